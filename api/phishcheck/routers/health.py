from fastapi import APIRouter

from ..pipeline.rules import get_registry

router = APIRouter()


@router.get("")
def health():
    """Return API status and the size of the effective rule set."""
    registry = get_registry()
    return {
        "status": "ok",
        "rules": {
            "builtin": len(registry.builtin_rules),
            "supplementary": len(registry.supplementary_rules),
        },
    }
