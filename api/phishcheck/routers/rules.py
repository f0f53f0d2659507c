from typing import List

from fastapi import APIRouter

from ..pipeline.rules import get_registry
from ..schemas import RuleOut

router = APIRouter()


@router.get("", response_model=List[RuleOut])
def list_rules() -> List[RuleOut]:
    """List the effective rules: built-in first, then supplementary."""
    registry = get_registry()
    registry.load()
    return [RuleOut.from_rule(r) for r in registry.get_all()]
