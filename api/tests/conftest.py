import json
import sys
from pathlib import Path

import pytest


# Ensure the `api/` directory is on sys.path so tests can import `phishcheck.*`
CURRENT_FILE = Path(__file__).resolve()
API_DIR = CURRENT_FILE.parents[1]  # .../api
if str(API_DIR) not in sys.path:
    sys.path.insert(0, str(API_DIR))


from phishcheck.pipeline.rules import PatternRegistry


@pytest.fixture
def write_patterns(tmp_path):
    """Write a supplementary rule document and return its path."""

    def _write(document, name="patterns.json"):
        path = tmp_path / name
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def gcash_registry(write_patterns):
    path = write_patterns({"patterns": [{"regex": "gcash", "score": 3, "reason": "GCash wallet lure"}]})
    registry = PatternRegistry(path)
    registry.load()
    return registry


@pytest.fixture
def builtin_registry():
    registry = PatternRegistry(None)
    registry.load()
    return registry
