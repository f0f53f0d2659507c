"""
Pattern registry: built-in rules plus an optional supplementary rule set.

The built-in table is fixed. Supplementary rules (typically regional scam
phrases) come from a JSON document on disk or behind an http(s) URL and are
loaded at most once per registry. A broken source never breaks analysis: the
registry falls back to the built-in rules and logs what went wrong.
"""

from __future__ import annotations

import json
import logging
import re
import threading
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, List, Tuple

import httpx

from .. import config
from .errors import PatternCompileError, RuleLoadError

logger = logging.getLogger(__name__)

BUILTIN = "builtin"
SUPPLEMENTARY = "supplementary"


@dataclass(frozen=True)
class Rule:
    pattern: re.Pattern
    weight: int
    rationale: str
    origin: str = BUILTIN

    @property
    def source(self) -> str:
        return self.pattern.pattern

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


RuleSet = Tuple[Rule, ...]


def compile_rule(source: str, weight: int, rationale: str, origin: str = BUILTIN) -> Rule:
    """Compile a case-insensitive rule; raise PatternCompileError on a bad pattern."""
    try:
        pattern = re.compile(source, re.IGNORECASE)
    except re.error as exc:
        raise PatternCompileError(f"Invalid pattern {source!r}: {exc}") from exc
    return Rule(pattern=pattern, weight=weight, rationale=rationale, origin=origin)


# ============================================================================
# Built-in Rules
# ============================================================================

# (pattern, weight, rationale); weights 1-3 reflect severity.
_BUILTIN_TABLE: List[Tuple[str, int, str]] = [
    (r"account (suspended|locked|disabled)", 3, "Mentions account suspension/lock"),
    (r"click here", 2, "Urgent click request"),
    (r"login here", 2, "Direct login link"),
    (r"update your account", 2, "Prompt to update account"),
    (r"verify your (identity|account)", 2, "Verification scam"),
    (r"24 hours", 1, "Sense of urgency"),
    (r"\.ru\b|\.xyz\b|\.pw\b", 2, "Suspicious domain"),
    (r"you(')?ve won", 2, "Fake prize/lottery"),
    (r"unusual login attempt", 1, "Fake login alert"),
    (r"download the attachment", 2, "Malware delivery"),
]

BUILTIN_RULES: RuleSet = tuple(compile_rule(p, w, r) for p, w, r in _BUILTIN_TABLE)


# ============================================================================
# Supplementary Source Parsing
# ============================================================================

def _pick(entry: dict, *keys: str) -> Any:
    for key in keys:
        if key in entry:
            return entry[key]
    raise RuleLoadError(f"Rule entry missing one of {keys}: {entry!r}")


def _parse_entries(document: Any) -> List[Tuple[str, int, str]]:
    """
    Validate the supplementary document and return (pattern, weight, rationale).

    Accepts {"patterns": [...]} or a bare list. Any structural problem fails
    the whole document.
    """
    entries = document.get("patterns") if isinstance(document, dict) else document
    if not isinstance(entries, list):
        raise RuleLoadError("Supplementary rules must be a list or an object with a 'patterns' list")

    parsed: List[Tuple[str, int, str]] = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise RuleLoadError(f"Rule entry is not an object: {entry!r}")
        source = _pick(entry, "regex", "pattern")
        weight = _pick(entry, "score", "weight")
        rationale = _pick(entry, "reason", "rationale")
        if not isinstance(source, str) or not source:
            raise RuleLoadError(f"Rule pattern must be a non-empty string: {entry!r}")
        # bool is an int subclass; reject it explicitly
        if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
            raise RuleLoadError(f"Rule weight must be a non-negative integer: {entry!r}")
        if not isinstance(rationale, str):
            raise RuleLoadError(f"Rule rationale must be a string: {entry!r}")
        parsed.append((source, weight, rationale))
    return parsed


def compile_supplementary(entries: Iterable[Tuple[str, int, str]]) -> RuleSet:
    """Compile supplementary entries, dropping (and logging) any bad pattern."""
    rules: List[Rule] = []
    for source, weight, rationale in entries:
        try:
            rules.append(compile_rule(source, weight, rationale, origin=SUPPLEMENTARY))
        except PatternCompileError as exc:
            logger.error(f"Dropping supplementary rule: {exc}")
    return tuple(rules)


# ============================================================================
# Registry
# ============================================================================

class PatternRegistry:
    """
    Holds the merged rule list used by the scorer.

    Usage:
        registry = PatternRegistry("local_phishing_patterns.json")
        registry.load()
        rules = registry.get_all()
    """

    def __init__(self, source: str | Path | None = None, builtin: RuleSet = BUILTIN_RULES,
                 timeout: float | None = None):
        self.source = str(source) if source else ""
        self.timeout = timeout if timeout is not None else config.RULES_FETCH_TIMEOUT
        self._builtin: RuleSet = tuple(builtin)
        self._supplementary: RuleSet = ()
        self._loaded = False
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def builtin_rules(self) -> RuleSet:
        return self._builtin

    @property
    def supplementary_rules(self) -> RuleSet:
        return self._supplementary

    def load(self) -> None:
        """Load supplementary rules once. Never raises; failures leave the set empty."""
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            try:
                self._supplementary = compile_supplementary(_parse_entries(self._fetch()))
                logger.info(f"Loaded {len(self._supplementary)} supplementary rules from {self.source}")
            except RuleLoadError as exc:
                self._supplementary = ()
                logger.warning(f"Supplementary rules unavailable, using built-in rules only: {exc}")
            finally:
                self._loaded = True

    def get_all(self) -> RuleSet:
        return self._builtin + self._supplementary

    def _fetch(self) -> Any:
        if not self.source:
            raise RuleLoadError("No supplementary rule source configured")
        if self.source.startswith(("http://", "https://")):
            try:
                resp = httpx.get(self.source, timeout=self.timeout, follow_redirects=True)
                resp.raise_for_status()
                return resp.json()
            except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
                raise RuleLoadError(f"Could not fetch {self.source}: {exc}") from exc
        try:
            return json.loads(Path(self.source).read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise RuleLoadError(f"Could not read {self.source}: {exc}") from exc


@lru_cache(maxsize=1)
def get_registry() -> PatternRegistry:
    """Process-wide registry built from configuration."""
    return PatternRegistry(config.LOCAL_PATTERNS_SOURCE)
