"""
Pattern scorer.

Evaluates a message against every rule and returns the summed weight plus the
rationale and provenance of each match. Pure: no registry access, no state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Set, Tuple

from .rules import SUPPLEMENTARY, Rule


@dataclass(frozen=True)
class MatchResult:
    rationale: str
    origin: str


@dataclass(frozen=True)
class ScoreReport:
    total_score: int
    matches: Tuple[MatchResult, ...] = ()
    supplementary_matches: Tuple[str, ...] = ()


def score(message: str, rules: Iterable[Rule]) -> ScoreReport:
    """
    Score a message against rules in order.

    A rule contributes its weight at most once per pass, however often its
    pattern occurs and even if it is listed twice.
    """
    total = 0
    matches: List[MatchResult] = []
    supplementary: List[str] = []
    seen: Set[Rule] = set()

    for rule in rules:
        if rule in seen:
            continue
        seen.add(rule)
        if not rule.matches(message):
            continue
        total += rule.weight
        matches.append(MatchResult(rationale=rule.rationale, origin=rule.origin))
        if rule.origin == SUPPLEMENTARY:
            supplementary.append(rule.rationale)

    return ScoreReport(total_score=total, matches=tuple(matches), supplementary_matches=tuple(supplementary))
