from typing import List, Literal

from pydantic import BaseModel, Field

from .pipeline.policy import Verdict
from .pipeline.rules import Rule


class AnalyzeIn(BaseModel):
    """
    Message submitted for analysis.
    - message: raw email body or pasted text; blank input is rejected with 422
    """

    message: str = Field(..., max_length=100_000)


class MatchOut(BaseModel):
    rationale: str
    origin: Literal["builtin", "supplementary"]


class VerdictOut(BaseModel):
    """
    Output of one analysis pass.
    label: one of phishing | suspicious | legitimate
    risk_tier: one of low | medium | high
    supplementary_matches: rationales of matched regional rules (forces high risk)
    """

    total_score: int
    matches: List[MatchOut]
    supplementary_matches: List[str]
    label: Literal["phishing", "suspicious", "legitimate"]
    confidence: float
    recommendation: str
    risk_tier: Literal["low", "medium", "high"]

    @classmethod
    def from_verdict(cls, verdict: Verdict) -> "VerdictOut":
        return cls(
            total_score=verdict.total_score,
            matches=[MatchOut(rationale=m.rationale, origin=m.origin) for m in verdict.matches],
            supplementary_matches=list(verdict.supplementary_matches),
            label=verdict.label,
            confidence=verdict.confidence,
            recommendation=verdict.recommendation,
            risk_tier=verdict.risk_tier,
        )


class RuleOut(BaseModel):
    pattern: str
    weight: int
    rationale: str
    origin: Literal["builtin", "supplementary"]

    @classmethod
    def from_rule(cls, rule: Rule) -> "RuleOut":
        return cls(pattern=rule.source, weight=rule.weight, rationale=rule.rationale, origin=rule.origin)
