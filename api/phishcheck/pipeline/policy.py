"""
Classification policy: merge the score report and the confidence signal into
one verdict.

The score report drives the risk tier and headline label, using the same
override as the estimator (any supplementary match is high risk), so the two
signals cannot disagree on the headline. The estimator contributes the
confidence value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from .confidence import (
    LEGITIMATE,
    PHISHING,
    PHISHING_THRESHOLD,
    SUSPICIOUS,
    SUSPICIOUS_THRESHOLD,
    ConfidenceReport,
)
from .scorer import MatchResult, ScoreReport

logger = logging.getLogger(__name__)

HIGH = "high"
MEDIUM = "medium"
LOW = "low"

TIER_LABELS = {HIGH: PHISHING, MEDIUM: SUSPICIOUS, LOW: LEGITIMATE}

RECOMMENDATIONS = {
    "regional": (
        "This message shows signs of a known phishing scam in your region. Do NOT respond, "
        "click any links, or send any information or money."
    ),
    HIGH: (
        "This message shows strong signs of phishing. Do NOT respond, click any links, "
        "or send any information or money."
    ),
    MEDIUM: (
        "Be cautious. This message contains suspicious elements. Verify the sender before "
        "taking any action."
    ),
    LOW: (
        "Looks safe. No major red flags detected. Always remain vigilant for suspicious requests."
    ),
}


@dataclass(frozen=True)
class Verdict:
    total_score: int
    matches: Tuple[MatchResult, ...]
    supplementary_matches: Tuple[str, ...]
    label: str
    confidence: float
    recommendation: str
    risk_tier: str

    @property
    def regional(self) -> bool:
        return bool(self.supplementary_matches)


def risk_tier(report: ScoreReport) -> str:
    if report.supplementary_matches or report.total_score >= PHISHING_THRESHOLD:
        return HIGH
    if report.total_score >= SUSPICIOUS_THRESHOLD:
        return MEDIUM
    return LOW


def recommendation(tier: str, regional: bool) -> str:
    if tier == HIGH and regional:
        return RECOMMENDATIONS["regional"]
    return RECOMMENDATIONS[tier]


def classify(report: ScoreReport, confidence: ConfidenceReport) -> Verdict:
    """Combine a score report and its confidence report into a Verdict."""
    tier = risk_tier(report)
    label = TIER_LABELS[tier]
    if confidence.label != label:
        # Only possible with a substituted estimator.
        logger.debug(f"Estimator label {confidence.label!r} overridden by score policy {label!r}")

    return Verdict(
        total_score=report.total_score,
        matches=report.matches,
        supplementary_matches=report.supplementary_matches,
        label=label,
        confidence=max(0.0, min(1.0, confidence.confidence)),
        recommendation=recommendation(tier, bool(report.supplementary_matches)),
        risk_tier=tier,
    )
