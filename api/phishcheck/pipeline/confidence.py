"""
Confidence estimator.

Stand-in for a learned model: derives a coarse label and a bounded,
score-monotone confidence from the scorer's output. Anything with the same
call signature can be passed to analyze_message() instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .scorer import ScoreReport

PHISHING = "phishing"
SUSPICIOUS = "suspicious"
LEGITIMATE = "legitimate"

PHISHING_THRESHOLD = 5
SUSPICIOUS_THRESHOLD = 3

# Reported when nothing matched: "no evidence", not "confidently safe".
BASELINE_CONFIDENCE = 0.3


@dataclass(frozen=True)
class ConfidenceReport:
    label: str
    confidence: float


Estimator = Callable[[str, ScoreReport], ConfidenceReport]


def estimate(message: str, report: ScoreReport) -> ConfidenceReport:
    """Return label + confidence in [0, 1] for a scored message."""
    total = report.total_score
    if report.supplementary_matches or total >= PHISHING_THRESHOLD:
        label = PHISHING
    elif total >= SUSPICIOUS_THRESHOLD:
        label = SUSPICIOUS
    else:
        label = LEGITIMATE

    if total > 0:
        confidence = min(1.0, 0.5 + 0.1 * total)
    else:
        confidence = BASELINE_CONFIDENCE
    return ConfidenceReport(label=label, confidence=confidence)
