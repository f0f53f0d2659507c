"""
Analysis orchestration.

Wires input validation, the pattern registry, the scorer, the confidence
estimator and the classification policy into one pass. Blank input is
rejected before any pattern is evaluated.
"""

from __future__ import annotations

import logging

from .confidence import Estimator, estimate
from .errors import ValidationError
from .policy import Verdict, classify
from .rules import PatternRegistry, get_registry
from .scorer import score

logger = logging.getLogger(__name__)


def analyze_message(message: str | None, registry: PatternRegistry | None = None,
                    estimator: Estimator = estimate) -> Verdict:
    """
    Run one full analysis pass over a message.

    Args:
        message: Raw email body or pasted text
        registry: Rule registry (defaults to the process-wide one)
        estimator: Confidence estimator with the estimate() signature

    Raises:
        ValidationError: message is empty or whitespace-only
    """
    text = (message or "").strip()
    if not text:
        raise ValidationError()

    registry = registry or get_registry()
    registry.load()

    report = score(text, registry.get_all())
    confidence = estimator(text, report)
    verdict = classify(report, confidence)
    logger.info(
        f"Analyzed message ({len(text)} chars): score={verdict.total_score} "
        f"tier={verdict.risk_tier} matches={len(verdict.matches)}"
    )
    return verdict
