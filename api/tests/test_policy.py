import pytest

from phishcheck.pipeline.confidence import ConfidenceReport, estimate
from phishcheck.pipeline.policy import RECOMMENDATIONS, classify
from phishcheck.pipeline.scorer import MatchResult, ScoreReport


def _verdict(total, supplementary=()):
    matches = tuple(MatchResult(r, "supplementary") for r in supplementary)
    report = ScoreReport(total_score=total, matches=matches, supplementary_matches=tuple(supplementary))
    return classify(report, estimate("msg", report))


@pytest.mark.parametrize(
    "total,tier,label",
    [(5, "high", "phishing"), (4, "medium", "suspicious"), (3, "medium", "suspicious"), (0, "low", "legitimate")],
)
def test_tier_thresholds(total, tier, label):
    verdict = _verdict(total)
    assert verdict.risk_tier == tier
    assert verdict.label == label


def test_zero_score_is_low_with_baseline_confidence():
    verdict = _verdict(0)
    assert verdict.risk_tier == "low"
    assert verdict.confidence == 0.3
    assert verdict.recommendation == RECOMMENDATIONS["low"]


@pytest.mark.parametrize("total", [0, 1, 3, 7])
def test_supplementary_match_always_high(total):
    verdict = _verdict(total, ["Regional scam"])
    assert verdict.risk_tier == "high"
    assert verdict.label == "phishing"
    assert "in your region" in verdict.recommendation


def test_high_without_supplementary_is_not_regional():
    verdict = _verdict(6)
    assert verdict.recommendation == RECOMMENDATIONS["high"]
    assert "region" not in verdict.recommendation
    assert "Do NOT respond" in verdict.recommendation


def test_medium_recommendation_is_caution():
    assert _verdict(3).recommendation.startswith("Be cautious")


def test_classify_is_pure():
    report = ScoreReport(total_score=4, matches=(MatchResult("x", "builtin"),))
    conf = estimate("msg", report)
    assert classify(report, conf) == classify(report, conf)


def test_headline_follows_score_when_estimator_disagrees():
    report = ScoreReport(total_score=0)
    verdict = classify(report, ConfidenceReport(label="phishing", confidence=0.9))
    assert verdict.label == "legitimate"
    assert verdict.risk_tier == "low"
    assert verdict.confidence == 0.9


def test_confidence_is_clamped():
    report = ScoreReport(total_score=2)
    assert classify(report, ConfidenceReport(label="legitimate", confidence=1.7)).confidence == 1.0
