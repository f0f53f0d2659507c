from __future__ import annotations

from typing import List

from ..pipeline.policy import HIGH, MEDIUM, Verdict

RISK_LABELS = {HIGH: "High Risk", MEDIUM: "Medium Risk"}

PREDICTION_LABELS = {
    "phishing": "Phishing detected",
    "suspicious": "Suspicious",
    "legitimate": "Likely legitimate",
}


def risk_label(verdict: Verdict) -> str:
    return RISK_LABELS.get(verdict.risk_tier, "Low Risk")


def confidence_percent(verdict: Verdict) -> int:
    return int(round(verdict.confidence * 100))


def render_text(verdict: Verdict, message: str | None = None) -> str:
    """Render a verdict as a plain-text report."""
    lines: List[str] = [
        f"Risk Score: {verdict.total_score} - {risk_label(verdict)}",
        "",
        "Detected patterns:",
    ]
    if verdict.matches:
        for m in verdict.matches:
            suffix = " [Local]" if m.origin == "supplementary" else ""
            lines.append(f"  - {m.rationale}{suffix}")
    else:
        lines.append("  - No specific phishing patterns detected")

    if verdict.regional:
        lines += ["", "Localized intelligence triggered:"]
        lines += [f"  - {r}" for r in verdict.supplementary_matches]

    lines += [
        "",
        f"Prediction: {PREDICTION_LABELS.get(verdict.label, verdict.label)}",
        f"Confidence: {confidence_percent(verdict)}%",
        "",
        f"Recommendation: {verdict.recommendation}",
    ]
    if message:
        lines += ["", "Analyzed content:", message]
    return "\n".join(lines)
