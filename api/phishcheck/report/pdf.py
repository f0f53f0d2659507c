"""
PDF export of an analysis verdict.

Layout: title and timestamp, risk assessment, analyzed content, detected
pattern table, localized-intelligence section (only when supplementary rules
matched), confidence analysis, recommendation and a phishing-awareness
primer. Built with fpdf2 core fonts, so text is folded to Latin-1 first.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from fpdf import FPDF
from fpdf.enums import XPos, YPos
from fpdf.fonts import FontFace

from ..pipeline.policy import Verdict
from .text import confidence_percent, risk_label

logger = logging.getLogger(__name__)

FOOTER_TEXT = "Generated by Phishing Detector - For educational purposes"

LOCAL_INTEL_TEXT = (
    "This message matched one or more local phishing patterns common in your country or "
    "language. Stay extra vigilant - these tactics are often used to target people in your region."
)

AWARENESS_TEXT: List[str] = [
    "What is Phishing?",
    "Phishing is a type of cyber-attack where attackers trick individuals into giving away "
    "sensitive information such as passwords, banking details, or personal data by pretending "
    "to be a trustworthy entity, often through fake emails, links, or messages.",
    "",
    "How Does Phishing Work?",
    "- Attackers send emails or messages that look official, asking you to click links or provide info.",
    "- These links often lead to fake websites designed to steal your information.",
    "- Sometimes, phishing comes as SMS (smishing) or phone calls (vishing).",
    "",
    "Common Signs of Phishing:",
    "- Urgent language: \"Your account will be suspended, act now!\"",
    "- Requests for personal or financial information.",
    "- Suspicious links or attachments.",
    "- Poor grammar, spelling mistakes, or unfamiliar senders.",
    "",
    "Risks if You Fall for Phishing:",
    "- Identity theft",
    "- Financial loss",
    "- Unauthorized access to your accounts",
    "- Malware infection on your devices",
    "",
    "How to Stay Safe:",
    "- Always verify the sender's information.",
    "- Don't click on suspicious links or download unexpected attachments.",
    "- Never share personal information via email or message.",
    "- Use strong, unique passwords and enable two-factor authentication.",
    "- Report phishing attempts to your IT department or email provider.",
    "",
    "Remember:",
    "If something feels off, verify before you trust. Stay informed. Stay protected!",
]

PREDICTION_NAMES = {"phishing": "Phishing", "suspicious": "Suspicious", "legitimate": "Legitimate"}


def _latin1(text: str) -> str:
    """Fold text into what the core PDF fonts can encode."""
    return text.encode("latin-1", "replace").decode("latin-1")


def report_filename(generated_at: Optional[datetime] = None) -> str:
    generated_at = generated_at or datetime.now()
    return f"Phishing_Report_{int(round(generated_at.timestamp() * 1000))}.pdf"


class _ReportPDF(FPDF):
    def footer(self) -> None:
        self.set_y(-12)
        self.set_font("Helvetica", size=8)
        self.set_text_color(150)
        self.cell(0, 5, FOOTER_TEXT, align="C")


def _heading(pdf: FPDF, text: str, color=(40, 40, 40)) -> None:
    pdf.set_font("Helvetica", style="B", size=14)
    pdf.set_text_color(*color)
    pdf.cell(0, 10, text, new_x=XPos.LMARGIN, new_y=YPos.NEXT)


def _paragraph(pdf: FPDF, text: str, size: int = 10, style: str = "") -> None:
    pdf.set_font("Helvetica", style=style, size=size)
    pdf.set_text_color(20)
    pdf.multi_cell(0, 5, _latin1(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)


def build_pdf(verdict: Verdict, message: str, generated_at: Optional[datetime] = None) -> bytes:
    """Lay out the report and return the PDF document bytes."""
    generated_at = generated_at or datetime.now()
    pdf = _ReportPDF()
    pdf.set_auto_page_break(auto=True, margin=20)
    pdf.set_margins(14, 14, 14)
    pdf.add_page()

    pdf.set_font("Helvetica", style="B", size=18)
    pdf.set_text_color(40)
    pdf.cell(0, 10, "Phishing Analysis Report", align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.set_font("Helvetica", size=10)
    pdf.cell(0, 6, f"Generated on: {generated_at:%Y-%m-%d %H:%M:%S}", align="C",
             new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.ln(6)

    _heading(pdf, "Risk Assessment:")
    _paragraph(pdf, f"Score: {verdict.total_score}", size=12)
    _paragraph(pdf, f"Level: {risk_label(verdict)}", size=12)
    pdf.ln(4)

    _heading(pdf, "Analyzed Content:")
    _paragraph(pdf, message)
    pdf.ln(4)

    _heading(pdf, "Detected Phishing Patterns:")
    pdf.set_font("Helvetica", size=10)
    pdf.set_text_color(20)
    rows = [(m.rationale, "Yes" if m.origin == "supplementary" else "No") for m in verdict.matches]
    headings = FontFace(emphasis="BOLD", color=255, fill_color=(40, 40, 40))
    with pdf.table(col_widths=(4, 1), headings_style=headings) as table:
        for cells in [("Pattern Type", "Local?")] + (rows or [("None", "")]):
            row = table.row()
            for value in cells:
                row.cell(_latin1(value))
    pdf.ln(6)

    if verdict.regional:
        _heading(pdf, "Localized Intelligence Triggered!", color=(184, 135, 0))
        _paragraph(pdf, LOCAL_INTEL_TEXT)
        pdf.ln(2)
        _paragraph(pdf, "Matched local patterns:", style="I")
        for rationale in verdict.supplementary_matches:
            _paragraph(pdf, f"  - {rationale}")
        pdf.ln(4)

    _heading(pdf, "Confidence Analysis:")
    _paragraph(pdf, f"Prediction: {PREDICTION_NAMES.get(verdict.label, verdict.label)}")
    _paragraph(pdf, f"Confidence: {confidence_percent(verdict)}%")
    pdf.ln(4)

    _heading(pdf, "Recommendations:")
    _paragraph(pdf, verdict.recommendation)
    pdf.ln(6)

    _heading(pdf, "Phishing Awareness", color=(40, 64, 128))
    _paragraph(pdf, "\n".join(AWARENESS_TEXT))

    data = bytes(pdf.output())
    logger.info(f"Built PDF report ({len(data)} bytes, {pdf.page_no()} pages)")
    return data
