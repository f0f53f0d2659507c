"""
Report builders for analysis verdicts.

The pipeline hands a finished Verdict (plus the analyzed text) to these
helpers; all presentation lives here:
- text.py: plain-text report for terminals and logs
- pdf.py: downloadable PDF report (fpdf2)
"""

from .pdf import build_pdf, report_filename
from .text import render_text, risk_label

__all__ = ["build_pdf", "report_filename", "render_text", "risk_label"]
