"""
Per-session analysis state.

A session holds at most one current analysis and replaces it wholesale on
each submit. State moves idle -> analyzing -> displayed, back to analyzing on
re-submit, and to idle when the input is cleared.
"""

from __future__ import annotations

from typing import Callable, Optional

from .analyze import analyze_message
from .errors import ValidationError
from .policy import Verdict

IDLE = "idle"
ANALYZING = "analyzing"
DISPLAYED = "displayed"


class AnalysisSession:
    def __init__(self, analyzer: Callable[[str], Verdict] = analyze_message):
        self._analyzer = analyzer
        self.state = IDLE
        self.message: Optional[str] = None
        self.verdict: Optional[Verdict] = None

    def submit(self, text: str | None) -> Verdict:
        message = (text or "").strip()
        if not message:
            raise ValidationError()

        previous = self.state
        self.state = ANALYZING
        try:
            verdict = self._analyzer(message)
        except Exception:
            self.state = previous
            raise
        self.message = message
        self.verdict = verdict
        self.state = DISPLAYED
        return verdict

    def clear(self) -> None:
        self.state = IDLE
        self.message = None
        self.verdict = None

    def input_changed(self, text: str | None) -> None:
        """Drop the current analysis once the input has been emptied."""
        if not (text or "").strip():
            self.clear()
