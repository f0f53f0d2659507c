"""
Error taxonomy for the analysis pipeline.

Only ValidationError is meant to reach callers. Rule loading problems are
absorbed inside the registry and degrade to a smaller rule set.
"""


class PhishCheckError(Exception):
    """Base class for all pipeline errors."""


class RuleLoadError(PhishCheckError):
    """Supplementary rule source is unreachable or malformed."""


class PatternCompileError(PhishCheckError):
    """A single configured rule has a pattern that does not compile."""


class ValidationError(PhishCheckError, ValueError):
    """Input submitted for analysis is empty or whitespace-only."""

    prompt = "Please paste an email message or link to analyze."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.prompt)
