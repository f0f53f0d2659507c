"""
PhishCheck: rule-based phishing message triage.

Modules:
- pipeline: rule registry, scorer, confidence estimator and policy
- report: text and PDF renderings of a verdict
- routers/main.py: FastAPI service; cli.py: command-line front end
"""

__version__ = "0.1.0"
