import os
from pathlib import Path

DEFAULT_LOCAL_PATTERNS = Path(__file__).parent / "data" / "local_phishing_patterns.json"

# Path or http(s) URL of the supplementary (regional) rule source; "" disables it.
LOCAL_PATTERNS_SOURCE = os.getenv("PHISHCHECK_LOCAL_PATTERNS", str(DEFAULT_LOCAL_PATTERNS)).strip()

RULES_FETCH_TIMEOUT = max(1.0, float(os.getenv("PHISHCHECK_RULES_TIMEOUT", "5")))

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_LEVEL = os.getenv("PHISHCHECK_LOG_LEVEL", "INFO").strip().upper()
if LOG_LEVEL not in LOG_LEVELS:
    LOG_LEVEL = "INFO"

CORS_ORIGINS = [o.strip() for o in os.getenv("PHISHCHECK_CORS_ORIGINS", "*").split(",") if o.strip()]
