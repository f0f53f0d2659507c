import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .pipeline.rules import get_registry
from .routers import analyze, health, rules

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

# API metadata for OpenAPI documentation
description = """
## PhishCheck API

Rule-based phishing triage for pasted email bodies and messages.

### Key Features

* **Pattern scoring:** built-in rules for account threats, urgency, credential prompts, suspicious TLDs, prize lures and malware attachments
* **Localized intelligence:** optional regional rule set; any regional match is treated as high risk
* **Explainable:** every matched rule contributes a rationale and its origin
* **Reports:** one-call PDF export of the analysis

### Quick Start

1. **Health Check:** `GET /health`
2. **Effective rules:** `GET /rules`
3. **Analyze:** `POST /analyze`
4. **PDF report:** `POST /analyze/report`
"""


@asynccontextmanager
async def lifespan(_: FastAPI):
    # One-time supplementary rule load before the first request is served.
    registry = get_registry()
    registry.load()
    logger.info(f"Serving with {len(registry.get_all())} rules")
    yield


app = FastAPI(
    title="PhishCheck API",
    description=description,
    version="0.1.0",
    license_info={
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT",
    },
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "health",
            "description": "Service health and rule set size",
        },
        {
            "name": "rules",
            "description": "Effective built-in and supplementary rules",
        },
        {
            "name": "analyze",
            "description": "Message analysis and PDF report export",
        },
    ],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(rules.router, prefix="/rules", tags=["rules"])
app.include_router(analyze.router, prefix="/analyze", tags=["analyze"])
