from datetime import datetime

from fastapi import APIRouter, HTTPException, Response

from ..pipeline.analyze import analyze_message
from ..pipeline.errors import ValidationError
from ..pipeline.policy import Verdict
from ..report import build_pdf, report_filename
from ..schemas import AnalyzeIn, VerdictOut

router = APIRouter()


def _run(payload: AnalyzeIn) -> Verdict:
    try:
        return analyze_message(payload.message)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.post("", response_model=VerdictOut)
def analyze(payload: AnalyzeIn) -> VerdictOut:
    """
    Score a message against the built-in and supplementary rules.

    Returns:
    - `total_score`: sum of matched rule weights
    - `matches`: rationale + origin (builtin | supplementary) per matched rule
    - `supplementary_matches`: regional rule rationales; any entry forces high risk
    - `label`: phishing | suspicious | legitimate
    - `confidence`: 0-1, 0.3 when nothing matched
    - `recommendation`: advice text for the risk tier
    - `risk_tier`: low | medium | high

    Example request:
    ```json
    {"message": "Your account suspended. Click here within 24 hours."}
    ```
    """
    return VerdictOut.from_verdict(_run(payload))


@router.post("/report", response_class=Response)
def analyze_report(payload: AnalyzeIn) -> Response:
    """Analyze a message and return the result as a downloadable PDF report."""
    verdict = _run(payload)
    generated_at = datetime.now()
    content = build_pdf(verdict, payload.message.strip(), generated_at)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{report_filename(generated_at)}"'},
    )
