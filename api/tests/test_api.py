import pytest
from fastapi.testclient import TestClient

from phishcheck.main import app
from phishcheck.pipeline.rules import BUILTIN_RULES, PatternRegistry


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as c:
        yield c


def test_health_reports_rule_counts(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["rules"]["builtin"] == len(BUILTIN_RULES)
    assert body["rules"]["supplementary"] >= 0


def test_rules_listing_puts_builtin_first(client):
    rules = client.get("/rules").json()
    assert len(rules) >= len(BUILTIN_RULES)
    assert all(r["origin"] == "builtin" for r in rules[: len(BUILTIN_RULES)])
    assert rules[0]["pattern"] == BUILTIN_RULES[0].source


def test_analyze_high_risk(client):
    resp = client.post("/analyze", json={"message": "Your account suspended. Click here now."})
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_score"] >= 5
    assert body["risk_tier"] == "high"
    assert body["label"] == "phishing"
    assert {"rationale": "Urgent click request", "origin": "builtin"} in body["matches"]


def test_analyze_clean_message(client):
    body = client.post("/analyze", json={"message": "Minutes from today's meeting."}).json()
    assert body["total_score"] == 0
    assert body["matches"] == []
    assert body["confidence"] == 0.3
    assert body["risk_tier"] == "low"


def test_analyze_rejects_blank_message(client):
    resp = client.post("/analyze", json={"message": "   "})
    assert resp.status_code == 422
    assert resp.json()["detail"] == "Please paste an email message or link to analyze."


def test_report_endpoint_returns_pdf(client):
    resp = client.post("/analyze/report", json={"message": "You've won! Download the attachment."})
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert "Phishing_Report_" in resp.headers["content-disposition"]
    assert resp.content.startswith(b"%PDF")


def test_report_endpoint_rejects_blank_message(client):
    assert client.post("/analyze/report", json={"message": ""}).status_code == 422


def test_app_starts_with_invalid_rule_source(monkeypatch):
    import phishcheck.main as main_mod
    import phishcheck.routers.health as health_mod

    registry = PatternRegistry("https://[::1/patterns.json")
    monkeypatch.setattr(main_mod, "get_registry", lambda: registry)
    monkeypatch.setattr(health_mod, "get_registry", lambda: registry)
    with TestClient(app) as c:
        body = c.get("/health").json()
    assert registry.loaded
    assert body["rules"]["supplementary"] == 0
