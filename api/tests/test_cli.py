import importlib
import io
import json

import pytest

from phishcheck import config
from phishcheck.cli import main


def test_analyze_file_text_output(tmp_path, capsys, write_patterns):
    patterns = write_patterns({"patterns": [{"regex": "gcash", "score": 3, "reason": "GCash wallet lure"}]})
    msg = tmp_path / "msg.txt"
    msg.write_text("Send your GCash PIN now", encoding="utf-8")

    assert main(["--patterns", str(patterns), "analyze", str(msg)]) == 0
    out = capsys.readouterr().out
    assert "High Risk" in out
    assert "GCash wallet lure [Local]" in out


def test_analyze_json_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Verify your account within 24 hours"))
    assert main(["--patterns", "", "analyze", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["total_score"] == 3
    assert data["risk_tier"] == "medium"
    assert data["label"] == "suspicious"
    assert [m["origin"] for m in data["matches"]] == ["builtin", "builtin"]


def test_blank_input_exits_with_prompt(tmp_path, capsys):
    msg = tmp_path / "blank.txt"
    msg.write_text("  \n ", encoding="utf-8")
    assert main(["--patterns", "", "analyze", str(msg)]) == 2
    assert "Please paste" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main(["--patterns", "", "analyze", str(tmp_path / "nope.txt")]) == 1


def test_pdf_export(tmp_path, capsys):
    msg = tmp_path / "msg.txt"
    msg.write_text("Click here", encoding="utf-8")
    target = tmp_path / "report.pdf"
    assert main(["--patterns", "", "analyze", str(msg), "--pdf", str(target)]) == 0
    assert target.read_bytes().startswith(b"%PDF")


def test_rules_listing(capsys, write_patterns):
    patterns = write_patterns([{"regex": "gcash", "score": 3, "reason": "GCash wallet lure"}])
    assert main(["--patterns", str(patterns), "rules"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 11
    assert "supplementary" in lines[-1]


def test_unwritable_pdf_target(tmp_path, capsys):
    msg = tmp_path / "msg.txt"
    msg.write_text("Click here", encoding="utf-8")
    target = tmp_path / "missing-dir" / "report.pdf"
    assert main(["--patterns", "", "analyze", str(msg), "--pdf", str(target)]) == 1
    assert "Cannot write" in capsys.readouterr().err


def test_unknown_log_level_is_rejected(tmp_path):
    msg = tmp_path / "msg.txt"
    msg.write_text("Click here", encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        main(["--log-level", "verbose", "--patterns", "", "analyze", str(msg)])
    assert exc_info.value.code == 2


def test_log_level_is_case_insensitive(tmp_path):
    msg = tmp_path / "msg.txt"
    msg.write_text("Click here", encoding="utf-8")
    assert main(["--log-level", "debug", "--patterns", "", "analyze", str(msg)]) == 0


def test_unknown_env_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("PHISHCHECK_LOG_LEVEL", "verbose")
    importlib.reload(config)
    assert config.LOG_LEVEL == "INFO"
    monkeypatch.setenv("PHISHCHECK_LOG_LEVEL", "warning")
    importlib.reload(config)
    assert config.LOG_LEVEL == "WARNING"
    monkeypatch.delenv("PHISHCHECK_LOG_LEVEL")
    importlib.reload(config)
