"""
Tests for the promptarchitect CLI (main.py)
"""
import json
import sys
from unittest.mock import patch

import pytest

SCENARIO_PROMPT = "Act as an expert. Please help me write a poem."


def run_cli(monkeypatch, *args):
    from promptarchitect.main import main
    monkeypatch.setattr(sys, "argv", ["promptarchitect", *args])
    main()


class TestCLI:

    def test_no_args_prints_usage(self, monkeypatch, capsys):
        run_cli(monkeypatch)
        assert "promptarchitect analyze" in capsys.readouterr().out

    def test_unknown_command(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc:
            run_cli(monkeypatch, "explode")
        assert exc.value.code == 1
        assert "Unknown command" in capsys.readouterr().out

    def test_missing_prompt(self, monkeypatch):
        with pytest.raises(SystemExit) as exc:
            run_cli(monkeypatch, "analyze")
        assert exc.value.code == 1

    def test_analyze_json(self, monkeypatch, capsys):
        run_cli(monkeypatch, "analyze", SCENARIO_PROMPT, "--json")
        report = json.loads(capsys.readouterr().out)
        assert report["score"] == 12
        assert report["altitude"] == "too-high"

    def test_analyze_text(self, monkeypatch, capsys):
        run_cli(monkeypatch, "analyze", SCENARIO_PROMPT)
        out = capsys.readouterr().out
        assert "Score: 12/100" in out
        assert "Altitude: TOO-HIGH" in out

    def test_short_prompt_exits_2(self, monkeypatch):
        with pytest.raises(SystemExit) as exc:
            run_cli(monkeypatch, "analyze", "hi")
        assert exc.value.code == 2

    def test_optimize_json(self, monkeypatch, capsys):
        run_cli(monkeypatch, "optimize", SCENARIO_PROMPT, "--model", "gpt", "--json")
        payload = json.loads(capsys.readouterr().out)
        assert payload["model"] == "gpt"
        assert payload["result"]["optimized"].startswith("### Task Overview\n")

    def test_optimize_disable(self, monkeypatch, capsys):
        prompt = "Summarize the quarterly sales figures and output a short table for the leadership team."
        run_cli(monkeypatch, "optimize", prompt, "--disable", "format", "--json")
        payload = json.loads(capsys.readouterr().out)
        assert payload["result"]["techniques"] == []

    def test_optimize_text(self, monkeypatch, capsys):
        run_cli(monkeypatch, "optimize", SCENARIO_PROMPT)
        out = capsys.readouterr().out
        assert "Techniques: Signal Amplification, Altitude Elevation" in out

    def test_score(self, monkeypatch, capsys):
        run_cli(monkeypatch, "score", "Write a Python script")
        assert capsys.readouterr().out.startswith("3/10 - Weak (Vague)")

    def test_tokens(self, monkeypatch, capsys):
        run_cli(monkeypatch, "tokens", "a" * 400, "--model", "gpt", "--json")
        assert json.loads(capsys.readouterr().out) == {"model": "gpt", "tokens": 100}

    def test_questions_json(self, monkeypatch, capsys):
        run_cli(monkeypatch, "questions", "Draft an email to my landlord", "--json")
        ids = [q["id"] for q in json.loads(capsys.readouterr().out)]
        assert ids == ["tone", "recipient", "negative"]

    def test_remote_unavailable_exits_3(self, monkeypatch):
        from promptarchitect.connectors.service_client import ServiceUnavailable
        with patch("promptarchitect.connectors.service_client.ServiceClient.analyze",
                   side_effect=ServiceUnavailable("down")):
            with pytest.raises(SystemExit) as exc:
                run_cli(monkeypatch, "analyze", SCENARIO_PROMPT, "--remote", "http://svc")
        assert exc.value.code == 3

    def test_status_offline(self, monkeypatch, capsys):
        with patch("promptarchitect.connectors.service_client.ServiceClient.is_online", return_value=False):
            with pytest.raises(SystemExit) as exc:
                run_cli(monkeypatch, "status", "http://svc")
        assert exc.value.code == 1
        assert "Offline: http://svc" in capsys.readouterr().out
