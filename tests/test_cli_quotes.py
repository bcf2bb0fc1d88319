"""CLI: quote-cascade prints source, advisory and a quote table (no live network)."""

from __future__ import annotations

import json
import subprocess
import sys
from unittest.mock import patch

import pytest
import requests

from quote_cascade.cli.quotes import format_result, main
from quote_cascade.providers.base import ProviderName, Quote, ResolutionResult

HTTP_GET = "quote_cascade.providers.http.requests.get"


@pytest.fixture(autouse=True)
def offline(monkeypatch, tmp_path):
    monkeypatch.setenv("QUOTES_CONFIG", str(tmp_path / "missing.yaml"))
    for var in ("QUOTES_SYMBOLS", "FINNHUB_API_KEY", "QUOTES_FINNHUB_API_KEY"):
        monkeypatch.delenv(var, raising=False)
    with patch(HTTP_GET, side_effect=requests.ConnectionError("offline")):
        yield


def test_format_result_marks_absent_values():
    result = ResolutionResult(
        quotes=(
            Quote("AAPL", 228.484, 0.871),
            Quote("MSFT", None, None),
        ),
        source=ProviderName.FMP,
    )
    text = format_result(result)
    assert text.splitlines()[0] == "Data source: FMP"
    assert "$228.48" in text
    assert "0.87%" in text
    assert "—" in text


def test_main_offline_prints_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Data source: Demo" in out
    assert "Using local demo data (APIs unavailable)." in out
    assert "$228.48" in out


def test_main_json(capsys):
    assert main(["--json", "--symbols", "MSFT,AAPL"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["source"] == "Demo"
    assert [q["symbol"] for q in data["quotes"]] == ["MSFT", "AAPL"]
    assert data["quotes"][0]["price"] == 452.12


def test_main_unknown_symbol_exits_2(capsys):
    assert main(["--symbols", "ZZZZ"]) == 2
    assert "Configuration error" in capsys.readouterr().err


def test_help_exits_zero():
    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_python_m_help_exits_zero():
    r = subprocess.run(
        [sys.executable, "-m", "quote_cascade", "--help"],
        capture_output=True,
        text=True,
        timeout=60,
    )
    assert r.returncode == 0
    assert "quote-cascade" in r.stdout


def test_main_bad_timeout_env_exits_2(monkeypatch, capsys):
    monkeypatch.setenv("QUOTES_HTTP_TIMEOUT", "soon")
    assert main([]) == 2
    assert "QUOTES_HTTP_TIMEOUT" in capsys.readouterr().err
