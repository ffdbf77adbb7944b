"""Tests for logging configuration and the command line entrypoint."""

from __future__ import annotations

import io
import json

import pytest
import structlog

from langtext import main as main_module
from langtext.logging import configure_logging


def test_configure_logging_outputs_json():
    stream = io.StringIO()
    configure_logging(stream=stream)
    logger = structlog.get_logger()
    logger.info("unit-test", foo="bar")
    record = json.loads(stream.getvalue().splitlines()[-1])
    assert record["event"] == "unit-test"
    assert record["foo"] == "bar"
    assert record["level"] == "info"


def test_configure_logging_accepts_level_names():
    stream = io.StringIO()
    configure_logging("warning", stream=stream)
    logger = structlog.get_logger()
    logger.info("hidden")
    logger.warning("shown")
    output = stream.getvalue()
    assert "hidden" not in output
    assert "shown" in output


@pytest.fixture
def quiet_cli(monkeypatch, settings):
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)
    monkeypatch.setattr(
        main_module,
        "configure_logging",
        lambda level, stream=None: configure_logging(level, stream=io.StringIO()),
    )


@pytest.mark.asyncio
async def test_main_prints_resolved_tree(quiet_cli, capsys):
    exit_code = await main_module.main(["fr, en-us", "--max-cache-size", "4"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["global"]["topic1"]["text_hi"] == "Salut"
    assert payload["global"]["topic1"]["text_eaten"] == "Have you eaten?"


@pytest.mark.asyncio
async def test_main_uses_source_override(quiet_cli, capsys, tmp_path):
    other = tmp_path / "other.yaml"
    other.write_text("menu:\n  - name: title\n    de: Titel\n", encoding="utf-8")

    exit_code = await main_module.main(["de-ch", "--source", str(other)])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == {"menu": {"title": "Titel"}}


@pytest.mark.asyncio
async def test_main_reports_load_errors(quiet_cli, capsys, tmp_path):
    exit_code = await main_module.main(["en", "--source", str(tmp_path / "missing.yaml")])

    assert exit_code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Failed to load language file" in captured.err


@pytest.mark.asyncio
async def test_main_rejects_negative_cache_size(quiet_cli, capsys):
    exit_code = await main_module.main(["en", "--min-cache-size", "-2"])

    assert exit_code == 1
    assert "Invalid argument" in capsys.readouterr().err
