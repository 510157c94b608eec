"""Tests for the structlog configuration."""

from __future__ import annotations

import io
import json

import structlog

from dbstrings.logging import configure_logging


def test_events_are_written_to_given_stream(structlog_config):
    buffer = io.StringIO()
    configure_logging("INFO", file=buffer)

    log = structlog.get_logger("dbstrings.tests")
    log.info("resource_set_loaded", resource_name="App.Strings")
    log.debug("resource_searched", key="Hello")

    lines = buffer.getvalue().splitlines()
    assert len(lines) == 1
    event = json.loads(lines[0])
    assert event["event"] == "resource_set_loaded"
    assert event["resource_name"] == "App.Strings"
    assert event["level"] == "info"


def test_events_default_to_stderr(structlog_config, capsys):
    configure_logging("INFO")

    structlog.get_logger("dbstrings.tests").info("schema_created")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "schema_created" in captured.err
