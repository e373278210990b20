"""Testes do logging estruturado (structlog + stdlib)."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import httpx
import pytest
import structlog

import fishproxy.logging as fishproxy_logging
from fishproxy.models.tts import TTSRequest


class _Capture(logging.Handler):
    def __init__(self, formatter: logging.Formatter | None) -> None:
        super().__init__()
        self.lines: list[str] = []
        self.setFormatter(formatter)

    def emit(self, record: logging.LogRecord) -> None:
        self.lines.append(self.format(record))


def _reset_logging() -> None:
    fishproxy_logging._configured = False
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def _isolated_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("FISHPROXY_LOG_FORMAT", raising=False)
    monkeypatch.delenv("FISHPROXY_LOG_LEVEL", raising=False)
    _reset_logging()
    yield
    _reset_logging()


@pytest.fixture
def json_capture() -> Iterator[_Capture]:
    fishproxy_logging.configure_logging(log_format="json", level="DEBUG")
    root = logging.getLogger()
    capture = _Capture(root.handlers[0].formatter)
    root.addHandler(capture)
    yield capture
    root.removeHandler(capture)


class TestGetLogger:
    def test_returns_bound_logger_with_component(self) -> None:
        logger = fishproxy_logging.get_logger("server.routes.invoke")
        assert isinstance(logger, structlog.stdlib.BoundLogger)
        assert logger._context.get("component") == "server.routes.invoke"  # type: ignore[attr-defined]

    def test_get_logger_configures_once(self) -> None:
        fishproxy_logging.get_logger("proxy")
        assert fishproxy_logging._configured is True


class TestConfigureLogging:
    def test_idempotent(self) -> None:
        fishproxy_logging.configure_logging(log_format="console", level="DEBUG")
        fishproxy_logging.configure_logging(log_format="json", level="ERROR")
        assert logging.getLogger().level == logging.DEBUG

    def test_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FISHPROXY_LOG_LEVEL", "warning")
        fishproxy_logging.configure_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self) -> None:
        fishproxy_logging.configure_logging(level="LOUD")
        assert logging.getLogger().level == logging.INFO

    def test_json_format_fields(self, json_capture: _Capture) -> None:
        logger = fishproxy_logging.get_logger("commands")
        logger.info("command_dispatch", command="greet")

        parsed = json.loads(json_capture.lines[-1])
        assert parsed["event"] == "command_dispatch"
        assert parsed["component"] == "commands"
        assert parsed["command"] == "greet"
        assert parsed["level"] == "info"
        assert "timestamp" in parsed


class TestRedactSecrets:
    def test_masks_credential_fields(self) -> None:
        event = {"event": "x", "api_key": "sk-1", "authorization": "Bearer sk-1", "model": "s1"}
        redacted = fishproxy_logging.redact_secrets(None, "info", event)
        assert redacted["api_key"] == "***"
        assert redacted["authorization"] == "***"
        assert redacted["model"] == "s1"

    def test_rendered_output_is_redacted(self, json_capture: _Capture) -> None:
        fishproxy_logging.get_logger("test").info("leak_attempt", api_key="sk-abc")
        parsed = json.loads(json_capture.lines[-1])
        assert parsed["api_key"] == "***"


async def test_synthesis_logs_never_include_api_key(json_capture: _Capture) -> None:
    from fishproxy.proxy import tts_synthesize

    request = TTSRequest(text="hello", api_key="sk-very-secret", reference_id="ref1")
    transport = httpx.MockTransport(lambda _: httpx.Response(401, text="invalid key"))
    async with httpx.AsyncClient(transport=transport) as client:
        await tts_synthesize(request, client=client)

    events = [json.loads(line)["event"] for line in json_capture.lines]
    assert "tts_request" in events
    assert "tts_failed" in events
    assert all("sk-very-secret" not in line for line in json_capture.lines)
