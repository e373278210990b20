"""Structured logging para o Fish Proxy.

structlog com stdlib logging como backend, saida em stderr:
- console: legivel para desenvolvimento (default)
- json: uma linha por evento, para o host desktop coletar

Campos com credenciais (api_key, authorization) sao mascarados antes de
qualquer renderer.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

_configured = False

_SECRET_KEYS = frozenset({"api_key", "authorization"})
_REDACTED = "***"


def redact_secrets(
    _logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Processor structlog que mascara credenciais no event dict."""
    for key in _SECRET_KEYS.intersection(event_dict):
        event_dict[key] = _REDACTED
    return event_dict


def _select_renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    log_format: str | None = None,
    level: str | None = None,
) -> None:
    """Configura logging estruturado do processo.

    Idempotente: so a primeira chamada tem efeito.

    Args:
        log_format: "json" ou "console". Default via FISHPROXY_LOG_FORMAT ou "console".
        level: DEBUG, INFO, WARNING ou ERROR. Default via FISHPROXY_LOG_LEVEL ou "INFO".
    """
    global _configured
    if _configured:
        return

    resolved_format = log_format or os.environ.get("FISHPROXY_LOG_FORMAT", "console")
    resolved_level = level or os.environ.get("FISHPROXY_LOG_LEVEL", "INFO")

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            redact_secrets,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _select_renderer(resolved_format),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, resolved_level.upper(), logging.INFO))

    _configured = True


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Retorna logger com o campo `component` vinculado (ex: "proxy", "cli.serve")."""
    configure_logging()
    return structlog.get_logger().bind(component=component)  # type: ignore[no-any-return]
