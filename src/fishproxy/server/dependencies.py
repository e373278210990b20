"""FastAPI dependencies para injecao do registry e do client HTTP."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request  # noqa: TC002

if TYPE_CHECKING:
    import httpx

    from fishproxy.commands import CommandRegistry


def get_registry(request: Request) -> CommandRegistry:
    """Retorna o CommandRegistry do app state."""
    return request.app.state.registry  # type: ignore[no-any-return]


def get_http_client(request: Request) -> httpx.AsyncClient | None:
    """Retorna o AsyncClient compartilhado, ou None se nao configurado."""
    return request.app.state.http_client  # type: ignore[no-any-return]
