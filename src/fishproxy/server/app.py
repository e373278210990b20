"""FastAPI application factory do host local."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import FastAPI

import fishproxy
from fishproxy.commands import build_default_registry
from fishproxy.server.error_handlers import register_error_handlers
from fishproxy.server.routes import health, invoke

if TYPE_CHECKING:
    import httpx

    from fishproxy.commands import CommandRegistry


def create_app(
    http_client: httpx.AsyncClient | None = None,
    registry: CommandRegistry | None = None,
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """Cria a aplicacao FastAPI.

    Args:
        http_client: AsyncClient compartilhado entre comandos (opcional). Sem ele,
            cada sintese abre e fecha o seu proprio client.
        registry: Registry de comandos (default: comandos do app desktop).
        cors_origins: Origins do front-end autorizados a chamar o host (opcional).

    Returns:
        FastAPI application configurada.
    """
    app = FastAPI(
        title="Fish Proxy",
        version=fishproxy.__version__,
        description="Host local de comandos que encaminha sintese TTS para a Fish Audio",
    )

    app.state.http_client = http_client
    app.state.registry = registry if registry is not None else build_default_registry()

    if cors_origins:
        from fastapi.middleware.cors import CORSMiddleware

        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(invoke.router)

    return app
