"""Comando `fishproxy serve`: inicia o host local de comandos."""

from __future__ import annotations

import asyncio
import signal

import click

from fishproxy.cli.main import cli
from fishproxy.logging import configure_logging, get_logger

logger = get_logger("cli.serve")

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8765


def parse_origins(cors_origins: str) -> list[str]:
    return [o.strip() for o in cors_origins.split(",") if o.strip()] if cors_origins else []


@cli.command()
@click.option("--host", default=DEFAULT_HOST, show_default=True, help="Host do servidor local.")
@click.option("--port", default=DEFAULT_PORT, type=int, show_default=True, help="Porta HTTP.")
@click.option(
    "--cors-origins",
    default="",
    help="Origins do front-end (comma-separated). Ex: http://localhost:1420",
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"]),
    default="console",
    show_default=True,
    help="Formato de log.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default="INFO",
    show_default=True,
    help="Nivel de log.",
)
def serve(
    host: str,
    port: int,
    cors_origins: str,
    log_format: str,
    log_level: str,
) -> None:
    """Inicia o Fish Proxy como servidor local para o front-end."""
    configure_logging(log_format=log_format, level=log_level)
    asyncio.run(_serve(host, port, cors_origins=parse_origins(cors_origins)))


async def _serve(
    host: str,
    port: int,
    *,
    cors_origins: list[str] | None = None,
) -> None:
    """Fluxo async principal do serve."""
    import httpx
    import uvicorn

    from fishproxy.server.app import create_app

    # Client unico: conexoes com a Fish Audio sao reaproveitadas entre comandos
    http_client = httpx.AsyncClient()
    app = create_app(http_client=http_client, cors_origins=cors_origins)

    logger.info("server_starting", host=host, port=port, cors_origins=cors_origins or [])

    shutdown_event = asyncio.Event()
    loop = asyncio.get_running_loop()

    def _handle_signal(s: signal.Signals) -> None:
        logger.info("shutdown_signal", signal=s.name)
        shutdown_event.set()

    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(sig, _handle_signal, sig)

    config = uvicorn.Config(app, host=host, port=port, log_level="warning")
    server = uvicorn.Server(config)

    server_task = asyncio.create_task(server.serve())
    shutdown_task = asyncio.create_task(shutdown_event.wait())

    try:
        # Espera sinal de shutdown ou o servidor parar sozinho
        await asyncio.wait(
            [server_task, shutdown_task],
            return_when=asyncio.FIRST_COMPLETED,
        )

        if not server_task.done():
            server.should_exit = True
        await server_task
    finally:
        shutdown_task.cancel()
        await http_client.aclose()
        logger.info("server_stopped")
