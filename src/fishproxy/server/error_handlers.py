"""Exception handlers HTTP para o FastAPI.

Mapeia exceptions tipadas do Fish Proxy para respostas HTTP. Falhas de sintese
nunca chegam aqui: elas voltam dentro do resultado do comando.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi.responses import JSONResponse

from fishproxy.exceptions import (
    CommandNotFoundError,
    FishProxyError,
    InvalidCommandArgsError,
    InvalidRequestError,
)
from fishproxy.logging import get_logger

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

logger = get_logger("server.errors")


def _error_response(status_code: int, message: str, error_type: str, code: str) -> JSONResponse:
    """Cria resposta de erro no formato compativel com OpenAI."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "message": message,
                "type": error_type,
                "code": code,
            }
        },
    )


async def _handle_command_not_found(request: Request, exc: CommandNotFoundError) -> JSONResponse:
    logger.warning("command_not_found", command=exc.command, path=request.url.path)
    return _error_response(404, str(exc), "command_not_found_error", "command_not_found")


async def _handle_invalid_command_args(
    request: Request, exc: InvalidCommandArgsError
) -> JSONResponse:
    logger.warning("invalid_command_args", command=exc.command, errors=exc.errors)
    return _error_response(400, str(exc), "invalid_request_error", "invalid_arguments")


async def _handle_invalid_request(request: Request, exc: InvalidRequestError) -> JSONResponse:
    logger.warning("invalid_request", detail=exc.detail, path=request.url.path)
    return _error_response(400, str(exc), "invalid_request_error", "invalid_request")


async def _handle_fishproxy_error(request: Request, exc: FishProxyError) -> JSONResponse:
    logger.error(
        "unhandled_fishproxy_error",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )
    return _error_response(500, "Internal server error", "internal_error", "internal_error")


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unexpected_error",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )
    return _error_response(500, "Internal server error", "internal_error", "internal_error")


def register_error_handlers(app: FastAPI) -> None:
    """Registra todos os exception handlers no FastAPI app."""
    app.add_exception_handler(CommandNotFoundError, _handle_command_not_found)
    app.add_exception_handler(InvalidCommandArgsError, _handle_invalid_command_args)
    app.add_exception_handler(InvalidRequestError, _handle_invalid_request)
    app.add_exception_handler(FishProxyError, _handle_fishproxy_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)
