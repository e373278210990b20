"""POST /invoke/{command}: ponte entre o front-end e os comandos."""

from __future__ import annotations

import json
import uuid
from typing import Any

import httpx  # noqa: TC002
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from fishproxy.commands import CommandRegistry  # noqa: TC001
from fishproxy.exceptions import InvalidRequestError
from fishproxy.logging import get_logger
from fishproxy.server.dependencies import get_http_client, get_registry

router = APIRouter()

logger = get_logger("server.routes.invoke")


async def _read_payload(request: Request) -> Any:
    """Le o body JSON. Body vazio equivale a `{}`."""
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise InvalidRequestError(f"Request body is not valid JSON: {exc}") from exc


@router.post("/invoke/{command}")
async def invoke_command(
    command: str,
    request: Request,
    registry: CommandRegistry = Depends(get_registry),  # noqa: B008
    http_client: httpx.AsyncClient | None = Depends(get_http_client),  # noqa: B008
) -> dict[str, Any]:
    """Executa um comando registrado e devolve `{"result": ...}`.

    Falhas de sintese voltam com status 200 e `result.success = false`.
    """
    request_id = str(uuid.uuid4())

    # 404 antes de olhar o body
    registry.get(command)
    payload = await _read_payload(request)

    logger.info("command_invoked", request_id=request_id, command=command)

    context: dict[str, Any] = {}
    if http_client is not None:
        context["client"] = http_client

    result = await registry.invoke(command, payload, **context)
    if isinstance(result, BaseModel):
        result = result.model_dump()

    logger.info("command_done", request_id=request_id, command=command)
    return {"result": result}
