"""Health check endpoint."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

import fishproxy

router = APIRouter()


@router.get("/health")
async def health(request: Request) -> dict[str, Any]:
    """Health check do host.

    Retorna status basico (liveness) e os comandos disponiveis.
    """
    response: dict[str, Any] = {
        "status": "ok",
        "version": fishproxy.__version__,
    }

    registry = getattr(request.app.state, "registry", None)
    if registry is not None:
        response["commands"] = registry.names()

    return response
