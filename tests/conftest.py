"""Fixtures compartilhadas para todos os testes."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable

import httpx
import pytest

from fishproxy.models.tts import TTSRequest

Handler = Callable[[httpx.Request], httpx.Response]


class FailingStream(httpx.AsyncByteStream):
    """Body que falha no meio da leitura, como uma conexao resetada."""

    async def __aiter__(self) -> AsyncIterator[bytes]:
        raise httpx.ReadError("connection reset by peer")
        yield b""  # pragma: no cover


@pytest.fixture
def tts_request() -> TTSRequest:
    return TTSRequest(text="hello", api_key="k1", reference_id="ref1")


@pytest.fixture
def make_client() -> Callable[[Handler], httpx.AsyncClient]:
    """Fabrica de AsyncClient cujo transporte e um stub da Fish Audio."""

    def _make(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make
