"""Proxy de sintese TTS para a Fish Audio.

O front-end nao consegue chamar a Fish Audio direto (CORS), entao o pedido
passa por aqui: um POST com a chave no header Authorization, e o audio volta
como base64 dentro de um TTSResponse. Nenhuma falha escapa como exception.
"""

from __future__ import annotations

import base64

import httpx

from fishproxy.constants import FISH_TTS_URL
from fishproxy.exceptions import ApiError, ReadError, SynthesisError, TransportError
from fishproxy.logging import get_logger
from fishproxy.models.tts import TTSRequest, TTSResponse

logger = get_logger("proxy")


def build_request_body(request: TTSRequest) -> dict[str, str]:
    """Monta o body JSON no formato da Fish Audio.

    `api_key` vai apenas no header e `model` nao e enviado.
    """
    return {
        "text": request.text,
        "reference_id": request.reference_id,
        "format": request.format,
    }


def build_headers(api_key: str) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }


def _detail(exc: Exception) -> str:
    # Algumas exceptions do httpx (ex: timeouts) chegam sem mensagem
    return str(exc) or type(exc).__name__


async def fetch_audio(
    client: httpx.AsyncClient,
    request: TTSRequest,
    *,
    api_url: str = FISH_TTS_URL,
) -> bytes:
    """Executa o POST e retorna os bytes de audio.

    Duas suspensoes explicitas: envio (headers da resposta) e leitura do body.

    Raises:
        TransportError: Nenhuma resposta HTTP obtida.
        ApiError: Status fora da faixa 2xx.
        ReadError: Status 2xx, mas o body nao pode ser lido.
    """
    try:
        # Header com caractere nao-ASCII falha ja na montagem do request
        http_request = client.build_request(
            "POST",
            api_url,
            json=build_request_body(request),
            headers=build_headers(request.api_key),
        )
        response = await client.send(http_request, stream=True)
    except (httpx.RequestError, UnicodeEncodeError) as exc:
        raise TransportError(_detail(exc)) from exc

    try:
        if not response.is_success:
            try:
                await response.aread()
                body_text = response.text
            except (httpx.RequestError, httpx.StreamError):
                body_text = ""
            raise ApiError(response.status_code, response.reason_phrase, body_text)

        try:
            return await response.aread()
        except (httpx.RequestError, httpx.StreamError) as exc:
            raise ReadError(_detail(exc)) from exc
    finally:
        await response.aclose()


async def tts_synthesize(
    request: TTSRequest,
    *,
    client: httpx.AsyncClient | None = None,
    api_url: str = FISH_TTS_URL,
) -> TTSResponse:
    """Sintetiza `request.text` via Fish Audio.

    Args:
        request: Pedido de sintese vindo do front-end.
        client: AsyncClient compartilhado (opcional). Nao e fechado aqui.
            Sem ele, um client e criado e fechado para esta chamada.
        api_url: Endpoint TTS (default: endpoint publico da Fish Audio).

    Returns:
        TTSResponse com audio em base64 ou mensagem de erro.
    """
    logger.info(
        "tts_request",
        text_length=len(request.text),
        reference_id=request.reference_id,
        model=request.model,
        format=request.format,
    )

    try:
        if client is None:
            async with httpx.AsyncClient() as owned_client:
                audio = await fetch_audio(owned_client, request, api_url=api_url)
        else:
            audio = await fetch_audio(client, request, api_url=api_url)
    except SynthesisError as exc:
        logger.warning("tts_failed", error_type=type(exc).__name__, error=str(exc))
        return TTSResponse.fail(str(exc))

    logger.info("tts_done", audio_bytes=len(audio))
    return TTSResponse.ok(base64.b64encode(audio).decode("ascii"))


def greet(name: str) -> str:
    """Comando de exemplo do scaffold do app desktop."""
    return f"Hello, {name}! You've been greeted from Rust!"
