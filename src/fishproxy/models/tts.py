"""Pydantic models do comando `tts_synthesize`."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from fishproxy.constants import DEFAULT_FORMAT, DEFAULT_MODEL


class TTSRequest(BaseModel):
    """Pedido de sintese vindo do front-end.

    Nenhum campo e validado localmente alem do tipo; quem valida e a Fish Audio.
    """

    text: str = Field(description="Texto a ser sintetizado.")
    api_key: str = Field(repr=False, description="Chave da Fish Audio, enviada como Bearer.")
    reference_id: str = Field(description="Identificador da voz/referencia na Fish Audio.")
    model: str = Field(
        default=DEFAULT_MODEL,
        description="Modelo TTS. Aceito, mas ainda nao enviado a API.",
    )
    format: str = Field(
        default=DEFAULT_FORMAT,
        description="Container de audio de saida (mp3, wav, ...).",
    )


class TTSResponse(BaseModel):
    """Resultado da sintese.

    Exatamente um entre `audio_base64` e `error` e preenchido, conforme `success`.
    """

    success: bool
    audio_base64: str | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _check_exclusive_payload(self) -> TTSResponse:
        if self.success:
            if self.audio_base64 is None or self.error is not None:
                raise ValueError("successful response must carry audio_base64 and no error")
        elif self.error is None or self.audio_base64 is not None:
            raise ValueError("failed response must carry error and no audio_base64")
        return self

    @classmethod
    def ok(cls, audio_base64: str) -> TTSResponse:
        return cls(success=True, audio_base64=audio_base64)

    @classmethod
    def fail(cls, error: str) -> TTSResponse:
        return cls(success=False, error=error)
