"""Comando `fishproxy synthesize`: sintese unica direto do terminal."""

from __future__ import annotations

import asyncio
import base64
import sys
from pathlib import Path

import click

from fishproxy.cli.main import cli
from fishproxy.constants import DEFAULT_FORMAT, DEFAULT_MODEL
from fishproxy.models.tts import TTSRequest
from fishproxy.proxy import tts_synthesize


@cli.command()
@click.argument("text")
@click.option(
    "--api-key",
    envvar="FISH_API_KEY",
    required=True,
    help="Chave da Fish Audio (ou FISH_API_KEY).",
)
@click.option(
    "--reference-id",
    envvar="FISH_REFERENCE_ID",
    required=True,
    help="Voz/referencia na Fish Audio (ou FISH_REFERENCE_ID).",
)
@click.option("--model", default=DEFAULT_MODEL, show_default=True, help="Modelo TTS.")
@click.option(
    "--format",
    "audio_format",
    default=DEFAULT_FORMAT,
    show_default=True,
    help="Formato de audio de saida.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Arquivo de saida. Default: speech.<format>",
)
def synthesize(
    text: str,
    api_key: str,
    reference_id: str,
    model: str,
    audio_format: str,
    output: Path | None,
) -> None:
    """Sintetiza TEXT via Fish Audio e salva o audio em arquivo."""
    request = TTSRequest(
        text=text,
        api_key=api_key,
        reference_id=reference_id,
        model=model,
        format=audio_format,
    )

    result = asyncio.run(tts_synthesize(request))
    if not result.success or result.audio_base64 is None:
        click.echo(f"Erro: {result.error}", err=True)
        sys.exit(1)

    audio = base64.b64decode(result.audio_base64)
    target = output if output is not None else Path(f"speech.{audio_format}")
    target.write_bytes(audio)
    click.echo(f"Audio salvo em {target} ({len(audio)} bytes)")
