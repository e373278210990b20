"""Constantes compartilhadas do proxy."""

from __future__ import annotations

# Endpoint fixo da Fish Audio para sintese de voz
FISH_TTS_URL = "https://api.fish.audio/v1/tts"

DEFAULT_MODEL = "s1"
DEFAULT_FORMAT = "mp3"
