"""Grupo principal de comandos CLI do Fish Proxy."""

from __future__ import annotations

import click

import fishproxy


@click.group()
@click.version_option(version=fishproxy.__version__, prog_name="fishproxy")
def cli() -> None:
    """Fish Proxy: ponte local entre o app desktop e a Fish Audio TTS."""
