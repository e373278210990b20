"""CLI do Fish Proxy.

Registra todos os comandos no grupo principal.
"""

from fishproxy.cli.main import cli
from fishproxy.cli.serve import serve
from fishproxy.cli.tts import synthesize

__all__ = [
    "cli",
    "serve",
    "synthesize",
]
