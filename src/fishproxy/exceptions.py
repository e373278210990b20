"""Exceptions tipadas do Fish Proxy.

Hierarquia:
    FishProxyError (base)
    +-- SynthesisError
    |   +-- TransportError
    |   +-- ApiError
    |   +-- ReadError
    +-- CommandError
    |   +-- CommandNotFoundError
    |   +-- InvalidCommandArgsError
    +-- InvalidRequestError

As mensagens de SynthesisError sao o proprio campo `error` devolvido ao
front-end, por isso ficam em ingles e com formato estavel.
"""

from __future__ import annotations


class FishProxyError(Exception):
    """Base para todas as exceptions do Fish Proxy."""


# --- Sintese ---


class SynthesisError(FishProxyError):
    """Falha em alguma etapa da chamada a Fish Audio."""


class TransportError(SynthesisError):
    """Nenhuma resposta HTTP obtida (conexao, DNS, timeout)."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"request failed: {detail}")


class ApiError(SynthesisError):
    """Fish Audio respondeu com status fora da faixa 2xx."""

    def __init__(self, status_code: int, reason: str, body: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        status = f"{status_code} {reason}" if reason else str(status_code)
        super().__init__(f"API error {status}: {body}")


class ReadError(SynthesisError):
    """Status 2xx, mas o body nao pode ser lido por completo."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"failed to read response: {detail}")


# --- Comandos ---


class CommandError(FishProxyError):
    """Erro relacionado ao despacho de comandos."""


class CommandNotFoundError(CommandError):
    """Comando nao registrado."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Command '{command}' is not registered")


class InvalidCommandArgsError(CommandError):
    """Argumentos do comando nao passaram na validacao."""

    def __init__(self, command: str, errors: list[str]) -> None:
        self.command = command
        self.errors = errors
        detail = "; ".join(errors)
        super().__init__(f"Invalid arguments for command '{command}': {detail}")


# --- Request ---


class InvalidRequestError(FishProxyError):
    """Request HTTP malformado (ex: body que nao e JSON)."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)
