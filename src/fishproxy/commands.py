"""Registro e despacho de comandos invocados pelo front-end.

O front-end chama `invoke(<comando>, <args>)` com um objeto JSON de argumentos.
Cada comando declara um pydantic model para esses argumentos; o dispatcher
valida, chama o handler e aguarda o resultado quando ele e awaitable.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from fishproxy.exceptions import CommandNotFoundError, InvalidCommandArgsError
from fishproxy.logging import get_logger
from fishproxy.models.tts import TTSRequest
from fishproxy.proxy import greet, tts_synthesize

logger = get_logger("commands")


class GreetArgs(BaseModel):
    name: str


class TTSSynthesizeArgs(BaseModel):
    request: TTSRequest


@dataclass(frozen=True, slots=True)
class Command:
    """Handler registrado sob um nome, com o model dos seus argumentos."""

    name: str
    handler: Callable[..., Any]
    args_model: type[BaseModel]


def _format_validation_errors(exc: ValidationError) -> list[str]:
    errors: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"])
        errors.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return errors


class CommandRegistry:
    """Tabela de comandos disponiveis para o front-end."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(
        self, name: str, args_model: type[BaseModel]
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator que registra `handler` sob `name`."""

        def decorator(handler: Callable[..., Any]) -> Callable[..., Any]:
            self._commands[name] = Command(name=name, handler=handler, args_model=args_model)
            return handler

        return decorator

    def get(self, name: str) -> Command:
        """Retorna o comando registrado.

        Raises:
            CommandNotFoundError: Se nenhum comando tem esse nome.
        """
        command = self._commands.get(name)
        if command is None:
            raise CommandNotFoundError(name)
        return command

    def names(self) -> list[str]:
        return sorted(self._commands)

    async def invoke(
        self,
        name: str,
        payload: Mapping[str, Any] | None = None,
        **context: Any,
    ) -> Any:
        """Valida os argumentos e executa o comando.

        Args:
            name: Nome do comando.
            payload: Objeto JSON de argumentos (chaves = parametros do handler).
            **context: Dependencias do host (ex: `client`). So sao repassadas
                aos handlers que declaram um parametro com o mesmo nome.

        Raises:
            CommandNotFoundError: Comando desconhecido.
            InvalidCommandArgsError: Argumentos invalidos.
        """
        command = self.get(name)

        try:
            args = command.args_model.model_validate(payload if payload is not None else {})
        except ValidationError as exc:
            raise InvalidCommandArgsError(name, _format_validation_errors(exc)) from exc

        kwargs = {field: getattr(args, field) for field in type(args).model_fields}
        accepted = inspect.signature(command.handler).parameters
        kwargs.update({key: value for key, value in context.items() if key in accepted})

        logger.debug("command_dispatch", command=name)

        result = command.handler(**kwargs)
        if inspect.isawaitable(result):
            result = await result
        return result


def build_default_registry() -> CommandRegistry:
    """Registry com os comandos expostos pelo app desktop."""
    registry = CommandRegistry()
    registry.register("greet", GreetArgs)(greet)
    registry.register("tts_synthesize", TTSSynthesizeArgs)(tts_synthesize)
    return registry
