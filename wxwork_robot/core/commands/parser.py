"""Parse a single command declaration into one of the command variants."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

from ..json_values import read_array, read_object, read_string, stringify_scalar
from ..models import (
    CommandData,
    CommandKind,
    EchoCommand,
    HelpCommand,
    HttpCommand,
    HttpMethod,
    SpawnCommand,
    SpawnOutputType,
)

LOGGER = logging.getLogger(__name__)

DEFAULT_ECHO = "Ok"


def parse_command_data(name: str, declaration: Any) -> Optional[CommandData]:
    """Build the typed command variant for ``declaration``.

    Returns ``None`` (and logs why) when the declaration is not an object,
    has a missing or unknown ``type``, or lacks a field its type requires.
    """

    if not isinstance(declaration, Mapping):
        LOGGER.error(
            "command %s configure must be a json object, but real is %r",
            name,
            declaration,
        )
        return None

    type_name = read_string(declaration, "type")
    if type_name is None:
        LOGGER.error("command %s configure require type: %r", name, declaration)
        return None

    try:
        kind = CommandKind(type_name)
    except ValueError:
        LOGGER.error("command %s configure type invalid: %s", name, type_name)
        return None

    return _PARSERS[kind](name, declaration)


def _parse_echo(name: str, declaration: Mapping[str, Any]) -> Optional[CommandData]:
    return EchoCommand(echo=_string_or(declaration, "echo", DEFAULT_ECHO))


def _parse_spawn(name: str, declaration: Mapping[str, Any]) -> Optional[CommandData]:
    exec_field = read_string(declaration, "exec")
    if exec_field is None:
        LOGGER.error("spawn command %s requires exec: %r", name, declaration)
        return None

    args = tuple(stringify_scalar(arg) for arg in read_array(declaration, "args") or [])
    return SpawnCommand(
        exec=exec_field,
        args=args,
        cwd=_string_or(declaration, "cwd", ""),
        output_type=SpawnOutputType.from_config(read_string(declaration, "output_type")),
    )


def _parse_http(name: str, declaration: Mapping[str, Any]) -> Optional[CommandData]:
    url = read_string(declaration, "url")
    if url is None:
        LOGGER.error("http command %s requires url: %r", name, declaration)
        return None

    headers: Dict[str, str] = {}
    for key, value in (read_object(declaration, "headers") or {}).items():
        headers[str(key)] = stringify_scalar(value)

    return HttpCommand(
        url=url,
        echo=_string_or(declaration, "echo", DEFAULT_ECHO),
        post=_string_or(declaration, "post", DEFAULT_ECHO),
        method=HttpMethod.from_config(read_string(declaration, "method")),
        content_type=_string_or(declaration, "content_type", ""),
        headers=MappingProxyType(headers),
    )


def _parse_help(name: str, declaration: Mapping[str, Any]) -> Optional[CommandData]:
    return HelpCommand(
        prefix=_string_or(declaration, "prefix", ""),
        suffix=_string_or(declaration, "suffix", ""),
    )


def _string_or(declaration: Mapping[str, Any], field: str, default: str) -> str:
    value = read_string(declaration, field)
    return default if value is None else value


_PARSERS: Dict[CommandKind, Callable[[str, Mapping[str, Any]], Optional[CommandData]]] = {
    CommandKind.ECHO: _parse_echo,
    CommandKind.SPAWN: _parse_spawn,
    CommandKind.HTTP: _parse_http,
    CommandKind.HELP: _parse_help,
}
