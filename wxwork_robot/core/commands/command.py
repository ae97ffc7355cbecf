"""Compiled command descriptors and the command table builder."""

from __future__ import annotations

import copy
import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from ..json_values import read_bool, read_object, read_string, stringify_env_value
from ..models import ENV_PREFIX, CommandData, CommandKind
from .matcher import match_command
from .parser import parse_command_data

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Command:
    """Immutable, compiled form of one command declaration."""

    data: CommandData
    name: str
    rule: re.Pattern
    envs: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    config: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    hidden: bool = False
    description: str = ""

    def __hash__(self) -> int:
        return hash(self.name)

    @property
    def kind(self) -> CommandKind:
        return self.data.kind

    def is_hidden(self) -> bool:
        return self.hidden

    def try_capture(self, message: str) -> Optional[Dict[str, str]]:
        """Return the environment mapping for ``message`` or None if it does not match."""
        return match_command(self, message)


CommandTable = Tuple[Command, ...]


def env_key(name: str) -> str:
    return f"{ENV_PREFIX}_{name}".upper()


def compile_command(name: str, declaration: Any) -> Optional[Command]:
    """Compile a single declaration; returns None when it must be dropped."""

    data = parse_command_data(name, declaration)
    if data is None:
        return None

    try:
        rule = re.compile(name)
    except re.error as exc:
        LOGGER.error("command %s regex invalid: %r\n%s", name, declaration, exc)
        return None

    envs: Dict[str, str] = {}
    for key, value in (read_object(declaration, "env") or {}).items():
        envs[env_key(str(key))] = stringify_env_value(value)

    hidden = read_bool(declaration, "hidden")
    description = read_string(declaration, "description")
    return Command(
        data=data,
        name=name,
        rule=rule,
        envs=MappingProxyType(envs),
        config=MappingProxyType(copy.deepcopy(dict(declaration))),
        hidden=bool(hidden),
        description=description or "",
    )


def build_command_table(declarations: Any) -> CommandTable:
    """Compile every ``name -> declaration`` entry, keeping declaration order.

    Malformed entries are logged and skipped; a non-object input yields an
    empty table.
    """

    if not isinstance(declarations, Mapping):
        LOGGER.error("command table must be a json object, but real is %r", declarations)
        return ()

    commands = []
    for name, declaration in declarations.items():
        command = compile_command(str(name), declaration)
        if command is not None:
            commands.append(command)

    skipped = len(declarations) - len(commands)
    if skipped:
        LOGGER.warning("Skipped %s invalid command declaration(s)", skipped)
    LOGGER.info("Loaded %s command(s)", len(commands))
    return tuple(commands)


def get_command_description(command: Command) -> Optional[str]:
    """Text used by help listings; None for hidden commands."""
    if command.is_hidden():
        return None
    return command.description or command.name
