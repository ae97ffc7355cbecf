"""First-match dispatch over a compiled command table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..models import HelpCommand
from .command import Command, CommandTable, get_command_description


@dataclass(frozen=True)
class CommandMatch:
    command: Command
    envs: Dict[str, str]


class CommandDispatcher:
    """Finds the command a chat message refers to."""

    def __init__(self, commands: Sequence[Command] = ()) -> None:
        self._commands: CommandTable = tuple(commands)

    @property
    def commands(self) -> CommandTable:
        return self._commands

    def find_match(self, message: str) -> Optional[CommandMatch]:
        """Return the first command, in declaration order, whose rule matches."""
        for command in self._commands:
            envs = command.try_capture(message)
            if envs is not None:
                return CommandMatch(command=command, envs=envs)
        return None

    def visible_commands(self) -> List[Command]:
        return [cmd for cmd in self._commands if get_command_description(cmd) is not None]

    def build_help_lines(self, help_command: Optional[HelpCommand] = None) -> list[str]:
        """Render help text for all visible commands."""

        lines: list[str] = []
        if help_command and help_command.prefix:
            lines.append(help_command.prefix)
        for command in self._commands:
            description = get_command_description(command)
            if description is not None:
                lines.append(f"- {description}")
        if help_command and help_command.suffix:
            lines.append(help_command.suffix)
        return lines
