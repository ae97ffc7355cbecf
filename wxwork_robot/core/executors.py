"""Backends that execute spawn and http commands."""

from __future__ import annotations

import abc
from typing import Mapping

from .commands import Command
from .models import HttpCommand, SpawnCommand


class ICommandExecutor(abc.ABC):
    """Runs the commands the core only describes.

    Implementations receive the environment mapping produced by the match and
    return the text to send back to the chat. They raise ``ExecutorError`` when
    a command cannot be executed.
    """

    @abc.abstractmethod
    async def run_spawn(
        self, command: Command, spawn: SpawnCommand, envs: Mapping[str, str]
    ) -> str:
        """Start ``spawn.exec`` with ``spawn.args`` in ``spawn.cwd``."""

    @abc.abstractmethod
    async def run_http(
        self, command: Command, http: HttpCommand, envs: Mapping[str, str]
    ) -> str:
        """Send the request described by ``http``."""
