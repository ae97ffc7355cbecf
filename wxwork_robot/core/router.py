"""Routes chat messages to matching commands."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

from ..chat_adapters.i_chat_adapter import IChatAdapter
from .commands import CommandDispatcher, CommandMatch, CommandTable, merge_envs
from .errors import ExecutorError
from .executors import ICommandExecutor
from .json_values import stringify_env_value
from .models import CommandKind

LOGGER = logging.getLogger(__name__)

KindHandler = Callable[[CommandMatch, Dict[str, str]], Awaitable[str]]


class Router:
    """Central orchestrator translating chat messages into command replies."""

    def __init__(
        self,
        commands: CommandTable,
        executor: Optional[ICommandExecutor] = None,
    ) -> None:
        self._dispatcher = CommandDispatcher(commands)
        self._executor = executor
        self._chat_adapter: Optional[IChatAdapter] = None
        self._kind_handlers: Dict[CommandKind, KindHandler] = {
            CommandKind.ECHO: self._handle_echo,
            CommandKind.HELP: self._handle_help,
            CommandKind.SPAWN: self._handle_spawn,
            CommandKind.HTTP: self._handle_http,
        }

    @property
    def dispatcher(self) -> CommandDispatcher:
        return self._dispatcher

    def bind_adapter(self, adapter: IChatAdapter) -> None:
        """Attach the chat adapter so the router can send replies."""

        self._chat_adapter = adapter

    def bind_executor(self, executor: ICommandExecutor) -> None:
        self._executor = executor

    def update_commands(self, commands: CommandTable) -> None:
        """Swap in a freshly loaded command table."""
        self._dispatcher = CommandDispatcher(commands)
        LOGGER.info("Command table replaced with %s command(s)", len(commands))

    async def handle_message(self, event: Mapping[str, Any]) -> None:
        chat_id = event.get("chat_id")
        text = (event.get("text") or "").strip()

        if not chat_id:
            LOGGER.debug("Ignoring chat event missing chat_id")
            return
        if not text:
            LOGGER.debug("Ignoring empty message in %s", chat_id)
            return

        match = self._dispatcher.find_match(text)
        if match is None:
            LOGGER.info("No command matched message in %s: %s", chat_id, text)
            await self._send_message(chat_id, f"Unknown command: {text}")
            return

        envs = _normalize_envs(merge_envs(match.envs, event.get("env")))
        LOGGER.info(
            "Message in %s matched command %s (%s)",
            chat_id,
            match.command.name,
            match.command.kind.value,
        )

        handler = self._kind_handlers[match.command.kind]
        try:
            reply = await handler(match, envs)
        except ExecutorError as exc:
            LOGGER.error("Command %s failed: %s", match.command.name, exc)
            await self._send_message(chat_id, f"Failed to run `{match.command.name}`: {exc}")
            return
        await self._send_message(chat_id, reply)

    async def _handle_echo(self, match: CommandMatch, envs: Dict[str, str]) -> str:
        return match.command.data.echo

    async def _handle_help(self, match: CommandMatch, envs: Dict[str, str]) -> str:
        return "\n".join(self._dispatcher.build_help_lines(match.command.data))

    async def _handle_spawn(self, match: CommandMatch, envs: Dict[str, str]) -> str:
        executor = self._require_executor(match)
        return await executor.run_spawn(match.command, match.command.data, envs)

    async def _handle_http(self, match: CommandMatch, envs: Dict[str, str]) -> str:
        executor = self._require_executor(match)
        return await executor.run_http(match.command, match.command.data, envs)

    def _require_executor(self, match: CommandMatch) -> ICommandExecutor:
        if self._executor is None:
            raise ExecutorError(f"no executor bound for {match.command.kind.value} commands")
        return self._executor

    async def _send_message(self, chat_id: str, text: str) -> Optional[str]:
        if not self._chat_adapter:
            LOGGER.warning("Chat adapter not bound; dropping message: %s", text)
            return None
        return await self._chat_adapter.send_message(chat_id=chat_id, text=text)


def _normalize_envs(envs: Mapping[str, Any]) -> Dict[str, str]:
    return {str(key): stringify_env_value(value) for key, value in envs.items()}
