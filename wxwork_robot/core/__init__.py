"""Core domain logic for the WXWork robot."""

from .commands import (
    Command,
    CommandDispatcher,
    CommandMatch,
    CommandTable,
    build_command_table,
    compile_command,
    get_command_description,
    match_command,
    merge_envs,
)
from .config import Config, load_config
from .errors import (
    ConfigError,
    ExecutorError,
    WXWorkRobotError,
)
from .models import (
    ENV_PREFIX,
    CommandData,
    CommandKind,
    EchoCommand,
    HelpCommand,
    HttpCommand,
    HttpMethod,
    SpawnCommand,
    SpawnOutputType,
)
from .router import Router

__all__ = [
    "Config",
    "load_config",
    "Command",
    "CommandData",
    "CommandDispatcher",
    "CommandKind",
    "CommandMatch",
    "CommandTable",
    "EchoCommand",
    "HelpCommand",
    "HttpCommand",
    "HttpMethod",
    "SpawnCommand",
    "SpawnOutputType",
    "ENV_PREFIX",
    "build_command_table",
    "compile_command",
    "get_command_description",
    "match_command",
    "merge_envs",
    "WXWorkRobotError",
    "ConfigError",
    "ExecutorError",
    "Router",
]
