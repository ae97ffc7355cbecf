"""Command declarations, matching and dispatch."""

from .command import (
    Command,
    CommandTable,
    build_command_table,
    compile_command,
    get_command_description,
)
from .dispatcher import CommandDispatcher, CommandMatch
from .env import merge_envs
from .matcher import match_command
from .parser import parse_command_data

__all__ = [
    "Command",
    "CommandTable",
    "CommandDispatcher",
    "CommandMatch",
    "build_command_table",
    "compile_command",
    "get_command_description",
    "match_command",
    "merge_envs",
    "parse_command_data",
]
