"""CLI entry point."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from .core import ConfigError, load_config
from .core.commands import CommandDispatcher, get_command_description

LOGGER = logging.getLogger(__name__)


def cli(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="wxwork-robot",
        description="WXWork robot - inspect and test configured chat commands",
    )
    parser.add_argument(
        "--config-dir",
        help="Directory containing .env and commands.json/commands.yaml",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser(
        "list",
        help="List configured commands as the help command shows them",
    )
    list_parser.add_argument(
        "--all",
        action="store_true",
        help="Include hidden commands",
    )

    match_parser = subparsers.add_parser(
        "match",
        help="Show which command a message triggers and its environment",
    )
    match_parser.add_argument("message", help="Chat message text to match")

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config_dir)
    except ConfigError as exc:
        LOGGER.error("Configuration error: %s", exc)
        return 1

    logging.getLogger().setLevel(getattr(logging, config.log_level, logging.INFO))
    LOGGER.info("Using commands file: %s", config.commands_file)

    dispatcher = CommandDispatcher(config.commands)
    if args.command == "list":
        return _run_list(dispatcher, show_all=args.all)
    return _run_match(dispatcher, args.message)


def _run_list(dispatcher: CommandDispatcher, show_all: bool) -> int:
    for command in dispatcher.commands:
        description = get_command_description(command)
        if description is None:
            if not show_all:
                continue
            description = f"{command.description or command.name} (hidden)"
        print(f"{command.name}\t{command.kind.value}\t{description}")
    return 0


def _run_match(dispatcher: CommandDispatcher, message: str) -> int:
    match = dispatcher.find_match(message)
    if match is None:
        print(f"No command matches: {message}")
        return 1

    print(f"# {match.command.name} ({match.command.kind.value})")
    for key in sorted(match.envs):
        print(f"{key}={match.envs[key]}")
    return 0


if __name__ == "__main__":
    raise SystemExit(cli())
