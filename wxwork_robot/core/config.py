"""Configuration loader."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .commands import CommandTable, build_command_table
from .errors import ConfigError

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path("~/.wxwork-robot").expanduser()
ENV_FILE_NAME = ".env"
COMMANDS_FILES = ("commands.json", "commands.yaml", "commands.yml")
COMMANDS_KEY = "cmds"


@dataclass
class Config:
    commands: CommandTable
    config_dir: Path
    commands_file: Path
    log_level: str = "INFO"


def resolve_config_dir(config_dir: Path | str | None) -> Path:
    """Resolve and validate the directory containing .env + the commands file."""
    target = (
        Path(config_dir).expanduser() if config_dir else DEFAULT_CONFIG_DIR
    ).resolve()
    if not target.exists():
        raise ConfigError(
            f"Config directory {target} does not exist. "
            "Create it and add commands.json or commands.yaml."
        )
    if not target.is_dir():
        raise ConfigError(f"Config directory {target} is not a directory")
    return target


def load_config(config_dir: Path | str | None = None) -> Config:
    """Load robot configuration from the provided or default directory."""
    root = resolve_config_dir(config_dir)
    _load_env_file(root / ENV_FILE_NAME)

    commands_file = _find_commands_file(root)
    commands = load_commands_file(commands_file)
    log_level = (os.getenv("LOG_LEVEL") or "INFO").upper()

    return Config(
        commands=commands,
        config_dir=root,
        commands_file=commands_file,
        log_level=log_level,
    )


def load_commands_file(path: Path) -> CommandTable:
    """Read a JSON or YAML commands file and compile it into a command table."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigError(f"Commands file not found at {path}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc

    try:
        if path.suffix == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc

    declarations = _extract_declarations(data)
    if declarations is None:
        raise ConfigError(f"Invalid commands file structure at {path}")

    commands = build_command_table(declarations)
    if not commands:
        LOGGER.warning("No commands configured in %s", path)
    return commands


def _extract_declarations(data: Any) -> dict | None:
    """Return the pattern -> declaration mapping of a commands file.

    A file whose only key is ``cmds`` wraps the declarations, unless that value
    is itself a declaration (``cmds`` is a valid pattern too).
    """
    if not isinstance(data, dict):
        return None
    nested = data.get(COMMANDS_KEY)
    if len(data) == 1 and isinstance(nested, dict) and "type" not in nested:
        LOGGER.debug("Reading command declarations under the %r key", COMMANDS_KEY)
        return nested
    LOGGER.debug("Reading command declarations from the top-level mapping")
    return data


def _find_commands_file(root: Path) -> Path:
    for name in COMMANDS_FILES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    raise ConfigError(
        f"No commands file found in {root}; expected one of: " + ", ".join(COMMANDS_FILES)
    )


def _load_env_file(path: Path) -> None:
    if not path.exists():
        LOGGER.warning("No .env file found at %s; relying on shell environment.", path)
        return
    load_dotenv(dotenv_path=path, override=False)
