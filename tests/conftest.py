"""Shared fixtures for command tests."""

from __future__ import annotations

from typing import Any, Dict

import pytest

from wxwork_robot.core.commands import build_command_table


@pytest.fixture
def declarations() -> Dict[str, Any]:
    """A realistic command configuration covering every command type."""
    return {
        "^help$": {
            "type": "help",
            "description": "Show this command list",
            "prefix": "Available commands:",
            "suffix": "Ask in #robot for more.",
        },
        "^ping$": {
            "type": "echo",
            "echo": "pong",
            "description": "Check the robot is alive",
        },
        r"^deploy (?P<service>\S+)(?: (?P<env>\w+))?$": {
            "type": "spawn",
            "exec": "/usr/local/bin/deploy.sh",
            "args": ["--verbose", 3, True, None],
            "cwd": "/srv/deploy",
            "output_type": "Text",
            "env": {"team": "ops", "retries": 2},
            "description": "Deploy a service",
        },
        r"^status (?P<service>\S+)$": {
            "type": "http",
            "url": "https://status.example.com/api",
            "method": "POST",
            "content_type": "application/json",
            "headers": {"X-Token": "abc", "X-Retry": 1},
        },
        "^secret$": {
            "type": "echo",
            "hidden": True,
            "description": "Not listed",
        },
    }


@pytest.fixture
def command_table(declarations):
    return build_command_table(declarations)
