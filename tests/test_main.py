"""Tests for the command-line entry point."""

from __future__ import annotations

import json

import pytest

from wxwork_robot.main import cli


@pytest.fixture
def config_dir(tmp_path, declarations):
    (tmp_path / "commands.json").write_text(json.dumps(declarations), encoding="utf-8")
    return tmp_path


class TestCli:
    def test_list_hides_hidden_commands(self, config_dir, capsys):
        assert cli(["--config-dir", str(config_dir), "list"]) == 0

        output = capsys.readouterr().out
        assert "Check the robot is alive" in output
        assert "^secret$" not in output

    def test_list_all(self, config_dir, capsys):
        assert cli(["--config-dir", str(config_dir), "list", "--all"]) == 0

        output = capsys.readouterr().out
        assert "Not listed (hidden)" in output

    def test_match_prints_envs(self, config_dir, capsys):
        assert cli(["--config-dir", str(config_dir), "match", "deploy api prod"]) == 0

        output = capsys.readouterr().out
        assert "WXWORK_ROBOT_CMD=deploy api prod" in output
        assert "WXWORK_ROBOT_CMD_SERVICE=api" in output
        assert "WXWORK_ROBOT_CMD_ENV=prod" in output

    def test_match_no_command(self, config_dir, capsys):
        assert cli(["--config-dir", str(config_dir), "match", "make coffee"]) == 1
        assert "No command matches" in capsys.readouterr().out

    def test_missing_config_dir(self, tmp_path):
        assert cli(["--config-dir", str(tmp_path / "missing"), "list"]) == 1

    def test_no_subcommand(self, capsys):
        assert cli([]) == 1
