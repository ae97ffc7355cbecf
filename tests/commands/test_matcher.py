"""Tests for regex capture projection."""

from wxwork_robot.core.commands import compile_command, match_command


class TestMatchCommand:
    """Matching a message against a single command."""

    def test_named_group_projection(self):
        command = compile_command(r"deploy (?P<service>\S+)", {"type": "echo"})
        print("\n INPUT: 'deploy service-a'")
        envs = command.try_capture("deploy service-a")
        print(f" OUTPUT: {envs}")
        assert envs == {
            "WXWORK_ROBOT_CMD": "deploy service-a",
            "WXWORK_ROBOT_CMD_SERVICE": "service-a",
        }

    def test_no_match_returns_none(self):
        command = compile_command(r"^deploy (?P<service>\S+)$", {"type": "echo"})
        assert command.try_capture("rollback service-a") is None
        assert command.try_capture("rollback service-a") is None

    def test_search_is_unanchored(self):
        command = compile_command("ping", {"type": "echo"})
        assert command.try_capture("please ping now") == {"WXWORK_ROBOT_CMD": "ping"}

    def test_static_env_included(self):
        command = compile_command("^ping$", {"type": "echo", "env": {"team": "ops"}})
        assert match_command(command, "ping") == {
            "WXWORK_ROBOT_CMD": "ping",
            "WXWORK_ROBOT_CMD_TEAM": "ops",
        }

    def test_unmatched_optional_group_omitted(self):
        command = compile_command(
            r"^deploy (?P<service>\S+)(?: (?P<stage>\w+))?$", {"type": "echo"}
        )
        envs = command.try_capture("deploy api")
        assert envs == {"WXWORK_ROBOT_CMD": "deploy api", "WXWORK_ROBOT_CMD_SERVICE": "api"}
        assert "WXWORK_ROBOT_CMD_STAGE" not in envs

    def test_empty_participating_group_kept(self):
        command = compile_command(r"^say(?P<text>.*)$", {"type": "echo"})
        assert command.try_capture("say")["WXWORK_ROBOT_CMD_TEXT"] == ""

    def test_positional_groups_ignored(self):
        command = compile_command(r"^(\w+) (\w+)$", {"type": "echo"})
        assert command.try_capture("hello world") == {"WXWORK_ROBOT_CMD": "hello world"}

    def test_capture_overrides_static_env(self):
        command = compile_command(
            r"^deploy (?P<team>\w+)$", {"type": "echo", "env": {"team": "ops"}}
        )
        assert command.try_capture("deploy dev")["WXWORK_ROBOT_CMD_TEAM"] == "dev"

    def test_lowercase_group_name_uppercased(self):
        command = compile_command(r"^run (?P<Job_Name>\S+)$", {"type": "echo"})
        assert command.try_capture("run nightly")["WXWORK_ROBOT_CMD_JOB_NAME"] == "nightly"

    def test_repeated_matches_are_equal_and_independent(self):
        command = compile_command(r"^deploy (?P<service>\S+)$", {"type": "echo", "env": {"a": "1"}})
        first = command.try_capture("deploy api")
        first["WXWORK_ROBOT_CMD_A"] = "mutated"
        second = command.try_capture("deploy api")
        assert second["WXWORK_ROBOT_CMD_A"] == "1"
        assert second == command.try_capture("deploy api")
        assert command.envs["WXWORK_ROBOT_CMD_A"] == "1"
