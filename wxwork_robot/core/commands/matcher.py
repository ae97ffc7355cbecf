"""Project regex captures of a command into its environment mapping."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

from ..models import ENV_PREFIX

if TYPE_CHECKING:
    from .command import Command


def match_command(command: "Command", message: str) -> Optional[Dict[str, str]]:
    """Match ``message`` against the command rule.

    On a match the result holds the command's static env, the full match under
    ``WXWORK_ROBOT_CMD`` and one ``WXWORK_ROBOT_CMD_<NAME>`` entry per named
    group that took part in the match. Captures overwrite static env entries
    with the same key.
    """

    match = command.rule.search(message)
    if match is None:
        return None

    envs = dict(command.envs)
    envs[ENV_PREFIX] = match.group(0)
    for group_name, value in match.groupdict().items():
        # groups that did not participate are left out rather than emptied
        if value is not None:
            envs[f"{ENV_PREFIX}_{group_name}".upper()] = value
    return envs
