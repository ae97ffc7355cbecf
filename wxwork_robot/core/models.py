"""Domain models for WXWork robot commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import ClassVar, Mapping, Tuple, Union

ENV_PREFIX = "WXWORK_ROBOT_CMD"


def _empty_mapping() -> Mapping[str, str]:
    return MappingProxyType({})


class CommandKind(str, Enum):
    ECHO = "echo"
    SPAWN = "spawn"
    HTTP = "http"
    HELP = "help"


class SpawnOutputType(str, Enum):
    MARKDOWN = "markdown"
    TEXT = "text"
    IMAGE = "image"

    @classmethod
    def from_config(cls, value: str | None) -> "SpawnOutputType":
        """Case-insensitive lookup; anything unknown renders as markdown."""
        lowered = (value or "").lower()
        if lowered == "text":
            return cls.TEXT
        if lowered == "image":
            return cls.IMAGE
        return cls.MARKDOWN


class HttpMethod(str, Enum):
    AUTO = "auto"
    GET = "get"
    POST = "post"
    DELETE = "delete"
    HEAD = "head"
    PUT = "put"

    @classmethod
    def from_config(cls, value: str | None) -> "HttpMethod":
        try:
            return cls((value or "").lower())
        except ValueError:
            return cls.AUTO


@dataclass(frozen=True)
class EchoCommand:
    kind: ClassVar[CommandKind] = CommandKind.ECHO

    echo: str = "Ok"


@dataclass(frozen=True)
class SpawnCommand:
    kind: ClassVar[CommandKind] = CommandKind.SPAWN

    exec: str
    args: Tuple[str, ...] = ()
    cwd: str = ""
    output_type: SpawnOutputType = SpawnOutputType.MARKDOWN


@dataclass(frozen=True)
class HttpCommand:
    kind: ClassVar[CommandKind] = CommandKind.HTTP

    url: str
    echo: str = "Ok"
    post: str = "Ok"
    method: HttpMethod = HttpMethod.AUTO
    content_type: str = ""
    headers: Mapping[str, str] = field(default_factory=_empty_mapping)


@dataclass(frozen=True)
class HelpCommand:
    kind: ClassVar[CommandKind] = CommandKind.HELP

    prefix: str = ""
    suffix: str = ""


CommandData = Union[EchoCommand, SpawnCommand, HttpCommand, HelpCommand]
