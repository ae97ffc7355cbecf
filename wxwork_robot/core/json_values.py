"""Typed, failure-tolerant readers over decoded JSON values.

Every reader returns ``None`` when the container is not an object, the key is
missing, or the value has a different shape. Callers treat all three the same
way: the field is simply not present.
"""

from __future__ import annotations

import json
from typing import Any, List, Mapping, Optional

SCALAR_TYPES = (type(None), bool, int, float, str)


def _read_field(value: Any, name: str) -> Any:
    if not isinstance(value, Mapping):
        return None
    return value.get(name)


def read_string(value: Any, name: str) -> Optional[str]:
    field = _read_field(value, name)
    return field if isinstance(field, str) else None


def read_bool(value: Any, name: str) -> Optional[bool]:
    field = _read_field(value, name)
    return field if isinstance(field, bool) else None


def read_array(value: Any, name: str) -> Optional[List[Any]]:
    field = _read_field(value, name)
    return field if isinstance(field, list) else None


def read_object(value: Any, name: str) -> Optional[Mapping[str, Any]]:
    field = _read_field(value, name)
    return field if isinstance(field, Mapping) else None


def is_scalar(value: Any) -> bool:
    return isinstance(value, SCALAR_TYPES)


def to_json_text(value: Any) -> str:
    """Render a value the way a compact JSON encoder would.

    YAML sources can hold dates and timestamps; those render as their ``str``.
    """
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        # non-string mapping keys such as dates
        return str(value)


def _to_text(value: Any) -> str:
    if isinstance(value, (type(None), bool, int, float, list, dict)):
        return to_json_text(value)
    return str(value)


def stringify_scalar(value: Any) -> str:
    """Stringify an argument or header value.

    Strings pass through, null becomes an empty string, booleans become
    ``true``/``false`` and numbers keep their literal form. Nested values
    fall back to their JSON text.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return _to_text(value)


def stringify_env_value(value: Any) -> str:
    """Stringify a static env value; unlike arguments, null stays ``null``."""
    if isinstance(value, str):
        return value
    return _to_text(value)
