"""Merging of environment mappings."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ..json_values import is_scalar

LOGGER = logging.getLogger(__name__)


def merge_envs(base: Any, overlay: Any) -> Any:
    """Return a copy of ``base`` updated with the scalar entries of ``overlay``.

    Array or object values in ``overlay`` are skipped. When either side is not
    a mapping, ``base`` is returned unchanged.
    """

    if not isinstance(base, Mapping) or not isinstance(overlay, Mapping):
        return base

    merged = dict(base)
    for key, value in overlay.items():
        if is_scalar(value):
            merged[key] = value
        else:
            LOGGER.debug("Skipping non-scalar env value for %s", key)
    return merged
