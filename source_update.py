"""Rewrite a graph source block with new settings values.

Interactive changes (for example panning the viewport) are written back into
the author's text rather than kept in memory. The rewrite keeps the author's
formatting: existing directives have only their value replaced, in place, and
missing directives are appended to the end of the settings segment.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Any, Mapping

from .graph import SEGMENT_DELIMITER
from .graph_errors import GraphSyntaxError
from .graph_settings import SETTINGS_SCHEMA

__all__ = ["format_setting_value", "update_source"]

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


def format_setting_value(value: Any) -> str:
    """Spell a Python settings value the way the DSL writes it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.name.lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _replace_directive(settings: str, key: str, text: str) -> tuple[str, bool]:
    key_re = re.escape(key)

    assigned = re.compile(rf"(^|[;\r\n])([ \t]*{key_re}[ \t]*=[ \t]*)([^\s;]*)")
    settings, count = assigned.subn(lambda m: f"{m.group(1)}{m.group(2)}{text}", settings, count=1)
    if count:
        return settings, True

    # Bare boolean key, e.g. ``grid``.
    bare = re.compile(rf"(^|[;\r\n])([ \t]*{key_re})(?=[ \t]*(?:[;\r\n]|$))")
    settings, count = bare.subn(lambda m: f"{m.group(1)}{m.group(2)}={text}", settings, count=1)
    return settings, bool(count)


def update_source(source: str, updates: Mapping[str, Any]) -> str:
    """Return *source* with each ``key=value`` in *updates* applied.

    Parameters
    ----------
    source : str
        Graph source block.
    updates : mapping
        New values keyed by DSL key, e.g. ``{"left": -5, "grid": False}``.

    Raises
    ------
    GraphSyntaxError
        If a key is not a known settings field.
    """
    for key in updates:
        if key not in SETTINGS_SCHEMA:
            raise GraphSyntaxError(f"Unrecognised field: {key}")

    if SEGMENT_DELIMITER not in source:
        source = f"{SEGMENT_DELIMITER}\n{source}"

    settings, delimiter, equations = source.partition(SEGMENT_DELIMITER)

    for key, value in updates.items():
        text = format_setting_value(value)
        settings, replaced = _replace_directive(settings, key, text)
        if not replaced:
            if settings and not settings.endswith("\n"):
                settings += "\n"
            settings += f"{key}={text}\n"

    logger.debug(f"rewrote graph source settings {dict(updates)}")
    return settings + delimiter + equations
