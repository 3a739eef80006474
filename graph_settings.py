"""Graph settings: schema, defaults, directive parsing and validation.

The settings segment of a graph source is a list of ``key[=value]``
directives separated by semicolons and/or newlines, for example::

    width=800; height=400
    left=-5; right=5
    grid=false
    degreeMode=degrees

Parsing produces a *partial* record keyed by DSL key (only what the author
wrote). :func:`adjust_bounds` then infers a missing axis edge, and
:meth:`GraphSettings.from_partial` merges the record over the defaults.
Validation happens on the merged value.

Key matching is case-sensitive while boolean and enum *values* are matched
case-insensitively.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

from .graph_errors import GraphSyntaxError
from .graph_types import Color, ColorConstant, DegreeMode, parse_color, parse_enum

__all__ = [
    "DEFAULT_GRAPH_HEIGHT",
    "DEFAULT_GRAPH_SETTINGS",
    "DEFAULT_GRAPH_WIDTH",
    "MAX_SIZE",
    "SETTINGS_SCHEMA",
    "GraphSettings",
    "SettingField",
    "adjust_bounds",
    "parse_settings",
    "validate_settings",
]

#: The maximum dimensions of a graph.
MAX_SIZE = 99999


@dataclass(frozen=True)
class GraphSettings:
    """Fully-resolved, immutable graph settings.

    Parameters
    ----------
    width, height : int
        Rendered size in pixels, at most :data:`MAX_SIZE` each.
    left, right, bottom, top : float
        Viewport bounds in graph coordinates.
    grid : bool
        Whether to draw the grid.
    lock : bool
        Whether the viewport is locked against panning and zooming.
    hide_axis_numbers : bool
        Whether to hide the tick labels on both axes.
    degree_mode : DegreeMode
        Angle unit for trigonometric functions.
    default_color : Color or None
        Color applied to equations that do not specify one.
    """

    width: int = 600
    height: int = 400
    left: float = -10
    right: float = 10
    bottom: float = -7
    top: float = 7
    grid: bool = True
    lock: bool = False
    hide_axis_numbers: bool = False
    degree_mode: DegreeMode = DegreeMode.RADIANS
    default_color: Optional[Color] = None

    @classmethod
    def from_partial(cls, partial: Mapping[str, Any]) -> "GraphSettings":
        """Merge a partial record keyed by DSL key over the defaults."""
        return DEFAULT_GRAPH_SETTINGS.merged(partial)

    def merged(self, updates: Mapping[str, Any]) -> "GraphSettings":
        """Return a new settings value with *updates* (keyed by DSL key) applied."""
        changes = {}
        for key, value in updates.items():
            field = SETTINGS_SCHEMA.get(key)
            if field is None:
                raise GraphSyntaxError(f"Unrecognised field: {key}")
            changes[field.attr] = value
        return replace(self, **changes)

    def to_record(self) -> Dict[str, Any]:
        """Return all settings as a plain dict keyed by DSL key."""
        return {key: getattr(self, field.attr) for key, field in SETTINGS_SCHEMA.items()}


DEFAULT_GRAPH_SETTINGS = GraphSettings()

DEFAULT_GRAPH_WIDTH = abs(DEFAULT_GRAPH_SETTINGS.left) + abs(DEFAULT_GRAPH_SETTINGS.right)
DEFAULT_GRAPH_HEIGHT = abs(DEFAULT_GRAPH_SETTINGS.bottom) + abs(DEFAULT_GRAPH_SETTINGS.top)


@dataclass(frozen=True)
class SettingField:
    """One entry of the settings schema.

    ``kind`` is one of ``"number"``, ``"integer"``, ``"boolean"``, ``"enum"``
    or ``"color"`` and selects the value conversion rule.
    """

    key: str
    attr: str
    kind: str


SETTINGS_SCHEMA: Dict[str, SettingField] = {
    field.key: field
    for field in (
        SettingField("width", "width", "integer"),
        SettingField("height", "height", "integer"),
        SettingField("left", "left", "number"),
        SettingField("right", "right", "number"),
        SettingField("bottom", "bottom", "number"),
        SettingField("top", "top", "number"),
        SettingField("grid", "grid", "boolean"),
        SettingField("lock", "lock", "boolean"),
        SettingField("hideAxisNumbers", "hide_axis_numbers", "boolean"),
        SettingField("degreeMode", "degree_mode", "enum"),
        SettingField("defaultColor", "default_color", "color"),
    )
}

_DIRECTIVE_DELIMITER = re.compile(r"[;\r\n]+")


def _require_value(key: str, value: Optional[str]) -> str:
    if not value:
        raise GraphSyntaxError(f"Field '{key}' must have a value")
    return value


def _parse_number(key: str, value: Optional[str]) -> float:
    text = _require_value(key, value)
    try:
        number = float(text)
    except ValueError:
        number = math.nan
    if not math.isfinite(number):
        raise GraphSyntaxError(f"Field '{key}' must have an integer (or decimal) value, got '{text}'")
    return number


def _convert_value(field: SettingField, value: Optional[str]) -> Any:
    key = field.key

    if field.kind == "number":
        return _parse_number(key, value)

    if field.kind == "integer":
        # Fractional pixel sizes round half up.
        return int(math.floor(_parse_number(key, value) + 0.5))

    if field.kind == "boolean":
        # A bare key switches the flag on.
        if not value:
            return True
        lowered = value.lower()
        if lowered not in ("true", "false"):
            raise GraphSyntaxError(
                f"Field '{key}' requires a boolean value 'true'/'false' (omit a value to default to 'true')"
            )
        return lowered == "true"

    if field.kind == "enum":
        mode = parse_enum(DegreeMode, _require_value(key, value))
        if mode is None:
            accepted = ", ".join(m.name.lower() for m in DegreeMode)
            raise GraphSyntaxError(f"Field '{key}' must be one of: {accepted}")
        return mode

    if field.kind == "color":
        color = parse_color(_require_value(key, value))
        if color is None:
            names = ", ".join(c.name.lower() for c in ColorConstant)
            raise GraphSyntaxError(
                f"Field '{key}' must be either a valid hex code or one of: {names}"
            )
        return color

    raise RuntimeError(f"Got unrecognized field type {field.kind!r} for field '{key}', this is a bug.")


def parse_settings(source: Optional[str]) -> Dict[str, Any]:
    """Parse a settings segment into a partial record keyed by DSL key.

    Parameters
    ----------
    source : str or None
        Raw settings segment; ``None`` means there was no settings segment.

    Returns
    -------
    dict
        Only the keys the author supplied, in encounter order, with values
        already converted to their Python types.

    Raises
    ------
    GraphSyntaxError
        On an unknown key, a duplicate key, a missing required value or a
        value that cannot be converted.
    """
    settings: Dict[str, Any] = {}
    if source is None:
        return settings

    for directive in _DIRECTIVE_DELIMITER.split(source):
        directive = directive.strip()
        if not directive:
            continue

        key, sep, raw_value = directive.partition("=")
        key = key.strip()
        value = raw_value.strip() if sep else None

        field = SETTINGS_SCHEMA.get(key)
        if field is None:
            raise GraphSyntaxError(f"Unrecognised field: {key}")
        if key in settings:
            raise GraphSyntaxError(f"Duplicate key '{key}' not allowed")

        settings[key] = _convert_value(field, value)

    return settings


def adjust_bounds(partial: Mapping[str, Any]) -> Dict[str, Any]:
    """Infer a missing axis edge when the default would land on the wrong side.

    Only applies when exactly one edge of an axis is given and that edge is
    past the opposite default edge; the inferred edge is placed one default
    span away. Returns a new dict and leaves *partial* untouched.
    """
    settings = dict(partial)
    defaults = DEFAULT_GRAPH_SETTINGS

    if "left" in settings and "right" not in settings and settings["left"] >= defaults.right:
        settings["right"] = settings["left"] + DEFAULT_GRAPH_WIDTH
    if "right" in settings and "left" not in settings and settings["right"] <= defaults.left:
        settings["left"] = settings["right"] - DEFAULT_GRAPH_WIDTH
    if "bottom" in settings and "top" not in settings and settings["bottom"] >= defaults.top:
        settings["top"] = settings["bottom"] + DEFAULT_GRAPH_HEIGHT
    if "top" in settings and "bottom" not in settings and settings["top"] <= defaults.bottom:
        settings["bottom"] = settings["top"] - DEFAULT_GRAPH_HEIGHT

    return settings


def validate_settings(settings: GraphSettings) -> None:
    """Check the size ceiling and bound ordering of merged settings.

    Raises
    ------
    GraphSyntaxError
        If ``width``/``height`` exceed :data:`MAX_SIZE`, or a lower bound is
        not strictly below its upper bound.
    """
    if settings.width > MAX_SIZE or settings.height > MAX_SIZE:
        raise GraphSyntaxError(
            f"Graph size outside of accepted bounds (must be at most {MAX_SIZE}x{MAX_SIZE}, "
            f"got {settings.width}x{settings.height})"
        )

    if settings.left >= settings.right:
        raise GraphSyntaxError(
            f"Right boundary ({settings.right}) must be greater than left boundary ({settings.left})"
        )
    if settings.bottom >= settings.top:
        raise GraphSyntaxError(
            f"Top boundary ({settings.top}) must be greater than bottom boundary ({settings.bottom})"
        )
