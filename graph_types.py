"""Closed vocabularies shared by the settings and equation parsers.

This module centralizes the enum tables the DSL understands (line/point
styles, named colors, degree mode) together with the lookup rules applied to
raw tokens. Keeping them out of the parsers gives tests a single place to lock
token semantics.

Lookup is always by member *name* and case-insensitive, so ``dashed``,
``Dashed`` and ``DASHED`` all resolve to :attr:`LineStyle.DASHED`.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional, TypeVar, Union

__all__ = [
    "Color",
    "ColorConstant",
    "DegreeMode",
    "LineStyle",
    "PointStyle",
    "Style",
    "parse_color",
    "parse_enum",
    "parse_style",
]


class LineStyle(str, Enum):
    SOLID = "SOLID"
    DASHED = "DASHED"
    DOTTED = "DOTTED"


class PointStyle(str, Enum):
    POINT = "POINT"
    OPEN = "OPEN"
    CROSS = "CROSS"


class ColorConstant(str, Enum):
    """Named colors; each member's value is its canonical hex string."""

    RED = "#ff0000"
    GREEN = "#00ff00"
    BLUE = "#0000ff"

    YELLOW = "#ffff00"
    MAGENTA = "#ff00ff"
    CYAN = "#00ffff"

    PURPLE = "#6042a6"
    ORANGE = "#ffa500"
    BLACK = "#000000"
    WHITE = "#ffffff"


class DegreeMode(str, Enum):
    RADIANS = "RADIANS"
    DEGREES = "DEGREES"


# An equation carries at most one of either style family.
Style = Union[LineStyle, PointStyle]

# Hex colors are kept verbatim as plain strings.
Color = Union[ColorConstant, str]

E = TypeVar("E", bound=Enum)

_HEX_BODY = re.compile(r"[0-9a-zA-Z]+")


def parse_enum(enum_type: type[E], token: str) -> Optional[E]:
    """Return the member of *enum_type* whose name matches *token*, ignoring case."""
    wanted = token.upper()
    for member in enum_type:
        if member.name.upper() == wanted:
            return member
    return None


def parse_style(token: str) -> Optional[Style]:
    """Resolve *token* against line styles first, then point styles."""
    return parse_enum(LineStyle, token) or parse_enum(PointStyle, token)


def parse_color(token: str) -> Optional[Color]:
    """Parse a color token.

    A ``#`` followed by one or more alphanumeric characters is accepted as a
    hex color verbatim; digit count and hex range are not checked. Anything
    else is looked up in :class:`ColorConstant` by name.

    Returns
    -------
    ColorConstant, str or None
        ``None`` when the token is not a color, leaving the decision (error or
        next classifier) to the caller.
    """
    if token.startswith("#") and _HEX_BODY.fullmatch(token[1:]):
        return token
    return parse_enum(ColorConstant, token)
