"""Equation records and the equation-line parser.

An equation line is a ``|``-separated list whose first segment is the
expression itself, followed by optional tags in any order::

    y=\\sin(x) | x>0 | dashed | green | label:Sine

Each trailing segment is run through a fixed classifier chain and the first
match wins:

1. ``hidden``
2. a line or point style name
3. a color (hex or named constant)
4. ``label:<text>``
5. ``label`` (use the equation text as its own label)
6. anything else is a restriction

The order matters: a segment that would be a valid style is never treated as
a color or a restriction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .graph_errors import GraphSyntaxError
from .graph_hints import PotentialErrorHint, restriction_hint
from .graph_types import Color, Style, parse_color, parse_style

__all__ = ["Equation", "EquationParseResult", "parse_equation"]

_LABEL_PREFIX = "LABEL:"


@dataclass(frozen=True)
class Equation:
    """Immutable record of one parsed equation line.

    Parameters
    ----------
    equation : str
        The expression, verbatim.
    restrictions : tuple[str, ...] or None
        Restriction expressions in encounter order.
    style : LineStyle, PointStyle or None
        Line or point style.
    color : ColorConstant, str or None
        Named constant or hex string.
    hidden : bool or None
        ``True`` when the equation is tagged ``hidden``.
    label : str or None
        Label text; the empty string means "label with the equation itself".
    """

    equation: str
    restrictions: Optional[Tuple[str, ...]] = None
    style: Optional[Style] = None
    color: Optional[Color] = None
    hidden: Optional[bool] = None
    label: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready dict, omitting absent fields."""
        data: Dict[str, Any] = {"equation": self.equation}
        if self.restrictions is not None:
            data["restrictions"] = list(self.restrictions)
        if self.style is not None:
            data["style"] = self.style.value
        if self.color is not None:
            data["color"] = getattr(self.color, "value", self.color)
        if self.hidden is not None:
            data["hidden"] = self.hidden
        if self.label is not None:
            data["label"] = self.label
        return data


@dataclass(frozen=True)
class EquationParseResult:
    equation: Equation
    hint: Optional[PotentialErrorHint] = None


def parse_equation(line: str) -> EquationParseResult:
    """Parse one non-blank equation line.

    Raises
    ------
    GraphSyntaxError
        If the line has no expression, or repeats a style, color or label tag.
    """
    segments = [segment.strip() for segment in line.split("|")]
    segments = [segment for segment in segments if segment]
    if not segments:
        raise GraphSyntaxError(f"Equation line {line!r} has no expression")

    expression, tags = segments[0], segments[1:]

    restrictions: List[str] = []
    style: Optional[Style] = None
    color: Optional[Color] = None
    hidden: Optional[bool] = None
    label: Optional[str] = None
    hint: Optional[PotentialErrorHint] = None

    for segment in tags:
        upper = segment.upper()

        if upper == "HIDDEN":
            hidden = True
            continue

        found_style = parse_style(segment)
        if found_style is not None:
            if style is not None:
                raise GraphSyntaxError(
                    f"Duplicate style identifiers detected: {style.value}, {segment}"
                )
            style = found_style
            continue

        found_color = parse_color(segment)
        if found_color is not None:
            if color is not None:
                raise GraphSyntaxError(
                    "Duplicate color identifiers detected, each equation may only contain a single color code."
                )
            color = found_color
            continue

        if upper.startswith(_LABEL_PREFIX) or upper == "LABEL":
            if label is not None:
                raise GraphSyntaxError(
                    "Duplicate label identifiers detected, each equation may only contain a single label."
                )
            if upper == "LABEL":
                label = ""
                continue
            # Everything after the first colon, later colons included.
            label = segment.split(":", 1)[1].strip()
            if not label:
                raise GraphSyntaxError("Equation label must have a value")
            continue

        segment_hint = restriction_hint(segment)
        if segment_hint is not None:
            hint = segment_hint
        restrictions.append(segment)

    equation = Equation(
        equation=expression,
        restrictions=tuple(restrictions) if restrictions else None,
        style=style,
        color=color,
        hidden=hidden,
        label=label,
    )
    return EquationParseResult(equation=equation, hint=hint)
