"""Translate a parsed :class:`Graph` into graphing-calculator state.

The rendering surface is an embedded calculator widget; this module only
produces the plain data it is configured with (options, math bounds and one
expression state per equation). Nothing here talks to the widget.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .graph import Graph
from .graph_equation import Equation
from .graph_settings import GraphSettings
from .graph_types import DegreeMode, LineStyle, PointStyle

__all__ = ["calculator_options", "calculator_state", "expression_state", "math_bounds", "restriction_latex"]


def restriction_latex(restriction: str) -> str:
    """Wrap one restriction as a calculator domain clause, ``\\{...\\}``."""
    body = restriction.replace("<=", r"\le ").replace(">=", r"\ge ")
    return "\\{" + body + "\\}"


def expression_state(equation: Equation, id: Optional[str] = None) -> Dict[str, Any]:
    """Return the calculator expression state for one equation.

    Restrictions are appended to the latex as separate clauses, which the
    calculator combines with a logical AND.
    """
    latex = equation.equation + "".join(restriction_latex(r) for r in equation.restrictions or ())
    state: Dict[str, Any] = {"latex": latex}
    if id is not None:
        state["id"] = id

    if isinstance(equation.style, LineStyle):
        state["lineStyle"] = equation.style.value
    elif isinstance(equation.style, PointStyle):
        state["pointStyle"] = equation.style.value

    if equation.color is not None:
        state["color"] = getattr(equation.color, "value", equation.color)
    if equation.hidden:
        state["hidden"] = True
    if equation.label is not None:
        state["label"] = equation.label or equation.equation
        state["showLabel"] = True
    return state


def calculator_options(settings: GraphSettings) -> Dict[str, Any]:
    """Return the calculator constructor options for *settings*."""
    return {
        "settingsMenu": False,
        "expressions": False,
        "lockViewport": settings.lock,
        "zoomButtons": False,
        "trace": False,
        "showGrid": settings.grid,
        "xAxisNumbers": not settings.hide_axis_numbers,
        "yAxisNumbers": not settings.hide_axis_numbers,
        "degreeMode": settings.degree_mode is DegreeMode.DEGREES,
    }


def math_bounds(settings: GraphSettings) -> Dict[str, float]:
    return {
        "left": settings.left,
        "right": settings.right,
        "bottom": settings.bottom,
        "top": settings.top,
    }


def calculator_state(graph: Graph) -> Dict[str, Any]:
    """Bundle size, options, bounds and expressions for *graph*."""
    settings = graph.settings
    expressions: List[Dict[str, Any]] = [
        expression_state(eq, id=f"graph-{i}") for i, eq in enumerate(graph.equations)
    ]
    return {
        "width": settings.width,
        "height": settings.height,
        "options": calculator_options(settings),
        "mathBounds": math_bounds(settings),
        "expressions": expressions,
    }
