"""Top-level public API for the ``desmos_graph`` package.

This module re-exports the parser surface so users can import from a single
namespace, for example:

>>> from desmos_graph import Graph  # doctest: +SKIP
>>> graph = Graph.parse("left=0; right=5\\n---\\ny=x|dashed|red")  # doctest: +SKIP

It exposes both the high-level entry point (``Graph.parse``) and the lower
level building blocks (settings/equation parsers, calculator state builders,
source rewriting and diagnostic display) for host integrations.
"""

from .calculator import calculator_options, calculator_state, expression_state, math_bounds
from .content_hash import calculate_hash
from .error_display import error_html, render_error
from .graph import Graph, split_segments
from .graph_equation import Equation, parse_equation
from .graph_errors import GraphSyntaxError
from .graph_hints import PotentialErrorHint
from .graph_settings import (
    DEFAULT_GRAPH_SETTINGS,
    MAX_SIZE,
    GraphSettings,
    adjust_bounds,
    parse_settings,
    validate_settings,
)
from .graph_types import (
    ColorConstant,
    DegreeMode,
    LineStyle,
    PointStyle,
    parse_color,
    parse_style,
)
from .plugin_settings import (
    CacheLocation,
    CacheSettings,
    PluginSettings,
    default_plugin_settings,
    load_plugin_settings,
)
from .source_update import update_source

__all__ = [
    "CacheLocation",
    "CacheSettings",
    "ColorConstant",
    "DEFAULT_GRAPH_SETTINGS",
    "DegreeMode",
    "Equation",
    "Graph",
    "GraphSettings",
    "GraphSyntaxError",
    "LineStyle",
    "MAX_SIZE",
    "PluginSettings",
    "PointStyle",
    "PotentialErrorHint",
    "adjust_bounds",
    "calculate_hash",
    "calculator_options",
    "calculator_state",
    "default_plugin_settings",
    "error_html",
    "expression_state",
    "load_plugin_settings",
    "math_bounds",
    "parse_color",
    "parse_equation",
    "parse_settings",
    "parse_style",
    "render_error",
    "split_segments",
    "update_source",
    "validate_settings",
]
