"""Graph assembly: from source text to an immutable, hashable description.

Purpose
-------
``Graph.parse`` is the entry point of the package. It splits the source on the
``---`` delimiter, parses the optional settings segment and every equation
line, and assembles a :class:`Graph`:

1. directional bounds adjustment on the partial settings,
2. capture of the hash input (equations + adjusted partial settings),
3. merge over defaults and validation,
4. ``defaultColor`` applied to equations without a color.

Hash policy
-----------
The content hash covers what the author wrote (after bounds adjustment), not
the merged settings. Adding a new optional settings field therefore does not
change the hash, and the cache key, of graphs that never set it.

Logging
-------
Uses a ``NullHandler`` so importing this module never configures global
logging. Enable with ``logging.getLogger("desmos_graph.graph").setLevel(...)``.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .content_hash import calculate_hash
from .graph_equation import Equation, parse_equation
from .graph_errors import GraphSyntaxError
from .graph_hints import PotentialErrorHint
from .graph_settings import GraphSettings, adjust_bounds, parse_settings, validate_settings

__all__ = ["SEGMENT_DELIMITER", "Graph", "split_lines", "split_segments"]

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

SEGMENT_DELIMITER = "---"


def split_segments(source: str) -> Tuple[Optional[str], str]:
    """Split *source* into ``(settings_segment, equations_segment)``.

    ``settings_segment`` is ``None`` when the source has no delimiter.

    Raises
    ------
    GraphSyntaxError
        If the delimiter occurs more than once.
    """
    parts = source.split(SEGMENT_DELIMITER)
    if len(parts) > 2:
        raise GraphSyntaxError(
            f"Too many graph segments, there can only be a singular '{SEGMENT_DELIMITER}'"
        )
    if len(parts) == 2:
        return parts[0], parts[1]
    return None, parts[0]


def split_lines(segment: str) -> List[str]:
    """Return the trimmed, non-blank lines of *segment*."""
    return [line.strip() for line in segment.splitlines() if line.strip()]


class Graph:
    """Parsed graph: equations, resolved settings and an optional hint.

    Parameters
    ----------
    equations : iterable of Equation
        Parsed equations, in source order.
    settings : mapping, optional
        Partial settings keyed by DSL key (as produced by
        :func:`graph_settings.parse_settings`). Missing keys take defaults.
    potential_error_hint : PotentialErrorHint, optional
        Diagnostic to surface if the graphing engine later reports an error.

    Raises
    ------
    GraphSyntaxError
        If the merged settings violate the size ceiling or bound ordering.
    """

    def __init__(
        self,
        equations: Iterable[Equation],
        settings: Optional[Mapping[str, Any]] = None,
        potential_error_hint: Optional[PotentialErrorHint] = None,
    ) -> None:
        self._source_equations: Tuple[Equation, ...] = tuple(equations)
        # Kept unadjusted so updates re-derive the opposite bound from scratch.
        self._raw_partial: Dict[str, Any] = dict(settings or {})
        self._partial: Dict[str, Any] = adjust_bounds(self._raw_partial)
        self._potential_error_hint = potential_error_hint

        self._hash_input = {
            "equations": [eq.to_dict() for eq in self._source_equations],
            "settings": dict(self._partial),
        }
        self._hash: Optional[str] = None

        self._settings = GraphSettings.from_partial(self._partial)
        validate_settings(self._settings)

        default_color = self._settings.default_color
        if default_color is not None:
            self._equations = tuple(
                eq if eq.color is not None else replace(eq, color=default_color)
                for eq in self._source_equations
            )
        else:
            self._equations = self._source_equations

    @property
    def equations(self) -> Tuple[Equation, ...]:
        return self._equations

    @property
    def settings(self) -> GraphSettings:
        return self._settings

    @property
    def potential_error_hint(self) -> Optional[PotentialErrorHint]:
        """Supplementary error information if the source is valid but the engine errors."""
        return self._potential_error_hint

    async def hash(self) -> str:
        """Return the content hash (SHA-256, lowercase hex), computed once per graph."""
        if self._hash is None:
            self._hash = await calculate_hash(self._hash_input)
        return self._hash

    def with_settings(self, **updates: Any) -> "Graph":
        """Return a new graph with *updates* (keyed by DSL key) merged into the settings.

        >>> Graph.parse("y=x").with_settings(left=-2, right=2).settings.right  # doctest: +SKIP
        2
        """
        merged = {**self._raw_partial, **updates}
        logger.debug(f"graph settings update {updates}")
        return Graph(self._source_equations, merged, self._potential_error_hint)

    @classmethod
    def parse(cls, source: str) -> "Graph":
        """Parse a graph source block.

        Raises
        ------
        GraphSyntaxError
            On any structural, settings, equation or validation error.
        """
        settings_source, equations_source = split_segments(source)

        equations: List[Equation] = []
        hint: Optional[PotentialErrorHint] = None
        for line in split_lines(equations_source):
            result = parse_equation(line)
            equations.append(result.equation)
            # Only the last hint is kept.
            if result.hint is not None:
                hint = result.hint

        settings = parse_settings(settings_source)
        graph = cls(equations, settings, hint)

        logger.debug(
            f"parsed graph equations={len(graph.equations)} settings={sorted(settings)} hint={hint is not None}"
        )
        return graph

    def __repr__(self) -> str:
        return f"Graph(equations={len(self._equations)}, settings={self._settings!r})"
