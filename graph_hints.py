"""Potential-error hints for restriction segments.

A restriction containing a backslash is still accepted by the parser, since it
may be perfectly valid, but the graphing engine rejects LaTeX control syntax in
restrictions with a fairly cryptic message ("A piecewise expression must have
at least one condition"). When that happens the renderer can show the hint
built here as a plausible root cause.

Hints never interrupt parsing and never raise.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from typing import Optional

from .ParseLaTeX import LatexParseError, latex_to_plain

__all__ = ["PotentialErrorHint", "restriction_hint"]

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

_GENERIC_EXAMPLE = (r"\frac{1}{2}", "1/2")


@dataclass(frozen=True)
class PotentialErrorHint:
    """Supplementary diagnostic attached to a graph that parsed successfully.

    Parameters
    ----------
    segment : str
        The restriction segment that triggered the hint.
    suggestion : str or None
        Plain-expression rewrite of *segment*, when one could be derived.
    """

    segment: str
    suggestion: Optional[str] = None

    @property
    def message(self) -> str:
        """Plain-text hint body."""
        if self.suggestion is not None:
            alternative = f"e.g. {self.suggestion}"
        else:
            alternative = f"e.g. {_GENERIC_EXAMPLE[0]} => {_GENERIC_EXAMPLE[1]}"
        return (
            f"You may have tried to use the LaTeX syntax in the graph restriction ({self.segment}), "
            f"please use some sort of an alternative ({alternative}) as this is not supported by Desmos."
        )

    @property
    def view(self) -> str:
        """HTML fragment of the hint, with all user text escaped."""
        if self.suggestion is not None:
            alternative = f"e.g <code>{html.escape(self.suggestion)}</code>"
        else:
            alternative = (
                f"e.g <code>{html.escape(_GENERIC_EXAMPLE[0])}</code> =&gt; "
                f"<code>{html.escape(_GENERIC_EXAMPLE[1])}</code>"
            )
        return (
            "<span>"
            "<span>You may have tried to use the LaTeX syntax in the graph restriction (</span>"
            f"<code>{html.escape(self.segment)}</code>"
            f"<span>), please use some sort of an alternative ({alternative}) "
            "as this is not supported by Desmos.</span>"
            "</span>"
        )


def restriction_hint(segment: str) -> Optional[PotentialErrorHint]:
    """Return a hint for *segment* if it contains LaTeX control syntax."""
    if "\\" not in segment:
        return None

    try:
        suggestion: Optional[str] = latex_to_plain(segment)
    except LatexParseError as exc:
        logger.debug(f"no plain rewrite for restriction {segment!r}: {exc}")
        suggestion = None

    return PotentialErrorHint(segment=segment, suggestion=suggestion)
