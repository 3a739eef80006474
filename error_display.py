"""Diagnostic card for graph errors.

The host shows parse failures (and errors reported later by the graphing
engine) in place of the graph. :func:`error_html` builds the card markup;
:func:`render_error` wraps it in an ``ipywidgets.HTML`` widget so it can be
dropped into any widget container or displayed directly.

A :class:`~graph_hints.PotentialErrorHint`, when given, is appended below the
error message as a possible root cause.
"""

from __future__ import annotations

import html
from typing import Optional

import ipywidgets as widgets

from .graph_hints import PotentialErrorHint

__all__ = ["error_html", "render_error"]

_CARD_STYLE = "padding:20px; background-color:#f44336; color:white;"
_HINT_STYLE = "margin-top:10px; padding-top:10px; border-top:1px solid rgba(255,255,255,0.5);"


def error_html(message: str, hint: Optional[PotentialErrorHint] = None) -> str:
    """Return the HTML card for *message*, escaping all user text."""
    hint_html = ""
    if hint is not None:
        hint_html = f'<div class="desmos-graph-error-hint" style="{_HINT_STYLE}">{hint.view}</div>'

    return (
        f'<div class="desmos-graph-error" style="{_CARD_STYLE}">'
        "<div>"
        "<strong>Desmos Graph Error: </strong>"
        f"<span>{html.escape(message)}</span>"
        "</div>"
        f"{hint_html}"
        "</div>"
    )


def render_error(message: str, hint: Optional[PotentialErrorHint] = None) -> widgets.HTML:
    """Return an ``ipywidgets.HTML`` widget showing the error card."""
    return widgets.HTML(value=error_html(message, hint))
