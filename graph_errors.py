"""Error type raised by the graph DSL parser.

Every parse or validation failure surfaces as :class:`GraphSyntaxError`; the
categories (structural, unknown field, duplicate tag, missing value, type
conversion, invariant violation) are distinguished by message only.
"""

from __future__ import annotations

__all__ = ["GraphSyntaxError"]


class GraphSyntaxError(ValueError):
    """Raised when a graph source block cannot be parsed or validated."""
