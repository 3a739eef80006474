"""LaTeX parsing helpers with backend fallback.

Restriction segments are plain expressions, but authors frequently paste
LaTeX into them (``x<\\frac{1}{2}``). This module lets the hint machinery
translate such a segment into the equivalent plain expression so the hint can
suggest a concrete rewrite.

Parsing prefers SymPy's ``lark`` backend and falls back to ``antlr``, since
backend availability varies between installations.
"""

from __future__ import annotations

from sympy import Basic
from sympy.parsing.latex import parse_latex as _sympy_parse_latex
from sympy.printing.str import StrPrinter

__all__ = ["LatexParseError", "PlainPrinter", "latex_to_plain", "parse_latex"]


class LatexParseError(RuntimeError):
    """Raised when neither SymPy LaTeX backend can parse the input."""


class PlainPrinter(StrPrinter):
    """``StrPrinter`` that writes powers with ``^`` as the graphing engine expects."""

    def _print_Pow(self, expr, rational=False):
        return super()._print_Pow(expr, rational).replace("**", "^")


def parse_latex(tex: str) -> Basic:
    """Parse a LaTeX string into a SymPy expression, trying ``lark`` then ``antlr``.

    Raises
    ------
    LatexParseError
        If both backends fail.
    """
    try:
        lark_result = _sympy_parse_latex(tex, backend="lark")
        if isinstance(lark_result, Basic):
            return lark_result
        raise TypeError(f"lark backend returned non-SymPy result ({type(lark_result).__name__})")
    except Exception as e:
        lark_err = e

    try:
        return _sympy_parse_latex(tex, backend="antlr")
    except Exception as antlr_err:
        raise LatexParseError(
            f"Failed to parse LaTeX {tex!r}: "
            f"lark: {type(lark_err).__name__}: {lark_err}; "
            f"antlr: {type(antlr_err).__name__}: {antlr_err}"
        ) from antlr_err


def latex_to_plain(tex: str) -> str:
    """Return the plain-expression spelling of a LaTeX fragment.

    >>> latex_to_plain(r"x^2<\\frac{1}{2}")  # doctest: +SKIP
    'x^2 < 1/2'
    """
    return PlainPrinter().doprint(parse_latex(tex))
