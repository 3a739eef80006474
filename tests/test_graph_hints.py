from __future__ import annotations

from unittest.mock import patch

import pytest
import sympy as sp

from desmos_graph import Graph
from desmos_graph.graph_hints import PotentialErrorHint, restriction_hint
from desmos_graph.ParseLaTeX import LatexParseError, PlainPrinter, latex_to_plain, parse_latex


def test_no_hint_without_backslash() -> None:
    assert Graph.parse("y=x|x>0").potential_error_hint is None
    assert restriction_hint("0<x<5") is None


def test_backslash_restriction_still_parses_and_attaches_hint() -> None:
    with patch("desmos_graph.graph_hints.latex_to_plain", return_value="x < 1/2"):
        graph = Graph.parse(r"y=x|x<\frac{1}{2}")

    assert graph.equations[0].restrictions == (r"x<\frac{1}{2}",)
    assert graph.potential_error_hint == PotentialErrorHint(segment=r"x<\frac{1}{2}", suggestion="x < 1/2")


def test_backslash_in_equation_expression_is_not_a_hint() -> None:
    assert Graph.parse(r"y=\sin(x)|x>0").potential_error_hint is None


def test_last_hint_wins() -> None:
    with patch("desmos_graph.graph_hints.latex_to_plain", side_effect=lambda tex: tex.upper()):
        graph = Graph.parse("y=x|\\alpha>0\ny=2x|\\beta>0\ny=3x|x>0")

    assert graph.potential_error_hint is not None
    assert graph.potential_error_hint.segment == "\\beta>0"


def test_hint_degrades_to_generic_example_when_latex_fails() -> None:
    def _fail(tex: str) -> str:
        raise LatexParseError(f"cannot parse {tex}")

    with patch("desmos_graph.graph_hints.latex_to_plain", side_effect=_fail):
        hint = restriction_hint(r"x>\unknown{")

    assert hint is not None
    assert hint.suggestion is None
    assert r"\frac{1}{2} => 1/2" in hint.message
    assert "<code>\\frac{1}{2}</code> =&gt; <code>1/2</code>" in hint.view


def test_hint_message_and_view_name_the_segment() -> None:
    hint = PotentialErrorHint(segment=r"x<\pi", suggestion="x < pi")
    assert r"graph restriction (x<\pi)" in hint.message
    assert "e.g. x < pi" in hint.message
    assert "<code>x&lt;\\pi</code>" in hint.view
    assert "<code>x &lt; pi</code>" in hint.view


def test_parse_latex_falls_back_when_lark_returns_tree() -> None:
    calls: list[str] = []

    def _fake_parse_latex(_tex, *args, backend=None, **kwargs):
        calls.append(backend)
        if backend == "lark":
            return object()
        if backend == "antlr":
            return sp.Symbol("x") < sp.Rational(1, 2)
        raise AssertionError("unexpected backend")

    with patch("desmos_graph.ParseLaTeX._sympy_parse_latex", side_effect=_fake_parse_latex):
        out = parse_latex(r"x<\frac{1}{2}")

    assert out == (sp.Symbol("x") < sp.Rational(1, 2))
    assert calls == ["lark", "antlr"]


def test_parse_latex_raises_when_both_backends_fail() -> None:
    def _broken(_tex, *args, backend=None, **kwargs):
        raise ValueError(f"{backend} failed")

    with patch("desmos_graph.ParseLaTeX._sympy_parse_latex", side_effect=_broken):
        with pytest.raises(LatexParseError, match="lark failed"):
            parse_latex(r"\frac{")


def test_restriction_hint_uses_plain_rewrite_from_sympy() -> None:
    with patch(
        "desmos_graph.ParseLaTeX._sympy_parse_latex",
        return_value=sp.Symbol("x") < sp.Rational(1, 2),
    ):
        hint = restriction_hint(r"x<\frac{1}{2}")

    assert hint is not None
    assert hint.suggestion == "x < 1/2"


def test_plain_printer_writes_caret_powers() -> None:
    x = sp.Symbol("x")
    assert PlainPrinter().doprint(x**2 < sp.Rational(1, 2)) == "x^2 < 1/2"
    assert PlainPrinter().doprint((x + 1) ** 3) == "(x + 1)^3"


def test_latex_to_plain_never_emits_python_power_syntax() -> None:
    x = sp.Symbol("x")
    with patch("desmos_graph.ParseLaTeX._sympy_parse_latex", return_value=x**2 < sp.Rational(1, 2)):
        assert latex_to_plain(r"x^2<\frac{1}{2}") == "x^2 < 1/2"


def test_restriction_hint_with_real_backend_suggests_caret_powers() -> None:
    pytest.importorskip("lark")
    hint = restriction_hint(r"x^2<\frac{1}{2}")

    assert hint is not None
    assert hint.suggestion is not None
    assert "**" not in hint.suggestion
    assert "x^2" in hint.suggestion
    assert "**" not in hint.message
