"""Property-based checks for parser determinism and classification.

These complement the example-based tests with generated equations and
settings so the hashing and line-splitting contracts are exercised beyond a
handful of hand-picked inputs.
"""

from __future__ import annotations

import asyncio

import pytest

from desmos_graph import ColorConstant, Graph, parse_color
from desmos_graph.graph_equation import parse_equation

try:
    from hypothesis import given
    from hypothesis import strategies as st
except ModuleNotFoundError:  # pragma: no cover - environment-specific fallback
    pytest.skip("hypothesis is required for property-based tests", allow_module_level=True)


# Expressions without delimiter characters; they never collide with tags
# because they always contain an "=".
EXPRESSIONS = st.from_regex(r"[a-z]=[a-z0-9+*^()]{1,12}", fullmatch=True)
BOUNDS = st.integers(min_value=-1000, max_value=1000)


@given(lines=st.lists(EXPRESSIONS, max_size=6))
def test_equations_only_source_maps_every_line(lines: list[str]) -> None:
    source = "\n\n".join(f"  {line} " for line in lines)
    graph = Graph.parse(source)
    assert [eq.equation for eq in graph.equations] == lines
    assert graph.equations == tuple(parse_equation(line).equation for line in lines)


@given(expr=EXPRESSIONS, left=BOUNDS, span=st.integers(min_value=1, max_value=500))
def test_identical_sources_hash_identically(expr: str, left: int, span: int) -> None:
    source = f"left={left}; right={left + span}\n---\n{expr}"
    first = asyncio.run(Graph.parse(source).hash())
    second = asyncio.run(Graph.parse(source).hash())
    changed = asyncio.run(Graph.parse(f"left={left}; right={left + span + 1}\n---\n{expr}").hash())
    assert first == second
    assert first != changed


@given(body=st.from_regex(r"[0-9a-zA-Z]{1,10}", fullmatch=True))
def test_any_alphanumeric_hex_body_is_a_color(body: str) -> None:
    assert parse_color(f"#{body}") == f"#{body}"


@given(constant=st.sampled_from(list(ColorConstant)), flip=st.booleans())
def test_color_constant_lookup_ignores_case(constant: ColorConstant, flip: bool) -> None:
    name = constant.name.swapcase() if flip else constant.name.lower()
    assert parse_color(name) is constant
