from __future__ import annotations

import pytest

from desmos_graph import DegreeMode, Graph, GraphSyntaxError, update_source
from desmos_graph.source_update import format_setting_value


def test_existing_values_are_replaced_in_place() -> None:
    source = "left=0; right = 5;\ngrid=true\n---\ny=x"
    updated = update_source(source, {"left": -3, "right": 3.5, "grid": False})
    assert updated == "left=-3; right = 3.5;\ngrid=false\n---\ny=x"


def test_missing_separator_is_inserted() -> None:
    assert update_source("y=x", {"top": 4}) == "top=4\n---\ny=x"


def test_missing_key_is_appended_before_separator() -> None:
    source = "width=300\n---\ny=x"
    assert update_source(source, {"height": 200}) == "width=300\nheight=200\n---\ny=x"


def test_bare_boolean_key_gets_a_value() -> None:
    assert update_source("grid\n---\ny=x", {"grid": False}) == "grid=false\n---\ny=x"


def test_key_match_is_not_a_suffix_match() -> None:
    source = "hideAxisNumbers=false\n---\ny=x"
    assert update_source(source, {"hideAxisNumbers": True}) == "hideAxisNumbers=true\n---\ny=x"


def test_unknown_key_is_rejected() -> None:
    with pytest.raises(GraphSyntaxError, match="Unrecognised field: zoom"):
        update_source("y=x", {"zoom": 2})


def test_value_spelling() -> None:
    assert format_setting_value(True) == "true"
    assert format_setting_value(DegreeMode.DEGREES) == "degrees"
    assert format_setting_value(-10.0) == "-10"
    assert format_setting_value(0.25) == "0.25"


def test_update_round_trips_through_parse() -> None:
    source = "left=0; right=5\n---\ny=x|red"
    graph = Graph.parse(source)
    panned = graph.with_settings(left=-1.5, right=3.5)

    updated = update_source(source, {"left": panned.settings.left, "right": panned.settings.right})
    reparsed = Graph.parse(updated)
    assert reparsed.settings == panned.settings
    assert reparsed.equations == graph.equations
