# tests/unit/test_navigator.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""Tests for the neighbourhood filter and navigation history."""

import pytest

from symbol_graph.graph import SymbolGraph
from symbol_graph.navigator import (
    NavigationState,
    Navigator,
    filter_symbols,
    selected_neighborhood,
)

HELPER = "a.ts:1:function:helper"
MAIN = "a.ts:5:function:main"
OTHER = "a.ts:9:function:other"
CONFIG = "b.ts:2:class:Config"


@pytest.fixture
def graph(sample_symbols):
    return SymbolGraph.build(sample_symbols)


@pytest.fixture
def navigator(graph):
    return Navigator(graph)


class TestSelectedNeighborhood:
    """Tests for the one-hop path filter."""

    def test_incoming_and_outgoing(self, graph):
        """Both callers of helper are in its neighbourhood."""
        names = [s.name for s in selected_neighborhood(graph.symbols, graph.relationships, HELPER)]

        assert names == ["helper", "main", "other"]

    def test_edges_of_every_kind(self, graph):
        """Import edges count like any other edge."""
        names = [s.name for s in selected_neighborhood(graph.symbols, graph.relationships, CONFIG)]

        assert names == ["main", "Config", "./b"]

    def test_isolated_symbol(self, symbol_factory):
        """A symbol with no edges is alone in its neighbourhood."""
        lone = symbol_factory("lone")

        assert selected_neighborhood([lone], [], lone.id) == [lone]

    def test_unknown_focus(self, graph):
        """An id that is not a symbol gives an empty neighbourhood."""
        assert selected_neighborhood(graph.symbols, graph.relationships, "nope") == []

    def test_no_transitive_neighbours(self, symbol_factory):
        """Only one hop is followed."""
        from symbol_graph.graph import resolve

        a = symbol_factory("a", line=1)
        b = symbol_factory("b", line=2, references=["a"])
        c = symbol_factory("c", line=3, references=["b"])
        symbols = [a, b, c]

        assert selected_neighborhood(symbols, resolve(symbols), c.id) == [b, c]


class TestFilterSymbols:
    """Tests for search and kind filtering."""

    def test_query_is_case_insensitive(self, sample_symbols):
        """Query matches names regardless of case."""
        assert [s.name for s in filter_symbols(sample_symbols, "CONF")] == ["Config"]

    def test_query_matches_signature(self, symbol_factory):
        """Signatures are searched too."""
        fn = symbol_factory("run", signature="function run(limit: number)")

        assert filter_symbols([fn], "limit") == [fn]

    def test_kind_filter(self, sample_symbols):
        """Kind narrows the result."""
        assert [s.name for s in filter_symbols(sample_symbols, kind="class")] == ["Config"]
        assert len(filter_symbols(sample_symbols)) == len(sample_symbols)


class TestNavigator:
    """Tests for focus, back and history."""

    def test_focus_selects_and_records(self, navigator):
        """Focusing sets the selection and appends to history."""
        names = [s.name for s in navigator.focus(MAIN)]

        assert names == ["helper", "main", "Config"]
        assert navigator.selected.id == MAIN
        assert navigator.history == [MAIN]

    def test_repeated_focus_is_recorded_once(self, navigator):
        """Focusing the current symbol again does not duplicate it."""
        navigator.focus(MAIN)
        navigator.focus(MAIN)

        assert navigator.history == [MAIN]

    def test_unknown_focus_keeps_state(self, navigator):
        """Unknown ids return [] and leave selection and history alone."""
        navigator.focus(MAIN)

        assert navigator.focus("nope") == []
        assert navigator.state.selected_symbol == MAIN
        assert navigator.history == [MAIN]

    def test_back_walks_history(self, navigator):
        """back() steps through earlier entries without rewriting history."""
        navigator.focus(HELPER)
        navigator.follow_reference(HELPER, MAIN)
        navigator.follow_reference(MAIN, CONFIG)

        assert navigator.back() == MAIN
        assert navigator.back() == HELPER
        assert navigator.back() is None
        assert navigator.state.selected_symbol == HELPER
        assert navigator.history == [HELPER, MAIN, CONFIG]

    def test_back_with_empty_history(self, navigator):
        """No history, nothing to go back to."""
        assert navigator.back() is None
        assert navigator.selected is None

    def test_focus_after_back_appends(self, navigator):
        """A new focus after stepping back is appended to the end."""
        navigator.focus(HELPER)
        navigator.focus(MAIN)
        navigator.back()
        navigator.focus(OTHER)

        assert navigator.history == [HELPER, MAIN, OTHER]
        assert navigator.back() == MAIN

    def test_go_to_definition(self, navigator):
        """Returns the declaration location of a known symbol."""
        location = navigator.go_to_definition(CONFIG)

        assert (location.file, location.line) == ("b.ts", 2)
        assert navigator.go_to_definition("nope") is None

    def test_clear(self, navigator):
        """clear() drops selection and history."""
        navigator.focus(MAIN)
        navigator.clear()

        assert navigator.selected is None
        assert navigator.history == []
        assert navigator.state.to_dict() == {"selectedSymbol": None, "history": []}

    def test_visible_symbols(self, navigator, graph):
        """Without focus everything is visible; with focus only the neighbourhood."""
        assert len(navigator.visible_symbols()) == len(graph.symbols)

        navigator.focus(HELPER)

        assert [s.name for s in navigator.visible_symbols("o")] == ["other"]

    def test_breadcrumbs(self, navigator):
        """Breadcrumbs resolve history ids to symbols."""
        navigator.focus(HELPER)
        navigator.focus(MAIN)

        assert [s.name for s in navigator.breadcrumbs()] == ["helper", "main"]

    def test_shared_state(self, graph):
        """A NavigationState can be handed in and outlives the navigator."""
        state = NavigationState()
        Navigator(graph, state).focus(OTHER)

        assert state.to_dict() == {"selectedSymbol": OTHER, "history": [OTHER]}
