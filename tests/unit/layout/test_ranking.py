# tests/unit/layout/test_ranking.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""Tests for cycle breaking and longest-path ranking."""

from symbol_graph.layout.ranking import (
    acyclic_edges,
    assign_ranks,
    find_back_edges,
    rank_nodes,
)


class TestBackEdges:
    """Tests for DFS back edge detection."""

    def test_acyclic_graph_has_no_back_edges(self):
        """A chain has nothing to reverse."""
        assert find_back_edges(["a", "b", "c"], [("a", "b"), ("b", "c")]) == set()

    def test_two_cycle(self):
        """The edge closing the cycle in input order is the back edge."""
        assert find_back_edges(["a", "b"], [("a", "b"), ("b", "a")]) == {("b", "a")}

    def test_back_edge_depends_on_input_order(self):
        """Starting the DFS elsewhere reverses a different edge."""
        assert find_back_edges(["b", "a"], [("a", "b"), ("b", "a")]) == {("a", "b")}

    def test_long_chain_does_not_recurse(self):
        """Thousands of nodes in a chain are handled iteratively."""
        ids = [f"n{i}" for i in range(5000)]
        edges = list(zip(ids, ids[1:])) + [(ids[-1], ids[0])]

        assert find_back_edges(ids, edges) == {(ids[-1], ids[0])}

    def test_acyclic_edges_drops_duplicates_and_self_loops(self):
        """Only distinct edges between known nodes survive."""
        dag, back = acyclic_edges(
            ["a", "b"], [("a", "b"), ("a", "b"), ("a", "a"), ("a", "zzz")]
        )

        assert dag == [("a", "b")]
        assert back == set()


class TestRanks:
    """Tests for rank assignment."""

    def test_longest_path(self):
        """A node reachable by a short and a long path takes the longer one."""
        ranks = assign_ranks(
            ["a", "b", "c", "d"], [("a", "b"), ("b", "c"), ("a", "c"), ("c", "d")]
        )

        assert ranks == {"a": 0, "b": 1, "c": 2, "d": 3}

    def test_isolated_nodes_are_rank_zero(self):
        """Nodes without edges sit in the first rank."""
        assert assign_ranks(["x", "y"], []) == {"x": 0, "y": 0}

    def test_cycle_still_ranks_every_node(self):
        """Cycles are broken so every node gets a rank and forward edges go down."""
        ranks, dag, back = rank_nodes(
            ["a", "b", "c"], [("a", "b"), ("b", "c"), ("c", "a")]
        )

        assert set(ranks) == {"a", "b", "c"}
        assert back == {("c", "a")}
        for source, target in dag:
            assert ranks[target] > ranks[source]
