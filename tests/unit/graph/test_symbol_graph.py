# tests/unit/graph/test_symbol_graph.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""Tests for SymbolGraph - derived back-references, queries and export."""

import json

import pytest


@pytest.fixture
def graph(sample_symbols):
    """Resolved graph over the shared sample symbols."""
    from symbol_graph.graph import SymbolGraph

    return SymbolGraph.build(sample_symbols)


class TestSymbolGraphQueries:
    """Tests for adjacency queries."""

    def test_referenced_by_matches_edges(self, graph):
        """Every edge a->b puts a in b's referenced_by, and nothing else does."""
        for symbol in graph.symbols:
            expected = {r.source for r in graph.relationships if r.target == symbol.id}
            assert set(graph.referenced_by(symbol.id)) == expected

    def test_incoming_and_outgoing(self, graph):
        """helper is referenced by main and other."""
        incoming = {r.source for r in graph.incoming("a.ts:1:function:helper")}

        assert incoming == {"a.ts:5:function:main", "a.ts:9:function:other"}
        assert graph.outgoing("a.ts:1:function:helper") == []

    def test_neighbors(self, graph):
        """Neighbours are one edge away in either direction."""
        names = [s.name for s in graph.neighbors("a.ts:5:function:main")]

        assert names == ["helper", "Config"]

    def test_by_file_and_stats(self, graph):
        """Symbols group by file; stats count kinds."""
        groups = graph.by_file()
        stats = graph.stats()

        assert list(groups) == ["a.ts", "b.ts"]
        assert [s.name for s in groups["b.ts"]] == ["Config"]
        assert stats["symbols"] == 5
        assert stats["files"] == 2
        assert stats["symbol_kinds"]["function"] == 3
        assert stats["relationship_kinds"] == {"references": 3, "imports": 1}

    def test_get_unknown(self, graph):
        """Unknown ids return None."""
        assert graph.get("nope") is None


class TestSymbolGraphExport:
    """Tests for the JSON export document."""

    def test_export_field_names(self, graph):
        """Symbols and relationships use the documented camelCase fields."""
        data = graph.to_dict()
        symbol = data["symbols"][0]

        assert set(data) == {"symbols", "relationships"}
        assert set(symbol) == {
            "id", "name", "kind", "signature", "location", "references",
            "referencedBy", "parent", "extends", "implements", "calls",
        }
        assert set(symbol["location"]) == {"file", "line", "column", "endLine", "endColumn"}
        assert set(data["relationships"][0]) == {"from", "to", "kind"}

    def test_exported_referenced_by_is_derived(self, graph):
        """referencedBy in the export comes from the edge list."""
        data = graph.to_dict()
        helper = next(s for s in data["symbols"] if s["name"] == "helper")

        assert helper["referencedBy"] == ["a.ts:5:function:main", "a.ts:9:function:other"]

    def test_round_trip(self, graph, tmp_path):
        """save then load reproduces the same symbols and edges."""
        from symbol_graph.graph import SymbolGraph

        path = tmp_path / "out" / "symbols.json"
        graph.save(path)
        loaded = SymbolGraph.load(path)

        assert loaded.symbols == graph.symbols
        assert loaded.relationships == graph.relationships
        assert loaded.to_dict() == graph.to_dict()

    def test_export_is_json_serializable(self, graph):
        """The export survives json.dumps unchanged."""
        data = graph.to_dict()

        assert json.loads(json.dumps(data)) == data

    def test_invalid_documents_raise(self, tmp_path):
        """Non-export JSON raises ExportFormatError."""
        from symbol_graph.errors import ExportFormatError
        from symbol_graph.graph import SymbolGraph

        with pytest.raises(ExportFormatError):
            SymbolGraph.from_dict({"symbols": []})
        with pytest.raises(ExportFormatError):
            SymbolGraph.from_dict({"symbols": [{"name": "x"}], "relationships": []})

        bad = tmp_path / "bad.json"
        bad.write_text("{not json")
        with pytest.raises(ExportFormatError):
            SymbolGraph.load(bad)

    def test_missing_file_is_read_error(self, tmp_path):
        """Loading a missing export raises ReadError."""
        from symbol_graph.errors import ReadError
        from symbol_graph.graph import SymbolGraph

        with pytest.raises(ReadError):
            SymbolGraph.load(tmp_path / "missing.json")
