# tests/unit/parsers/test_python_parser.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Unit tests for the tree-sitter Python parser.

Tests symbol extraction with full spans, call targets, class bases,
class attributes and imports.
"""

import pytest

from symbol_graph.parsers.python_parser import PythonParser


@pytest.fixture
def parser() -> PythonParser:
    """Create a Python parser instance."""
    return PythonParser()


@pytest.fixture
def sample_module() -> str:
    """Module with imports, two classes, methods, a function and a variable."""
    return '''import os
from typing import Optional

class Base:
    pass

class Store(Base):
    limit: int = 10

    def fetch(self, key: str) -> Optional[Record]:
        return self.lookup(key)

    @staticmethod
    def lookup(key):
        return helper(key)

def helper(value):
    print(value)
    return Record(value)

DEFAULT = Store()
'''


def by_name(symbols, name):
    return [s for s in symbols if s.name == name]


class TestPythonParserSymbols:
    """Tests for declaration extraction."""

    def test_language_name(self, parser):
        """Parser reports python."""
        assert parser.get_language_name() == "python"

    def test_extracts_expected_symbols(self, parser, sample_module):
        """All declarations are found in file order."""
        symbols = parser.extract(sample_module, "pkg/store.py")

        assert [(s.name, s.kind) for s in symbols] == [
            ("os", "import"),
            ("typing", "import"),
            ("Base", "class"),
            ("Store", "class"),
            ("limit", "property"),
            ("fetch", "method"),
            ("lookup", "method"),
            ("helper", "function"),
            ("DEFAULT", "variable"),
        ]

    def test_class_span_covers_body(self, parser, sample_module):
        """Tree-sitter gives the true end line of a class."""
        symbols = parser.extract(sample_module, "pkg/store.py")
        store = by_name(symbols, "Store")[0]

        assert store.location.line == 7
        assert store.location.end_line == 15
        assert store.id == "pkg/store.py:7:class:Store"

    def test_columns_count_characters(self, parser):
        """Columns are character offsets even after multi-byte text."""
        symbols = parser.extract('label = "\u00e9"; size = 2\n', "m.py")

        label, size = by_name(symbols, "label")[0], by_name(symbols, "size")[0]
        assert label.location.end_column == 11
        assert size.location.column == 13

    def test_class_bases_are_extends(self, parser, sample_module):
        """Superclasses are recorded as extends and references."""
        symbols = parser.extract(sample_module, "pkg/store.py")
        store = by_name(symbols, "Store")[0]

        assert store.extends == ["Base"]
        assert store.references == ["Base"]
        assert store.signature == "class Store(Base)"

    def test_methods_have_parent(self, parser, sample_module):
        """Methods (decorated or not) carry their class name."""
        symbols = parser.extract(sample_module, "pkg/store.py")

        assert by_name(symbols, "fetch")[0].parent == "Store"
        assert by_name(symbols, "lookup")[0].parent == "Store"
        assert by_name(symbols, "limit")[0].parent == "Store"
        assert by_name(symbols, "helper")[0].parent is None


class TestPythonParserCalls:
    """Tests for call target extraction."""

    def test_attribute_call_reduced_to_last_segment(self, parser, sample_module):
        """self.lookup(key) is recorded as lookup."""
        symbols = parser.extract(sample_module, "pkg/store.py")
        fetch = by_name(symbols, "fetch")[0]

        assert fetch.calls == ["lookup"]
        assert "lookup" in fetch.references

    def test_annotations_are_references(self, parser, sample_module):
        """Names in parameter and return annotations are referenced."""
        symbols = parser.extract(sample_module, "pkg/store.py")
        fetch = by_name(symbols, "fetch")[0]

        assert "Optional" in fetch.references
        assert "Record" in fetch.references
        assert "str" not in fetch.references

    def test_builtins_are_skipped(self, parser, sample_module):
        """print() is not a call target."""
        symbols = parser.extract(sample_module, "pkg/store.py")
        helper = by_name(symbols, "helper")[0]

        assert helper.calls == ["Record"]

    def test_nested_function_bodies_are_not_symbols(self, parser):
        """Locals and inner functions stay inside their parent."""
        code = "def outer():\n    def inner():\n        pass\n    x = 1\n    return inner()\n"
        symbols = parser.extract(code, "m.py")

        assert [s.name for s in symbols] == ["outer"]
        assert symbols[0].calls == ["inner"]


class TestPythonParserImports:
    """Tests for import extraction."""

    def test_import_bindings(self, parser):
        """Imports bind their top-level name or alias."""
        code = "import os.path\nimport numpy as np\nfrom . import sibling\nfrom a.b import c as d, e\n"
        symbols = parser.extract(code, "m.py")

        assert [(s.name, s.references) for s in symbols] == [
            ("os.path", ["os"]),
            ("numpy", ["np"]),
            (".", ["sibling"]),
            ("a.b", ["d", "e"]),
        ]

    def test_malformed_source_does_not_raise(self, parser):
        """Syntax errors still produce a list."""
        symbols = parser.extract("def broken(:\n  class\n)))", "bad.py")

        assert isinstance(symbols, list)
