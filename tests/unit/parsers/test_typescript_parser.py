# tests/unit/parsers/test_typescript_parser.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Unit tests for the tree-sitter TypeScript parser.

Tests symbol extraction, heritage clauses, call targets, import bindings
and export lists.
"""

import pytest

from symbol_graph.parsers.typescript_parser import TypeScriptParser


@pytest.fixture
def parser() -> TypeScriptParser:
    """Create a TypeScript parser instance."""
    return TypeScriptParser()


@pytest.fixture
def sample_module() -> str:
    """Module with imports, an interface, a type alias, a class and functions."""
    return """import { Foo, Bar as Baz } from './foo';
import * as path from 'path';
import React from 'react';

export interface Shape extends Base {
  area(): number;
}

export type Id = string | Key;

export class Circle extends Figure implements Shape, Printable {
  radius: number = 1;

  area(): number {
    return compute(this.radius);
  }
}

export function compute(r: number): number {
  return Math.PI * square(r);
}

const square = (x: number) => x * x;

export const ORIGIN: Point = makePoint(0, 0);

export { compute as calc };
"""


def by_name(symbols, name):
    return [s for s in symbols if s.name == name]


class TestTypeScriptParserSymbols:
    """Tests for declaration extraction."""

    def test_extracts_expected_symbols(self, parser, sample_module):
        """All declarations are found in file order."""
        symbols = parser.extract(sample_module, "src/shapes.ts")

        assert [(s.name, s.kind) for s in symbols] == [
            ("./foo", "import"),
            ("path", "import"),
            ("react", "import"),
            ("Shape", "interface"),
            ("Id", "type-alias"),
            ("Circle", "class"),
            ("radius", "property"),
            ("area", "method"),
            ("compute", "function"),
            ("square", "function"),
            ("ORIGIN", "variable"),
            ("shapes", "export"),
        ]

    def test_class_heritage(self, parser, sample_module):
        """extends and implements clauses are recorded separately."""
        symbols = parser.extract(sample_module, "src/shapes.ts")
        circle = by_name(symbols, "Circle")[0]

        assert circle.extends == ["Figure"]
        assert circle.implements == ["Shape", "Printable"]
        assert circle.references == ["Figure", "Shape", "Printable"]

    def test_class_span_and_members(self, parser, sample_module):
        """Class spans its body; members carry the class as parent."""
        symbols = parser.extract(sample_module, "src/shapes.ts")
        circle = by_name(symbols, "Circle")[0]

        assert circle.location.line == 11
        assert circle.location.end_line == 17
        assert by_name(symbols, "area")[0].parent == "Circle"
        assert by_name(symbols, "radius")[0].parent == "Circle"

    def test_columns_count_characters(self, parser):
        """Columns after non-ASCII text match the line parser's character columns."""
        from symbol_graph.parsers.line_parser import TypeScriptLineParser

        content = "/* \u00e9 */ function foo() {}\n"
        foo = parser.extract(content, "a.ts")[0]
        line_foo = TypeScriptLineParser().extract(content, "a.ts")[0]

        assert (foo.location.column, foo.location.end_column) == (8, 25)
        assert foo.location.column == line_foo.location.column

    def test_interface_and_alias(self, parser, sample_module):
        """Interfaces record extends; aliases reference named types."""
        symbols = parser.extract(sample_module, "src/shapes.ts")

        assert by_name(symbols, "Shape")[0].extends == ["Base"]
        assert by_name(symbols, "Id")[0].references == ["Key"]

    def test_exported_variable_references(self, parser, sample_module):
        """Type annotations and initializer identifiers are references."""
        symbols = parser.extract(sample_module, "src/shapes.ts")
        origin = by_name(symbols, "ORIGIN")[0]

        assert origin.references == ["Point", "makePoint"]


class TestTypeScriptParserCalls:
    """Tests for call target extraction."""

    def test_method_calls(self, parser, sample_module):
        """Calls inside a method body are recorded."""
        symbols = parser.extract(sample_module, "src/shapes.ts")

        assert by_name(symbols, "area")[0].calls == ["compute"]

    def test_function_calls_skip_builtins(self, parser, sample_module):
        """Math.PI is not a call; square(r) is."""
        symbols = parser.extract(sample_module, "src/shapes.ts")

        assert by_name(symbols, "compute")[0].calls == ["square"]

    def test_new_and_member_calls(self, parser):
        """new X() and obj.method() both count; console.log does not."""
        code = "function run() {\n  const s = new Store();\n  s.save();\n  console.log('x');\n}\n"
        symbols = parser.extract(code, "run.ts")

        assert symbols[0].calls == ["Store", "save"]


class TestTypeScriptParserImportsExports:
    """Tests for imports and exports."""

    def test_import_bindings(self, parser, sample_module):
        """Named, aliased, namespace and default bindings."""
        symbols = parser.extract(sample_module, "src/shapes.ts")
        imports = [(s.name, s.references) for s in symbols if s.kind == "import"]

        assert imports == [
            ("./foo", ["Foo", "Baz"]),
            ("path", ["path"]),
            ("react", ["React"]),
        ]

    def test_export_list(self, parser, sample_module):
        """export { a as b } references the local name."""
        symbols = parser.extract(sample_module, "src/shapes.ts")
        export = by_name(symbols, "shapes")[0]

        assert export.references == ["compute"]

    def test_tsx_parser(self):
        """The TSX grammar handles JSX in function bodies."""
        parser = TypeScriptParser(tsx=True)
        code = "export function App() {\n  return <Button label=\"go\" onClick={() => start()} />;\n}\n"
        symbols = parser.extract(code, "App.tsx")

        assert parser.get_language_name() == "tsx"
        assert [s.name for s in symbols] == ["App"]
        assert symbols[0].calls == ["start"]
