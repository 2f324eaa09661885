# symbol_graph/parsers/base.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Base parser interface for symbol extraction.

Parsers turn one file's text into an ordered list of Symbols. They never
raise on malformed content: anything a rule cannot make sense of is skipped.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Iterable, Iterator, Optional

from symbol_graph.models import Location, Symbol


_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][\w$]*")


def make_symbol_id(file_path: str, line: int, kind: str, name: str) -> str:
    """Build the base id for a symbol: ``path:line:kind:name``."""
    return f"{file_path}:{line}:{kind}:{name}"


def unique(names: Iterable[str]) -> list[str]:
    """De-duplicate while keeping first-seen order."""
    seen: set[str] = set()
    result = []
    for name in names:
        if name and name not in seen:
            seen.add(name)
            result.append(name)
    return result


def scan_identifiers(
    text: str, keywords: frozenset[str], exclude: Iterable[str] = ()
) -> list[str]:
    """Ordered, de-duplicated identifiers in text, minus keywords and exclusions."""
    skip = set(exclude)
    return unique(
        token
        for token in _IDENTIFIER_RE.findall(text)
        if token not in keywords and token not in skip and not token[0].isdigit()
    )


def last_segment(dotted: str) -> str:
    """``React.Component`` -> ``Component``."""
    return dotted.strip().split(".")[-1]


class SymbolCollector:
    """Accumulates the symbols of one file in scan order.

    Allocates ids so that two symbols which would share a base id (same line,
    kind and name) stay distinct: the second gets a ``#2`` suffix and so on.
    """

    def __init__(self, file_path: str):
        self.file_path = file_path
        self.symbols: list[Symbol] = []
        self._id_counts: dict[str, int] = {}

    def _allocate_id(self, line: int, kind: str, name: str) -> str:
        base = make_symbol_id(self.file_path, line, kind, name)
        count = self._id_counts.get(base, 0) + 1
        self._id_counts[base] = count
        return base if count == 1 else f"{base}#{count}"

    def add(
        self,
        name: str,
        kind: str,
        line: int,
        column: int = 0,
        end_line: Optional[int] = None,
        end_column: int = 0,
        signature: Optional[str] = None,
        references: Iterable[str] = (),
        parent: Optional[str] = None,
        extends: Iterable[str] = (),
        implements: Iterable[str] = (),
        calls: Iterable[str] = (),
    ) -> Symbol:
        """Create a symbol and append it to the collected list."""
        symbol = Symbol(
            id=self._allocate_id(line, kind, name),
            name=name,
            kind=kind,
            location=Location(
                file=self.file_path,
                line=line,
                column=column,
                end_line=end_line if end_line is not None else line,
                end_column=end_column,
            ),
            signature=signature,
            references=unique(references),
            parent=parent,
            extends=unique(extends),
            implements=unique(implements),
            calls=unique(calls),
        )
        self.symbols.append(symbol)
        return symbol


class BaseParser(ABC):
    """Base class for symbol parsers.

    Subclasses implement ``_collect`` and push symbols into the collector in
    file order.
    """

    language: str = ""

    def extract(self, content: str, file_path: str) -> list[Symbol]:
        """Extract all symbols from file content.

        Args:
            content: Source code as string.
            file_path: Path recorded in each symbol's location and id.

        Returns:
            Symbols in scan order.
        """
        collector = SymbolCollector(file_path)
        self._collect(content, collector)
        return collector.symbols

    @abstractmethod
    def _collect(self, content: str, collector: SymbolCollector) -> None:
        """Walk the content and add symbols to the collector."""

    def get_language_name(self) -> str:
        """Get the language name for this parser."""
        return self.language or self.__class__.__name__.replace("Parser", "").lower()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.get_language_name()})"


class TreeSitterMixin:
    """Node helpers shared by the tree-sitter parsers."""

    def _text(self, node) -> str:
        return node.text.decode("utf-8", errors="replace")

    def _walk_tree(self, node) -> Iterator:
        """Walk all nodes in a tree using a generator."""
        yield node
        for child in node.children:
            yield from self._walk_tree(child)

    def _span(self, node) -> dict:
        """Location keywords for SymbolCollector.add (1-indexed lines).

        Columns are byte offsets here; ``_character_columns`` converts them
        once the file is collected.
        """
        return {
            "line": node.start_point[0] + 1,
            "column": node.start_point[1],
            "end_line": node.end_point[0] + 1,
            "end_column": node.end_point[1],
        }

    def _character_columns(self, content: str, collector: SymbolCollector) -> None:
        """Rewrite the byte columns of collected symbols as character columns."""
        if content.isascii():
            return
        lines = content.encode("utf-8").split(b"\n")

        def to_chars(line: int, column: int) -> int:
            if line > len(lines):
                return column
            return len(lines[line - 1][:column].decode("utf-8", errors="replace"))

        for symbol in collector.symbols:
            loc = symbol.location
            symbol.location = replace(
                loc,
                column=to_chars(loc.line, loc.column),
                end_column=to_chars(loc.end_line, loc.end_column),
            )

    def _first_line(self, node) -> str:
        """Declaration header: first line of the node, without an opening brace."""
        text = self._text(node).split("\n")[0].strip()
        if text.endswith("{"):
            text = text[:-1].rstrip()
        return text
