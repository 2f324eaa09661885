# symbol_graph/graph/symbol_table.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Symbol name to Symbol mapping.

Maps names to every symbol declared with that name across the scan, in scan
order, so that ambiguous names resolve to all of their candidates.
"""

from collections import defaultdict
from typing import Iterable, Optional

from symbol_graph.models import KIND_CLASS, Symbol


class SymbolTable:
    """Maps symbol names to the symbols that carry them.

    Provides two lookup strategies:
    1. Name-only: name -> list of all Symbols with that name
    2. Owner: (file, class name, line) -> nearest preceding class declaration,
       used to attach members to their class
    """

    def __init__(self, symbols: Iterable[Symbol] = ()):
        self._by_name: dict[str, list[Symbol]] = defaultdict(list)
        self._classes: dict[tuple[str, str], list[Symbol]] = defaultdict(list)
        for symbol in symbols:
            self.add(symbol)

    def add(self, symbol: Symbol) -> None:
        self._by_name[symbol.name].append(symbol)
        if symbol.kind == KIND_CLASS:
            self._classes[(symbol.file, symbol.name)].append(symbol)

    def lookup_name(self, name: str) -> list[Symbol]:
        """Get all symbols for a name (may be several across files).

        Returns:
            Symbols in scan order, empty list if none.
        """
        return self._by_name.get(name, [])

    def lookup_owner(self, member: Symbol) -> Optional[Symbol]:
        """Class declaration that owns a method or property.

        Picks the last class with the member's ``parent`` name in the same file
        that starts at or before the member's line.
        """
        if not member.parent:
            return None
        owner = None
        for candidate in self._classes.get((member.file, member.parent), []):
            if candidate.line <= member.line:
                owner = candidate
        return owner

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return sum(len(symbols) for symbols in self._by_name.values())
