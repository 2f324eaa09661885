# symbol_graph/graph/resolver.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Relationship resolution.

Links each symbol's raw reference names to the symbols declared with those
names, producing directed, typed edges. Resolution is by name only: when
several symbols share a name every one of them receives an edge.
"""

import logging
from typing import Iterable

from symbol_graph.models import (
    KIND_EXPORT,
    KIND_IMPORT,
    REL_CALLS,
    REL_CONTAINS,
    REL_EXTENDS,
    REL_IMPLEMENTS,
    REL_IMPORTS,
    REL_REFERENCES,
    Relationship,
    Symbol,
)

from .symbol_table import SymbolTable

logger = logging.getLogger(__name__)


class SymbolResolver:
    """Resolves reference names to symbol ids across one scan.

    Edge kinds:
    - imports: the source is an import symbol
    - extends / implements: the name appears in the source's heritage lists
    - calls: the name was recorded as a call target
    - references: any other textual mention
    - contains: a class to each of its methods and properties
    """

    def __init__(self, symbols: Iterable[Symbol]):
        self.symbols = list(symbols)
        self.symbol_table = SymbolTable(self.symbols)

    def edge_kind(self, source: Symbol, name: str) -> str:
        """Pick the relationship kind for one reference name of a symbol."""
        if source.kind == KIND_IMPORT:
            return REL_IMPORTS
        if name in source.extends:
            return REL_EXTENDS
        if name in source.implements:
            return REL_IMPLEMENTS
        if name in source.calls:
            return REL_CALLS
        return REL_REFERENCES

    def candidates(self, source: Symbol, name: str) -> list[Symbol]:
        """Target symbols for a name, excluding the source itself.

        Export symbols are only reachable from imports, since an export list
        carries the names of the declarations it re-exports. An import never
        targets another import of the same module.
        """
        targets = []
        for target in self.symbol_table.lookup_name(name):
            if target.id == source.id:
                continue
            if source.kind == KIND_IMPORT:
                if target.kind == KIND_IMPORT and target.name == source.name:
                    continue
            elif target.kind == KIND_EXPORT:
                continue
            targets.append(target)
        return targets

    def resolve(self) -> list[Relationship]:
        """Build the edge list in symbol scan order, without duplicates."""
        relationships: list[Relationship] = []
        seen: set[Relationship] = set()

        def add(rel: Relationship) -> None:
            if rel.source != rel.target and rel not in seen:
                seen.add(rel)
                relationships.append(rel)

        for symbol in self.symbols:
            owner = self.symbol_table.lookup_owner(symbol)
            if owner is not None:
                add(Relationship(owner.id, symbol.id, REL_CONTAINS))

        for symbol in self.symbols:
            for name in symbol.references:
                kind = self.edge_kind(symbol, name)
                for target in self.candidates(symbol, name):
                    add(Relationship(symbol.id, target.id, kind))

        logger.debug(
            f"Resolved {len(relationships)} relationships for {len(self.symbols)} symbols"
        )
        return relationships


def resolve(symbols: Iterable[Symbol]) -> list[Relationship]:
    """Resolve all symbols of a scan into relationships."""
    return SymbolResolver(symbols).resolve()
