# symbol_graph/navigator.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Path filter and navigation history for browsing a symbol graph.

The "code path" of a focused symbol is its one-hop neighbourhood: the symbol
itself plus every symbol joined to it by an edge in either direction, of any
kind. Multi-hop exploration is done by re-focusing, which the navigation
history records so the user can retrace their steps.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from symbol_graph.graph import SymbolGraph
from symbol_graph.models import Location, Relationship, Symbol

logger = logging.getLogger(__name__)


def selected_neighborhood(
    symbols: Iterable[Symbol], relationships: Iterable[Relationship], focus: str
) -> list[Symbol]:
    """``{focus} ∪ {s : edge(focus, s) or edge(s, focus)}`` in symbol order.

    Returns an empty list if ``focus`` is not one of the symbols.
    """
    symbols = list(symbols)
    if not any(s.id == focus for s in symbols):
        return []
    ids = {focus}
    for rel in relationships:
        if rel.source == focus:
            ids.add(rel.target)
        elif rel.target == focus:
            ids.add(rel.source)
    return [s for s in symbols if s.id in ids]


def filter_symbols(
    symbols: Iterable[Symbol], query: str = "", kind: Optional[str] = None
) -> list[Symbol]:
    """Case-insensitive substring search over name and signature, plus kind filter."""
    needle = query.lower()
    result = []
    for symbol in symbols:
        if kind and symbol.kind != kind:
            continue
        if needle and needle not in symbol.name.lower() and needle not in (
            symbol.signature or ""
        ).lower():
            continue
        result.append(symbol)
    return result


@dataclass
class NavigationState:
    """Selected symbol plus the breadcrumb history of focus operations.

    ``history`` only grows (until ``clear``); ``cursor`` points at the entry
    currently shown, so stepping back never rewrites the record.
    """

    selected_symbol: Optional[str] = None
    history: list[str] = field(default_factory=list)
    cursor: int = -1

    def record(self, symbol_id: str) -> bool:
        """Append unless it repeats the most recent entry. Returns True if appended."""
        if self.history and self.history[-1] == symbol_id:
            self.cursor = len(self.history) - 1
            return False
        self.history.append(symbol_id)
        self.cursor = len(self.history) - 1
        return True

    def clear(self) -> None:
        self.selected_symbol = None
        self.history.clear()
        self.cursor = -1

    def to_dict(self) -> dict:
        return {"selectedSymbol": self.selected_symbol, "history": list(self.history)}


class Navigator:
    """Focus/back navigation over one SymbolGraph."""

    def __init__(self, graph: SymbolGraph, state: Optional[NavigationState] = None):
        self.graph = graph
        self.state = state or NavigationState()

    @property
    def selected(self) -> Optional[Symbol]:
        if self.state.selected_symbol is None:
            return None
        return self.graph.get(self.state.selected_symbol)

    def neighborhood(self, symbol_id: Optional[str] = None) -> list[Symbol]:
        """Neighbourhood of a symbol, by default the current selection."""
        focus = symbol_id if symbol_id is not None else self.state.selected_symbol
        if focus is None:
            return []
        return selected_neighborhood(self.graph.symbols, self.graph.relationships, focus)

    def focus(self, symbol_id: str) -> list[Symbol]:
        """Select a symbol and return its neighbourhood.

        Unknown ids leave the state untouched and return an empty list.
        """
        if self.graph.get(symbol_id) is None:
            logger.debug(f"Ignoring focus on unknown symbol {symbol_id}")
            return []
        self.state.selected_symbol = symbol_id
        self.state.record(symbol_id)
        return self.neighborhood(symbol_id)

    def follow_reference(self, from_id: str, to_id: str) -> list[Symbol]:
        """Re-focus on the target of an edge the user clicked."""
        logger.debug(f"Following reference {from_id} -> {to_id}")
        return self.focus(to_id)

    def go_to_definition(self, symbol_id: str) -> Optional[Location]:
        """Focus a symbol and return where it is declared."""
        if not self.focus(symbol_id):
            return None
        return self.graph.get(symbol_id).location

    def back(self) -> Optional[str]:
        """Step to the previous history entry; returns the newly selected id.

        At the start of the history (or with no history) nothing changes and
        None is returned.
        """
        if self.state.cursor <= 0:
            return None
        self.state.cursor -= 1
        self.state.selected_symbol = self.state.history[self.state.cursor]
        return self.state.selected_symbol

    def clear(self) -> None:
        self.state.clear()

    @property
    def history(self) -> list[str]:
        return list(self.state.history)

    def breadcrumbs(self) -> list[Symbol]:
        """History resolved to symbols, skipping ids no longer in the graph."""
        crumbs = []
        for symbol_id in self.state.history:
            symbol = self.graph.get(symbol_id)
            if symbol is not None:
                crumbs.append(symbol)
        return crumbs

    def visible_symbols(self, query: str = "", kind: Optional[str] = None) -> list[Symbol]:
        """Symbols to list: the focus neighbourhood (or everything) after search filtering."""
        base = self.neighborhood() if self.state.selected_symbol else self.graph.symbols
        return filter_symbols(base, query, kind)
