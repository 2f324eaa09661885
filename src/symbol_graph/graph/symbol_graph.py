# symbol_graph/graph/symbol_graph.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
The resolved symbol graph of one scan.

The relationship list is the single source of truth. ``referenced_by`` and
the per-symbol ``referencedBy`` field of the export are derived from it and
are never stored on the symbols themselves.
"""

import json
from collections import Counter, defaultdict
from pathlib import Path
from typing import Iterable, Optional

from symbol_graph.errors import ExportFormatError, ReadError
from symbol_graph.models import Relationship, Symbol

from .resolver import resolve


class SymbolGraph:
    """Symbols plus the directed, typed edges between them.

    Stores forward (outgoing) and inverse (incoming) adjacency built from the
    same edge list, so both directions always agree.
    """

    def __init__(self, symbols: Iterable[Symbol], relationships: Iterable[Relationship]):
        self.symbols: list[Symbol] = list(symbols)
        self.relationships: list[Relationship] = list(relationships)
        self._by_id: dict[str, Symbol] = {s.id: s for s in self.symbols}
        self._outgoing: dict[str, list[Relationship]] = defaultdict(list)
        self._incoming: dict[str, list[Relationship]] = defaultdict(list)
        for rel in self.relationships:
            self._outgoing[rel.source].append(rel)
            self._incoming[rel.target].append(rel)

    @classmethod
    def build(cls, symbols: Iterable[Symbol]) -> "SymbolGraph":
        """Resolve a scan's symbols into a graph."""
        symbols = list(symbols)
        return cls(symbols, resolve(symbols))

    def get(self, symbol_id: str) -> Optional[Symbol]:
        return self._by_id.get(symbol_id)

    def outgoing(self, symbol_id: str) -> list[Relationship]:
        """Edges leaving a symbol, in edge-list order."""
        return list(self._outgoing.get(symbol_id, []))

    def incoming(self, symbol_id: str) -> list[Relationship]:
        """Edges arriving at a symbol, in edge-list order."""
        return list(self._incoming.get(symbol_id, []))

    def referenced_by(self, symbol_id: str) -> list[str]:
        """Ids of the symbols with an edge into this one (derived, de-duplicated)."""
        seen: set[str] = set()
        result = []
        for rel in self._incoming.get(symbol_id, []):
            if rel.source not in seen:
                seen.add(rel.source)
                result.append(rel.source)
        return result

    def neighbors(self, symbol_id: str) -> list[Symbol]:
        """Symbols one edge away in either direction, in symbol scan order."""
        ids = {rel.target for rel in self._outgoing.get(symbol_id, [])}
        ids.update(rel.source for rel in self._incoming.get(symbol_id, []))
        ids.discard(symbol_id)
        return [s for s in self.symbols if s.id in ids]

    def by_file(self) -> dict[str, list[Symbol]]:
        """Symbols grouped per file, files sorted, symbols in scan order."""
        groups: dict[str, list[Symbol]] = defaultdict(list)
        for symbol in self.symbols:
            groups[symbol.file].append(symbol)
        return {path: groups[path] for path in sorted(groups)}

    def stats(self) -> dict:
        """Counts of symbols and relationships, overall and per kind."""
        return {
            "symbols": len(self.symbols),
            "relationships": len(self.relationships),
            "files": len({s.file for s in self.symbols}),
            "symbol_kinds": dict(Counter(s.kind for s in self.symbols)),
            "relationship_kinds": dict(Counter(r.kind for r in self.relationships)),
        }

    def to_dict(self) -> dict:
        """Export document: ``{"symbols": [...], "relationships": [...]}``."""
        return {
            "symbols": [s.to_dict(referenced_by=self.referenced_by(s.id)) for s in self.symbols],
            "relationships": [r.to_dict() for r in self.relationships],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SymbolGraph":
        """Rebuild a graph from an export document.

        Raises:
            ExportFormatError: If the document is not a symbols/relationships export.
        """
        if not isinstance(data, dict):
            raise ExportFormatError("Export must be a JSON object")
        if not isinstance(data.get("symbols"), list) or not isinstance(
            data.get("relationships"), list
        ):
            raise ExportFormatError("Export must contain 'symbols' and 'relationships' arrays")
        try:
            symbols = [Symbol.from_dict(item) for item in data["symbols"]]
            relationships = [Relationship.from_dict(item) for item in data["relationships"]]
        except (KeyError, TypeError, ValueError) as e:
            raise ExportFormatError(f"Malformed export entry: {e}") from e
        return cls(symbols, relationships)

    def save(self, path: Path) -> None:
        """Write the export document as JSON."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: Path) -> "SymbolGraph":
        """Read an export document written by ``save``."""
        try:
            with open(path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ExportFormatError(f"Invalid JSON in {path}: {e}") from e
        except OSError as e:
            raise ReadError(str(path), e.strerror or str(e)) from e
        return cls.from_dict(data)

    def __len__(self) -> int:
        return len(self.symbols)

    def __repr__(self) -> str:
        return f"SymbolGraph({len(self.symbols)} symbols, {len(self.relationships)} relationships)"
