# symbol_graph/layout/models.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Data models for the layered layout.

A LayoutResult is derived and ephemeral: it is recomputed whenever the
symbol/edge set changes and is never part of the export document.
"""

from dataclasses import dataclass, field
from typing import Optional

Point = tuple[float, float]


@dataclass(frozen=True)
class LayoutNode:
    """Placed node box. ``x``/``y`` are the top-left corner."""

    id: str
    x: float
    y: float
    width: float
    height: float
    rank: int
    order: int  # Position within the rank after crossing reduction

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "rank": self.rank,
            "order": self.order,
        }


@dataclass(frozen=True)
class LayoutEdge:
    """Routed edge polyline from the source anchor to the target anchor."""

    source: str
    target: str
    kind: str
    points: tuple[Point, ...]
    reversed: bool = False  # Ignored during ranking to break a cycle

    def to_dict(self) -> dict:
        return {
            "from": self.source,
            "to": self.target,
            "kind": self.kind,
            "points": [[x, y] for x, y in self.points],
            "reversed": self.reversed,
        }


@dataclass
class LayoutResult:
    """Geometry for one layout run: one node per input id, one edge per routable relationship."""

    nodes: list[LayoutNode] = field(default_factory=list)
    edges: list[LayoutEdge] = field(default_factory=list)
    width: float = 0
    height: float = 0
    direction: str = "TB"

    def node(self, node_id: str) -> Optional[LayoutNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    @property
    def rank_count(self) -> int:
        return max((n.rank for n in self.nodes), default=-1) + 1

    def to_dict(self) -> dict:
        return {
            "direction": self.direction,
            "width": self.width,
            "height": self.height,
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }
