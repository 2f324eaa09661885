# symbol_graph/layout/engine.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Layered (Sugiyama-style) layout of a symbol graph.

Pipeline: rank (cycle breaking + longest path), order (barycenter crossing
reduction), position (fixed box size and spacing, each rank centred) and
route (smooth-step polylines between anchor sides). The result depends only
on the node and edge input order, never on hashing or timing.
"""

import logging
from typing import Iterable, Optional, Union

from symbol_graph.config import LayoutConfig
from symbol_graph.models import Relationship, Symbol

from .models import LayoutEdge, LayoutNode, LayoutResult, Point
from .ordering import build_layers, order_layers
from .ranking import rank_nodes

logger = logging.getLogger(__name__)


def _node_ids(nodes: Iterable[Union[Symbol, str]]) -> list[str]:
    """Input ids in order, each once."""
    seen: set[str] = set()
    ids = []
    for node in nodes:
        node_id = node.id if isinstance(node, Symbol) else node
        if node_id not in seen:
            seen.add(node_id)
            ids.append(node_id)
    return ids


class LayeredLayout:
    """Computes node boxes and edge routes for one direction and spacing."""

    def __init__(self, config: Optional[LayoutConfig] = None):
        self.config = config or LayoutConfig()

    def run(
        self, nodes: Iterable[Union[Symbol, str]], relationships: Iterable[Relationship]
    ) -> LayoutResult:
        node_ids = _node_ids(nodes)
        if not node_ids:
            return LayoutResult(direction=self.config.direction)

        known = set(node_ids)
        relationships = list(relationships)
        routable = [
            rel for rel in relationships
            if rel.source in known and rel.target in known and rel.source != rel.target
        ]
        ranks, dag, back_edges = rank_nodes(node_ids, [(r.source, r.target) for r in routable])
        layers = order_layers(build_layers(node_ids, ranks), dag, self.config.ordering_passes)
        boxes, width, height = self._position(layers)

        nodes_out = [boxes[node_id] for node_id in node_ids]
        edges_out = [
            LayoutEdge(
                source=rel.source,
                target=rel.target,
                kind=rel.kind,
                points=self._route(boxes[rel.source], boxes[rel.target]),
                reversed=(rel.source, rel.target) in back_edges,
            )
            for rel in routable
        ]
        logger.debug(
            f"Layout: {len(nodes_out)} nodes in {len(layers)} ranks, "
            f"{len(edges_out)} edges ({len(back_edges)} back edges, "
            f"{len(relationships) - len(routable)} not routed)"
        )
        return LayoutResult(
            nodes=nodes_out,
            edges=edges_out,
            width=width,
            height=height,
            direction=self.config.direction,
        )

    def _position(self, layers: list[list[str]]) -> tuple[dict[str, LayoutNode], float, float]:
        """Top-left coordinates for every node; ranks are centred on the widest one."""
        cfg = self.config
        horizontal = cfg.direction == "TB"
        # Extent of a node along the rank axis and across it
        along = cfg.node_width if horizontal else cfg.node_height
        across = cfg.node_height if horizontal else cfg.node_width

        def extent(layer: list[str]) -> float:
            return len(layer) * along + max(len(layer) - 1, 0) * cfg.node_sep

        widest = max(extent(layer) for layer in layers)
        boxes: dict[str, LayoutNode] = {}
        for rank, layer in enumerate(layers):
            offset = (widest - extent(layer)) / 2
            depth = rank * (across + cfg.rank_sep)
            for order, node_id in enumerate(layer):
                spread = offset + order * (along + cfg.node_sep)
                x, y = (spread, depth) if horizontal else (depth, spread)
                boxes[node_id] = LayoutNode(
                    id=node_id,
                    x=x,
                    y=y,
                    width=cfg.node_width,
                    height=cfg.node_height,
                    rank=rank,
                    order=order,
                )

        depth_total = len(layers) * across + (len(layers) - 1) * cfg.rank_sep
        if horizontal:
            return boxes, widest, depth_total
        return boxes, depth_total, widest

    def _route(self, source: LayoutNode, target: LayoutNode) -> tuple[Point, ...]:
        """Smooth-step route: source bottom to target top (TB), right to left (LR)."""
        if self.config.direction == "TB":
            start = (source.x + source.width / 2, source.y + source.height)
            end = (target.x + target.width / 2, target.y)
            if start[0] == end[0]:
                return (start, end)
            mid = (start[1] + end[1]) / 2
            return (start, (start[0], mid), (end[0], mid), end)

        start = (source.x + source.width, source.y + source.height / 2)
        end = (target.x, target.y + target.height / 2)
        if start[1] == end[1]:
            return (start, end)
        mid = (start[0] + end[0]) / 2
        return (start, (mid, start[1]), (mid, end[1]), end)


def layout(
    nodes: Iterable[Union[Symbol, str]],
    relationships: Iterable[Relationship],
    config: Optional[LayoutConfig] = None,
) -> LayoutResult:
    """Lay out symbols (or bare ids) and their relationships.

    Every input id appears exactly once in the result. Relationships whose
    endpoints are not both in the node set are not routed. An empty node set
    gives an empty layout.
    """
    return LayeredLayout(config).run(nodes, relationships)
