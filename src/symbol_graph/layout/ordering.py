# symbol_graph/layout/ordering.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Crossing reduction within ranks.

Barycenter heuristic: alternate downward and upward sweeps, each reordering a
rank by the mean position of its neighbours on the already-fixed side. The
best ordering seen (fewest crossings) is kept. Sorting is stable with the
current position as tie-break, so equal input gives equal output.
"""

from collections import defaultdict
from typing import Iterable

from .ranking import Edge

Layers = list[list[str]]


def build_layers(node_ids: list[str], ranks: dict[str, int]) -> Layers:
    """Group nodes by rank, each rank in input order."""
    layer_count = max(ranks.values(), default=-1) + 1
    layers: Layers = [[] for _ in range(layer_count)]
    for node_id in node_ids:
        layers[ranks[node_id]].append(node_id)
    return layers


def count_crossings(layers: Layers, edges: Iterable[Edge]) -> int:
    """Crossings between edges that join adjacent ranks."""
    position = {}
    rank_of = {}
    for rank, layer in enumerate(layers):
        for index, node_id in enumerate(layer):
            position[node_id] = index
            rank_of[node_id] = rank

    between: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for source, target in edges:
        if rank_of[target] - rank_of[source] == 1:
            between[rank_of[source]].append((position[source], position[target]))

    crossings = 0
    for segments in between.values():
        for i, (a_top, a_bottom) in enumerate(segments):
            for b_top, b_bottom in segments[i + 1:]:
                if (a_top - b_top) * (a_bottom - b_bottom) < 0:
                    crossings += 1
    return crossings


def _sweep(layers: Layers, neighbours: dict[str, list[str]], indices: range) -> Layers:
    """Reorder each layer in ``indices`` against its already-placed neighbours."""
    layers = [list(layer) for layer in layers]
    position = {
        node_id: index for layer in layers for index, node_id in enumerate(layer)
    }
    for rank in indices:
        layer = layers[rank]
        keyed = []
        for index, node_id in enumerate(layer):
            placed = [position[n] for n in neighbours.get(node_id, [])]
            barycenter = sum(placed) / len(placed) if placed else float(index)
            keyed.append((barycenter, index, node_id))
        keyed.sort()
        layers[rank] = [node_id for _, _, node_id in keyed]
        for index, node_id in enumerate(layers[rank]):
            position[node_id] = index
    return layers


def order_layers(layers: Layers, edges: Iterable[Edge], passes: int = 8) -> Layers:
    """Reduce crossings with up to ``passes`` down+up barycenter sweeps.

    Stops early once a full pass leaves the ordering unchanged.
    """
    edges = list(edges)
    predecessors: dict[str, list[str]] = defaultdict(list)
    successors: dict[str, list[str]] = defaultdict(list)
    for source, target in edges:
        successors[source].append(target)
        predecessors[target].append(source)

    best = [list(layer) for layer in layers]
    best_crossings = count_crossings(best, edges)
    current = best
    for _ in range(passes):
        if best_crossings == 0:
            break
        updated = _sweep(current, predecessors, range(1, len(current)))
        updated = _sweep(updated, successors, range(len(updated) - 2, -1, -1))
        crossings = count_crossings(updated, edges)
        if crossings < best_crossings:
            best, best_crossings = updated, crossings
        if updated == current:
            break
        current = updated
    return best
