# symbol_graph/layout/ranking.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Rank assignment for the layered layout.

Cycles are legal in source code, so they are broken first: a depth-first
traversal in input order marks every edge that closes a cycle as a back edge,
and ranking ignores those. Ranks are then the longest path from a source.
"""

from collections import defaultdict, deque
from typing import Iterable

Edge = tuple[str, str]


def _adjacency(node_ids: list[str], edges: Iterable[Edge]) -> dict[str, list[str]]:
    """Successor lists in first-seen edge order, without duplicates or self-loops."""
    known = set(node_ids)
    adjacency: dict[str, list[str]] = defaultdict(list)
    seen: set[Edge] = set()
    for source, target in edges:
        if source == target or source not in known or target not in known:
            continue
        if (source, target) in seen:
            continue
        seen.add((source, target))
        adjacency[source].append(target)
    return adjacency


def find_back_edges(node_ids: list[str], edges: Iterable[Edge]) -> set[Edge]:
    """Edges that close a cycle during a DFS started from each node in input order.

    Iterative so that long reference chains do not hit the recursion limit.
    """
    adjacency = _adjacency(node_ids, edges)
    state: dict[str, int] = {}  # 1 = on stack, 2 = done
    back_edges: set[Edge] = set()

    for root in node_ids:
        if root in state:
            continue
        state[root] = 1
        stack = [(root, iter(adjacency.get(root, [])))]
        while stack:
            node, successors = stack[-1]
            advanced = False
            for target in successors:
                target_state = state.get(target)
                if target_state == 1:
                    back_edges.add((node, target))
                elif target_state is None:
                    state[target] = 1
                    stack.append((target, iter(adjacency.get(target, []))))
                    advanced = True
                    break
            if not advanced:
                state[node] = 2
                stack.pop()
    return back_edges


def acyclic_edges(node_ids: list[str], edges: Iterable[Edge]) -> tuple[list[Edge], set[Edge]]:
    """Distinct edges between known nodes, split into (acyclic edges, back edges)."""
    edges = list(edges)
    back_edges = find_back_edges(node_ids, edges)
    adjacency = _adjacency(node_ids, edges)
    dag = [
        (source, target)
        for source in node_ids
        for target in adjacency.get(source, [])
        if (source, target) not in back_edges
    ]
    return dag, back_edges


def assign_ranks(node_ids: list[str], dag_edges: Iterable[Edge]) -> dict[str, int]:
    """Longest-path ranks over an acyclic edge set.

    Nodes without predecessors get rank 0; every edge spans at least one rank.
    """
    successors: dict[str, list[str]] = defaultdict(list)
    in_degree = {node_id: 0 for node_id in node_ids}
    for source, target in dag_edges:
        successors[source].append(target)
        in_degree[target] += 1

    ranks = {node_id: 0 for node_id in node_ids}
    queue = deque(node_id for node_id in node_ids if in_degree[node_id] == 0)
    while queue:
        node = queue.popleft()
        for target in successors.get(node, []):
            ranks[target] = max(ranks[target], ranks[node] + 1)
            in_degree[target] -= 1
            if in_degree[target] == 0:
                queue.append(target)
    return ranks


def rank_nodes(
    node_ids: list[str], edges: Iterable[Edge]
) -> tuple[dict[str, int], list[Edge], set[Edge]]:
    """Break cycles and assign ranks.

    Returns:
        (rank per node id, acyclic edges used for ranking, back edges ignored)
    """
    dag, back_edges = acyclic_edges(node_ids, edges)
    return assign_ranks(node_ids, dag), dag, back_edges
