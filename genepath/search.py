"""
Breadth-first shortest mutation paths.

Every edge has unit weight, so the first time BFS discovers the target the
predecessor chain back to the start is a shortest path. Neighbours are
expanded in lexicographic order, which makes the choice among equally short
paths deterministic.
"""

# [S:ALG v1] algo=bfs_shortest_path complexity=O(V+E) pass

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, List, Optional

from .graph import MutationGraph
from .types import MutationPath

logger = logging.getLogger("genepath.search")
logger.addHandler(logging.NullHandler())


def _reconstruct(parents: Dict[str, Optional[str]], target: str) -> List[str]:
    chain: List[str] = []
    current: Optional[str] = target
    while current is not None:
        chain.append(current)
        current = parents[current]
    chain.reverse()
    return chain


def shortest_path(
    graph: MutationGraph,
    start: str,
    target: str,
    edit_weight: int = 1,
) -> Optional[MutationPath]:
    """Return the shortest mutation path from ``start`` to ``target``.

    Args:
        graph: Mutation graph to search.
        start: Gene to start from.
        target: Gene to reach.
        edit_weight: Flat weight applied to the display cost of each step.

    Returns:
        A :class:`MutationPath`, or ``None`` when ``target`` is unreachable.
        ``start == target`` gives the single-gene path.
    """
    if start == target:
        return MutationPath((start,), edit_weight=edit_weight)
    if start not in graph or target not in graph:
        logger.debug({"phase": "search", "event": "unknown_gene", "start": start, "target": target})
        return None

    parents: Dict[str, Optional[str]] = {start: None}
    queue: Deque[str] = deque([start])
    expanded = 0
    while queue:
        current = queue.popleft()
        expanded += 1
        for neighbour in graph.sorted_neighbors(current):
            if neighbour in parents:
                continue
            parents[neighbour] = current
            if neighbour == target:
                genes = _reconstruct(parents, target)
                logger.debug(
                    {
                        "phase": "search",
                        "event": "found",
                        "length": len(genes) - 1,
                        "expanded": expanded,
                    }
                )
                return MutationPath(tuple(genes), edit_weight=edit_weight)
            queue.append(neighbour)

    logger.debug({"phase": "search", "event": "not_found", "visited": len(parents), "start": start, "target": target})
    return None


def shortest_path_lengths(graph: MutationGraph, start: str) -> Dict[str, int]:
    """BFS distance (in mutations) from ``start`` to every reachable gene."""

    if start not in graph:
        return {}
    distances = {start: 0}
    queue: Deque[str] = deque([start])
    while queue:
        current = queue.popleft()
        for neighbour in graph.sorted_neighbors(current):
            if neighbour not in distances:
                distances[neighbour] = distances[current] + 1
                queue.append(neighbour)
    return distances


__all__ = ["shortest_path", "shortest_path_lengths"]
