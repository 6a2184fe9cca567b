"""
Mutation graph over dictionary genes.

Two genes are linked iff they have the same length and differ at exactly one
position (a single substitution). Insertions and deletions never create an
edge. The graph is built once from the dictionary and treated as read-only
afterwards.

Two construction strategies produce the same graph:

* ``pairwise`` compares every unordered pair of genes, O(n^2 * L).
* ``bucket`` groups genes by masked keys (the gene with one position blanked
  out) and only links genes that share a bucket, roughly O(n * L^2).
"""

from __future__ import annotations

import logging
from collections import defaultdict
from itertools import combinations
from typing import Dict, FrozenSet, Iterable, Iterator, List, Set, Tuple

import numpy as np
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import connected_components

from .config import GRAPH_STRATEGIES

logger = logging.getLogger("genepath.graph")
logger.addHandler(logging.NullHandler())

Edge = Tuple[str, str]


def is_single_mutation(a: str, b: str) -> bool:
    """Return ``True`` when ``a`` and ``b`` differ by exactly one substitution."""

    if len(a) != len(b):
        return False
    differences = 0
    for x, y in zip(a, b):
        if x != y:
            differences += 1
            if differences > 1:
                return False
    return differences == 1


def _pairwise_edges(genes: List[str]) -> Iterator[Edge]:
    for a, b in combinations(genes, 2):
        if is_single_mutation(a, b):
            yield a, b


def _bucket_edges(genes: List[str]) -> Iterator[Edge]:
    # The key keeps the masked position separate from the symbols so that no
    # placeholder character can collide with the alphabet.
    buckets: Dict[Tuple[int, str, str], List[str]] = defaultdict(list)
    for gene in genes:
        for i in range(len(gene)):
            buckets[(i, gene[:i], gene[i + 1:])].append(gene)
    for members in buckets.values():
        for a, b in combinations(members, 2):
            yield a, b


class MutationGraph:
    """Undirected graph linking genes one substitution apart."""

    def __init__(self, genes: Iterable[str] = ()) -> None:
        self._adjacency: Dict[str, Set[str]] = {}
        for gene in genes:
            self._adjacency.setdefault(gene, set())
        self._labels: Dict[str, int] | None = None

    @classmethod
    def build(cls, dictionary: Iterable[str], strategy: str = "bucket") -> "MutationGraph":
        """Build the graph for ``dictionary`` using the named strategy."""
        if strategy not in GRAPH_STRATEGIES:
            raise ValueError(f"Unknown graph strategy {strategy!r}; expected one of {GRAPH_STRATEGIES}")
        genes = list(dict.fromkeys(dictionary))
        if "" in genes:
            logger.warning("skipping empty gene in mutation graph")
            genes.remove("")
        graph = cls(genes)
        edge_source = _bucket_edges if strategy == "bucket" else _pairwise_edges
        for a, b in edge_source(genes):
            graph._link(a, b)
        logger.debug(
            {
                "phase": "graph",
                "event": "built",
                "strategy": strategy,
                "nodes": len(graph),
                "edges": graph.edge_count,
            }
        )
        return graph

    def _link(self, a: str, b: str) -> None:
        self._adjacency[a].add(b)
        self._adjacency[b].add(a)

    @property
    def genes(self) -> List[str]:
        return list(self._adjacency)

    def neighbors(self, gene: str) -> FrozenSet[str]:
        """Genes one mutation away from ``gene``; empty for unknown genes."""
        return frozenset(self._adjacency.get(gene, ()))

    def sorted_neighbors(self, gene: str) -> List[str]:
        return sorted(self._adjacency.get(gene, ()))

    def degree(self, gene: str) -> int:
        return len(self._adjacency.get(gene, ()))

    def edges(self) -> List[Edge]:
        """Every undirected edge once, as sorted ``(low, high)`` pairs."""
        return sorted(
            (a, b)
            for a, neighbours in self._adjacency.items()
            for b in neighbours
            if a < b
        )

    @property
    def edge_count(self) -> int:
        return sum(len(neighbours) for neighbours in self._adjacency.values()) // 2

    def component_labels(self) -> Dict[str, int]:
        """Map each gene to the id of its connected component."""
        if self._labels is None and not self._adjacency:
            self._labels = {}
        if self._labels is None:
            genes = self.genes
            position = {gene: i for i, gene in enumerate(genes)}
            edges = self.edges()
            rows = np.array([position[a] for a, _ in edges], dtype=np.int64)
            cols = np.array([position[b] for _, b in edges], dtype=np.int64)
            data = np.ones(len(edges), dtype=np.int8)
            matrix = csr_matrix((data, (rows, cols)), shape=(len(genes), len(genes)))
            _, labels = connected_components(matrix, directed=False)
            self._labels = {gene: int(labels[i]) for i, gene in enumerate(genes)}
        return dict(self._labels)

    def same_component(self, a: str, b: str) -> bool:
        labels = self.component_labels()
        return a in labels and b in labels and labels[a] == labels[b]

    def __contains__(self, gene: object) -> bool:
        return gene in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"MutationGraph(nodes={len(self)}, edges={self.edge_count})"


__all__ = ["Edge", "MutationGraph", "is_single_mutation"]
