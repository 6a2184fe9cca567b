"""Typed values shared across the genepath modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from .cost import mutation_cost

FOUND = "FOUND"
NOT_FOUND = "NOT_FOUND"
NOT_IN_DICTIONARY = "NOT_IN_DICTIONARY"


def normalize_gene(raw: str) -> str:
    """Strip surrounding whitespace and upper-case a gene string."""

    return raw.strip().upper()


@dataclass(frozen=True)
class RejectedRecord:
    """Dictionary record that was skipped while loading."""

    line_number: int
    raw: str
    reason: str


@dataclass(frozen=True)
class MutationPath:
    """Ordered chain of genes where each neighbour pair differs by one mutation."""

    genes: Tuple[str, ...]
    edit_weight: int = 1

    def __post_init__(self) -> None:
        if not self.genes:
            raise ValueError("a mutation path needs at least one gene")

    @property
    def start(self) -> str:
        return self.genes[0]

    @property
    def target(self) -> str:
        return self.genes[-1]

    @property
    def length(self) -> int:
        """Number of mutations (edges) along the path."""

        return len(self.genes) - 1

    def steps(self) -> Iterator[Tuple[str, str, int]]:
        """Yield ``(source, target, cost)`` for each mutation in order."""

        for source, target in zip(self.genes, self.genes[1:]):
            yield source, target, mutation_cost(source, target, self.edit_weight)

    @property
    def total_cost(self) -> int:
        return sum(cost for _, _, cost in self.steps())

    def __len__(self) -> int:
        return len(self.genes)

    def __iter__(self) -> Iterator[str]:
        return iter(self.genes)


@dataclass(frozen=True)
class Suggestion:
    """Closest dictionary entry for a query string."""

    query: str
    match: str
    distance: int


@dataclass
class QueryResult:
    """Outcome of a single start/target query."""

    status: str
    start: str
    target: str
    path: Optional[MutationPath] = None
    suggestions: Dict[str, Suggestion] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.status == FOUND

    @property
    def missing(self) -> List[str]:
        """Queries that failed membership, in start/target order."""

        return list(self.suggestions)


__all__ = [
    "FOUND",
    "NOT_FOUND",
    "NOT_IN_DICTIONARY",
    "normalize_gene",
    "RejectedRecord",
    "MutationPath",
    "Suggestion",
    "QueryResult",
]
