"""Coordinator that answers start/target mutation queries."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from .config import Settings, build_settings
from .dictionary import GeneDictionary
from .graph import MutationGraph
from .history import MutationHistory
from .prefix_index import PrefixIndex
from .search import shortest_path
from .suggest import suggest
from .types import (
    FOUND,
    NOT_FOUND,
    NOT_IN_DICTIONARY,
    QueryResult,
    Suggestion,
    normalize_gene,
)

logger = logging.getLogger("genepath.session")
logger.addHandler(logging.NullHandler())


class MutationSession:
    """Dictionary, index and graph built once and queried many times."""

    def __init__(
        self,
        dictionary: GeneDictionary,
        settings: Optional[Settings] = None,
        history: Optional[MutationHistory] = None,
    ):
        self.settings = settings or build_settings()
        self.dictionary = dictionary
        self.history = history
        self.index = PrefixIndex.build(dictionary)
        self.graph = MutationGraph.build(dictionary, strategy=self.settings.graph_strategy)
        logger.debug(
            {
                "phase": "session",
                "event": "ready",
                "genes": len(self.dictionary),
                "edges": self.graph.edge_count,
            }
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, with_history: bool = True) -> "MutationSession":
        """Load the configured dictionary (and history) and build a session."""
        settings = settings or build_settings()
        dictionary = GeneDictionary.load(settings.dictionary_path, alphabet=settings.alphabet)
        history = None
        if with_history:
            history = MutationHistory(settings.history_path)
            history.load()
        return cls(dictionary, settings=settings, history=history)

    def query(self, start: str, target: str) -> QueryResult:
        """Find the shortest mutation path, or suggest genes for missing queries."""
        start = normalize_gene(start)
        target = normalize_gene(target)

        suggestions: Dict[str, Suggestion] = {}
        for gene in (start, target):
            if gene not in suggestions and not self.index.contains(gene):
                suggestions[gene] = suggest(gene, self.dictionary)
        if suggestions:
            logger.debug({"phase": "session", "event": "not_in_dictionary", "missing": list(suggestions)})
            return QueryResult(NOT_IN_DICTIONARY, start, target, suggestions=suggestions)

        path = shortest_path(self.graph, start, target, edit_weight=self.settings.edit_weight)
        if path is None:
            logger.debug(
                {
                    "phase": "session",
                    "event": "not_found",
                    "start": start,
                    "target": target,
                    "same_component": self.graph.same_component(start, target),
                }
            )
            return QueryResult(NOT_FOUND, start, target)

        if self.history is not None:
            self.history.record(path)
        return QueryResult(FOUND, start, target, path=path)


__all__ = ["MutationSession"]
