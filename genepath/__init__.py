"""Shortest gene mutation paths over a fixed dictionary."""

from .config import Settings, build_settings
from .dictionary import GeneDictionary
from .errors import EmptyDictionaryError, GenePathError, InputAbsentError
from .graph import MutationGraph
from .history import HistoryEntry, MutationHistory
from .prefix_index import PrefixIndex
from .search import shortest_path, shortest_path_lengths
from .session import MutationSession
from .suggest import levenshtein, rank, suggest
from .types import MutationPath, QueryResult, Suggestion, normalize_gene

__all__ = [
    "Settings",
    "build_settings",
    "GeneDictionary",
    "GenePathError",
    "InputAbsentError",
    "EmptyDictionaryError",
    "MutationGraph",
    "HistoryEntry",
    "MutationHistory",
    "PrefixIndex",
    "shortest_path",
    "shortest_path_lengths",
    "MutationSession",
    "levenshtein",
    "rank",
    "suggest",
    "MutationPath",
    "QueryResult",
    "Suggestion",
    "normalize_gene",
]
