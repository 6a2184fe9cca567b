"""Human readable rendering of query results and history."""

from __future__ import annotations

from typing import Iterable, List

from .history import HistoryEntry
from .types import FOUND, NOT_FOUND, MutationPath, QueryResult


def render_path(path: MutationPath) -> str:
    """Format a path as ``A --(1)--> B --(1)--> C``."""

    parts: List[str] = [path.start]
    for _, target, cost in path.steps():
        parts.append(f" --({cost})--> {target}")
    return "".join(parts)


def render_result(result: QueryResult) -> str:
    if result.status == FOUND and result.path is not None:
        path = result.path
        lines = [
            "Optimized Mutation Path:",
            render_path(path),
            f"Mutations: {path.length}",
            f"Total Mutation Cost: {path.total_cost}",
        ]
        return "\n".join(lines)
    if result.status == NOT_FOUND:
        return f"No mutation path found from {result.start} to {result.target}."

    lines = []
    for gene, suggestion in result.suggestions.items():
        lines.append(
            f"{gene} is not in the dictionary; did you mean {suggestion.match} "
            f"(edit distance {suggestion.distance})?"
        )
    return "\n".join(lines)


def render_history(entries: Iterable[HistoryEntry]) -> str:
    lines = ["Mutation History:"]
    entries = list(entries)
    if not entries:
        lines.append("  (no mutations recorded yet)")
    for entry in entries:
        lines.append(f"Sequence: {entry.sequence} | Cost: {entry.cost}")
    return "\n".join(lines)


__all__ = ["render_path", "render_result", "render_history"]
