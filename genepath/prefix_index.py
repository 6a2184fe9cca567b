"""
Prefix tree for exact dictionary membership.

Each node keeps its children in a dict keyed by a single symbol, so the index
works for any alphabet. A node is terminal when the path from the root spells
a complete dictionary gene.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

logger = logging.getLogger("genepath.prefix_index")
logger.addHandler(logging.NullHandler())


@dataclass
class PrefixNode:
    children: Dict[str, "PrefixNode"] = field(default_factory=dict)
    terminal: bool = False


class PrefixIndex:
    """Exact-membership index over dictionary genes."""

    def __init__(self) -> None:
        self.root = PrefixNode()
        self._size = 0

    @classmethod
    def build(cls, dictionary: Iterable[str]) -> "PrefixIndex":
        """Insert every gene of ``dictionary`` into a fresh index."""
        index = cls()
        for gene in dictionary:
            index.insert(gene)
        logger.debug({"phase": "prefix_index", "event": "built", "members": len(index)})
        return index

    def insert(self, gene: str) -> bool:
        """Add ``gene``; return ``True`` if it was not already a member.

        Empty strings are skipped with a warning.
        """
        if not gene:
            logger.warning("skipping empty gene in prefix index")
            return False
        node = self.root
        for symbol in gene:
            node = node.children.setdefault(symbol, PrefixNode())
        if node.terminal:
            return False
        node.terminal = True
        self._size += 1
        return True

    def _walk(self, prefix: str) -> Optional[PrefixNode]:
        node = self.root
        for symbol in prefix:
            node = node.children.get(symbol)
            if node is None:
                return None
        return node

    def contains(self, query: str) -> bool:
        """Return ``True`` only when ``query`` is a full dictionary member."""
        if not query:
            return False
        node = self._walk(query)
        return node is not None and node.terminal

    def has_prefix(self, prefix: str) -> bool:
        """Return ``True`` when some member starts with ``prefix``."""
        if not prefix:
            return self._size > 0
        return self._walk(prefix) is not None

    def __contains__(self, query: object) -> bool:
        return isinstance(query, str) and self.contains(query)

    def __len__(self) -> int:
        return self._size


__all__ = ["PrefixNode", "PrefixIndex"]
