"""Persistent log of completed mutation optimizations.

The file holds one ``SEQUENCE COST`` pair per line, the same layout the
original console optimizer wrote, so existing history files keep working.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from .types import MutationPath

logger = logging.getLogger("genepath.history")
logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class HistoryEntry:
    sequence: str
    cost: int


class MutationHistory:
    """History entries backed by a plain text file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.entries: List[HistoryEntry] = []

    def load(self) -> List[HistoryEntry]:
        """Read entries from disk; a missing file means an empty history.

        Lines that are not valid UTF-8 are skipped with a warning.
        """
        self.entries = []
        if not self.path.exists():
            return self.entries
        with self.path.open("r", encoding="utf-8-sig", errors="replace") as f:
            for line_number, line in enumerate(f, start=1):
                if "\ufffd" in line:
                    logger.warning("skipping undecodable history line %d in %s", line_number, self.path)
                    continue
                fields = line.split()
                if not fields:
                    continue
                if len(fields) != 2:
                    logger.warning("skipping malformed history line %d in %s: %r", line_number, self.path, line.rstrip())
                    continue
                sequence, cost = fields
                try:
                    self.entries.append(HistoryEntry(sequence, int(cost)))
                except ValueError:
                    logger.warning("skipping history line %d in %s with non-integer cost %r", line_number, self.path, cost)
        return self.entries

    def save(self) -> Path:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            for entry in self.entries:
                f.write(f"{entry.sequence} {entry.cost}\n")
        return self.path

    def append(self, entry: HistoryEntry) -> None:
        self.entries.append(entry)

    def record(self, path: MutationPath) -> HistoryEntry:
        """Append the target and total cost of ``path`` and save immediately."""
        entry = HistoryEntry(path.target, path.total_cost)
        self.append(entry)
        self.save()
        logger.debug({"phase": "history", "event": "recorded", "sequence": entry.sequence, "cost": entry.cost})
        return entry

    def __len__(self) -> int:
        return len(self.entries)


__all__ = ["HistoryEntry", "MutationHistory"]
