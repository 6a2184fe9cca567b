"""
Gene dictionary loading and validation.

The dictionary is read once from a line-oriented text source. Each record is
normalized, checked against the optional alphabet and de-duplicated while
preserving the order of first appearance. Bad records are flagged and
skipped, never fatal; an unavailable or empty source is.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Set, Union

from .errors import InputAbsentError
from .types import RejectedRecord, normalize_gene

logger = logging.getLogger("genepath.dictionary")
logger.addHandler(logging.NullHandler())


def validate_record(record: str, alphabet: Optional[str] = None) -> Optional[str]:
    """Return the reason ``record`` is unusable, or ``None`` when it is valid."""

    if not record:
        return "empty record"
    if any(ch.isspace() for ch in record):
        return "contains whitespace"
    if alphabet is not None:
        invalid = sorted(set(record) - set(alphabet))
        if invalid:
            return f"symbols outside alphabet: {''.join(invalid)}"
    return None


class GeneDictionary(Sequence[str]):
    """Ordered, duplicate-free collection of dictionary genes."""

    def __init__(self, genes: Iterable[str] = (), alphabet: Optional[str] = None):
        self.alphabet = alphabet
        self.rejected: List[RejectedRecord] = []
        self.duplicates: List[str] = []
        self._genes: List[str] = []
        self._members: Set[str] = set()
        for line_number, raw in enumerate(genes, start=1):
            gene = normalize_gene(raw)
            reason = validate_record(gene, alphabet)
            if reason is not None:
                record = RejectedRecord(line_number, raw.rstrip("\r\n"), reason)
                self.rejected.append(record)
                logger.warning(
                    "rejected dictionary record %d (%r): %s",
                    record.line_number,
                    record.raw,
                    record.reason,
                )
                continue
            if gene in self._members:
                self.duplicates.append(gene)
                continue
            self._members.add(gene)
            self._genes.append(gene)
        logger.debug(
            {
                "phase": "dictionary",
                "event": "loaded",
                "genes": len(self._genes),
                "rejected": len(self.rejected),
                "duplicates": len(self.duplicates),
            }
        )

    @classmethod
    def from_lines(cls, lines: Iterable[str], alphabet: Optional[str] = None) -> "GeneDictionary":
        return cls(lines, alphabet=alphabet)

    @classmethod
    def load(cls, path: Union[str, Path], alphabet: Optional[str] = None) -> "GeneDictionary":
        """Read a dictionary file, one gene per line.

        Raises :class:`InputAbsentError` when the file cannot be read, is not
        valid UTF-8, or yields no valid genes. A leading byte-order mark is
        dropped.
        """
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8-sig") as f:
                dictionary = cls(f, alphabet=alphabet)
        except (OSError, UnicodeDecodeError) as exc:
            raise InputAbsentError(f"Could not read gene dictionary {path}: {exc}") from exc
        if not dictionary:
            raise InputAbsentError(f"Gene dictionary {path} contains no valid genes")
        logger.info("Loaded %d genes from %s", len(dictionary), path)
        return dictionary

    def __getitem__(self, index):
        return self._genes[index]

    def __len__(self) -> int:
        return len(self._genes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._genes)

    def __contains__(self, gene: object) -> bool:
        return gene in self._members

    def __repr__(self) -> str:
        return f"GeneDictionary({len(self._genes)} genes, {len(self.rejected)} rejected)"


__all__ = ["GeneDictionary", "validate_record"]
