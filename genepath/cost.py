"""Display cost for a single mutation step.

The cost follows the original optimizer's accounting: one unit per differing
position over the shared length plus a flat penalty when lengths differ. It is
reported alongside paths and never used to choose one.
"""

from __future__ import annotations

LENGTH_MISMATCH_PENALTY = 2


def hamming_distance(a: str, b: str) -> int:
    """Count differing positions between two equal-length strings."""

    if len(a) != len(b):
        raise ValueError(f"Hamming distance needs equal lengths, got {len(a)} and {len(b)}")
    return sum(1 for x, y in zip(a, b) if x != y)


def mutation_cost(source: str, target: str, edit_weight: int = 1) -> int:
    """Return the weighted display cost of mutating ``source`` into ``target``."""

    cost = LENGTH_MISMATCH_PENALTY if len(source) != len(target) else 0
    cost += sum(1 for x, y in zip(source, target) if x != y)
    return cost * edit_weight


__all__ = ["LENGTH_MISMATCH_PENALTY", "hamming_distance", "mutation_cost"]
