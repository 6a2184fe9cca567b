"""Environment-driven settings for the mutation path tools."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Optional

GRAPH_STRATEGIES = ("bucket", "pairwise")

GENEPATH_DEFAULTS: Dict[str, str] = {
    "DICTIONARY": "genes.txt",
    "HISTORY": "gene_history.txt",
    "ALPHABET": "",
    "EDIT_WEIGHT": "1",
    "GRAPH_STRATEGY": "bucket",
}


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for a single run."""

    dictionary_path: str
    history_path: str
    alphabet: Optional[str]
    edit_weight: int
    graph_strategy: str


def _from_env() -> Dict[str, str]:
    params = dict(GENEPATH_DEFAULTS)
    for key in GENEPATH_DEFAULTS:
        value = os.environ.get(f"GENEPATH_{key}")
        if value is not None:
            params[key] = value
    return params


def build_settings(overrides: Optional[Dict[str, object]] = None) -> Settings:
    """Return :class:`Settings` from the environment merged with ``overrides``.

    Override keys use the same names as the environment variables without the
    ``GENEPATH_`` prefix, e.g. ``{"EDIT_WEIGHT": 2}``.
    """

    params: Dict[str, object] = dict(_from_env())
    if overrides:
        unknown = set(overrides) - set(GENEPATH_DEFAULTS)
        if unknown:
            raise ValueError(f"Unknown settings: {sorted(unknown)}")
        params.update(overrides)

    try:
        edit_weight = int(params["EDIT_WEIGHT"])
    except (TypeError, ValueError):
        raise ValueError(f"EDIT_WEIGHT must be an integer, got {params['EDIT_WEIGHT']!r}") from None
    if edit_weight < 1:
        raise ValueError("EDIT_WEIGHT must be positive")

    strategy = str(params["GRAPH_STRATEGY"]).lower()
    if strategy not in GRAPH_STRATEGIES:
        raise ValueError(f"GRAPH_STRATEGY must be one of {GRAPH_STRATEGIES}, got {strategy!r}")

    alphabet = str(params["ALPHABET"] or "").strip().upper() or None
    return Settings(
        dictionary_path=str(params["DICTIONARY"]),
        history_path=str(params["HISTORY"]),
        alphabet=alphabet,
        edit_weight=edit_weight,
        graph_strategy=strategy,
    )


__all__ = ["GENEPATH_DEFAULTS", "GRAPH_STRATEGIES", "Settings", "build_settings"]
