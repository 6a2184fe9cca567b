"""
Graph export helpers.

The mutation graph can be written as a Graphviz DOT description or as a JSON
node/edge list. Output is sorted so repeated exports of the same dictionary
are byte-identical.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Union

from .graph import MutationGraph

logger = logging.getLogger("genepath.export")
logger.addHandler(logging.NullHandler())

EXPORT_FORMATS = ("dot", "json")


def _quote(gene: str) -> str:
    escaped = gene.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def to_dot(graph: MutationGraph, name: str = "mutations") -> str:
    """Render ``graph`` as an undirected DOT graph, isolated genes included."""

    lines = [f"graph {_quote(name)} {{"]
    for gene in sorted(graph.genes):
        lines.append(f"    {_quote(gene)};")
    for a, b in graph.edges():
        lines.append(f"    {_quote(a)} -- {_quote(b)};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def to_json(graph: MutationGraph) -> str:
    payload = {
        "nodes": sorted(graph.genes),
        "edges": [list(edge) for edge in graph.edges()],
    }
    return json.dumps(payload, indent=2)


def summary(graph: MutationGraph) -> Dict[str, Any]:
    """Node, edge and component counts for ``graph``."""

    sizes = Counter(graph.component_labels().values())
    return {
        "nodes": len(graph),
        "edges": graph.edge_count,
        "components": len(sizes),
        "largest_component": max(sizes.values()) if sizes else 0,
        "isolated": sum(1 for gene in graph.genes if graph.degree(gene) == 0),
    }


def write(graph: MutationGraph, out_path: Union[str, Path], fmt: str = "dot") -> Path:
    """Serialize ``graph`` to ``out_path`` in the requested format.

    Returns the path to the written file for convenience.
    """
    if fmt == "dot":
        text = to_dot(graph)
    elif fmt == "json":
        text = to_json(graph)
    else:
        raise ValueError(f"Unknown export format {fmt!r}; expected one of {EXPORT_FORMATS}")
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text, encoding="utf-8")
    logger.info("Wrote %s graph with %d edges to %s", fmt, graph.edge_count, out_path)
    return out_path


__all__ = ["EXPORT_FORMATS", "to_dot", "to_json", "summary", "write"]
