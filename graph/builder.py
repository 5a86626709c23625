"""
builder.py — Vertex Graph Construction
=======================================
Turns text or JSON-able dicts into linked `Vertex` graphs, and back.

The traversal code never needs a container: a graph *is* whatever is
reachable from a vertex.  The builder therefore hands back a plain
`{label: Vertex}` dict so callers can pick start / end vertices by name.

Supported inputs:
  1. Adjacency-list text             (from_adjacency_list)
  2. Dict with vertices + edge pairs (from_dict / to_dict)
"""

import logging
from typing import Any, Dict, List, Tuple, Union

from graph.vertex import Vertex

logger = logging.getLogger(__name__)

Label = Union[int, str]


class GraphFormatError(ValueError):
    """Raised when graph input cannot be turned into vertices."""


# ---------------------------------------------------------------------------
# Adjacency list (text)
# ---------------------------------------------------------------------------
def from_adjacency_list(text: str) -> Dict[Label, Vertex]:
    """
    Parse a simple text adjacency list.

    Supported formats (one source vertex per line):
        A: B C D            → A has edges to B, C, D
        1 -> 2, 3           → alternate arrow syntax, comma separated
        1 → 2 3             → unicode arrow
        R:                  → R with no outgoing edges

    Integer labels become int payloads; anything else keeps the string.
    Targets that never appear as a source still become (leaf) vertices.
    """
    adjacency: Dict[Label, List[Label]] = {}

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        # split on ':' or '→' or '->'
        if ":" in line:
            parts = line.split(":", 1)
        elif "→" in line:
            parts = line.split("→", 1)
        elif "->" in line:
            parts = line.split("->", 1)
        else:
            raise GraphFormatError(f"line {lineno}: expected 'source: targets', got {raw!r}")

        src_token = parts[0].strip()
        if not src_token:
            raise GraphFormatError(f"line {lineno}: missing source vertex")
        src = _label(src_token)
        adjacency.setdefault(src, [])

        for token in parts[1].replace(",", " ").split():
            tgt = _label(token)
            adjacency.setdefault(tgt, [])
            adjacency[src].append(tgt)

    vertices: Dict[Label, Vertex] = {label: Vertex(label) for label in adjacency}
    edge_count = 0
    for src, targets in adjacency.items():
        for tgt in targets:
            vertices[src].add_neighbor(vertices[tgt])
            edge_count += 1

    logger.debug("parsed adjacency list: %d vertices, %d edges", len(vertices), edge_count)
    return vertices


def _label(token: str) -> Label:
    try:
        return int(token)
    except ValueError:
        return token


# ---------------------------------------------------------------------------
# Dict round-trip  (for JSON payloads)
# ---------------------------------------------------------------------------
def from_dict(data: Dict[str, Any]) -> Dict[Any, Vertex]:
    """
    Build vertices from
        {"vertices": [{"id": "A", "data": 1}, …], "edges": [["A", "B"], …]}

    `data` defaults to the id when omitted.  Ids must be hashable (strings
    and numbers in JSON payloads).
    """
    vertex_list = _list_field(data, "vertices")
    edge_list = _list_field(data, "edges")

    vertices: Dict[Any, Vertex] = {}
    for vd in vertex_list:
        if not isinstance(vd, dict) or "id" not in vd:
            raise GraphFormatError(f"vertex entry without an id: {vd!r}")
        vid = _checked_id(vd["id"])
        if vid in vertices:
            raise GraphFormatError(f"duplicate vertex id: {vid!r}")
        vertices[vid] = Vertex(vd.get("data", vid))

    edges: List[Tuple[Any, Any]] = []
    for pair in edge_list:
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise GraphFormatError(f"edge must be a [source, target] pair: {pair!r}")
        src, tgt = (_checked_id(end) for end in pair)
        for end in (src, tgt):
            if end not in vertices:
                raise GraphFormatError(f"edge {pair!r} references unknown vertex {end!r}")
        edges.append((src, tgt))

    for src, tgt in edges:
        vertices[src].add_neighbor(vertices[tgt])

    logger.debug("built graph from dict: %d vertices, %d edges", len(vertices), len(edges))
    return vertices


def _list_field(data: Dict[str, Any], name: str) -> List[Any]:
    value = data.get(name, [])
    if not isinstance(value, list):
        raise GraphFormatError(f"'{name}' must be a list, got {type(value).__name__}")
    return value


def _checked_id(value: Any) -> Any:
    try:
        hash(value)
    except TypeError:
        raise GraphFormatError(f"vertex id must be a string or number: {value!r}") from None
    return value


def to_dict(vertices: Dict[Any, Vertex]) -> Dict[str, Any]:
    # identity → id, so edges can be written by name
    ids = {id(v): vid for vid, v in vertices.items()}
    return {
        "vertices": [{"id": vid, "data": v.data} for vid, v in vertices.items()],
        "edges": [
            [vid, ids[id(n)]]
            for vid, v in vertices.items()
            for n in v.neighbors
            if id(n) in ids
        ],
    }
