"""
traversal/__init__.py — Operation Registry
===========================================
Single source of truth for every traversal query the project exposes.

    from traversal import REGISTRY, get_operation

REGISTRY is a dict:
    {
        "reachable": OpInfo(key, label, fn, needs_end, numeric, description),
        …
    }

The Flask demo only talks to this registry, so exposing a new query is:
write the function in dfs.py, add one entry here.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from traversal.dfs import (
    MIN_SENTINEL,
    all_odd,
    has_strictly_increasing_path,
    leaves,
    max_value,
    print_vertex_vals,
    reachable,
    visit_order,
    walk,
)
from traversal.errors import InvalidArgumentError


# ---------------------------------------------------------------------------
# OpInfo — metadata card for each operation
# ---------------------------------------------------------------------------
@dataclass
class OpInfo:
    key:          str                 # registry key, e.g. "reachable"
    label:        str                 # human label
    fn:           Callable            # the traversal function
    needs_end:    bool = False        # takes (start, end) instead of (vertex)
    numeric:      bool = False        # requires integer payloads
    description:  str  = ""           # one-liner for listings


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, OpInfo] = {

    "print_vertex_vals": OpInfo(
        key="print_vertex_vals", label="Print Reachable Values", fn=print_vertex_vals,
        description="Prints every reachable value once, one per line, in DFS order.",
    ),

    "reachable": OpInfo(
        key="reachable", label="Reachable Vertices", fn=reachable,
        description="Every vertex reachable from the start, the start included.",
    ),

    "max_value": OpInfo(
        key="max_value", label="Maximum Value", fn=max_value, numeric=True,
        description=f"Largest reachable value; {MIN_SENTINEL} when there is no start vertex.",
    ),

    "leaves": OpInfo(
        key="leaves", label="Reachable Leaves", fn=leaves,
        description="Reachable vertices with no outgoing edges.",
    ),

    "all_odd": OpInfo(
        key="all_odd", label="All Values Odd", fn=all_odd, numeric=True,
        description="True when every reachable value is odd. Stops at the first even one.",
    ),

    "has_strictly_increasing_path": OpInfo(
        key="has_strictly_increasing_path", label="Strictly Increasing Path",
        fn=has_strictly_increasing_path, needs_end=True, numeric=True,
        description="Is there a start → end path whose values strictly increase?",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_operation(key: str) -> Optional[OpInfo]:
    """Return OpInfo by key, or None."""
    return REGISTRY.get(key)


def list_operations() -> List[OpInfo]:
    """Return all registered operations in insertion order."""
    return list(REGISTRY.values())


def numeric_operations() -> List[OpInfo]:
    return [op for op in REGISTRY.values() if op.numeric]


__all__ = [
    "OpInfo",
    "REGISTRY",
    "get_operation",
    "list_operations",
    "numeric_operations",
    "InvalidArgumentError",
    "MIN_SENTINEL",
    "walk",
    "visit_order",
    "print_vertex_vals",
    "reachable",
    "max_value",
    "leaves",
    "all_odd",
    "has_strictly_increasing_path",
]
