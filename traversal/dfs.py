"""
dfs.py — Depth-First Traversal Utilities
=========================================
Six read-only queries over a `Vertex` graph, all built on one walk:

    walk(vertex)              → every reachable vertex once, DFS pre-order
    print_vertex_vals(vertex) → one value per line
    reachable(vertex)         → set of reachable vertices
    max_value(vertex)         → largest reachable value
    leaves(vertex)            → reachable vertices with no out-edges
    all_odd(vertex)           → every reachable value odd?
    has_strictly_increasing_path(start, end)

The walk uses an explicit stack of neighbour iterators (no Python recursion
limit issues) but visits in exactly the order recursive pre-order DFS would:
a vertex is marked visited before any neighbour is entered, and neighbours
are entered in list order.

`None` as a start vertex means "empty graph" everywhere except
has_strictly_increasing_path, which treats it as a caller error.
"""

import logging
import sys
from typing import Iterator, List, Optional, Set, TextIO, TypeVar

from graph.vertex import Vertex
from traversal.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Result of max_value(None): the 32-bit minimum integer, meaning "no vertices".
MIN_SENTINEL: int = -(2 ** 31)

_DONE = object()


# ---------------------------------------------------------------------------
# Shared walk
# ---------------------------------------------------------------------------
def walk(vertex: Optional[Vertex[T]]) -> Iterator[Vertex[T]]:
    """
    Yield each vertex reachable from `vertex` (itself included) exactly once,
    in depth-first pre-order.  Yields nothing for None.

    The visited set belongs to this generator, so abandoning it early
    (e.g. all_odd short-circuiting) leaves nothing behind.
    """
    if vertex is None:
        return

    visited: Set[int] = {id(vertex)}
    yield vertex
    stack: List[Iterator[Vertex[T]]] = [iter(vertex.neighbors)]

    while stack:
        nbr = next(stack[-1], _DONE)
        if nbr is _DONE:
            stack.pop()
            continue
        if id(nbr) in visited:
            continue
        visited.add(id(nbr))
        yield nbr
        stack.append(iter(nbr.neighbors))


def visit_order(vertex: Optional[Vertex[T]]) -> List[T]:
    """Reachable values in the order the walk meets them."""
    return [v.data for v in walk(vertex)]


# ---------------------------------------------------------------------------
# The six queries
# ---------------------------------------------------------------------------
def print_vertex_vals(vertex: Optional[Vertex[T]], out: Optional[TextIO] = None) -> None:
    """
    Print the value of every vertex reachable from `vertex`, one per line.

    Each value appears once even when several paths lead to it.  Lines are
    written as vertices are visited.  `out` defaults to the sys.stdout in
    effect at call time.
    """
    out = out if out is not None else sys.stdout
    for v in walk(vertex):
        print(v.data, file=out, flush=True)


def reachable(vertex: Optional[Vertex[T]]) -> Set[Vertex[T]]:
    """Set of all vertices reachable from `vertex`, itself included.  Empty for None."""
    result = set(walk(vertex))
    logger.debug("reachable: %d vertices", len(result))
    return result


def max_value(vertex: Optional[Vertex[int]]) -> int:
    """
    Largest `data` among the vertices reachable from `vertex`.

    Returns MIN_SENTINEL for None.  Vertices are tracked by identity, so two
    vertices that happen to share a value are both still considered.
    """
    if vertex is None:
        return MIN_SENTINEL
    return max(v.data for v in walk(vertex))


def leaves(vertex: Optional[Vertex[T]]) -> Set[Vertex[T]]:
    """
    Reachable vertices with no outgoing edges.  The start vertex counts if it
    is a leaf; a vertex whose only edge is a self-loop does not.
    """
    result = {v for v in walk(vertex) if not v.neighbors}
    logger.debug("leaves: %d found", len(result))
    return result


def all_odd(vertex: Optional[Vertex[int]]) -> bool:
    """True iff every reachable value is odd.  Vacuously True for None."""
    for v in walk(vertex):
        if v.data % 2 == 0:
            logger.debug("all_odd: stopped at even value %r", v.data)
            return False
    return True


def has_strictly_increasing_path(
    start: Optional[Vertex[int]],
    end: Optional[Vertex[int]],
) -> bool:
    """
    True iff some directed path start → … → end has strictly increasing values.

    A zero-length path (start is end) always qualifies.  Only neighbours with
    a larger value than the current vertex are entered; a vertex is never
    repeated within one path, and a vertex already explored to exhaustion is
    not explored again.  The first path found in neighbour order wins.

    Raises:
        InvalidArgumentError: start or end is None.
    """
    if start is None or end is None:
        missing = [name for name, v in (("start", start), ("end", end)) if v is None]
        raise InvalidArgumentError(f"{' and '.join(missing)} must not be None")

    if start is end:
        return True

    # on_path mirrors the stack: the vertices of the current path prefix.
    # Every prefix vertex holds a smaller value than the vertex being expanded,
    # so what lies beyond a vertex never depends on how it was reached: once
    # fully explored without finding `end` it is a dead end for the whole call.
    on_path: Set[int] = {id(start)}
    dead: Set[int] = set()
    path: List[Vertex[int]] = [start]
    stack: List[Iterator[Vertex[int]]] = [iter(start.neighbors)]

    while stack:
        current = path[-1]
        nbr = next(stack[-1], _DONE)
        if nbr is _DONE:
            stack.pop()
            finished = id(path.pop())
            on_path.discard(finished)
            dead.add(finished)
            continue
        if id(nbr) in on_path or id(nbr) in dead or not current.data < nbr.data:
            continue
        if nbr is end:
            logger.debug("increasing path found with %d edges", len(path))
            return True
        on_path.add(id(nbr))
        path.append(nbr)
        stack.append(iter(nbr.neighbors))

    logger.debug("no increasing path from %r to %r", start.data, end.data)
    return False
