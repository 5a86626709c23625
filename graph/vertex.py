from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Vertex
# ---------------------------------------------------------------------------
class Vertex(Generic[T]):
    """
    One node of a caller-owned directed graph.

    Attributes:
        data      : The payload.  Values are expected to be unique within a
                    graph, but nothing here enforces it.
        neighbors : Outgoing edges, in insertion order.  These are plain
                    references to other vertices, so cycles (including
                    self-loops) are allowed.

    Equality and hashing are the default identity semantics: two vertices
    carrying the same data are still two distinct set members.
    """

    __slots__ = ("data", "neighbors")

    def __init__(self, data: T, neighbors: Optional[List["Vertex[T]"]] = None):
        self.data: T                        = data
        self.neighbors: List["Vertex[T]"]   = list(neighbors) if neighbors else []

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------
    def add_neighbor(self, other: "Vertex[T]") -> "Vertex[T]":
        """Append an outgoing edge to `other`.  Returns self for chaining."""
        self.neighbors.append(other)
        return self

    @property
    def is_leaf(self) -> bool:
        return not self.neighbors

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        # never recurse into neighbours: the graph may be cyclic
        return f"Vertex(data={self.data!r}, out_degree={len(self.neighbors)})"
