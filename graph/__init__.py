"""
graph/
-----
Core data layer.  Public API:

    from graph import Vertex
    from graph import from_adjacency_list, from_dict, to_dict, GraphFormatError
"""

from graph.vertex  import Vertex
from graph.builder import (
    GraphFormatError,
    from_adjacency_list,
    from_dict,
    to_dict,
)

__all__ = [
    "Vertex",
    "GraphFormatError",
    "from_adjacency_list",
    "from_dict",
    "to_dict",
]
