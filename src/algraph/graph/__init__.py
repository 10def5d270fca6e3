"""
Graph subsystem for algraph.

Defines the algebraic graph expression and everything that interprets it:
- constructors that compose graphs from smaller graphs
- expansion into vertex and edge sets
- structural queries and transforms
- canonicalization and export to concrete representations
"""

from algraph.graph.graph_schema import Graph, Empty, Vertex, Overlay, Product
from algraph.graph.graph_builder import (
    empty,
    singleton,
    vertex,
    overlay,
    product,
    connect,
    edge,
    from_list,
    overlays,
    connects,
    from_edges,
    clique,
    star,
)
from algraph.graph.graph_expand import (
    vertices,
    edges,
    vertex_list,
    edge_list,
    vertex_count,
    edge_count,
    adjacency,
)
from algraph.graph.graph_query import (
    is_empty,
    member,
    has_edge,
    size,
    structurally_equal,
)
from algraph.graph.graph_transform import (
    foldg,
    gmap,
    concat_map,
    bind,
    fold,
    transpose,
)
from algraph.graph.graph_compact import compact
from algraph.graph.graph_export import to_networkx, from_networkx, adjacency_matrix

__all__ = [
    "Graph",
    "Empty",
    "Vertex",
    "Overlay",
    "Product",
    "empty",
    "singleton",
    "vertex",
    "overlay",
    "product",
    "connect",
    "edge",
    "from_list",
    "overlays",
    "connects",
    "from_edges",
    "clique",
    "star",
    "vertices",
    "edges",
    "vertex_list",
    "edge_list",
    "vertex_count",
    "edge_count",
    "adjacency",
    "is_empty",
    "member",
    "has_edge",
    "size",
    "structurally_equal",
    "foldg",
    "gmap",
    "concat_map",
    "bind",
    "fold",
    "transpose",
    "compact",
    "to_networkx",
    "from_networkx",
    "adjacency_matrix",
]
