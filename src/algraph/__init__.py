"""
algraph
=======

Algebraic graphs for Python: directed graphs that are correct by
construction, because edges only ever arise from composing graphs.

Core idea:
- Build graphs from four constructors (empty, vertex, overlay, product)
  and read vertex and edge sets off the expression on demand.

Public API:
- Graph
- empty, singleton, overlay, product, edge, from_list
- vertices, edges, is_empty, member
- gmap, concat_map, fold
- compact
- AlgraphConfig
"""

from algraph.config import AlgraphConfig
from algraph.graph.graph_schema import Graph
from algraph.graph.graph_builder import (
    empty,
    singleton,
    overlay,
    product,
    edge,
    from_list,
)
from algraph.graph.graph_expand import vertices, edges
from algraph.graph.graph_query import is_empty, member
from algraph.graph.graph_transform import gmap, concat_map, fold
from algraph.graph.graph_compact import compact

__all__ = [
    "AlgraphConfig",
    "Graph",
    "empty",
    "singleton",
    "overlay",
    "product",
    "edge",
    "from_list",
    "vertices",
    "edges",
    "is_empty",
    "member",
    "gmap",
    "concat_map",
    "fold",
    "compact",
]

__version__ = "0.1.0"
