from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, TypeVar

import networkx as nx
import numpy as np

from algraph.config import AlgraphConfig, resolve_config
from algraph.graph.graph_builder import from_edges, from_list, overlay
from algraph.graph.graph_expand import edge_list, vertex_list
from algraph.graph.graph_schema import Graph
from algraph.utils.ordering import canonical_sequence

V = TypeVar("V")


def to_networkx(
    graph: Graph[V],
    *,
    config: Optional[AlgraphConfig] = None,
) -> nx.DiGraph:
    """
    Materialize the denoted graph as a networkx DiGraph.
    """
    cfg = resolve_config(config)
    g = nx.DiGraph()
    g.add_nodes_from(canonical_sequence(vertex_list(graph), cfg.canonical_order))
    g.add_edges_from(
        canonical_sequence(edge_list(graph, config=cfg), cfg.canonical_order)
    )
    return g


def from_networkx(g: nx.DiGraph) -> Graph:
    """
    Algebraic expression denoting the nodes and edges of `g`.

    Node and edge attributes are not carried over.
    """
    return overlay(from_list(g.nodes), from_edges(g.edges))


def adjacency_matrix(
    graph: Graph[V],
    order: Optional[Sequence[V]] = None,
    *,
    config: Optional[AlgraphConfig] = None,
) -> Tuple[np.ndarray, List[V]]:
    """
    Square 0/1 adjacency matrix and the vertex order of its rows and
    columns. Entry [i, j] is 1 when the graph has the edge
    order[i] -> order[j].
    """
    cfg = resolve_config(config)
    present = vertex_list(graph)

    if order is None:
        labels = canonical_sequence(present, cfg.canonical_order)
    else:
        labels = list(order)
        missing = set(present) - set(labels)
        if missing:
            raise ValueError(f"order is missing vertices: {sorted(map(repr, missing))}")
        if len(set(labels)) != len(labels):
            raise ValueError("order contains duplicate vertices")

    index = {v: i for i, v in enumerate(labels)}
    matrix = np.zeros((len(labels), len(labels)), dtype=np.int64)
    for s, t in edge_list(graph, config=cfg):
        matrix[index[s], index[t]] = 1

    return matrix, labels
