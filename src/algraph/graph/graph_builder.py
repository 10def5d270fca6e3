from __future__ import annotations

from typing import Iterable, Optional, Tuple, TypeVar

from algraph.config import AlgraphConfig, resolve_config
from algraph.graph.graph_schema import Empty, Graph, Overlay, Product, Vertex

V = TypeVar("V")

_EMPTY: Graph = Empty()


def _require_graph(value: object) -> Graph:
    if not isinstance(value, Graph):
        raise TypeError(f"expected a Graph, got {type(value).__name__}")
    return value


# ---------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------


def empty() -> Graph[V]:
    return _EMPTY


def singleton(value: V) -> Graph[V]:
    return Vertex(value)


vertex = singleton


def overlay(left: Graph[V], right: Graph[V]) -> Graph[V]:
    return Overlay(_require_graph(left), _require_graph(right))


def product(left: Graph[V], right: Graph[V]) -> Graph[V]:
    return Product(_require_graph(left), _require_graph(right))


connect = product


def edge(
    source: V,
    target: V,
    *,
    config: Optional[AlgraphConfig] = None,
) -> Graph[V]:
    """
    Graph with an edge from `source` to `target`.

    With the legacy "overlay" edge semantics the result holds both
    vertices but no edge between them.
    """
    if resolve_config(config).edge_semantics == "overlay":
        return Overlay(Vertex(source), Vertex(target))
    return Product(Vertex(source), Vertex(target))


def from_list(values: Iterable[V]) -> Graph[V]:
    """
    Vertex-only graph holding exactly `values`, built as a right fold
    of overlay starting from the empty graph.
    """
    acc: Graph[V] = _EMPTY
    for value in reversed(list(values)):
        acc = Overlay(Vertex(value), acc)
    return acc


# ---------------------------------------------------------------------
# Derived builders
# ---------------------------------------------------------------------


def overlays(graphs: Iterable[Graph[V]]) -> Graph[V]:
    acc: Graph[V] = _EMPTY
    for graph in reversed(list(graphs)):
        acc = Overlay(_require_graph(graph), acc)
    return acc


def connects(graphs: Iterable[Graph[V]]) -> Graph[V]:
    acc: Graph[V] = _EMPTY
    for graph in reversed(list(graphs)):
        acc = Product(_require_graph(graph), acc)
    return acc


def from_edges(pairs: Iterable[Tuple[V, V]]) -> Graph[V]:
    """
    Overlay of one edge per (source, target) pair.

    Always uses product edges, whatever the configured edge semantics.
    """
    return overlays(Product(Vertex(s), Vertex(t)) for s, t in pairs)


def clique(values: Iterable[V]) -> Graph[V]:
    return connects(Vertex(v) for v in values)


def star(centre: V, leaves: Iterable[V]) -> Graph[V]:
    return Product(Vertex(centre), from_list(leaves))
