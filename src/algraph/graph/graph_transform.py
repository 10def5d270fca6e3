from __future__ import annotations

from typing import Callable, Dict, List, Tuple, TypeVar

from algraph.graph.graph_builder import empty
from algraph.graph.graph_schema import (
    Empty,
    Graph,
    Overlay,
    Product,
    Vertex,
    walk,
)

V = TypeVar("V")
W = TypeVar("W")
B = TypeVar("B")


def foldg(
    on_empty: Callable[[], B],
    on_vertex: Callable[[V], B],
    on_overlay: Callable[[B, B], B],
    on_product: Callable[[B, B], B],
    graph: Graph[V],
) -> B:
    """
    Interpret `graph` bottom-up by replacing each constructor with the
    matching callback.

    Runs with an explicit stack, so expression depth is not bounded by
    the interpreter recursion limit. Each distinct node object is
    interpreted once per call, so shared sub-expressions are rebuilt
    once and stay shared in the result. Callbacks run left operand first.
    """
    results: Dict[int, B] = {}
    stack: List[Tuple[Graph[V], bool]] = [(graph, False)]

    while stack:
        node, children_done = stack.pop()
        key = id(node)
        if key in results:
            continue

        if isinstance(node, Empty):
            results[key] = on_empty()
        elif isinstance(node, Vertex):
            results[key] = on_vertex(node.value)
        elif isinstance(node, (Overlay, Product)):
            if children_done:
                left = results[id(node.left)]
                right = results[id(node.right)]
                combine = on_overlay if isinstance(node, Overlay) else on_product
                results[key] = combine(left, right)
            else:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
        else:
            raise TypeError(f"not a graph expression: {node!r}")

    return results[id(graph)]


def gmap(f: Callable[[V], W], graph: Graph[V]) -> Graph[W]:
    """
    Relabel every vertex with `f`, keeping the expression shape.

    Vertices that `f` sends to the same value stay separate nodes.
    """
    return foldg(empty, lambda v: Vertex(f(v)), Overlay, Product, graph)


def concat_map(f: Callable[[V], Graph[W]], graph: Graph[V]) -> Graph[W]:
    """
    Substitute the graph `f(v)` for every vertex `v`.

    Overlay and product structure is kept around the substituted graphs,
    so an edge x -> y becomes edges from every vertex of f(x) to every
    vertex of f(y).
    """

    def substitute(value: V) -> Graph[W]:
        result = f(value)
        if not isinstance(result, Graph):
            raise TypeError(
                f"concat_map callback must return a Graph, got {type(result).__name__}"
            )
        return result

    return foldg(empty, substitute, Overlay, Product, graph)


bind = concat_map


def fold(op: Callable[[V, B], B], initial: B, graph: Graph[V]) -> B:
    """
    Thread an accumulator through every vertex occurrence, left to right.

    A sub-expression used twice is folded twice; this is not a fold over
    the vertex set.
    """
    acc = initial
    for node in walk(graph):
        if isinstance(node, Vertex):
            acc = op(node.value, acc)
    return acc


def transpose(graph: Graph[V]) -> Graph[V]:
    """
    Reverse every edge by swapping the operands of each product.
    """
    return foldg(
        empty,
        Vertex,
        Overlay,
        lambda left, right: Product(right, left),
        graph,
    )
