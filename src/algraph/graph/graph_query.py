from __future__ import annotations

from typing import Any, Dict, List, Tuple, TypeVar

from algraph.graph.graph_schema import (
    Empty,
    Graph,
    Overlay,
    Product,
    Vertex,
    walk,
    walk_unique,
)

V = TypeVar("V")


def is_empty(graph: Graph[V]) -> bool:
    """
    True when the expression holds no Vertex node.

    Decided on the expression tree alone; nothing is expanded.
    """
    return not any(isinstance(node, Vertex) for node in walk_unique(graph))


def member(value: Any, graph: Graph[V]) -> bool:
    """
    True when some Vertex node stores a value equal to `value`.

    Only equality is required of vertices.
    """
    return any(
        isinstance(node, Vertex) and node.value == value
        for node in walk_unique(graph)
    )


def has_edge(source: Any, target: Any, graph: Graph[V]) -> bool:
    """
    True when `graph` denotes the edge source -> target.

    Looks for a product whose left operand holds `source` and whose
    right operand holds `target`. No cross product is built and only
    equality is required of vertices, but each distinct product operand
    is scanned once, so the cost is O(products x operand size).
    """
    memo: Dict[Tuple[int, bool], bool] = {}

    def holds(node: Graph[V], on_left: bool) -> bool:
        key = (id(node), on_left)
        if key not in memo:
            memo[key] = member(source if on_left else target, node)
        return memo[key]

    for node in walk_unique(graph):
        if not isinstance(node, Product):
            continue
        if holds(node.left, True) and holds(node.right, False):
            return True
    return False


def size(graph: Graph[V]) -> int:
    """
    Number of leaf occurrences (Empty and Vertex) in the expression tree.
    """
    return sum(1 for node in walk(graph) if isinstance(node, (Empty, Vertex)))


def structurally_equal(left: Graph[V], right: Graph[V]) -> bool:
    """
    True when both expressions have the same shape and the same vertex
    values in the same positions. Stricter than `==`, which compares
    denotations.
    """
    stack: List[Tuple[Graph[V], Graph[V]]] = [(left, right)]
    while stack:
        a, b = stack.pop()
        if a is b:
            continue
        if type(a) is not type(b):
            return False
        if isinstance(a, Vertex):
            if a.value != b.value:
                return False
        elif isinstance(a, (Overlay, Product)):
            stack.append((a.right, b.right))
            stack.append((a.left, b.left))
    return True
