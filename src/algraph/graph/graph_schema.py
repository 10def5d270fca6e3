from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, List, Set, TypeVar

V = TypeVar("V")


class Graph(Generic[V]):
    """
    Algebraic graph expression.

    A graph is one of four immutable node kinds: Empty, Vertex, Overlay
    and Product. Edges are never stored; they are derived from products,
    so every edge connects vertices of the same expression.

    Equality is denotational: two expressions are equal when they denote
    the same vertex set and the same edge set, whatever their shape.
    Graphs over unhashable vertices cannot build those sets; they compare
    structurally instead, and cannot be hashed.
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented

        from algraph.graph.graph_expand import edges, vertices
        from algraph.graph.graph_query import structurally_equal

        try:
            return vertices(self) == vertices(other) and edges(self) == edges(other)
        except TypeError:
            return structurally_equal(self, other)

    def __hash__(self) -> int:
        from algraph.graph.graph_expand import edges, vertices

        return hash((vertices(self), edges(self)))

    # -------------------- Operators --------------------

    def __add__(self, other: "Graph[V]") -> "Graph[V]":
        if not isinstance(other, Graph):
            return NotImplemented
        return Overlay(self, other)

    def __mul__(self, other: "Graph[V]") -> "Graph[V]":
        if not isinstance(other, Graph):
            return NotImplemented
        return Product(self, other)

    def __contains__(self, value: Any) -> bool:
        from algraph.graph.graph_query import member

        return member(value, self)


@dataclass(frozen=True, eq=False)
class Empty(Graph[V]):
    """
    The graph with no vertices and no edges.
    """


@dataclass(frozen=True, eq=False)
class Vertex(Graph[V]):
    """
    A single vertex, no edges.
    """

    value: V


@dataclass(frozen=True, eq=False)
class Overlay(Graph[V]):
    """
    Union of the vertices and edges of both operands.
    """

    left: Graph[V]
    right: Graph[V]


@dataclass(frozen=True, eq=False)
class Product(Graph[V]):
    """
    Union of both operands plus an edge from every vertex of `left`
    to every vertex of `right`.
    """

    left: Graph[V]
    right: Graph[V]


# ---------------------------------------------------------------------
# Traversal primitives
# ---------------------------------------------------------------------


def walk(graph: Graph[V]) -> Iterator[Graph[V]]:
    """
    Yield every node occurrence, pre-order, left operand first.

    A sub-expression shared by several parents is yielded once per
    occurrence.
    """
    stack: List[Graph[V]] = [graph]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, (Overlay, Product)):
            stack.append(node.right)
            stack.append(node.left)
        elif not isinstance(node, (Empty, Vertex)):
            raise TypeError(f"not a graph expression: {node!r}")


def walk_unique(graph: Graph[V]) -> Iterator[Graph[V]]:
    """
    Yield every distinct node object once, pre-order, left operand first.
    """
    seen: Set[int] = set()
    stack: List[Graph[V]] = [graph]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        yield node
        if isinstance(node, (Overlay, Product)):
            stack.append(node.right)
            stack.append(node.left)
        elif not isinstance(node, (Empty, Vertex)):
            raise TypeError(f"not a graph expression: {node!r}")
