from __future__ import annotations

import logging
from typing import Dict, FrozenSet, List, Optional, Tuple, TypeVar

from algraph.config import AlgraphConfig, resolve_config
from algraph.graph.graph_schema import Graph, Product, Vertex, walk_unique

V = TypeVar("V")


# ---------------------------------------------------------------------
# Ordered expansion
# ---------------------------------------------------------------------


def _vertex_keys(graph: Graph[V]) -> Dict[V, None]:
    # dict as an ordered set: first-seen, left to right
    return {
        node.value: None for node in walk_unique(graph) if isinstance(node, Vertex)
    }


def _edge_keys(
    graph: Graph[V],
    config: AlgraphConfig,
) -> Dict[Tuple[V, V], None]:
    logger = logging.getLogger("algraph.expansion")
    cache: Dict[int, Dict[V, None]] = {}
    collected: Dict[Tuple[V, V], None] = {}
    products = 0

    def operand_vertices(node: Graph[V]) -> Dict[V, None]:
        key = id(node)
        if key not in cache:
            cache[key] = _vertex_keys(node)
        return cache[key]

    for node in walk_unique(graph):
        if not isinstance(node, Product):
            continue
        products += 1

        sources = operand_vertices(node.left)
        targets = operand_vertices(node.right)

        cross = len(sources) * len(targets)
        if cross > config.cross_product_warning:
            logger.warning(
                "large product expansion: %s x %s = %s edges",
                len(sources),
                len(targets),
                cross,
            )

        for s in sources:
            for t in targets:
                collected[(s, t)] = None

    logger.debug("expanded edges=%s products=%s", len(collected), products)
    return collected


# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------


def vertices(graph: Graph[V]) -> FrozenSet[V]:
    return frozenset(_vertex_keys(graph))


def edges(
    graph: Graph[V],
    *,
    config: Optional[AlgraphConfig] = None,
) -> FrozenSet[Tuple[V, V]]:
    """
    Edge set denoted by `graph`.

    Each product contributes the full cross product of its operands'
    vertex sets; overlays only union what their operands contribute.
    """
    return frozenset(_edge_keys(graph, resolve_config(config, lenient=True)))


def vertex_list(graph: Graph[V]) -> List[V]:
    return list(_vertex_keys(graph))


def edge_list(
    graph: Graph[V],
    *,
    config: Optional[AlgraphConfig] = None,
) -> List[Tuple[V, V]]:
    return list(_edge_keys(graph, resolve_config(config, lenient=True)))


def vertex_count(graph: Graph[V]) -> int:
    return len(_vertex_keys(graph))


def edge_count(graph: Graph[V], *, config: Optional[AlgraphConfig] = None) -> int:
    return len(_edge_keys(graph, resolve_config(config, lenient=True)))


def adjacency(
    graph: Graph[V],
    *,
    config: Optional[AlgraphConfig] = None,
) -> Dict[V, FrozenSet[V]]:
    """
    Successor set of every vertex, isolated vertices included.
    """
    successors: Dict[V, set] = {v: set() for v in _vertex_keys(graph)}
    for s, t in _edge_keys(graph, resolve_config(config, lenient=True)):
        successors[s].add(t)
    return {v: frozenset(ts) for v, ts in successors.items()}
