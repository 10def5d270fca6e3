from __future__ import annotations

import logging
from typing import Optional, TypeVar

from algraph.config import AlgraphConfig, resolve_config
from algraph.graph.graph_builder import from_edges, from_list, overlay
from algraph.graph.graph_expand import edge_list, vertex_list
from algraph.graph.graph_schema import Graph, walk_unique
from algraph.utils.ordering import canonical_sequence

V = TypeVar("V")


def compact(
    graph: Graph[V],
    *,
    config: Optional[AlgraphConfig] = None,
) -> Graph[V]:
    """
    Rebuild `graph` in normal form from its vertex and edge sets.

    The result is `overlay(from_list(vertices), overlay of edges)`, with
    both sequences in canonical order, so its size is linear in
    |V| + |E| however redundant the input was. Edges are always product
    edges, independent of the configured `edge` semantics.
    """
    cfg = resolve_config(config)

    vs = canonical_sequence(vertex_list(graph), cfg.canonical_order)
    es = canonical_sequence(edge_list(graph, config=cfg), cfg.canonical_order)

    result = overlay(from_list(vs), from_edges(es))

    logger = logging.getLogger("algraph.compact")
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "compacted nodes=%s -> %s vertices=%s edges=%s",
            sum(1 for _ in walk_unique(graph)),
            sum(1 for _ in walk_unique(result)),
            len(vs),
            len(es),
        )
    return result
