import logging

import pytest

from algraph.config import AlgraphConfig
from algraph.graph.graph_builder import (
    clique,
    edge,
    from_list,
    overlay,
    product,
    singleton,
)
from algraph.graph.graph_compact import compact
from algraph.graph.graph_expand import edges, vertices
from algraph.graph.graph_query import size, structurally_equal


def test_compact_removes_duplicate_vertices():
    g = compact(overlay(singleton(1), overlay(singleton(1), singleton(2))))
    assert vertices(g) == {1, 2}
    assert edges(g) == frozenset()
    assert structurally_equal(g, overlay(from_list([1, 2]), from_list([])))


def test_compact_preserves_denotation(graphs):
    for g in graphs:
        c = compact(g)
        assert vertices(c) == vertices(g)
        assert edges(c) == edges(g)


def test_compact_is_idempotent(graphs):
    for g in graphs:
        once = compact(g)
        assert structurally_equal(compact(once), once)


def test_compact_size_is_linear_in_vertices_and_edges(graphs):
    for g in graphs:
        c = compact(g)
        assert size(c) == len(vertices(g)) + 2 * len(edges(g)) + 2


def test_compact_collapses_redundant_expressions():
    g = edge(1, 2)
    for _ in range(40):
        g = overlay(g, product(g, singleton(1)))

    c = compact(g)
    assert vertices(c) == {1, 2}
    assert edges(c) == {(1, 2), (1, 1), (2, 1)}
    assert size(c) == 2 + 2 * 3 + 2


def test_compact_always_uses_product_edges():
    legacy = AlgraphConfig(edge_semantics="overlay")
    c = compact(clique([1, 2]), config=legacy)
    assert edges(c) == {(1, 2)}


def test_compact_sorted_order_requires_orderable_vertices():
    g = from_list([1, "a"])
    with pytest.raises(TypeError):
        compact(g)


def test_compact_insertion_order_accepts_unorderable_vertices():
    g = overlay(edge("a", 1), singleton(2.5))
    c = compact(g, config=AlgraphConfig(canonical_order="insertion"))
    assert vertices(c) == {"a", 1, 2.5}
    assert edges(c) == {("a", 1)}
    assert structurally_equal(
        c,
        overlay(from_list(["a", 1, 2.5]), overlay(edge("a", 1), from_list([]))),
    )


def test_compact_logs_sizes_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="algraph.compact"):
        compact(from_list([2, 1, 2]))

    assert "compacted" in caplog.text
