"""
Algebraic laws of overlay and product, checked denotationally on
every combination of a small set of sample graphs.
"""

import itertools

import pytest

from algraph.graph.graph_builder import empty, from_list, overlay, product, singleton
from algraph.graph.graph_expand import edges, vertices
from algraph.graph.graph_compact import compact

from samples import sample_graphs

SAMPLES = sample_graphs()
PAIRS = list(itertools.product(range(len(SAMPLES)), repeat=2))
TRIPLES = list(itertools.product(range(0, len(SAMPLES), 2), repeat=3))


@pytest.mark.parametrize("i", range(len(SAMPLES)))
def test_empty_is_identity(i):
    a = SAMPLES[i]
    assert overlay(a, empty()) == a
    assert overlay(empty(), a) == a
    assert product(a, empty()) == a
    assert product(empty(), a) == a


@pytest.mark.parametrize("i", range(len(SAMPLES)))
def test_overlay_is_idempotent(i):
    a = SAMPLES[i]
    assert overlay(a, a) == a


@pytest.mark.parametrize("i,j", PAIRS)
def test_overlay_is_commutative(i, j):
    a, b = SAMPLES[i], SAMPLES[j]
    assert overlay(a, b) == overlay(b, a)


@pytest.mark.parametrize("i,j,k", TRIPLES)
def test_overlay_is_associative(i, j, k):
    a, b, c = SAMPLES[i], SAMPLES[j], SAMPLES[k]
    assert overlay(a, overlay(b, c)) == overlay(overlay(a, b), c)


@pytest.mark.parametrize("i,j,k", TRIPLES)
def test_product_is_associative(i, j, k):
    a, b, c = SAMPLES[i], SAMPLES[j], SAMPLES[k]
    assert product(a, product(b, c)) == product(product(a, b), c)


@pytest.mark.parametrize("i,j,k", TRIPLES)
def test_product_distributes_over_overlay(i, j, k):
    a, b, c = SAMPLES[i], SAMPLES[j], SAMPLES[k]

    left = product(a, overlay(b, c))
    assert vertices(left) == vertices(product(a, b)) | vertices(product(a, c))
    assert edges(left) == edges(product(a, b)) | edges(product(a, c))

    right = product(overlay(a, b), c)
    assert right == overlay(product(a, c), product(b, c))


@pytest.mark.parametrize("i,j,k", TRIPLES)
def test_decomposition(i, j, k):
    a, b, c = SAMPLES[i], SAMPLES[j], SAMPLES[k]
    abc = product(a, product(b, c))
    assert abc == overlay(overlay(product(a, b), product(a, c)), product(b, c))


def test_product_is_not_commutative():
    a, b = singleton(1), singleton(2)
    assert product(a, b) != product(b, a)
    assert vertices(product(a, b)) == vertices(product(b, a))


def test_equal_graphs_hash_equally():
    shapes = {
        from_list([1, 2]),
        from_list([2, 1, 1]),
        overlay(singleton(2), singleton(1)),
        compact(from_list([1, 2])),
    }
    assert len(shapes) == 1


def test_operators():
    a, b = singleton("a"), singleton("b")
    assert a + b == overlay(a, b)
    assert a * b == product(a, b)
    assert edges(a * b + b * a) == {("a", "b"), ("b", "a")}


def test_operators_reject_non_graphs():
    with pytest.raises(TypeError):
        singleton(1) + 1
    with pytest.raises(TypeError):
        singleton(1) * "x"
    assert (singleton(1) == 1) is False


def test_unhashable_vertices_compare_structurally():
    assert singleton([1]) == singleton([1])
    assert singleton([1]) != singleton([2])
    assert product(singleton([1]), singleton({"k": 1})) == product(
        singleton([1]), singleton({"k": 1})
    )
    assert overlay(singleton([1]), singleton([2])) != product(
        singleton([1]), singleton([2])
    )
    with pytest.raises(TypeError):
        hash(singleton([1]))
