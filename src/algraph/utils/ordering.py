from __future__ import annotations

from typing import Iterable, List, TypeVar

from algraph.config.settings import CANONICAL_ORDERS

T = TypeVar("T")


def canonical_sequence(items: Iterable[T], order: str) -> List[T]:
    """
    Deterministic sequence of `items`.

    "sorted" sorts, and propagates the TypeError raised for unorderable
    items. "insertion" keeps the given order, which callers pass as the
    first-seen order of a traversal.
    """
    if order == "sorted":
        return sorted(items)
    if order == "insertion":
        return list(items)
    raise ValueError(f"order must be one of {CANONICAL_ORDERS}, got {order!r}")
