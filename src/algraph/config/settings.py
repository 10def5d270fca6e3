from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

EDGE_SEMANTICS = ("product", "overlay")
CANONICAL_ORDERS = ("sorted", "insertion")

# ---------------------------------------------------------------------
# Library policy
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class AlgraphConfig:
    """
    Controls the few behaviours of algraph that are a matter of policy
    rather than algebra.

    edge_semantics:
        "product" builds `edge(a, b)` as a product of two singletons, which
        denotes the edge a -> b. "overlay" keeps the legacy construction
        that yields two disconnected vertices.
    canonical_order:
        How `compact` and the export views sequence vertex and edge sets.
        "sorted" requires totally ordered vertices; "insertion" keeps the
        first-seen order of a left-to-right traversal.
    cross_product_warning:
        Edge count above which a single product expansion is logged
        as a warning.
    """

    edge_semantics: Literal["product", "overlay"] = "product"
    canonical_order: Literal["sorted", "insertion"] = "sorted"
    cross_product_warning: int = 1_000_000

    def __post_init__(self) -> None:
        if self.edge_semantics not in EDGE_SEMANTICS:
            raise ValueError(
                f"edge_semantics must be one of {EDGE_SEMANTICS}, "
                f"got {self.edge_semantics!r}"
            )
        if self.canonical_order not in CANONICAL_ORDERS:
            raise ValueError(
                f"canonical_order must be one of {CANONICAL_ORDERS}, "
                f"got {self.canonical_order!r}"
            )
        if (
            isinstance(self.cross_product_warning, bool)
            or not isinstance(self.cross_product_warning, int)
            or self.cross_product_warning <= 0
        ):
            raise ValueError(
                "cross_product_warning must be a positive integer, "
                f"got {self.cross_product_warning!r}"
            )
