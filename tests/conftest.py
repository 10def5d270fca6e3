from __future__ import annotations

from typing import List

import pytest

from algraph.config import reset_config
from algraph.graph.graph_schema import Graph

from samples import sample_graphs

ENV_VARS = (
    "ALGRAPH_EDGE_SEMANTICS",
    "ALGRAPH_CANONICAL_ORDER",
    "ALGRAPH_CROSS_PRODUCT_WARNING",
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture()
def graphs() -> List[Graph]:
    return sample_graphs()
