from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from dynaconf import Dynaconf

from algraph.config.settings import AlgraphConfig

DEFAULTS = {
    # "product" (edge a -> b) or "overlay" (legacy, two isolated vertices)
    "EDGE_SEMANTICS": "product",
    # Sequencing used by compact and the export views
    "CANONICAL_ORDER": "sorted",
    # Single-product edge count that triggers a warning
    "CROSS_PRODUCT_WARNING": 1_000_000,
}


def load_config() -> AlgraphConfig:
    """
    Build an AlgraphConfig from ALGRAPH_* environment variables
    (and a .env file, when present), falling back to DEFAULTS.
    """
    settings = Dynaconf(
        envvar_prefix="ALGRAPH",
        load_dotenv=True,
        settings_files=[],
    )

    config = AlgraphConfig(
        edge_semantics=str(
            settings.get("EDGE_SEMANTICS", DEFAULTS["EDGE_SEMANTICS"])
        ),
        canonical_order=str(
            settings.get("CANONICAL_ORDER", DEFAULTS["CANONICAL_ORDER"])
        ),
        cross_product_warning=int(
            settings.get("CROSS_PRODUCT_WARNING", DEFAULTS["CROSS_PRODUCT_WARNING"])
        ),
    )
    logging.getLogger("algraph.config").debug(
        "loaded config edge_semantics=%s canonical_order=%s cross_product_warning=%s",
        config.edge_semantics,
        config.canonical_order,
        config.cross_product_warning,
    )
    return config


@lru_cache
def get_config() -> AlgraphConfig:
    return load_config()


@lru_cache
def get_config_or_defaults() -> AlgraphConfig:
    """
    Like get_config, but an invalid environment is logged on
    algraph.config and replaced by the defaults instead of raising.
    """
    try:
        return get_config()
    except ValueError as exc:
        logging.getLogger("algraph.config").warning(
            "invalid ALGRAPH_* configuration, using defaults: %s", exc
        )
        return AlgraphConfig()


def reset_config() -> None:
    get_config.cache_clear()
    get_config_or_defaults.cache_clear()


def resolve_config(
    config: Optional[AlgraphConfig] = None,
    *,
    lenient: bool = False,
) -> AlgraphConfig:
    if config is not None:
        return config
    return get_config_or_defaults() if lenient else get_config()
