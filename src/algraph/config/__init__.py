"""
Configuration layer for algraph.

The algebra itself has no knobs. Configuration only covers policy:
how `edge` is built, how canonical sequences are ordered, and when
large expansions are worth a warning.

Configuration in algraph is:
- Explicit (every consulting operation accepts `config=`)
- Typed (validated at construction time)
- Loadable from ALGRAPH_* environment variables
"""

from algraph.config.settings import AlgraphConfig
from algraph.config.loader import (
    DEFAULTS,
    load_config,
    get_config,
    get_config_or_defaults,
    reset_config,
    resolve_config,
)

__all__ = [
    "AlgraphConfig",
    "DEFAULTS",
    "load_config",
    "get_config",
    "get_config_or_defaults",
    "reset_config",
    "resolve_config",
]
