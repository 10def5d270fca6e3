"""
Utility functions for algraph.

Low-level helpers used across the system.
No graph algebra should live here.
"""

from algraph.utils.ordering import canonical_sequence

__all__ = [
    "canonical_sequence",
]
