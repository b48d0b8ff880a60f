"""
Result storage module.

Persists analysis results keyed by listing, separately from the pure
analyzers.
"""

from .result_storage import (
    BaseResultStorage,
    InMemoryResultStorage,
    ResultStorage,
    SupabaseResultStorage,
    get_result_storage,
)

__all__ = [
    "BaseResultStorage",
    "InMemoryResultStorage",
    "ResultStorage",
    "SupabaseResultStorage",
    "get_result_storage",
]
