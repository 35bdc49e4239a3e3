"""Utility functions and constants for seedroll."""

from .constants import (
    CYCLE_LIMIT_DEFAULT,
    DEFAULT_CURVE,
    DRAW_COUNT_DEFAULT,
    PLUCK_LIMIT_DEFAULT,
    STRING_HASH_START,
    UINT32_MASK,
)
from .hashing import string_hash

__all__ = [
    "CYCLE_LIMIT_DEFAULT",
    "DEFAULT_CURVE",
    "DRAW_COUNT_DEFAULT",
    "PLUCK_LIMIT_DEFAULT",
    "STRING_HASH_START",
    "UINT32_MASK",
    "string_hash",
]
