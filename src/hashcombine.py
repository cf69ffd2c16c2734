"""Public API surface for hashcombine.

This module provides a stable import path for library users.
It re-exports the hash functions, combinator and typed config.
"""

from __future__ import annotations

from core.config import HashCombineConfig
from core.errors import HashCombineConfigError, HashCombineError, HashCombineInputError
from core.types import HashCodeProvider
from hashing.combinator import (
    HashCombinator,
    hash_bytes,
    hash_chars,
    hash_code,
    hash_sequence,
    hash_values,
)
from hashing.element_hash import element_hash_code

__all__ = [
    "HashCodeProvider",
    "HashCombinator",
    "HashCombineConfig",
    "HashCombineConfigError",
    "HashCombineError",
    "HashCombineInputError",
    "element_hash_code",
    "hash_bytes",
    "hash_chars",
    "hash_code",
    "hash_sequence",
    "hash_values",
]
