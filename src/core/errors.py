"""hashcombine exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Hashing stays total over its documented inputs; these errors mark the edges.
"""

from __future__ import annotations


class HashCombineError(Exception):
    """Base exception for all hashcombine failures."""


class HashCombineConfigError(HashCombineError):
    """Raised for invalid runtime configuration."""


class HashCombineInputError(HashCombineError):
    """Raised for values outside a hashing operation's input domain."""
