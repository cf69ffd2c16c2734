"""Shared typed models.

This module defines the input shapes accepted by hashing operations
and the protocol for values that supply their own hash code.
"""

from __future__ import annotations

from typing import Iterable, Protocol, Union, runtime_checkable


@runtime_checkable
class HashCodeProvider(Protocol):
    """Value that supplies its own 32-bit hash code."""

    def hash_code(self) -> int:
        """Return this value's hash code."""


ByteInput = Union[bytes, bytearray, memoryview, Iterable[int]]
CharInput = Union[str, Iterable[Union[str, int]]]
