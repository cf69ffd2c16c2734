"""Two's-complement 32-bit integer helpers."""

from __future__ import annotations

from typing import Iterable

from core.constants import (
    HASH_MULTIPLIER,
    HASH_SEED,
    INT32_BITS,
    INT32_MASK,
    INT64_MASK,
    SIGNED_BYTE_MAX,
)


def to_int32(value: int) -> int:
    """Wrap an arbitrary integer into the signed 32-bit range."""
    value &= INT32_MASK
    if value >> (INT32_BITS - 1):
        return value - (1 << INT32_BITS)
    return value


def fold_int64(value: int) -> int:
    """Fold a 64-bit pattern into 32 bits as ``u ^ (u >>> 32)``."""
    unsigned = value & INT64_MASK
    return to_int32(unsigned ^ (unsigned >> INT32_BITS))


def sign_extend_byte(value: int) -> int:
    """Map an unsigned byte in [128, 255] to its signed value."""
    if value > SIGNED_BYTE_MAX:
        return value - 256
    return value


def fold_hash_codes(hash_codes: Iterable[int]) -> int:
    """Fold element hash codes left to right as ``acc = 31 * acc + code``.

    Args:
        hash_codes: Element hash codes in sequence order.

    Returns:
        Combined signed 32-bit hash code, ``1`` for an empty sequence.
    """
    accumulator = HASH_SEED
    for hash_code in hash_codes:
        accumulator = to_int32(HASH_MULTIPLIER * accumulator + hash_code)
    return accumulator
