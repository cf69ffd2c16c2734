"""Stable per-element hash codes.

This module defines the hash code a single value contributes to a fold.
The interpreter's builtin ``hash()`` is salted for text and bytes, so each
common type gets a process-independent 32-bit definition instead.
"""

from __future__ import annotations

import struct
from typing import Callable, Iterator
import weakref

from core.constants import (
    ABSENT_HASH,
    BYTE_MAX,
    BYTE_MIN,
    CANONICAL_NAN_BITS,
    CHAR_MAX,
    HASH_MULTIPLIER,
    INT32_BITS,
    INT32_MASK,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    STRING_HASH_SEED,
)
from core.errors import HashCombineInputError
from core.logging_config import get_logger
from core.types import ByteInput, CharInput
from hashing.int32 import fold_hash_codes, fold_int64, sign_extend_byte, to_int32

_LOGGER = get_logger(__name__)
_warned_fallback_types: weakref.WeakSet[type] = weakref.WeakSet()


def element_hash_code(value: object, strict: bool = False) -> int:
    """Return the stable 32-bit hash code of one value.

    Values that compare equal across ``bool``, ``int`` and integral
    ``float`` share a hash code, so ``1``, ``1.0`` and ``True`` agree.

    Args:
        value: Value to hash. ``None`` hashes to ``0``.
        strict: Reject types without a stable definition instead of
            falling back to the builtin ``hash()``.

    Returns:
        Signed 32-bit hash code.

    Raises:
        HashCombineInputError: If ``strict`` and the type has no stable
            hash code, or a ``hash_code()`` method returns a non-integer.
    """
    if value is None:
        return ABSENT_HASH
    provider = getattr(value, "hash_code", None)
    if callable(provider):
        return _provided_hash_code(value, provider, strict)
    if isinstance(value, int):
        return _int_hash_code(value)
    if isinstance(value, float):
        return _float_hash_code(value)
    if isinstance(value, str):
        return _str_hash_code(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return fold_hash_codes(iter_signed_bytes(value))
    if isinstance(value, (list, tuple)):
        return fold_hash_codes(element_hash_code(item, strict) for item in value)
    if isinstance(value, (set, frozenset)):
        return to_int32(sum(element_hash_code(item, strict) for item in value))
    if isinstance(value, dict):
        return to_int32(
            sum(
                element_hash_code(key, strict) ^ element_hash_code(item, strict)
                for key, item in value.items()
            )
        )
    return _fallback_hash_code(value, strict)


def iter_signed_bytes(values: ByteInput) -> Iterator[int]:
    """Yield signed byte values from bytes or an iterable of integers.

    Integers in [128, 255] are read as the unsigned spelling of a negative
    byte and sign-extended.

    Raises:
        HashCombineInputError: If an item is not an integer in [-128, 255].
    """
    if isinstance(values, memoryview):
        values = values.tobytes()
    for item in values:
        if isinstance(item, bool) or not isinstance(item, int):
            raise HashCombineInputError(
                f"Invalid byte value: expected integer, got {type(item).__name__}."
            )
        if not BYTE_MIN <= item <= BYTE_MAX:
            raise HashCombineInputError(
                f"Invalid byte value: expected integer in [{BYTE_MIN}, {BYTE_MAX}], got {item}."
            )
        yield sign_extend_byte(item)


def iter_code_units(values: CharInput) -> Iterator[int]:
    """Yield unsigned 16-bit code units from text or character items.

    Characters outside the Basic Multilingual Plane yield their
    surrogate pair.

    Raises:
        HashCombineInputError: If an item is not one character or an
            integer code unit in [0, 0xFFFF].
    """
    if isinstance(values, str):
        yield from _utf16_units(values)
        return
    for item in values:
        if isinstance(item, str):
            if len(item) != 1:
                raise HashCombineInputError(
                    f"Invalid character: expected a single character, got {item!r}."
                )
            yield from _utf16_units(item)
        elif isinstance(item, int) and not isinstance(item, bool):
            if not 0 <= item <= CHAR_MAX:
                raise HashCombineInputError(
                    f"Invalid code unit: expected integer in [0, {CHAR_MAX:#x}], got {item}."
                )
            yield item
        else:
            raise HashCombineInputError(
                f"Invalid character: expected str or int, got {type(item).__name__}."
            )


def _utf16_units(text: str) -> Iterator[int]:
    encoded = text.encode("utf-16-be", "surrogatepass")
    for index in range(0, len(encoded), 2):
        yield (encoded[index] << 8) | encoded[index + 1]


def _provided_hash_code(value: object, provider: Callable[[], object], strict: bool) -> int:
    try:
        hash_code = provider()
    except TypeError as error:
        if strict:
            raise HashCombineInputError(
                f"{type(value).__name__}.hash_code() cannot be called without arguments."
            ) from error
        return _fallback_hash_code(value, strict)
    if isinstance(hash_code, bool) or not isinstance(hash_code, int):
        raise HashCombineInputError(
            f"{type(value).__name__}.hash_code() must return int, "
            f"got {type(hash_code).__name__}."
        )
    return to_int32(hash_code)


def _int_hash_code(value: int) -> int:
    if INT32_MIN <= value <= INT32_MAX:
        return value
    if INT64_MIN <= value <= INT64_MAX:
        return fold_int64(value)
    magnitude = abs(value)
    word_count = (magnitude.bit_length() + INT32_BITS - 1) // INT32_BITS
    hash_code = 0
    for word_index in reversed(range(word_count)):
        word = (magnitude >> (word_index * INT32_BITS)) & INT32_MASK
        hash_code = to_int32(HASH_MULTIPLIER * hash_code + word)
    return to_int32(hash_code if value > 0 else -hash_code)


def _float_hash_code(value: float) -> int:
    if value != value:
        return fold_int64(CANONICAL_NAN_BITS)
    if value.is_integer():
        return _int_hash_code(int(value))
    (bits,) = struct.unpack(">q", struct.pack(">d", value))
    return fold_int64(bits)


def _str_hash_code(value: str) -> int:
    hash_code = STRING_HASH_SEED
    for unit in _utf16_units(value):
        hash_code = to_int32(HASH_MULTIPLIER * hash_code + unit)
    return hash_code


def _fallback_hash_code(value: object, strict: bool) -> int:
    value_type = type(value)
    if strict:
        raise HashCombineInputError(
            f"No stable hash code for type {value_type.__name__}. "
            "Implement hash_code() or disable strict mode."
        )
    if value_type not in _warned_fallback_types:
        _warned_fallback_types.add(value_type)
        _LOGGER.warning("element_hash_fallback", value_type=value_type.__qualname__)
    try:
        builtin_hash = hash(value)
    except TypeError as error:
        raise HashCombineInputError(
            f"Unhashable element of type {value_type.__name__}."
        ) from error
    return fold_int64(builtin_hash)

