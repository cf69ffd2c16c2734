"""Null-safe hash combinator for multi-field hash codes.

This module folds values into order-sensitive signed 32-bit hash codes:
``acc = 1`` then ``acc = 31 * acc + element_hash`` left to right.

An absent reference sequence hashes like an empty one (``1``), while an
absent byte or character sequence hashes to ``0``. The asymmetry is kept
for compatibility with existing stored hash codes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from core.config import HashCombineConfig
from core.constants import ABSENT_HASH, HASH_SEED
from core.logging_config import configure_logging, get_logger
from core.types import ByteInput, CharInput
from hashing.element_hash import element_hash_code, iter_code_units, iter_signed_bytes
from hashing.int32 import fold_hash_codes

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class HashCombinator:
    """Hash combinator bound to one element hashing policy.

    Attributes:
        strict: Reject element types without a stable hash code.
    """

    strict: bool = False

    @classmethod
    def from_config(cls, config: HashCombineConfig) -> "HashCombinator":
        """Build a combinator and apply the configured log level.

        Args:
            config: Validated runtime configuration.

        Returns:
            Combinator honoring the configured strictness.
        """
        configure_logging(config.log_level)
        _LOGGER.debug("hash_combinator_configured", strict=config.strict)
        return cls(strict=config.strict)

    def hash_code(self, value: object) -> int:
        """Return the value's own hash code, or ``0`` when absent."""
        return element_hash_code(value, self.strict)

    def hash_values(self, *values: object) -> int:
        """Hash the positional values as one ordered sequence.

        ``hash_values(x)`` does not equal ``hash_code(x)``; a single value
        is still folded into the accumulator.
        """
        return self.hash_sequence(values)

    def hash_sequence(self, values: Iterable[object] | None) -> int:
        """Hash an ordered sequence of optional values.

        Args:
            values: Values in order. ``None`` is treated as empty.

        Returns:
            Combined hash code; ``1`` for an absent or empty sequence.
        """
        if values is None:
            return HASH_SEED
        return fold_hash_codes(element_hash_code(value, self.strict) for value in values)

    def hash_bytes(self, values: ByteInput | None) -> int:
        """Hash a byte sequence without per-element dispatch.

        Bytes are folded as signed values, so the result equals
        ``hash_sequence`` over the same signed integers.

        Args:
            values: Bytes, or integers in [-128, 255].

        Returns:
            Combined hash code; ``0`` when absent.

        Raises:
            HashCombineInputError: If an item is not a byte value.
        """
        if values is None:
            return ABSENT_HASH
        return fold_hash_codes(iter_signed_bytes(values))

    def hash_chars(self, values: CharInput | None) -> int:
        """Hash a character sequence as unsigned 16-bit code units.

        Args:
            values: Text, single characters, or integer code units.

        Returns:
            Combined hash code; ``0`` when absent.

        Raises:
            HashCombineInputError: If an item is not a character.
        """
        if values is None:
            return ABSENT_HASH
        return fold_hash_codes(iter_code_units(values))


_DEFAULT_COMBINATOR = HashCombinator()


def hash_code(value: object) -> int:
    """Return the value's own hash code, or ``0`` when absent."""
    return _DEFAULT_COMBINATOR.hash_code(value)


def hash_values(*values: object) -> int:
    """Hash the positional values as one ordered sequence.

    Useful for implementing ``hash_code()`` on objects with several fields::

        def hash_code(self) -> int:
            return hash_values(self.x, self.y, self.z)
    """
    return _DEFAULT_COMBINATOR.hash_sequence(values)


def hash_sequence(values: Iterable[object] | None) -> int:
    """Hash an ordered sequence; ``None`` hashes like an empty sequence."""
    return _DEFAULT_COMBINATOR.hash_sequence(values)


def hash_bytes(values: ByteInput | None) -> int:
    """Hash a byte sequence; ``None`` hashes to ``0``."""
    return _DEFAULT_COMBINATOR.hash_bytes(values)


def hash_chars(values: CharInput | None) -> int:
    """Hash a character sequence; ``None`` hashes to ``0``."""
    return _DEFAULT_COMBINATOR.hash_chars(values)
