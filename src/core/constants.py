"""Core constants used across hashcombine modules.

This module centralizes the fold parameters and integer bounds.
Keeping values here avoids magic literals in hashing logic.
"""

from __future__ import annotations

HASH_SEED = 1
HASH_MULTIPLIER = 31
ABSENT_HASH = 0
STRING_HASH_SEED = 0
INT32_BITS = 32
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT32_MASK = 0xFFFFFFFF
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
INT64_MASK = 0xFFFFFFFFFFFFFFFF
BYTE_MIN = -128
BYTE_MAX = 255
SIGNED_BYTE_MAX = 127
CHAR_MAX = 0xFFFF
CANONICAL_NAN_BITS = 0x7FF8000000000000
STRICT_ENV_VAR = "HASHCOMBINE_STRICT"
LOG_LEVEL_ENV_VAR = "HASHCOMBINE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
TRUTHY_VALUES = ("1", "true", "yes", "on")
FALSY_VALUES = ("0", "false", "no", "off")
