"""Runtime configuration model for hashcombine.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_LOG_LEVEL,
    FALSY_VALUES,
    LOG_LEVEL_ENV_VAR,
    STRICT_ENV_VAR,
    SUPPORTED_LOG_LEVELS,
    TRUTHY_VALUES,
)
from core.errors import HashCombineConfigError


@dataclass(frozen=True)
class HashCombineConfig:
    """Validated runtime configuration.

    Attributes:
        strict: Reject element types that have no stable hash code.
        log_level: Minimum level emitted by library loggers.
    """

    strict: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "HashCombineConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            HashCombineConfigError: If environment values are invalid.
        """
        strict_value = os.getenv(STRICT_ENV_VAR, "false")
        log_level_value = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
        return cls(
            strict=_parse_bool(STRICT_ENV_VAR, strict_value),
            log_level=_parse_log_level(log_level_value),
        )


def _parse_bool(name: str, raw_value: str) -> bool:
    """Parse a boolean environment value.

    Args:
        name: Environment variable name, used in error messages.
        raw_value: Raw string from environment.

    Returns:
        Parsed boolean.

    Raises:
        HashCombineConfigError: If value is not a recognized boolean.
    """
    normalized = raw_value.strip().lower()
    if normalized in TRUTHY_VALUES:
        return True
    if normalized in FALSY_VALUES:
        return False
    raise HashCombineConfigError(
        f"Invalid {name} value: "
        f"expected boolean, got '{raw_value}'. "
        f"Set {name} to one of {', '.join(TRUTHY_VALUES + FALSY_VALUES)}."
    )


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Upper-cased level name.

    Raises:
        HashCombineConfigError: If level is not supported.
    """
    normalized = raw_value.strip().upper()
    if normalized not in SUPPORTED_LOG_LEVELS:
        raise HashCombineConfigError(
            f"Invalid {LOG_LEVEL_ENV_VAR} value: "
            f"expected one of {', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'."
        )
    return normalized
