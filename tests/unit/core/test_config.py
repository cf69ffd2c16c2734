"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import HashCombineConfig
from core.errors import HashCombineConfigError


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should default to non-strict INFO logging."""
    monkeypatch.delenv("HASHCOMBINE_STRICT", raising=False)
    monkeypatch.delenv("HASHCOMBINE_LOG_LEVEL", raising=False)

    config = HashCombineConfig.from_env()

    assert config == HashCombineConfig(strict=False, log_level="INFO")


def test_from_env_reads_strict_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should accept common boolean spellings."""
    monkeypatch.setenv("HASHCOMBINE_STRICT", " Yes ")

    config = HashCombineConfig.from_env()

    assert config.strict


def test_from_env_normalizes_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should upper-case the log level."""
    monkeypatch.setenv("HASHCOMBINE_LOG_LEVEL", "debug")

    config = HashCombineConfig.from_env()

    assert config.log_level == "DEBUG"


def test_from_env_raises_for_invalid_strict(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unrecognized boolean values."""
    monkeypatch.setenv("HASHCOMBINE_STRICT", "maybe")

    with pytest.raises(HashCombineConfigError, match="HASHCOMBINE_STRICT"):
        HashCombineConfig.from_env()


def test_from_env_raises_for_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unknown log levels."""
    monkeypatch.setenv("HASHCOMBINE_LOG_LEVEL", "verbose")

    with pytest.raises(HashCombineConfigError, match="HASHCOMBINE_LOG_LEVEL"):
        HashCombineConfig.from_env()
