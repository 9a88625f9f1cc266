"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import EvolveConfig
from core.errors import EvolveConfigError


def test_from_env_defaults_to_warning(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to warning level when unset."""
    monkeypatch.delenv("EVOLVE_LOG_LEVEL", raising=False)

    config = EvolveConfig.from_env()

    assert config.log_level == "warning"


def test_from_env_normalizes_level_name(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should accept level names in any case."""
    monkeypatch.setenv("EVOLVE_LOG_LEVEL", " DEBUG ")

    config = EvolveConfig.from_env()

    assert config.log_level == "debug"


def test_from_env_raises_for_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unsupported level names."""
    monkeypatch.setenv("EVOLVE_LOG_LEVEL", "verbose")

    with pytest.raises(EvolveConfigError):
        EvolveConfig.from_env()


def test_log_level_number_maps_to_stdlib_level() -> None:
    """Numeric level should match stdlib logging values."""
    config = EvolveConfig(log_level="info")

    assert config.log_level_number == 20
