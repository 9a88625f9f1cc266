"""Runtime configuration model for lineage.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os

from core.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR, SUPPORTED_LOG_LEVELS
from core.errors import EvolveConfigError


@dataclass(frozen=True)
class EvolveConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum level emitted by module loggers.
    """

    log_level: str

    @classmethod
    def from_env(cls) -> "EvolveConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            EvolveConfigError: If environment values are invalid.
        """
        raw_level = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
        return cls(log_level=_parse_log_level(raw_level))

    @property
    def log_level_number(self) -> int:
        """Return the stdlib numeric level for the configured name."""
        return logging.getLevelName(self.log_level.upper())


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Normalized lowercase level name.

    Raises:
        EvolveConfigError: If value is not a supported level.
    """
    level = raw_value.strip().lower()
    if level not in SUPPORTED_LOG_LEVELS:
        raise EvolveConfigError(
            f"Invalid {LOG_LEVEL_ENV_VAR} value: "
            f"expected one of {', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'. "
            f"Set {LOG_LEVEL_ENV_VAR} to a supported level name."
        )
    return level
