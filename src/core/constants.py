"""Core constants used across lineage modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DIRECTION_UPGRADE = "upgrade"
DIRECTION_DOWNGRADE = "downgrade"
ROOT_VERSION_ID = 0
LOG_LEVEL_ENV_VAR = "EVOLVE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "warning"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
