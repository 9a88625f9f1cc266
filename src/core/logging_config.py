"""Structured logging configuration.

This module configures structlog once with a stable structured format,
filtered at the level read from the environment. Loggers built with an
explicit config carry their own level without touching the global setup.
"""

from __future__ import annotations

from typing import Any

import structlog

from core.config import EvolveConfig

_PROCESSORS = [
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.add_log_level,
    structlog.processors.JSONRenderer(),
]
_configured = False


def get_logger(name: str, config: EvolveConfig | None = None) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.
        config: Optional runtime configuration scoped to the returned logger.

    Returns:
        A structlog logger with JSON output.
    """
    if config is not None:
        return structlog.wrap_logger(
            structlog.PrintLogger(),
            processors=_PROCESSORS,
            wrapper_class=structlog.make_filtering_bound_logger(config.log_level_number),
            logger_name=name,
        )
    _configure_once()
    return structlog.get_logger(name)


def _configure_once() -> None:
    """Apply the process-wide structlog setup from environment config."""
    global _configured
    if _configured:
        return
    structlog.configure(
        processors=_PROCESSORS,
        wrapper_class=structlog.make_filtering_bound_logger(
            EvolveConfig.from_env().log_level_number
        ),
        cache_logger_on_first_use=True,
    )
    _configured = True
