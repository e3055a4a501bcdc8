"""Logging setup for command-line runs.

Flows report progress with ``print`` under Prefect's ``log_prints``; library
modules use ``logging.getLogger(__name__)``.  This wires the latter to stderr.
"""

from __future__ import annotations

from logging.config import dictConfig

from earthwatch.config import get_settings

_configured = False


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging once per process."""
    global _configured
    if _configured:
        return

    log_level = level if level is not None else get_settings().log_level

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "plain": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                }
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "level": log_level,
                    "formatter": "plain",
                }
            },
            "root": {"handlers": ["default"], "level": log_level},
        }
    )

    _configured = True
