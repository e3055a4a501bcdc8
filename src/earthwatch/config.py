"""
Application settings.

Values come from ``EARTHWATCH_*`` environment variables, falling back to the
defaults declared on :class:`Settings`.  Use :func:`get_settings` rather than
instantiating directly so the environment is read once per process.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

ENV_PREFIX = "EARTHWATCH_"


class Settings(BaseModel):
    """Runtime configuration."""

    model_config = {"str_strip_whitespace": True, "frozen": True}

    app_name: str = "earthwatch"
    app_env: str = "development"
    debug: bool = False
    default_location: str = Field(default="Lima, Peru", description="Preset used when none given")
    http_timeout: float = Field(default=30.0, gt=0)
    site_dir: Path = Path("site")
    api_port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        """Build settings from ``EARTHWATCH_*`` variables (blank values are ignored)."""
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for name in cls.model_fields:
            raw = env.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None and raw.strip():
                values[name] = raw.strip()
        return cls(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings."""
    return Settings.from_env()
