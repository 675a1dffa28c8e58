"""
Runtime settings for the file tree service.

Values come from FILETREE_* environment variables and fall back to the
defaults the desktop viewer shipped with (800px viewport, 10px padding,
20px labels).
"""

import os
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "FILETREE_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    """Layout and service settings"""
    viewport_height: float = Field(default=800.0, gt=0)
    horizontal_padding: float = Field(default=10.0, gt=0)
    text_size: int = Field(default=20, gt=0)
    char_width_ratio: float = Field(default=0.6, gt=0)
    follow_symlinks: bool = False
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def char_width(self) -> float:
        """Approximate label glyph width used when labels are requested"""
        return self.text_size * self.char_width_ratio


def load_settings(environ=None) -> Settings:
    """
    Build settings from environment variables.

    Only variables that are set override the defaults, so an empty
    environment yields Settings().

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Settings: Validated settings
    """
    environ = os.environ if environ is None else environ

    values = {}
    for field_name in Settings.model_fields:
        raw = environ.get(ENV_PREFIX + field_name.upper())
        if raw is not None:
            values[field_name] = raw

    return Settings(**values)


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, read once"""
    return load_settings()
