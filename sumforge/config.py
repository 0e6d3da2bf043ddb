"""
SumForge configuration.

Settings are read from an optional YAML file; anything left out keeps
its default.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SumforgeConfig(BaseModel):
    """Settings for the command-line tools."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_file: str = Field(
        default="go.sum", description="go.sum path used when none is given"
    )
    cleanup_on_write: bool = Field(
        default=True, description="Remove dropped entries before writing"
    )
    missing_ok: bool = Field(
        default=True, description="Treat a missing go.sum as empty"
    )
    log_level: str = Field(default="WARNING", description="Logging level name")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)

    @classmethod
    def load(cls, path: Path) -> SumforgeConfig:
        """
        Load configuration from a YAML file.

        Args:
            path: Path to config YAML.

        Returns:
            Loaded config. An empty document yields defaults.
        """
        content = path.read_text()
        data = yaml.safe_load(content) or {}
        return cls.model_validate(data)


def load_config(path: str | Path | None = None) -> SumforgeConfig:
    """
    Load configuration, falling back to defaults when no path is given.

    Raises:
        FileNotFoundError: If path is given but does not exist.
        pydantic.ValidationError: If the file has invalid values.
    """
    if path is None:
        return SumforgeConfig()
    return SumforgeConfig.load(Path(path))
