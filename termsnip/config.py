"""Configuration loading and validation using Pydantic."""

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from termsnip.domain import DEFAULT_LIMIT
from termsnip.infrastructure.config import YAMLConfigLoader

DEFAULT_CONFIG_PATH = "termsnip.yaml"
CONFIG_PATH_ENV = "TERMSNIP_CONFIG_PATH"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SnipConfig(BaseModel):
    """Session configuration."""

    limit: int = Field(default=DEFAULT_LIMIT, ge=1)
    fill: bool = False
    clear_on_exit: bool = False
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


def get_config_path() -> Path:
    """Get the config path, honoring TERMSNIP_CONFIG_PATH."""
    return Path(os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH))


def load_config(config_path: Path | str | None = None) -> SnipConfig:
    """Load configuration from YAML file.

    A missing file yields the defaults.
    """
    loader = YAMLConfigLoader(config_path if config_path is not None else get_config_path())
    return SnipConfig.model_validate(loader.load())
