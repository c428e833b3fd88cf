"""Settings loaded from rollex.toml."""
from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("rollex.toml")


class DisplaySettings(BaseModel):
    show_rolls: bool = True


class LoggingSettings(BaseModel):
    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseModel):
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    variables: dict[str, int | float] = Field(default_factory=dict)


def load_config(path: Path | str | None = None) -> Settings:
    """Load settings from a TOML file. A missing file gives the defaults."""
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        logger.debug("No config at %s, using defaults.", config_path)
        return Settings()
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return Settings.model_validate(data)
