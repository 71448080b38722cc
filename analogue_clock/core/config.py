"""Configuration loading and validation for the analogue clock."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Optional

import yaml
from PIL import ImageColor
from pydantic import BaseModel, Field, field_validator

from .exceptions import ConfigurationError

_config: Optional["AppConfig"] = None

_ENV_PATTERN = re.compile(r"\$\{(\w+)\}")


class ClockConfig(BaseModel):
    """Hand motion and geometry."""

    sweep_seconds: bool = False
    tick_interval_seconds: float = 1.0
    # Ratios of the faceplate radius
    hour_hand_length: float = 0.53
    minute_hand_length: float = 0.68
    second_hand_length: float = 0.95

    @field_validator("tick_interval_seconds")
    @classmethod
    def validate_interval(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("tick_interval_seconds must be positive")
        return v

    @field_validator("hour_hand_length", "minute_hand_length", "second_hand_length")
    @classmethod
    def validate_hand_length(cls, v: float) -> float:
        if not 0 < v <= 1:
            raise ValueError("hand length ratios must be in (0, 1]")
        return v


class FaceConfig(BaseModel):
    """Clock face styling."""

    faceplate_color: str = "rgb(179, 179, 179)"
    dial_color: str = "black"
    hand_color: str = "white"
    second_hand_color: str = "rgb(255, 140, 0)"
    axis_color: str = "black"
    png_size: int = 300

    @field_validator(
        "faceplate_color",
        "dial_color",
        "hand_color",
        "second_hand_color",
        "axis_color",
    )
    @classmethod
    def validate_color(cls, v: str) -> str:
        # Same parser the PNG snapshot uses
        ImageColor.getrgb(v)
        return v

    @field_validator("png_size")
    @classmethod
    def validate_png_size(cls, v: int) -> int:
        if v < 16:
            raise ValueError("png_size must be at least 16 pixels")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: Optional[str] = None


class AppConfig(BaseModel):
    """Root configuration model."""

    clock: ClockConfig = Field(default_factory=ClockConfig)
    face: FaceConfig = Field(default_factory=FaceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _substitute_env_vars(config_str: str) -> str:
    """
    Replace ${VAR} with environment variable values.

    Comment lines are left untouched so documented placeholders don't
    have to be set.

    Raises:
        ConfigurationError: If a referenced env var is not set
    """

    def replacer(match: re.Match) -> str:
        var_name = match.group(1)
        value = os.environ.get(var_name)
        if value is None:
            raise ConfigurationError(f"Missing environment variable: {var_name}")
        return value

    lines = []
    for line in config_str.split("\n"):
        if line.lstrip().startswith("#"):
            lines.append(line)
        else:
            lines.append(_ENV_PATTERN.sub(replacer, line))
    return "\n".join(lines)


def load_config(path: Path = Path("config.yaml")) -> AppConfig:
    """
    Load and validate configuration from a YAML file.

    Args:
        path: Path to config.yaml

    Returns:
        Validated AppConfig instance

    Raises:
        ConfigurationError: If the file is missing or invalid
    """
    global _config

    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")

    try:
        data = yaml.safe_load(_substitute_env_vars(path.read_text()))
        _config = AppConfig.model_validate(data or {})
        return _config
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file: {e}")
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Failed to load config: {e}")


def set_config(config: AppConfig) -> None:
    """Install a config directly (startup fallback and tests)."""
    global _config
    _config = config


def get_config() -> AppConfig:
    """
    Get the current configuration.

    Raises:
        ConfigurationError: If config hasn't been loaded yet
    """
    if _config is None:
        raise ConfigurationError("Configuration not loaded. Call load_config() first.")
    return _config


def reload_config(path: Path = Path("config.yaml")) -> AppConfig:
    """
    Hot-reload configuration from disk.

    The previous config stays active if the new file fails to load.
    """
    return load_config(path)
