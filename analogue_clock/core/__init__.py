"""Core infrastructure for the analogue clock."""

from .config import (
    AppConfig,
    ClockConfig,
    FaceConfig,
    get_config,
    load_config,
    reload_config,
    set_config,
)
from .logging import setup_logging, get_logger
from .scheduler import ClockScheduler
from .exceptions import (
    AnalogueClockError,
    ConfigurationError,
    DisplayError,
    HandNotAttachedError,
)

__all__ = [
    "AppConfig",
    "ClockConfig",
    "FaceConfig",
    "get_config",
    "load_config",
    "reload_config",
    "set_config",
    "setup_logging",
    "get_logger",
    "ClockScheduler",
    "AnalogueClockError",
    "ConfigurationError",
    "DisplayError",
    "HandNotAttachedError",
]
