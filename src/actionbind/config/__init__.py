"""Configuration module for actionbind."""

from actionbind.config.loader import ConfigLoader
from actionbind.config.models import (
    ActionBindConfig,
    LoggingConfig,
    NLUModelConfig,
    SessionConfig,
    SettingsConfig,
)

__all__ = [
    "ActionBindConfig",
    "ConfigLoader",
    "LoggingConfig",
    "NLUModelConfig",
    "SessionConfig",
    "SettingsConfig",
]
