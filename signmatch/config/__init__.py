"""Configuration management module for the phrase matcher."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config
from .models import (
    AppConfig,
    HistoryConfig,
    LogFormat,
    LogLevel,
    LoggingConfig,
    MatchingConfig,
    PhraseConfig,
    VariantRuleConfig,
)

__all__ = [
    # Loader functions
    "load_config",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "PhraseConfig",
    "VariantRuleConfig",
    "MatchingConfig",
    "HistoryConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
