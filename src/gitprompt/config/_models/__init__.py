"""Configuration models.

This module provides Pydantic models for gitprompt configuration sections
and the main Config container class.
"""

from gitprompt.config._models._common import (
    ConfigSource,
    ConfigSourceName,
    LogFormat,
    LogLevel,
)
from gitprompt.config._models._config import Config
from gitprompt.config._models._logging import LoggingConfig
from gitprompt.config._models._prompt import PromptConfig

__all__ = [
    "Config",
    "ConfigSource",
    "ConfigSourceName",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "PromptConfig",
]
