# pyright: reportExplicitAny=false, reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Configuration container with typed access.

This module provides the main Config class that serves as the primary
interface for accessing gitprompt configuration values.
"""

# ruff: noqa: TC003  # Path needed at runtime for annotations
from pathlib import Path
from typing import Any, ClassVar, Self

import tomli_w
from pydantic import BaseModel, ConfigDict, PrivateAttr

from gitprompt.config._defaults import DEFAULT_CONFIG
from gitprompt.config._loader import (
    copy_value,
    deep_merge,
    parse_env_vars,
    read_toml_file,
)
from gitprompt.config._models._common import ConfigSource, ConfigSourceName
from gitprompt.config._models._logging import LoggingConfig
from gitprompt.config._models._prompt import PromptConfig


def _validate(data: dict[str, Any], source: str | None = None) -> None:
    # Deferred import to avoid circular dependency
    from gitprompt.config._validation import (  # noqa: PLC0415
        raise_if_validation_errors,
        validate_config,
    )

    raise_if_validation_errors(validate_config(data, source=source))


def _source_values(source: ConfigSource, cli_overrides: dict[str, Any]) -> Any:
    match source.name:
        case ConfigSourceName.DEFAULT:
            return source.values
        case ConfigSourceName.ENV:
            return parse_env_vars()
        case ConfigSourceName.CLI:
            return cli_overrides
        case _:
            if source.path is not None and source.exists:
                return read_toml_file(source.path)
            return {}


def _source_label(source: ConfigSource) -> str:
    return str(source.path) if source.path is not None else source.name.value


class Config(BaseModel):
    """Configuration container with typed access.

    Instances are immutable. Use the factory methods rather than the
    constructor.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    _data: dict[str, Any] = PrivateAttr(default_factory=dict)
    _logging: LoggingConfig = PrivateAttr(default_factory=LoggingConfig)
    _prompt: PromptConfig = PrivateAttr(default_factory=PromptConfig)

    def __init__(
        self,
        *,
        _data: dict[str, Any] | None = None,
        _logging: LoggingConfig | None = None,
        _prompt: PromptConfig | None = None,
    ) -> None:
        """Initialize configuration container.

        This constructor is intended for internal use. Use from_dict() or
        load() to create Config instances.

        Args:
            _data: The complete merged configuration dictionary.
            _logging: Parsed logging configuration section.
            _prompt: Parsed prompt configuration section.
        """
        super().__init__()
        self._data = _data if _data is not None else {}
        self._logging = _logging if _logging is not None else LoggingConfig()
        self._prompt = _prompt if _prompt is not None else PromptConfig()

    @classmethod
    def _from_merged(cls, merged: dict[str, Any]) -> Self:
        return cls(
            _data=merged,
            _logging=LoggingConfig.model_validate(merged.get("logging", {})),
            _prompt=PromptConfig.model_validate(merged.get("prompt", {})),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create configuration from a dictionary merged over the defaults.

        Args:
            data: Dictionary of configuration values.

        Returns:
            Configuration object from the dictionary.

        Raises:
            ConfigValidationError: If validation fails.
        """
        merged = deep_merge(DEFAULT_CONFIG, data)
        _validate(merged)
        return cls._from_merged(merged)

    @classmethod
    def load(
        cls,
        *,
        config_path: Path | None = None,
        include_env: bool = True,
        include_cli: bool = False,
        cli_overrides: dict[str, Any] | None = None,
    ) -> Self:
        """Load merged configuration from all sources.

        Merges defaults, the config file, environment variables and CLI
        overrides, in that order. Each source is validated on its own first,
        so an error names the file or source that holds the bad value.

        Args:
            config_path: Explicit config file replacing the user config file.
            include_env: Include environment variables as a source.
            include_cli: Include CLI overrides.
            cli_overrides: Dict of CLI argument overrides. Only used if
                include_cli is True.

        Returns:
            Merged configuration object.

        Raises:
            ConfigLoadError: If config files cannot be loaded.
            ConfigValidationError: If a source fails validation.
        """
        # Deferred import to avoid circular dependency
        from gitprompt.config._discovery import discover_sources  # noqa: PLC0415

        sources = discover_sources(
            config_path=config_path,
            include_env=include_env,
            include_cli=include_cli,
            cli_overrides=cli_overrides,
        )

        merged: dict[str, Any] = {}
        # Sources are discovered highest-to-lowest, so reverse for merging
        for source in reversed(sources):
            values = _source_values(source, cli_overrides or {})
            if not values:
                continue
            if source.name != ConfigSourceName.DEFAULT:
                _validate(deep_merge(DEFAULT_CONFIG, values), _source_label(source))
            merged = deep_merge(merged, values)

        return cls._from_merged(merged)

    @property
    def logging(self) -> LoggingConfig:
        """Return the logging configuration section."""
        return self._logging

    @property
    def prompt(self) -> PromptConfig:
        """Return the prompt configuration section."""
        return self._prompt

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the merged configuration."""
        return copy_value(self._data)

    def to_toml(self) -> str:
        """Render the merged configuration as TOML."""
        return tomli_w.dumps(self.to_dict())
