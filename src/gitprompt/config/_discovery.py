"""Config file path discovery.

This module determines the platform-specific user configuration path and
lists the configuration sources that feed into a merged Config.
"""

# ruff: noqa: TC003  # Path needed at runtime for annotations
from pathlib import Path
from typing import Any

import platformdirs

from ._defaults import DEFAULT_CONFIG
from ._models._common import ConfigSource, ConfigSourceName

APP_NAME = "gitprompt"


def get_user_config_path() -> Path:
    r"""Get platform-specific user config file path.

    - Linux: ``~/.config/gitprompt/config.toml``
    - macOS: ``~/Library/Application Support/gitprompt/config.toml``
    - Windows: ``%APPDATA%\gitprompt\config.toml``

    The path is returned regardless of whether the file exists.

    Returns:
        Path to the user config file for the current platform.
    """
    return platformdirs.user_config_path(APP_NAME) / "config.toml"


def _file_exists(path: Path) -> bool:
    """Check if a file exists, handling permission errors gracefully."""
    try:
        return path.is_file()
    except OSError:
        return False


def discover_sources(
    *,
    config_path: Path | None = None,
    include_env: bool = True,
    include_cli: bool = False,
    cli_overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
) -> list[ConfigSource]:
    """Discover all configuration sources.

    Sources are returned highest precedence first: CLI, ENV, the config
    file, DEFAULT. The config file is config_path when given, otherwise the
    user config path. File sources are listed even when the file is missing,
    with exists=False.

    Args:
        config_path: Explicit config file replacing the user config file.
        include_env: Include environment variables as a source.
        include_cli: Include CLI overrides as a source.
        cli_overrides: Dictionary of CLI argument overrides. Only used
            if include_cli is True.

    Returns:
        List of ConfigSource objects in precedence order (highest first).
    """
    sources: list[ConfigSource] = []

    if include_cli:
        sources.append(
            ConfigSource(
                name=ConfigSourceName.CLI,
                path=None,
                exists=bool(cli_overrides),
                values=cli_overrides or {},
            )
        )

    if include_env:
        # Values are parsed during loading
        sources.append(
            ConfigSource(name=ConfigSourceName.ENV, path=None, exists=True, values={})
        )

    if config_path is not None:
        file_source = ConfigSource(
            name=ConfigSourceName.FILE,
            path=config_path,
            exists=_file_exists(config_path),
            values={},
        )
    else:
        user_path = get_user_config_path()
        file_source = ConfigSource(
            name=ConfigSourceName.USER,
            path=user_path,
            exists=_file_exists(user_path),
            values={},
        )
    sources.append(file_source)

    sources.append(
        ConfigSource(
            name=ConfigSourceName.DEFAULT,
            path=None,
            exists=True,
            values=DEFAULT_CONFIG,
        )
    )

    return sources
