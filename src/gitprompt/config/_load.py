# ruff: noqa: TC003  # Path needed at runtime for annotations
"""Error-tolerant configuration loading for the CLI."""

import os
import sys
from pathlib import Path

from gitprompt.exceptions import ConfigError, ConfigLoadError

from ._models import Config

STRICT_CONFIG_ENV = "GITPROMPT_STRICT_CONFIG"


def safe_load_config(
    *,
    config_path: Path | None = None,
    cli_overrides: dict[str, object] | None = None,
) -> tuple[Config, str | None]:
    """Load configuration with error handling.

    A broken config must not break the shell prompt, so by default load
    errors are reported on stderr and defaults are used. Setting
    GITPROMPT_STRICT_CONFIG=1 re-raises them instead.

    An explicit config_path (--config flag) must exist.

    Args:
        config_path: Explicit path to config file.
        cli_overrides: CLI argument overrides to pass to Config.load().

    Returns:
        Tuple of (Config, error_message). On success, error_message is None.

    Raises:
        ConfigLoadError: If config_path is given but does not exist.
        ConfigError: If loading fails in strict mode.
    """
    if config_path is not None and not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise ConfigLoadError(msg, path=config_path)

    try:
        config = Config.load(
            config_path=config_path,
            include_env=True,
            include_cli=cli_overrides is not None,
            cli_overrides=cli_overrides,
        )
    except (ConfigError, OSError) as e:
        if os.environ.get(STRICT_CONFIG_ENV, "0") == "1":
            raise
        error_msg = f"Failed to load config: {e}"
        print(f"Warning: {error_msg}", file=sys.stderr)  # noqa: T201
        return Config.from_dict({}), error_msg
    else:
        return config, None
