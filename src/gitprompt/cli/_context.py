# pyright: reportUnusedCallResult=false
# ruff: noqa: TC002, TC003  # Runtime imports needed for dataclass fields
"""CLI context for global state management.

The CLIContext is set once by the meta app after global options are parsed
and made available to all commands via contextvars.
"""

import contextvars
from dataclasses import dataclass, field
from pathlib import Path
from typing import Self

from structlog.typing import FilteringBoundLogger

from gitprompt.config import Config

# Thread-safe context variable for CLIContext
_current_cli_context: "contextvars.ContextVar[CLIContext | None]" = (
    contextvars.ContextVar("cli_context", default=None)
)


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global CLI context with configuration and options.

    Attributes:
        config: Loaded configuration object.
        verbose: Report discovery failures on stderr.
        quiet: Suppress error messages on stderr.
        no_color: Disable colored output.
        config_path: Explicit config file given with --config.
        config_error: Error message if config loading failed.
        logger: Structured logger for CLI commands (writes to file only).
    """

    config: Config = field(repr=False)
    verbose: bool = False
    quiet: bool = False
    no_color: bool = False
    config_path: Path | None = None
    config_error: str | None = None
    logger: FilteringBoundLogger | None = field(default=None, repr=False)

    @property
    def color(self) -> bool:
        """Whether output should be styled."""
        return self.config.prompt.color and not self.no_color

    @classmethod
    def get_current(cls) -> Self:
        """Get current active CLIContext, or create a default if not set.

        Returns:
            The currently active CLIContext, or a default instance if none is set.
        """
        ctx = _current_cli_context.get()
        if ctx is not None:
            return ctx
        return cls(config=Config.from_dict({}))

    @classmethod
    def set_current(cls, ctx: Self) -> None:
        """Set the current active CLIContext."""
        _current_cli_context.set(ctx)

    @classmethod
    def reset(cls) -> None:
        """Reset to default context.

        This is primarily useful for testing to ensure a clean state between tests.
        """
        _current_cli_context.set(None)
