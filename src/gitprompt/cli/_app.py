"""The command-line interface for gitprompt."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from gitprompt._logging import create_cli_logger
from gitprompt.config import safe_load_config
from gitprompt.exceptions import ConfigError

from ._commands import register_commands
from ._context import CLIContext
from ._shared import ExitCode, exit_with_error

_HELP = "Print a git prompt segment: the branch or commit, and any operation."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    """Create the gitprompt application.

    Global options are parsed by the meta app, which loads configuration,
    creates the logger and sets the CLIContext before dispatching the
    remaining tokens. Invoke ``app.meta()`` to run with global options.

    Args:
        console: Console for help and usage output.
        error_console: Console for parse errors.
        exit_on_error: Exit on parse errors rather than raising.

    Returns:
        The configured cyclopts App.
    """
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="gitprompt",
        help=_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.meta.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        verbose: Annotated[
            bool, Parameter(help="Report when no repository is found")
        ] = False,
        quiet: Annotated[bool, Parameter(help="Suppress error messages")] = False,
        no_color: Annotated[
            bool, Parameter(name="--no-color", help="Disable colored output")
        ] = False,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
    ) -> None:
        """Run gitprompt with global options.

        Args:
            tokens: Command tokens to pass to subcommands.
            verbose: Report discovery failures on stderr.
            quiet: Suppress error messages.
            no_color: Disable colored output.
            config: Explicit path to config file.
        """
        cli_overrides: dict[str, object] | None = None
        if no_color:
            cli_overrides = {"prompt": {"color": False}}

        try:
            loaded_config, config_error = safe_load_config(
                config_path=config,
                cli_overrides=cli_overrides,
            )
        except ConfigError as e:
            exit_with_error(str(e), ExitCode.LOAD_ERROR, quiet=quiet)

        logging_config = loaded_config.logging
        cli_logger = create_cli_logger(
            level=logging_config.level.value,
            log_format=logging_config.format.value,  # type: ignore[arg-type]
            log_file=logging_config.file,
            command=tokens[0] if tokens and not tokens[0].startswith("-") else "",
            max_bytes=logging_config.max_bytes,
            backup_count=logging_config.backup_count,
        )
        if config_error is not None:
            cli_logger.warning("config_load_failed", error=config_error)

        ctx = CLIContext(
            config=loaded_config,
            verbose=verbose,
            quiet=quiet,
            no_color=no_color,
            config_path=config,
            config_error=config_error,
            logger=cli_logger,
        )
        CLIContext.set_current(ctx)

        try:
            app(tokens)
        finally:
            CLIContext.reset()

    register_commands(app)
    return app


app = create_app()


def main() -> None:
    """Default entrypoint for the `gitprompt` CLI."""
    create_app().meta()


if __name__ == "__main__":
    main()
