# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: A002
"""Config commands for viewing gitprompt configuration."""

from typing import Annotated, Literal

from cyclopts import App, Parameter

from gitprompt.cli._context import CLIContext
from gitprompt.cli._shared import format_json
from gitprompt.config import get_user_config_path

app = App(name="config", help="View gitprompt configuration.")


@app.command(name="show")
def _show(
    *,
    format: Annotated[
        Literal["toml", "json"],
        Parameter(name=["--format", "-f"], help="Output format (toml, json)"),
    ] = "toml",
) -> None:
    """Display the effective configuration

    Shows defaults merged with the config file, GITPROMPT_* environment
    variables and command-line overrides.

    Args:
        format: Output format (toml, json).
    """
    ctx = CLIContext.get_current()
    data = ctx.config.to_dict()

    if format == "json":
        print(format_json(data))  # noqa: T201
    else:
        print(ctx.config.to_toml(), end="")  # noqa: T201


@app.command(name="path")
def _path() -> None:
    """Print the config file path

    Prints the file given with --config, or the user config file whether or
    not it exists.
    """
    ctx = CLIContext.get_current()
    path = ctx.config_path if ctx.config_path is not None else get_user_config_path()
    print(path)  # noqa: T201
