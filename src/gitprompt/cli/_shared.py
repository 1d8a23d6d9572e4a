# pyright: reportExplicitAny=false
"""Shared CLI utilities for commands.

This module provides common utilities used across CLI command implementations:
- Standardized exit codes
- JSON formatting
- Consoles for segment and error output
"""

from enum import IntEnum
from typing import Any, Never

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from gitprompt._render import SegmentStyle
from gitprompt.config import PromptConfig

# Type alias for formattable data - uses Any to match library signatures
FormattableData = dict[str, Any]

__all__ = [
    "ExitCode",
    "exit_with_error",
    "format_json",
    "get_error_console",
    "print_text",
    "segment_style",
]


class ExitCode(IntEnum):
    """Standard exit codes for gitprompt CLI commands."""

    SUCCESS = 0
    LOAD_ERROR = 1
    STATE_ERROR = 2
    INTERNAL_ERROR = 5


def format_json(data: FormattableData, *, indent: bool = True) -> str:
    """Format data as JSON.

    Args:
        data: Dictionary to format as JSON.
        indent: Whether to pretty-print with indentation.

    Returns:
        JSON-formatted string representation.
    """
    import orjson

    options = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(data, option=options).decode("utf-8")


def segment_style(prompt: PromptConfig) -> SegmentStyle:
    """Build the segment style from the prompt configuration section."""
    return SegmentStyle(
        prefix=prompt.prefix,
        suffix=prompt.suffix,
        head=prompt.head_style,
        operation=prompt.operation_style,
    )


def get_output_console() -> Console:
    """Get a Rich console for colored segment output on stdout.

    Shells capture the prompt through a pipe, so color is forced on rather
    than detected from the terminal. NO_COLOR is still honored by Rich.

    Returns:
        Console instance writing to stdout.
    """
    return Console(
        force_terminal=True,
        color_system="standard",
        highlight=False,
        soft_wrap=True,
    )


def print_text(text: Text, *, color: bool) -> None:
    """Print styled text, or its plain string when color is disabled."""
    if color:
        get_output_console().print(text)
    else:
        print(text.plain)  # noqa: T201


def get_error_console() -> Console:
    """Get a Rich console configured for error output to stderr.

    Returns:
        Console instance writing to stderr.
    """
    return Console(stderr=True)


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.INTERNAL_ERROR,
    *,
    console: Console | None = None,
    quiet: bool = False,
) -> Never:
    """Print an error message and exit with the specified code.

    Args:
        message: The error message to display.
        code: The exit code to use (defaults to INTERNAL_ERROR).
        console: Optional Rich console for output. If not provided,
            a new stderr console will be created.
        quiet: Exit without printing the message.

    Raises:
        SystemExit: Always raised with the specified exit code.
    """
    if not quiet:
        if console is None:
            console = get_error_console()
        console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
    raise SystemExit(code)
