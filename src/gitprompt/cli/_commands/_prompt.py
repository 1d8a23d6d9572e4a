# pyright: reportUnusedCallResult=false
# ruff: noqa: A002, TC003  # Path needed at runtime for cyclopts parameter parsing
"""Commands printing the prompt segment and its parts."""

from pathlib import Path
from typing import Annotated, Literal

from cyclopts import Parameter
from rich.text import Text

from gitprompt._logging import create_null_logger
from gitprompt._render import format_head, format_operation, render_segment
from gitprompt._snapshot import PromptSnapshot, inspect_repository, snapshot_to_dict
from gitprompt.cli._context import CLIContext
from gitprompt.cli._shared import (
    ExitCode,
    exit_with_error,
    format_json,
    get_error_console,
    print_text,
    segment_style,
)
from gitprompt.exceptions import (
    AmbiguousOrMissingReferenceError,
    DetachedOrCorruptHeadError,
    RepositoryNotFoundError,
)

PathOption = Annotated[
    Path | None,
    Parameter(
        name=["--path", "-C"],
        help="Directory to inspect instead of the current directory",
    ),
]


def load_snapshot(path: Path | None) -> PromptSnapshot | None:
    """Inspect the repository for the current command.

    Not being inside a repository is not an error for a prompt, so it
    returns None. Broken repository state exits with STATE_ERROR.

    Args:
        path: Directory to start discovery from, or None for the current one.

    Returns:
        The snapshot, or None outside a repository.
    """
    ctx = CLIContext.get_current()
    logger = ctx.logger if ctx.logger is not None else create_null_logger()

    try:
        snapshot = inspect_repository(
            path, min_abbrev=ctx.config.prompt.min_abbrev, logger=logger
        )
    except RepositoryNotFoundError as e:
        logger.debug("repository_not_found", path=str(e.path))
        if ctx.verbose and not ctx.quiet:
            get_error_console().print(str(e), markup=False, highlight=False)
        return None
    except (AmbiguousOrMissingReferenceError, DetachedOrCorruptHeadError) as e:
        logger.error(  # noqa: TRY400
            "repository_state_error", error=str(e), error_type=type(e).__name__
        )
        exit_with_error(str(e), ExitCode.STATE_ERROR, quiet=ctx.quiet)
    except OSError as e:
        logger.exception("repository_read_failed", error=str(e))
        exit_with_error(
            f"Failed to read repository: {e}", ExitCode.INTERNAL_ERROR, quiet=ctx.quiet
        )

    logger.info(
        "snapshot_taken",
        head=format_head(snapshot.head),
        operation=(
            format_operation(snapshot.operation)
            if snapshot.operation is not None
            else None
        ),
    )
    return snapshot


def segment(*, path: PathOption = None) -> None:
    """Print the prompt segment

    Prints ``(<head>)`` or ``(<operation> <head>)`` for the repository
    containing PATH. Prints nothing outside a repository.

    Args:
        path: Directory to inspect instead of the current directory.
    """
    snapshot = load_snapshot(path)
    if snapshot is None:
        return

    ctx = CLIContext.get_current()
    text = render_segment(
        snapshot.head, snapshot.operation, segment_style(ctx.config.prompt)
    )
    print_text(text, color=ctx.color)


def state(
    *,
    path: PathOption = None,
    format: Annotated[
        Literal["text", "json"],
        Parameter(name=["--format", "-f"], help="Output format (text, json)"),
    ] = "text",
) -> None:
    """Print the in-progress operation

    In text format, prints the operation tag or an empty line when no
    operation is in progress. In json format, prints the head, the
    operation and the rendered segment.

    Args:
        path: Directory to inspect instead of the current directory.
        format: Output format (text, json).
    """
    snapshot = load_snapshot(path)
    if snapshot is None:
        return

    ctx = CLIContext.get_current()
    style = segment_style(ctx.config.prompt)

    if format == "json":
        print(format_json(snapshot_to_dict(snapshot, style)))  # noqa: T201
        return

    if snapshot.operation is None:
        print()  # noqa: T201
        return
    print_text(
        Text(format_operation(snapshot.operation), style=style.operation),
        color=ctx.color,
    )


def head(*, path: PathOption = None) -> None:
    """Print the current branch or abbreviated commit

    Args:
        path: Directory to inspect instead of the current directory.
    """
    snapshot = load_snapshot(path)
    if snapshot is None:
        return

    ctx = CLIContext.get_current()
    style = segment_style(ctx.config.prompt)
    print_text(Text(format_head(snapshot.head), style=style.head), color=ctx.color)
