"""Prompt segment formatting.

The segment grammar is ``<prefix>[<operation> ]<head><suffix>``, for example
``(main)``, ``(:1a2b3c4)`` or ``(rbs feature 2/5 :1a2b3c4)``.
"""

from dataclasses import dataclass
from typing import assert_never

from rich.text import Text

from gitprompt._git import (
    AmRbs,
    ApplyMailbox,
    Bisect,
    Branch,
    CherryPick,
    DetachedCommit,
    Head,
    Merge,
    Operation,
    Rebase,
    RebaseInteractive,
    Revert,
)


@dataclass(frozen=True, slots=True)
class SegmentStyle:
    """Delimiters and rich styles for the rendered segment.

    Attributes:
        prefix: Text opening the segment.
        suffix: Text closing the segment.
        head: Rich style for the delimiters and head.
        operation: Rich style for the operation tag.
    """

    prefix: str = "("
    suffix: str = ")"
    head: str = "green"
    operation: str = "red"


def format_head(head: Head) -> str:
    """Format HEAD as a branch name or ``:<hash>``."""
    match head:
        case Branch(name=name):
            return name
        case DetachedCommit(commit=commit):
            return f":{commit}"
        case _:
            assert_never(head)


def format_operation(operation: Operation) -> str:
    """Format an in-progress operation as its short tag.

    Args:
        operation: The detected operation.

    Returns:
        One of ``am``, ``rbs``, ``am/rbs``, ``rbs [<head>] [<num>/<end>]``,
        ``bsc [<branch>]``, ``mrg :<hash>``, ``chp :<hash>`` or
        ``rvt :<hash>``.
    """
    match operation:
        case ApplyMailbox():
            return "am"
        case Rebase():
            return "rbs"
        case AmRbs():
            return "am/rbs"
        case RebaseInteractive(head=head, progress=progress):
            parts = ["rbs"]
            if head is not None:
                parts.append(format_head(head))
            if progress is not None:
                parts.append(f"{progress.current}/{progress.total}")
            return " ".join(parts)
        case Bisect(branch=branch):
            return "bsc" if branch is None else f"bsc {branch}"
        case Merge(commit=commit):
            return f"mrg :{commit}"
        case CherryPick(commit=commit):
            return f"chp :{commit}"
        case Revert(commit=commit):
            return f"rvt :{commit}"
        case _:
            assert_never(operation)


def render_segment(
    head: Head,
    operation: Operation | None,
    style: SegmentStyle | None = None,
) -> Text:
    """Render the prompt segment.

    Args:
        head: What HEAD points at.
        operation: The in-progress operation, if any.
        style: Delimiters and styles. Defaults to SegmentStyle().

    Returns:
        Styled text. Use ``.plain`` for the uncolored string.
    """
    if style is None:
        style = SegmentStyle()

    text = Text(style.prefix, style=style.head)
    if operation is not None:
        text.append(format_operation(operation), style=style.operation)
        text.append(" ")
    text.append(format_head(head), style=style.head)
    text.append(style.suffix, style=style.head)
    return text
