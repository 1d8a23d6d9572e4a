# ruff: noqa: TC002, TC003  # Runtime imports needed for annotations
"""Repository inspection producing a prompt snapshot."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, assert_never

from structlog.typing import FilteringBoundLogger

from gitprompt._git import (
    AmRbs,
    ApplyMailbox,
    Bisect,
    Branch,
    CherryPick,
    DetachedCommit,
    HashResolver,
    Head,
    Merge,
    Operation,
    Rebase,
    RebaseInteractive,
    Revert,
    ShortHash,
    current_head,
    detect_operation,
    resolve_repo,
)
from gitprompt._render import (
    SegmentStyle,
    format_head,
    format_operation,
    render_segment,
)


@dataclass(frozen=True, slots=True)
class PromptSnapshot:
    """What HEAD points at and which operation, if any, is in progress."""

    head: Head
    operation: Operation | None

    def render(self, style: SegmentStyle | None = None) -> str:
        """Return the uncolored segment text."""
        return render_segment(self.head, self.operation, style).plain


def inspect_repository(
    cwd: Path | None = None,
    *,
    min_abbrev: int | None = None,
    logger: FilteringBoundLogger | None = None,
) -> PromptSnapshot:
    """Discover the repository at or above cwd and take a snapshot.

    The repository is opened once and closed before returning.

    Args:
        cwd: Directory to start discovery from. Defaults to the current
            directory.
        min_abbrev: Minimum abbreviated hash length. None follows the
            repository's core.abbrev.
        logger: Optional logger for resolution events.

    Returns:
        The snapshot of HEAD and the in-progress operation.

    Raises:
        RepositoryNotFoundError: If cwd is not inside a repository.
        AmbiguousOrMissingReferenceError: If a marker names a reference
            that does not resolve to exactly one object.
        DetachedOrCorruptHeadError: If HEAD cannot be read.
    """
    repo = resolve_repo(cwd)
    try:
        resolver = HashResolver(repo, min_length=min_abbrev, logger=logger)
        head = current_head(repo, resolver, logger=logger)
        operation = detect_operation(repo, resolver, logger=logger)
    finally:
        repo.close()
    return PromptSnapshot(head=head, operation=operation)


def _hash_to_dict(commit: ShortHash) -> dict[str, str]:
    return {"prefix": commit.prefix, "object_id": commit.object_id}


def head_to_dict(head: Head) -> dict[str, Any]:
    """Convert a Head into a JSON-serializable dictionary."""
    match head:
        case Branch(name=name):
            return {"kind": "branch", "name": name}
        case DetachedCommit(commit=commit):
            return {"kind": "detached", "commit": _hash_to_dict(commit)}
        case _:
            assert_never(head)


def operation_to_dict(operation: Operation) -> dict[str, Any]:
    """Convert an Operation into a JSON-serializable dictionary.

    Every dictionary carries ``kind`` and the formatted ``tag``; variants
    with payloads add their fields.
    """
    data: dict[str, Any]
    match operation:
        case ApplyMailbox():
            data = {"kind": "apply_mailbox"}
        case Rebase():
            data = {"kind": "rebase"}
        case AmRbs():
            data = {"kind": "am_rebase"}
        case RebaseInteractive(head=head, progress=progress):
            data = {
                "kind": "rebase_interactive",
                "head": head_to_dict(head) if head is not None else None,
                "progress": (
                    {"current": progress.current, "total": progress.total}
                    if progress is not None
                    else None
                ),
            }
        case Bisect(branch=branch):
            data = {"kind": "bisect", "branch": branch}
        case Merge(commit=commit):
            data = {"kind": "merge", "commit": _hash_to_dict(commit)}
        case CherryPick(commit=commit):
            data = {"kind": "cherry_pick", "commit": _hash_to_dict(commit)}
        case Revert(commit=commit):
            data = {"kind": "revert", "commit": _hash_to_dict(commit)}
        case _:
            assert_never(operation)
    data["tag"] = format_operation(operation)
    return data


def snapshot_to_dict(
    snapshot: PromptSnapshot, style: SegmentStyle | None = None
) -> dict[str, Any]:
    """Convert a snapshot into a JSON-serializable dictionary."""
    return {
        "head": head_to_dict(snapshot.head) | {"text": format_head(snapshot.head)},
        "operation": (
            operation_to_dict(snapshot.operation)
            if snapshot.operation is not None
            else None
        ),
        "segment": snapshot.render(style),
    }
