# ruff: noqa: TC002, TC003  # Repo, Path and logger types needed at runtime
"""In-progress operation detection.

git records a stopped am, rebase, bisect, merge, cherry-pick or revert as
marker files under the repository's control directory. Several markers can
coexist while git moves between states (a stale rebase-apply/ left by an
aborted ``git am`` next to a later MERGE_HEAD, for example), so the checks
run in a fixed priority order and the first hit wins:

    ====  ========================  =====================================
    Rank  Marker                    Result
    ====  ========================  =====================================
    1     rebase-apply/applying     ApplyMailbox
    2     rebase-apply/rebasing     Rebase
    3     rebase-apply/             AmRbs
    4     rebase-merge/             RebaseInteractive(head, progress)
    5     BISECT_LOG                Bisect(BISECT_START)
    6     MERGE_HEAD                Merge(commit)
    7     CHERRY_PICK_HEAD          CherryPick(commit)
    8     REVERT_HEAD               Revert(commit)
    ====  ========================  =====================================

A marker that cannot be read counts as absent, whatever the reason. A commit
marker that is readable but does not resolve to exactly one object is fatal
and raises AmbiguousOrMissingReferenceError.
"""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from dulwich.repo import Repo
from structlog.typing import FilteringBoundLogger

from gitprompt._git._common import get_control_dir, strip_refs_heads
from gitprompt._git._hashes import HashResolver
from gitprompt._git._models import (
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
    RebaseProgress,
    Revert,
    ShortHash,
)


def _is_file(path: Path) -> bool:
    """Check if a file exists, treating permission errors as absence."""
    try:
        return path.is_file()
    except OSError:
        return False


def _is_dir(path: Path) -> bool:
    """Check if a directory exists, treating permission errors as absence."""
    try:
        return path.is_dir()
    except OSError:
        return False


def read_marker(path: Path) -> str | None:
    """Read a marker file.

    Args:
        path: Path to the marker file.

    Returns:
        The file content, or None if it is missing, unreadable or not UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def _read_trimmed(path: Path) -> str | None:
    content = read_marker(path)
    if content is None:
        return None
    return content.strip()


def _first_line(content: str) -> str:
    """Return the first non-blank line, or an empty string."""
    for line in content.splitlines():
        if line.strip():
            return line
    return ""


# =============================================================================
# Checks
# =============================================================================


@dataclass(frozen=True, slots=True)
class MarkerCheck:
    """One row of the detection priority table.

    Attributes:
        marker: Marker path relative to the control directory.
        probe: Returns the operation when the marker is active, else None.
    """

    marker: str
    probe: Callable[[Path, HashResolver], Operation | None]


def _check_applying(git_dir: Path, resolver: HashResolver) -> Operation | None:
    if _is_file(git_dir / "rebase-apply" / "applying"):
        return ApplyMailbox()
    return None


def _check_rebasing(git_dir: Path, resolver: HashResolver) -> Operation | None:
    if _is_file(git_dir / "rebase-apply" / "rebasing"):
        return Rebase()
    return None


def _check_rebase_apply(git_dir: Path, resolver: HashResolver) -> Operation | None:
    if _is_dir(git_dir / "rebase-apply"):
        return AmRbs()
    return None


def _rebase_head(state_dir: Path, resolver: HashResolver) -> Head | None:
    """Work out which branch or commit an interactive rebase is rewriting.

    Any readable head-name is taken as the branch, verbatim once trimmed.
    Only when it cannot be read does orig-head give the commit instead.
    """
    head_name = read_marker(state_dir / "head-name")
    if head_name is not None:
        return Branch(name=strip_refs_heads(head_name.strip()))

    orig_head = read_marker(state_dir / "orig-head")
    if orig_head is None:
        return None
    return DetachedCommit(commit=resolver.resolve(orig_head))


def _rebase_progress(state_dir: Path) -> RebaseProgress | None:
    current = _read_trimmed(state_dir / "msgnum")
    total = _read_trimmed(state_dir / "end")
    if current is None or total is None:
        return None
    return RebaseProgress(current=current, total=total)


def _check_rebase_merge(git_dir: Path, resolver: HashResolver) -> Operation | None:
    state_dir = git_dir / "rebase-merge"
    if not _is_dir(state_dir):
        return None
    return RebaseInteractive(
        head=_rebase_head(state_dir, resolver),
        progress=_rebase_progress(state_dir),
    )


def _check_bisect(git_dir: Path, resolver: HashResolver) -> Operation | None:
    if not _is_file(git_dir / "BISECT_LOG"):
        return None
    return Bisect(branch=_read_trimmed(git_dir / "BISECT_START"))


def _commit_marker(
    name: str, variant: Callable[[ShortHash], Operation]
) -> Callable[[Path, HashResolver], Operation | None]:
    """Build a check for a marker file holding commit ids, one per line."""

    def probe(git_dir: Path, resolver: HashResolver) -> Operation | None:
        content = read_marker(git_dir / name)
        if content is None:
            return None
        return variant(resolver.resolve(_first_line(content)))

    return probe


MARKER_PRIORITY: tuple[MarkerCheck, ...] = (
    MarkerCheck("rebase-apply/applying", _check_applying),
    MarkerCheck("rebase-apply/rebasing", _check_rebasing),
    MarkerCheck("rebase-apply", _check_rebase_apply),
    MarkerCheck("rebase-merge", _check_rebase_merge),
    MarkerCheck("BISECT_LOG", _check_bisect),
    MarkerCheck("MERGE_HEAD", _commit_marker("MERGE_HEAD", Merge)),
    MarkerCheck("CHERRY_PICK_HEAD", _commit_marker("CHERRY_PICK_HEAD", CherryPick)),
    MarkerCheck("REVERT_HEAD", _commit_marker("REVERT_HEAD", Revert)),
)


# =============================================================================
# Detection
# =============================================================================


def detect_operation_in(
    git_dir: Path,
    resolver: HashResolver,
    *,
    logger: FilteringBoundLogger | None = None,
) -> Operation | None:
    """Detect the in-progress operation recorded in a control directory.

    Args:
        git_dir: The repository's control directory.
        resolver: Resolver for commit ids found in marker files.
        logger: Optional logger for diagnostics.

    Returns:
        The highest priority active operation, or None when the working
        tree is not in the middle of anything.

    Raises:
        AmbiguousOrMissingReferenceError: If a commit marker is present but
            its content does not name exactly one object.
    """
    for check in MARKER_PRIORITY:
        operation = check.probe(git_dir, resolver)
        if operation is not None:
            if logger is not None:
                logger.debug(
                    "operation_detected",
                    marker=check.marker,
                    operation=type(operation).__name__,
                )
            return operation
    return None


def detect_operation(
    repo: Repo,
    resolver: HashResolver,
    *,
    logger: FilteringBoundLogger | None = None,
) -> Operation | None:
    """Detect the in-progress operation of a repository.

    See detect_operation_in() for the rules; this looks up the control
    directory of repo first.
    """
    return detect_operation_in(get_control_dir(repo), resolver, logger=logger)
