"""Value types for HEAD and in-progress repository operations.

``Head`` and ``Operation`` are closed unions of frozen dataclasses. Code that
consumes them matches on the concrete classes; the renderer does so
exhaustively.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ShortHash:
    """Shortest unambiguous prefix of an object id.

    Attributes:
        prefix: Hex prefix, unique among all objects at resolution time.
        object_id: Full hex object id the prefix identifies.
    """

    prefix: str
    object_id: str

    def __str__(self) -> str:
        return self.prefix


# =============================================================================
# HEAD
# =============================================================================


@dataclass(frozen=True, slots=True)
class Branch:
    """HEAD points at a named branch.

    Attributes:
        name: Short branch name without the refs/heads/ namespace.
    """

    name: str


@dataclass(frozen=True, slots=True)
class DetachedCommit:
    """HEAD points directly at a commit.

    Attributes:
        commit: Shortened id of the checked out commit.
    """

    commit: ShortHash


type Head = Branch | DetachedCommit


# =============================================================================
# Operations
# =============================================================================


@dataclass(frozen=True, slots=True)
class RebaseProgress:
    """Step counters of an interactive rebase.

    Attributes:
        current: Number of the step being applied (rebase-merge/msgnum).
        total: Total number of steps (rebase-merge/end).
    """

    current: str
    total: str


@dataclass(frozen=True, slots=True)
class ApplyMailbox:
    """``git am`` is applying patches."""


@dataclass(frozen=True, slots=True)
class Rebase:
    """An apply-based rebase is in progress."""


@dataclass(frozen=True, slots=True)
class AmRbs:
    """rebase-apply/ exists without telling am and rebase apart."""


@dataclass(frozen=True, slots=True)
class RebaseInteractive:
    """A merge-based (interactive) rebase is in progress.

    Attributes:
        head: The branch or commit being rebased, if recorded.
        progress: Step counters, present only when both are recorded.
    """

    head: Head | None = None
    progress: RebaseProgress | None = None


@dataclass(frozen=True, slots=True)
class Bisect:
    """A bisect session is active.

    Attributes:
        branch: What HEAD pointed at when the bisect started, if recorded.
    """

    branch: str | None = None


@dataclass(frozen=True, slots=True)
class Merge:
    """A merge stopped before committing."""

    commit: ShortHash


@dataclass(frozen=True, slots=True)
class CherryPick:
    """A cherry-pick stopped before committing."""

    commit: ShortHash


@dataclass(frozen=True, slots=True)
class Revert:
    """A revert stopped before committing."""

    commit: ShortHash


type Operation = (
    ApplyMailbox
    | Rebase
    | AmRbs
    | RebaseInteractive
    | Bisect
    | Merge
    | CherryPick
    | Revert
)
