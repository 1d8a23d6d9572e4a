# ruff: noqa: TC002  # Repo and logger types needed at runtime for annotations
"""HEAD classification.

HEAD is either a symbolic ref naming a branch (possibly unborn) or a raw
object id when detached.
"""

from dulwich.refs import HEADREF, SYMREF
from dulwich.repo import Repo
from structlog.typing import FilteringBoundLogger

from gitprompt._git._common import decode_bytes, shorten_ref_name
from gitprompt._git._hashes import HashResolver
from gitprompt._git._models import Branch, DetachedCommit, Head
from gitprompt.exceptions import DetachedOrCorruptHeadError


def _read_head(repo: Repo) -> bytes:
    """Read HEAD without following it.

    Raises:
        DetachedOrCorruptHeadError: If HEAD is missing or unreadable.
    """
    try:
        raw = repo.refs.read_ref(HEADREF)
    except OSError as e:
        msg = f"Cannot read HEAD: {e}"
        raise DetachedOrCorruptHeadError(msg) from e
    if not raw:
        msg = "HEAD is missing or empty"
        raise DetachedOrCorruptHeadError(msg)
    return raw


def current_head(
    repo: Repo,
    resolver: HashResolver,
    *,
    logger: FilteringBoundLogger | None = None,
) -> Head:
    """Determine what HEAD points at.

    Args:
        repo: The repository instance.
        resolver: Resolver used to shorten a detached HEAD's commit id.
        logger: Optional logger for diagnostics.

    Returns:
        Branch with the short branch name when HEAD is symbolic, otherwise
        DetachedCommit with the shortest unique prefix of the commit id.

    Raises:
        DetachedOrCorruptHeadError: If HEAD cannot be read at all.
        AmbiguousOrMissingReferenceError: If a detached HEAD does not name
            exactly one object.
    """
    raw = _read_head(repo)
    try:
        text = decode_bytes(raw)
    except UnicodeDecodeError as e:
        msg = "HEAD is not valid UTF-8"
        raise DetachedOrCorruptHeadError(msg) from e

    head: Head
    if raw.startswith(SYMREF):
        target = text[len(SYMREF) :].strip()
        head = Branch(name=shorten_ref_name(target))
    else:
        head = DetachedCommit(commit=resolver.resolve(text))

    if logger is not None:
        logger.debug("head_resolved", head=repr(head))
    return head
