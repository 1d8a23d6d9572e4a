"""Common git utility functions.

This module provides shared helpers used by the resolvers and the state
detector: repository discovery, control directory lookup, byte/string
conversion and ref name shortening.
"""

from pathlib import Path

from dulwich.errors import NotGitRepository
from dulwich.repo import Repo

from gitprompt.exceptions import RepositoryNotFoundError

# Namespaces stripped from full ref names, most specific first
_REF_NAMESPACES = ("refs/heads/", "refs/tags/", "refs/remotes/", "refs/")

BRANCH_NAMESPACE = "refs/heads/"


def decode_bytes(value: bytes | str) -> str:
    """Decode bytes to str if needed.

    Args:
        value: A bytes or str value.

    Returns:
        The value as a string.
    """
    if isinstance(value, bytes):
        return value.decode()
    return value


def discover_repo(cwd: Path | str | None = None) -> Repo | None:
    """Discover git repository from the given directory.

    Args:
        cwd: Directory to start search from. If None, uses current directory.

    Returns:
        Repo instance if found, None otherwise.
    """
    try:
        if cwd is not None:
            return Repo.discover(str(cwd))
        return Repo.discover()
    except NotGitRepository:
        return None


def resolve_repo(cwd: Path | None = None) -> Repo:
    """Discover a repository or fail.

    Args:
        cwd: Directory to start search from. If None, uses current directory.

    Returns:
        The discovered Repo instance.

    Raises:
        RepositoryNotFoundError: If no git repository is found.
    """
    repo = discover_repo(cwd)
    if repo is None:
        start = cwd if cwd is not None else Path.cwd()
        msg = f"Not inside a git repository: {start}"
        raise RepositoryNotFoundError(msg, path=start)
    return repo


def get_control_dir(repo: Repo) -> Path:
    """Get the metadata directory that holds operation marker files.

    For a linked worktree this is the worktree-private directory
    (``.git/worktrees/<name>``), which is where git writes MERGE_HEAD,
    rebase-merge/ and friends for that worktree.

    Args:
        repo: The repository instance.

    Returns:
        Path to the control directory.
    """
    return Path(decode_bytes(repo.controldir()))


def strip_refs_heads(branch: bytes | str) -> str:
    """Strip refs/heads/ prefix from a branch reference.

    Args:
        branch: Branch reference (bytes or str), possibly with refs/heads/ prefix.

    Returns:
        Branch name without prefix.
    """
    branch_str = decode_bytes(branch)
    if branch_str.startswith(BRANCH_NAMESPACE):
        return branch_str[len(BRANCH_NAMESPACE) :]
    return branch_str


def shorten_ref_name(ref: bytes | str) -> str:
    """Shorten a full ref name for display.

    Strips the first matching namespace out of refs/heads/, refs/tags/,
    refs/remotes/ and refs/. Names outside refs/ are returned unchanged.

    Args:
        ref: Full ref name, e.g. ``refs/heads/main``.

    Returns:
        The short name, e.g. ``main``.
    """
    ref_str = decode_bytes(ref)
    for namespace in _REF_NAMESPACES:
        if ref_str.startswith(namespace):
            return ref_str[len(namespace) :]
    return ref_str
