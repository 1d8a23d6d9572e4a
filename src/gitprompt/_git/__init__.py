"""Git state inspection for gitprompt.

This package resolves HEAD, shortens object ids and detects in-progress
operations by reading a dulwich repository. Nothing here writes to the
repository.
"""

from gitprompt._git._common import (
    decode_bytes,
    discover_repo,
    get_control_dir,
    resolve_repo,
    shorten_ref_name,
    strip_refs_heads,
)
from gitprompt._git._hashes import (
    HashResolver,
    auto_abbrev_length,
    match_prefix,
    read_core_abbrev,
    shortest_unique_prefix,
)
from gitprompt._git._head import current_head
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
from gitprompt._git._state import (
    MARKER_PRIORITY,
    MarkerCheck,
    detect_operation,
    detect_operation_in,
    read_marker,
)

__all__ = [
    "MARKER_PRIORITY",
    "AmRbs",
    "ApplyMailbox",
    "Bisect",
    "Branch",
    "CherryPick",
    "DetachedCommit",
    "HashResolver",
    "Head",
    "MarkerCheck",
    "Merge",
    "Operation",
    "Rebase",
    "RebaseInteractive",
    "RebaseProgress",
    "Revert",
    "ShortHash",
    "auto_abbrev_length",
    "current_head",
    "decode_bytes",
    "detect_operation",
    "detect_operation_in",
    "discover_repo",
    "get_control_dir",
    "match_prefix",
    "read_core_abbrev",
    "read_marker",
    "resolve_repo",
    "shorten_ref_name",
    "shortest_unique_prefix",
    "strip_refs_heads",
]
