"""Default configuration values.

This module defines the built-in default configuration values that are used
when no other configuration sources provide values.

Note: DEFAULT_CONFIG is intentionally a plain dict for type compatibility
with functions like deep_merge. The merge functions create copies, so the
defaults are never mutated.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "logging": {
        "level": "warning",
        "format": "json",
        "file": "",
        "max_bytes": 1_048_576,
        "backup_count": 3,
    },
    "prompt": {
        "abbrev": 0,
        "prefix": "(",
        "suffix": ")",
        "color": True,
        "head_style": "green",
        "operation_style": "red",
    },
}
