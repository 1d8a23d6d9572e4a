"""gitprompt exceptions."""

from pathlib import Path
from typing import Any


class GitPromptError(Exception):
    """Base exception for gitprompt errors."""


class RepositoryNotFoundError(GitPromptError):
    """Raised when no git repository exists at or above a directory.

    Attributes:
        path: The directory discovery started from.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialize with error message and discovery start path."""
        super().__init__(message)
        self.path: Path | None = path


# =============================================================================
# Repository State Exceptions
# =============================================================================


class AmbiguousOrMissingReferenceError(GitPromptError):
    """Raised when a reference does not identify exactly one object.

    Attributes:
        reference: The reference text that failed to resolve.
    """

    def __init__(self, message: str, *, reference: str) -> None:
        """Initialize with error message and the offending reference.

        Args:
            message: Human-readable error message.
            reference: The reference text that failed to resolve.
        """
        super().__init__(message)
        self.reference: str = reference


class MissingReferenceError(AmbiguousOrMissingReferenceError):
    """Raised when a reference matches no object in the repository."""


class AmbiguousReferenceError(AmbiguousOrMissingReferenceError):
    """Raised when a short hash matches more than one object.

    Attributes:
        candidates: Full hex ids of the matching objects, sorted.
    """

    def __init__(
        self,
        message: str,
        *,
        reference: str,
        candidates: tuple[str, ...] = (),
    ) -> None:
        """Initialize with error message, reference and matching ids."""
        super().__init__(message, reference=reference)
        self.candidates: tuple[str, ...] = candidates


class DetachedOrCorruptHeadError(GitPromptError):
    """Raised when HEAD cannot be read at all."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(GitPromptError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source
