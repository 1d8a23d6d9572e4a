"""Prompt configuration model.

This module provides the PromptConfig Pydantic model for segment rendering
and hash abbreviation settings.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, field_validator

# Matches git's accepted core.abbrev range
_MIN_ABBREV = 4
_MAX_ABBREV = 40


class PromptConfig(BaseModel):
    """Prompt configuration section.

    Attributes:
        abbrev: Minimum length of shortened hashes. 0 follows the
            repository's core.abbrev setting.
        prefix: Text opening the segment.
        suffix: Text closing the segment.
        color: Whether to style the segment.
        head_style: Rich style for the delimiters and head.
        operation_style: Rich style for the operation tag.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    abbrev: int = 0
    prefix: str = "("
    suffix: str = ")"
    color: bool = True
    head_style: str = "green"
    operation_style: str = "red"

    @field_validator("abbrev")
    @classmethod
    def _check_abbrev(cls, value: int) -> int:
        if value != 0 and not _MIN_ABBREV <= value <= _MAX_ABBREV:
            msg = f"must be 0 or between {_MIN_ABBREV} and {_MAX_ABBREV}"
            raise ValueError(msg)
        return value

    @property
    def min_abbrev(self) -> int | None:
        """Configured minimum hash length, or None to follow core.abbrev."""
        return self.abbrev or None
