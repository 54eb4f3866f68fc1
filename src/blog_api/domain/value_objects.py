"""
Value objects for the post domain.

`PostTitle` and `PostBody` wrap a string whose trimmed content is guaranteed to be
non-empty. There are two ways to build one:

    - `try_create(raw)`: the validating factory. Trims the input and raises a
      field-specific `EmptyValueError` subclass when nothing is left.
    - `create_unchecked(raw)`: rebuilds a value that is already known to be valid
      (e.g. a row loaded from the database). No trimming, no validation.

Both are frozen dataclasses, so equality, hashing and ordering are by value
(lexicographic over the wrapped string).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .errors import EmptyValueError, PostBodyEmptyError, PostTitleEmptyError


def validate_non_empty(raw: str) -> str | None:
    """Return the trimmed input, or None when nothing is left after trimming."""
    trimmed = raw.strip()
    return trimmed or None


@dataclass(frozen=True, order=True)
class _NonEmptyText:
    value: str

    # each subclass names the error raised on empty input
    empty_error: ClassVar[type[EmptyValueError]] = EmptyValueError

    @classmethod
    def try_create(cls, raw: str):
        trimmed = validate_non_empty(raw)
        if trimmed is None:
            raise cls.empty_error()
        return cls(trimmed)

    @classmethod
    def create_unchecked(cls, raw: str):
        return cls(raw)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class PostTitle(_NonEmptyText):
    """Title of a blog post. Unique across posts (enforced by the store)."""

    empty_error: ClassVar[type[EmptyValueError]] = PostTitleEmptyError


@dataclass(frozen=True, order=True)
class PostBody(_NonEmptyText):
    """Body text of a blog post."""

    empty_error: ClassVar[type[EmptyValueError]] = PostBodyEmptyError


__all__ = ["PostTitle", "PostBody", "validate_non_empty"]
