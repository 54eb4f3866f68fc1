"""
Domain entities and request objects for posts.

These are plain, immutable objects built only from valid value objects. They know
nothing about SQLAlchemy or HTTP: the storage adapter converts rows into `Post`, and
the API layer converts request bodies into `CreatePostRequest` / `UpdatePostRequest`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .ids import PostId
from .value_objects import PostBody, PostTitle


@dataclass(frozen=True)
class Post:
    id: PostId
    title: PostTitle
    body: PostBody
    created_at: datetime  # UTC, assigned by the store


@dataclass(frozen=True)
class CreatePostRequest:
    title: PostTitle
    body: PostBody

    @classmethod
    def from_raw(cls, title: str, body: str) -> CreatePostRequest:
        """
        Validate raw strings and build the request.

        Raises:
            PostTitleEmptyError / PostBodyEmptyError: if a field is empty after trimming.
                The title is checked first.
        """
        return cls(PostTitle.try_create(title), PostBody.try_create(body))


@dataclass(frozen=True)
class UpdatePostRequest:
    """Partial update. A field left as None keeps its stored value."""

    title: PostTitle | None = None
    body: PostBody | None = None

    @classmethod
    def from_raw(cls, title: str | None = None, body: str | None = None) -> UpdatePostRequest:
        return cls(
            PostTitle.try_create(title) if title is not None else None,
            PostBody.try_create(body) if body is not None else None,
        )

    def is_empty(self) -> bool:
        return self.title is None and self.body is None


__all__ = ["Post", "CreatePostRequest", "UpdatePostRequest"]
