"""
Typed identifiers for domain entities.

A `PostId` is an opaque wrapper around a UUID. Wrapping the raw UUID keeps ids of
different entities from being mixed up at call sites (a `PostId` is never equal to a
bare `uuid.UUID` or to the id of another entity type), while staying cheap to build,
hash and compare.

Usage:
    post_id = PostId.new()
    same = PostId.parse(str(post_id))
    assert same == post_id
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class PostId:
    """Opaque unique identifier of a Post."""

    value: uuid.UUID

    @classmethod
    def new(cls) -> PostId:
        return cls(uuid.uuid4())

    @classmethod
    def parse(cls, raw: str | uuid.UUID) -> PostId:
        """
        Build a PostId from its string form (or an existing UUID).

        Raises:
            ValueError: if `raw` is not a valid UUID string.
        """
        if isinstance(raw, uuid.UUID):
            return cls(raw)
        return cls(uuid.UUID(str(raw)))

    def __str__(self) -> str:
        return str(self.value)


__all__ = ["PostId"]
