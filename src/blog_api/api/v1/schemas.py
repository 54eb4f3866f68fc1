"""
Request/response DTOs.

Request bodies accept raw strings; turning them into validated value objects
(trimming, non-empty checks) is done by the domain request factories, so the
same rules apply to every caller of the service and not only to HTTP.
"""

from datetime import datetime
from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from blog_api.domain import Post

DataT = TypeVar("DataT")


class CreatePostBody(BaseModel):
    title: str
    body: str


class UpdatePostBody(BaseModel):
    """Omitted (or null) fields keep their stored value."""

    title: str | None = None
    body: str | None = None


class PostResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    title: str
    body: str
    created_at: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id.value,
            title=post.title.value,
            body=post.body.value,
            created_at=post.created_at,
        )


class MessageResponse(BaseModel):
    message: str


class Envelope(BaseModel, Generic[DataT]):
    """Body of every /posts response: `{"status_code": ..., "data": ...}`."""

    status_code: int
    data: DataT


__all__ = [
    "CreatePostBody",
    "UpdatePostBody",
    "PostResponse",
    "MessageResponse",
    "Envelope",
]
