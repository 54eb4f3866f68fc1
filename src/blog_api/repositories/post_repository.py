"""
SQLAlchemy storage adapter for posts.

`PostRepository` sits between the service layer and `BaseRepository`:

    service  --(domain objects)-->  PostRepository  --(kwargs / UUIDs)-->  BaseRepository  --> DB
    service  <--(Post | RepositoryError)--  PostRepository  <--(rows | raw exceptions)--  BaseRepository

Every call runs inside `storage_error_handler` with the classifier of its operation,
so the only exceptions that leave this class are the per-operation errors from
`blog_api.exceptions`.
"""

import logging
from datetime import timezone

from sqlalchemy.exc import NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.domain import (
    CreatePostRequest,
    Post,
    PostBody,
    PostId,
    PostTitle,
    UpdatePostRequest,
)
from blog_api.exceptions.mapper import (
    classify_create_error,
    classify_get_error,
    classify_unknown,
    classify_update_error,
    storage_error_handler,
)
from blog_api.models import PostModel
from .base_repository import BaseRepository
from .contract import PostRepositoryContract

MODEL_NAME = "Post"


def to_domain(row: PostModel) -> Post:
    """
    Rebuild a `Post` from a stored row.

    Values coming out of the table were validated on the way in, so the value objects
    are built unchecked. SQLite hands back naive timestamps; they are stored as UTC.

    Raises:
        ValueError / TypeError: if the row is malformed (e.g. a non-UUID id).
    """
    created_at = row.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)

    return Post(
        id=PostId.parse(row.id),
        title=PostTitle.create_unchecked(row.title),
        body=PostBody.create_unchecked(row.body),
        created_at=created_at,
    )


class PostRepository(PostRepositoryContract):
    """
    Post repository backed by an `AsyncSession`.

    Args:
        db: the request-scoped session. Commit is left to the session owner.
        logger: where classified failures are reported (defaults to this module's logger).
    """

    def __init__(self, db: AsyncSession, logger: logging.Logger | None = None):
        self.db = db
        self.logger = logger or logging.getLogger(__name__)
        self._base = BaseRepository(PostModel, db)

    def _handle(self, classify, operation: str):
        return storage_error_handler(
            self.db, classify, operation=operation, model_name=MODEL_NAME, logger=self.logger
        )

    async def create(self, request: CreatePostRequest) -> Post:
        async with self._handle(lambda e: classify_create_error(e, request.title), "create"):
            row = await self._base.create(title=request.title.value, body=request.body.value)
            post = to_domain(row)

        self.logger.info("repo.create.success", extra={"model": MODEL_NAME, "id": str(post.id)})
        return post

    async def get_all(self) -> list[Post]:
        async with self._handle(classify_unknown, "list"):
            rows = await self._base.get_all()
            # one malformed row fails the whole listing
            return [to_domain(row) for row in rows]

    async def get_by_id(self, post_id: PostId) -> Post:
        async with self._handle(lambda e: classify_get_error(e, post_id=post_id), "get"):
            row = await self._base.get_by_id_or_raise(post_id.value)
            return to_domain(row)

    async def get_by_title(self, title: PostTitle) -> Post:
        async with self._handle(lambda e: classify_get_error(e, title=title), "get_by_title"):
            row = await self._base.find_by_field_or_raise("title", title.value)
            return to_domain(row)

    async def update(self, post_id: PostId, request: UpdatePostRequest) -> Post:
        async with self._handle(lambda e: classify_update_error(e, post_id, request.title), "update"):
            row = await self._base.update(
                post_id.value,
                title=request.title.value if request.title is not None else None,
                body=request.body.value if request.body is not None else None,
            )
            if row is None:
                raise NoResultFound(f"{MODEL_NAME} with ID {post_id} not found")
            post = to_domain(row)

        self.logger.info("repo.update.success", extra={"model": MODEL_NAME, "id": str(post.id)})
        return post

    async def delete(self, post_id: PostId) -> None:
        async with self._handle(classify_unknown, "delete"):
            deleted = await self._base.delete(post_id.value)

        self.logger.info("repo.delete.success", extra={"model": MODEL_NAME, "id": str(post_id), "deleted": deleted})


__all__ = ["PostRepository", "to_domain"]
