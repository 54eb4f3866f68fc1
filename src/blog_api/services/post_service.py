"""
Post service: the business layer between the API and the repository.

It owns the one cross-row rule of the domain (a title may only belong to one post)
for the update path, and converts every repository failure into a `ServiceError`
that keeps the original classification attached.
"""

import logging

from blog_api.domain import CreatePostRequest, Post, PostId, UpdatePostRequest
from blog_api.exceptions import (
    GetPostNotFoundError,
    RepositoryError,
    ServiceError,
    UpdatePostDuplicateError,
)
from blog_api.repositories.contract import PostRepositoryContract


class PostService:
    def __init__(self, repository: PostRepositoryContract, logger: logging.Logger | None = None):
        self.repository = repository
        self.logger = logger or logging.getLogger(__name__)

    async def create_post(self, request: CreatePostRequest) -> Post:
        try:
            return await self.repository.create(request)
        except RepositoryError as exc:
            raise ServiceError(exc) from exc

    async def get_all_posts(self) -> list[Post]:
        try:
            return await self.repository.get_all()
        except RepositoryError as exc:
            raise ServiceError(exc) from exc

    async def get_post_by_id(self, post_id: PostId) -> Post:
        try:
            return await self.repository.get_by_id(post_id)
        except RepositoryError as exc:
            raise ServiceError(exc) from exc

    async def update_post(self, post_id: PostId, request: UpdatePostRequest) -> Post:
        """
        Apply a partial update.

        When a new title is given, the post currently holding that title (if any) is
        looked up first; if it is a different post the update is refused with
        `UpdatePostDuplicateError` before anything is written. Renaming a post to its
        own current title is allowed. The check is not atomic: a concurrent writer is
        still caught by the storage-level unique constraint.

        Raises:
            ServiceError: wrapping UpdatePostNotFoundError, UpdatePostDuplicateError,
                or an unknown repository error.
        """
        if request.title is not None:
            try:
                holder = await self.repository.get_by_title(request.title)
            except GetPostNotFoundError:
                holder = None
            except RepositoryError as exc:
                raise ServiceError(exc) from exc

            if holder is not None and holder.id != post_id:
                self.logger.info(
                    "service.update.duplicate_title",
                    extra={"id": str(post_id), "holder_id": str(holder.id)},
                )
                raise ServiceError(UpdatePostDuplicateError(request.title))

        try:
            return await self.repository.update(post_id, request)
        except RepositoryError as exc:
            raise ServiceError(exc) from exc


__all__ = ["PostService"]
