"""
Abstract capability set of a post repository.

Implementations:
    - `PostRepository`: SQLAlchemy adapter (blog_api.repositories.post_repository)
    - `InMemoryPostRepository`: test fake (blog_api.tests.test_fixtures.repository_fixtures)

Every method raises only the errors listed in its docstring. Implementations must
classify raw storage failures themselves; nothing driver-specific may escape.
"""

from abc import ABC, abstractmethod

from blog_api.domain import CreatePostRequest, Post, PostId, PostTitle, UpdatePostRequest


class PostRepositoryContract(ABC):

    @abstractmethod
    async def create(self, request: CreatePostRequest) -> Post:
        """
        Raises:
            CreatePostDuplicateError: a post with this title already exists.
            CreatePostUnknownError: anything else.
        """

    @abstractmethod
    async def get_all(self) -> list[Post]:
        """
        All posts, newest first.

        Raises:
            UnknownRepositoryError
        """

    @abstractmethod
    async def get_by_id(self, post_id: PostId) -> Post:
        """
        Raises:
            GetPostNotFoundError: no post with this id.
            GetPostUnknownError: anything else.
        """

    @abstractmethod
    async def get_by_title(self, title: PostTitle) -> Post:
        """
        Raises:
            GetPostNotFoundError: no post with this title.
            GetPostUnknownError: anything else.
        """

    @abstractmethod
    async def update(self, post_id: PostId, request: UpdatePostRequest) -> Post:
        """
        Partial update; unset fields keep their stored value.

        Raises:
            UpdatePostNotFoundError: no post with this id.
            UpdatePostDuplicateError: the new title belongs to another post.
            UpdatePostUnknownError: anything else.
        """

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """
        Delete a post. Deleting a missing post is a no-op.

        Raises:
            UnknownRepositoryError
        """


__all__ = ["PostRepositoryContract"]
