"""Fixtures for repository and service tests."""

import itertools
import uuid
from dataclasses import replace
from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.domain import CreatePostRequest, Post, PostId, PostTitle, UpdatePostRequest
from blog_api.exceptions import (
    CreatePostDuplicateError,
    GetPostNotFoundError,
    RepositoryError,
    UpdatePostDuplicateError,
    UpdatePostNotFoundError,
)
from blog_api.models import PostModel
from blog_api.repositories import BaseRepository, PostRepository, PostRepositoryContract
from blog_api.services import PostService

# NOTE: DB-backed fixtures depend on the `db_session` fixture defined in conftest.py


class InMemoryPostRepository(PostRepositoryContract):
    """
    Dict-backed implementation of the repository contract.

    Enforces title uniqueness like the real table does, and can be told to fail an
    operation with a given error:

        repo.failures["get_all"] = UnknownRepositoryError(RuntimeError("db down"))

    `calls` records operation names in order, so tests can assert what the service
    did (or did not) call.
    """

    def __init__(self):
        self.posts: dict[PostId, Post] = {}
        self.failures: dict[str, RepositoryError] = {}
        self.calls: list[str] = []
        self._seq = itertools.count()
        self._order: dict[PostId, int] = {}

    def _enter(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.failures:
            raise self.failures[operation]

    def _title_holder(self, title: PostTitle) -> Post | None:
        return next((p for p in self.posts.values() if p.title == title), None)

    async def create(self, request: CreatePostRequest) -> Post:
        self._enter("create")
        if self._title_holder(request.title) is not None:
            raise CreatePostDuplicateError(request.title)
        post = Post(
            id=PostId.new(),
            title=request.title,
            body=request.body,
            created_at=datetime.now(timezone.utc),
        )
        self.posts[post.id] = post
        self._order[post.id] = next(self._seq)
        return post

    async def get_all(self) -> list[Post]:
        self._enter("get_all")
        return sorted(self.posts.values(), key=lambda p: self._order[p.id], reverse=True)

    async def get_by_id(self, post_id: PostId) -> Post:
        self._enter("get_by_id")
        try:
            return self.posts[post_id]
        except KeyError:
            raise GetPostNotFoundError(post_id) from None

    async def get_by_title(self, title: PostTitle) -> Post:
        self._enter("get_by_title")
        post = self._title_holder(title)
        if post is None:
            raise GetPostNotFoundError(title=title)
        return post

    async def update(self, post_id: PostId, request: UpdatePostRequest) -> Post:
        self._enter("update")
        current = self.posts.get(post_id)
        if current is None:
            raise UpdatePostNotFoundError(post_id)
        if request.title is not None:
            holder = self._title_holder(request.title)
            if holder is not None and holder.id != post_id:
                raise UpdatePostDuplicateError(request.title)
        updated = replace(
            current,
            title=request.title if request.title is not None else current.title,
            body=request.body if request.body is not None else current.body,
        )
        self.posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId) -> None:
        self._enter("delete")
        self.posts.pop(post_id, None)
        self._order.pop(post_id, None)


@pytest.fixture
async def base_repo(db_session: AsyncSession) -> BaseRepository[PostModel]:
    """
    BaseRepository for PostModel, bound to the test session.

    Used by the generic storage-operation tests (create, get_by_id, update, delete ...).
    """
    return BaseRepository(PostModel, db_session)


@pytest.fixture
async def post_repository(db_session: AsyncSession) -> PostRepository:
    """The SQLAlchemy post repository bound to the test session."""
    return PostRepository(db_session)


@pytest.fixture
def fake_repository() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture
def post_service(fake_repository: InMemoryPostRepository) -> PostService:
    """PostService over the in-memory repository (no database)."""
    return PostService(fake_repository)


@pytest.fixture
def sample_post_data() -> dict[str, str]:
    """
    Deterministic sample payload. Kept synchronous because it does not touch the DB.
    """
    return {
        "title": "Hello world",
        "body": "First post.",
    }


@pytest.fixture
async def create_post(post_repository: PostRepository):
    """
    Factory helper creating posts through the repository, with optional overrides.

    Usage:
        post = await create_post(title="Another one")
    """
    async def _create(**overrides) -> Post:
        data = {
            "title": f"post_{uuid.uuid4().hex[:8]}",
            "body": "Some body text",
        }
        data.update(overrides)
        return await post_repository.create(CreatePostRequest.from_raw(**data))

    return _create


@pytest.fixture
async def created_post(create_post, sample_post_data, db_session: AsyncSession) -> Post:
    """A single persisted (committed) post built from sample_post_data."""
    post = await create_post(**sample_post_data)
    await db_session.commit()
    return post


@pytest.fixture
async def multiple_posts(create_post, db_session: AsyncSession) -> list[Post]:
    """Three committed posts with unique titles, in creation order."""
    posts = [await create_post(title=f"post {idx}") for idx in range(3)]
    await db_session.commit()
    return posts
