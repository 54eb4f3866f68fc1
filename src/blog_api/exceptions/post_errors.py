"""
Per-operation error taxonomy for the post repository.

Each repository operation has its own closed set of failures:

| Operation | Error base        | Variants                                   |
| --------- | ----------------- | ------------------------------------------ |
| create    | `CreatePostError` | Duplicate{title}, Unknown(cause)           |
| get       | `GetPostError`    | PostNotFound{id}, Unknown(cause)           |
| update    | `UpdatePostError` | PostNotFound{id}, Duplicate{title}, Unknown|
| list      | -                 | `UnknownRepositoryError`                   |
| delete    | -                 | `UnknownRepositoryError`                   |

Every variant class inherits from BOTH its operation base and its kind base
(`DuplicateError`, `NotFoundError`, `UnknownRepositoryError`), so callers can catch
by operation (`except UpdatePostError`) or by kind (`except DuplicateError`) and no
classification is lost on the way up.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import DuplicateError, NotFoundError, RepositoryError, UnknownRepositoryError

if TYPE_CHECKING:
    from blog_api.domain import PostId, PostTitle


def _duplicate_message(title) -> str:
    return f"Blog post with title {title} already exists."


def _not_found_message(post_id=None, title=None) -> str:
    if post_id is None and title is not None:
        return f"Could not find blog post with title {title}."
    return f"Could not find blog post with id {post_id}."


# =================================================================================================================
# Operation bases
# =================================================================================================================

class CreatePostError(RepositoryError):
    """Failure of the create operation."""

    operation = "create"


class GetPostError(RepositoryError):
    """Failure of a single-post lookup (by id or by title)."""

    operation = "get"


class UpdatePostError(RepositoryError):
    """Failure of the update operation."""

    operation = "update"


# =================================================================================================================
# Create
# =================================================================================================================

class CreatePostDuplicateError(CreatePostError, DuplicateError):
    def __init__(self, title: PostTitle, *, constraint: str | None = None):
        self.title = title
        super().__init__(_duplicate_message(title), fields=["title"], constraint=constraint)


class CreatePostUnknownError(CreatePostError, UnknownRepositoryError):
    pass


# =================================================================================================================
# Get
# =================================================================================================================

class GetPostNotFoundError(GetPostError, NotFoundError):
    """
    No row matched the lookup.

    `id` is set for lookups by id; `title` for the by-title lookup used by the
    service's duplicate pre-check. One of the two is required.
    """

    def __init__(self, id: PostId | None = None, *, title: PostTitle | None = None):
        if id is None and title is None:
            raise TypeError("GetPostNotFoundError requires an id or a title")
        self.id = id
        self.title = title
        super().__init__(_not_found_message(id, title), fields=["id"] if title is None else ["title"])


class GetPostUnknownError(GetPostError, UnknownRepositoryError):
    pass


# =================================================================================================================
# Update
# =================================================================================================================

class UpdatePostNotFoundError(UpdatePostError, NotFoundError):
    def __init__(self, id: PostId):
        self.id = id
        super().__init__(_not_found_message(id), fields=["id"])


class UpdatePostDuplicateError(UpdatePostError, DuplicateError):
    def __init__(self, title: PostTitle, *, constraint: str | None = None):
        self.title = title
        super().__init__(_duplicate_message(title), fields=["title"], constraint=constraint)


class UpdatePostUnknownError(UpdatePostError, UnknownRepositoryError):
    pass


__all__ = [
    "CreatePostError",
    "GetPostError",
    "UpdatePostError",
    "CreatePostDuplicateError",
    "CreatePostUnknownError",
    "GetPostNotFoundError",
    "GetPostUnknownError",
    "UpdatePostNotFoundError",
    "UpdatePostDuplicateError",
    "UpdatePostUnknownError",
]
