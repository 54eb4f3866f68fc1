"""
Domain layer: identifiers, value objects and entities for posts.

Usage:
    from blog_api.domain import Post, PostId, PostTitle, PostBody, CreatePostRequest
"""

from .errors import EmptyValueError, PostBodyEmptyError, PostTitleEmptyError
from .ids import PostId
from .value_objects import PostBody, PostTitle
from .entities import CreatePostRequest, Post, UpdatePostRequest

__all__ = [
    "EmptyValueError",
    "PostTitleEmptyError",
    "PostBodyEmptyError",
    "PostId",
    "PostTitle",
    "PostBody",
    "Post",
    "CreatePostRequest",
    "UpdatePostRequest",
]
