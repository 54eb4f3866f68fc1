"""
Repository layer initialization module.

Usage:
    from blog_api.repositories import PostRepository, PostRepositoryContract
"""

from .base_repository import BaseRepository
from .contract import PostRepositoryContract
from .post_repository import PostRepository

__all__ = [
    "BaseRepository",
    "PostRepositoryContract",
    "PostRepository",
]
