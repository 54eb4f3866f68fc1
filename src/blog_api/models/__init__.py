r"""
Centralized access to all database models.

Importing this package registers every ORM class with `Base.metadata`, which is what
`create_all()` (startup / tests) relies on.

Example:
    from blog_api.models import PostModel
"""

from .post import PostModel

__all__ = [
    "PostModel",
]
