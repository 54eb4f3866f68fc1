# blog_api/
# │
# ├── exceptions/
# │   ├── __init__.py
# │   ├── base.py                    # Repository-level kinds (RepositoryError, DuplicateError, NotFoundError, ...)
# │   ├── post_errors.py             # Per-operation taxonomy (CreatePostError, GetPostError, UpdatePostError)
# │   ├── service.py                 # ServiceError wrapping a RepositoryError
# │   ├── integrity_classifier.py    # IntegrityError diagnosis (constraint kind, name, columns)
# │   └── mapper.py                  # Raw storage errors -> per-operation errors

from .base import DuplicateError, NotFoundError, RepositoryError, UnknownRepositoryError
from .post_errors import (
    CreatePostDuplicateError,
    CreatePostError,
    CreatePostUnknownError,
    GetPostError,
    GetPostNotFoundError,
    GetPostUnknownError,
    UpdatePostDuplicateError,
    UpdatePostError,
    UpdatePostNotFoundError,
    UpdatePostUnknownError,
)
from .service import ServiceError

__all__ = [
    "RepositoryError",
    "NotFoundError",
    "DuplicateError",
    "UnknownRepositoryError",
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
    "ServiceError",
]
