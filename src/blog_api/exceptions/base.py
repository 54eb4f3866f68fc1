"""
Repository error kinds.

Every failure that leaves the storage adapter is a `RepositoryError`. The kinds here
say WHAT went wrong; the per-operation classes in `post_errors.py` add WHICH operation
failed. HTTP statuses are not decided here but in `api/v1/errors.py`.
"""

from typing import Iterable


class RepositoryError(Exception):
    """
    Base exception for repository errors.

    - message: human-readable; safe for clients except on `UnknownRepositoryError`
    - fields: names of the fields involved (e.g. ['title']), for logs
    - constraint: DB constraint name, for logs only
    """

    error_code: str | None = None

    def __init__(self, message: str, *, fields: Iterable[str] | None = None, constraint: str | None = None):
        super().__init__(message)
        self.message = message
        self.fields = list(fields) if fields else None
        self.constraint = constraint

    def __str__(self) -> str:
        details = []
        if self.fields:
            details.append(f"fields: {', '.join(self.fields)}")
        if self.constraint:
            details.append(f"constraint: {self.constraint}")
        return f"{self.message} ({'; '.join(details)})" if details else self.message


class NotFoundError(RepositoryError):
    error_code = "not_found"


class DuplicateError(RepositoryError):
    error_code = "duplicate"


class UnknownRepositoryError(RepositoryError):
    """
    Anything the storage adapter could not classify.

    `cause` keeps the original exception for logging at the API boundary.
    """

    error_code = "unknown"

    def __init__(self, cause: BaseException | None = None, message: str | None = None):
        self.cause = cause
        if message is None:
            message = str(cause) if cause is not None else "Unknown repository error"
        super().__init__(message)


__all__ = [
    "RepositoryError",
    "NotFoundError",
    "DuplicateError",
    "UnknownRepositoryError",
]
