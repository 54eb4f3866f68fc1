"""
Service-level error.

The service layer never invents its own classification for storage failures: it wraps
the `RepositoryError` it received (or built, for the update pre-check) and re-raises
it with the original attached, so the API mapper can walk down to the exact variant.
"""

from .base import RepositoryError


class ServiceError(Exception):
    """Unified error raised by `PostService`. `error` is the wrapped repository error."""

    def __init__(self, error: RepositoryError):
        self.error = error
        super().__init__(str(error))

    @property
    def error_code(self) -> str | None:
        return self.error.error_code

    def __repr__(self) -> str:
        return f"ServiceError({self.error!r})"


__all__ = ["ServiceError"]
