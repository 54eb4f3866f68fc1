"""
API-visible errors and the final mapping from the service error taxonomy.

| Wrapped repository error                          | ApiError              | Status |
| ------------------------------------------------- | --------------------- | ------ |
| DuplicateError (create / update)                  | Conflict              | 409    |
| NotFoundError (get / update)                      | NotFound              | 404    |
| EmptyValueError, request validation               | UnprocessableEntity   | 422    |
| UnknownRepositoryError, anything unclassified     | InternalServerError   | 500    |

Only the 500 path logs the underlying cause here, at WARNING and without traceback.
The traceback is logged once, by the storage adapter when it classifies the failure.
The client gets the generic message and nothing about the storage failure.
"""

import logging

from blog_api.domain import EmptyValueError
from blog_api.exceptions import (
    DuplicateError,
    NotFoundError,
    ServiceError,
    UnknownRepositoryError,
)

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR_MESSAGE = "Internal server error"


class ApiError(Exception):
    """Error with a transport status and a client-safe message."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code}, message={self.message!r})"


class Conflict(ApiError):
    status_code = 409


class NotFound(ApiError):
    status_code = 404


class UnprocessableEntity(ApiError):
    status_code = 422


class InternalServerError(ApiError):
    status_code = 500

    def __init__(self, message: str = INTERNAL_SERVER_ERROR_MESSAGE):
        super().__init__(message)


def map_service_error(exc: ServiceError, logger: logging.Logger = logger) -> ApiError:
    error = exc.error

    if isinstance(error, DuplicateError):
        return Conflict(error.message)

    if isinstance(error, NotFoundError):
        return NotFound(error.message)

    # Unknown (or an unclassified variant): log the root cause, hide it from the client
    cause = error.cause if isinstance(error, UnknownRepositoryError) and error.cause is not None else error
    logger.warning(
        "api.internal_error",
        extra={"error_type": type(error).__name__, "cause_type": type(cause).__name__, "cause": repr(cause)},
    )
    return InternalServerError()


def map_validation_error(exc: EmptyValueError) -> ApiError:
    return UnprocessableEntity(exc.message)


__all__ = [
    "ApiError",
    "Conflict",
    "NotFound",
    "UnprocessableEntity",
    "InternalServerError",
    "INTERNAL_SERVER_ERROR_MESSAGE",
    "map_service_error",
    "map_validation_error",
]
