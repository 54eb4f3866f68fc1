"""
Map raw storage errors to the per-operation post error taxonomy.

The storage adapter runs every database call inside `storage_error_handler(...)` and
hands it a classifier for the operation at hand. On failure the handler rolls back
the session (when the statement actually failed), asks the classifier which domain
error the raw exception stands for, logs it at the right level and raises it with
the raw exception chained as `__cause__`.

| Raw outcome                                   | create        | get           | update        | list/delete |
| --------------------------------------------- | ------------- | ------------- | ------------- | ----------- |
| `IntegrityError`, unique violation on title   | Duplicate     | Unknown       | Duplicate     | Unknown     |
| `NoResultFound` (no row)                      | Unknown       | PostNotFound  | PostNotFound  | Unknown     |
| anything else                                 | Unknown       | Unknown       | Unknown       | Unknown     |
"""

import logging
from contextlib import asynccontextmanager
from typing import Callable

from sqlalchemy.exc import IntegrityError, NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.domain import PostId, PostTitle
from .base import RepositoryError, UnknownRepositoryError
from .integrity_classifier import ConstraintKind, diagnose_integrity_error
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

logger = logging.getLogger(__name__)

# Column name that carries the unique title constraint, and the constraint name
# produced by the naming convention in database/base.py ("uq_%(table_name)s_%(column_0_name)s").
TITLE_COLUMN = "title"
TITLE_CONSTRAINT = "uq_posts_title"
# Postgres' own default name, for tables created outside our metadata
TITLE_CONSTRAINT_NAMES = {TITLE_CONSTRAINT, "posts_title_key"}


def is_title_unique_violation(exc: BaseException) -> bool:
    """True when `exc` is an IntegrityError caused by the unique constraint on posts.title."""
    if not isinstance(exc, IntegrityError):
        return False

    diagnosis = diagnose_integrity_error(exc)
    if diagnosis.kind is not ConstraintKind.UNIQUE:
        return False
    if diagnosis.constraint in TITLE_CONSTRAINT_NAMES:
        return True
    # no constraint name (SQLite, MySQL, older drivers): fall back to the reported columns
    return TITLE_COLUMN in diagnosis.columns or TITLE_CONSTRAINT in diagnosis.columns


# -----------------------
# Per-operation classifiers
# -----------------------

def classify_create_error(exc: Exception, title: PostTitle) -> CreatePostError:
    if is_title_unique_violation(exc):
        return CreatePostDuplicateError(title, constraint=TITLE_CONSTRAINT)
    return CreatePostUnknownError(exc)


def classify_get_error(exc: Exception, *, post_id: PostId | None = None,
                       title: PostTitle | None = None) -> GetPostError:
    if isinstance(exc, NoResultFound):
        return GetPostNotFoundError(post_id, title=title)
    return GetPostUnknownError(exc)


def classify_update_error(exc: Exception, post_id: PostId, title: PostTitle | None) -> UpdatePostError:
    if isinstance(exc, NoResultFound):
        return UpdatePostNotFoundError(post_id)
    # Only a new title can collide with another row's title
    if title is not None and is_title_unique_violation(exc):
        return UpdatePostDuplicateError(title, constraint=TITLE_CONSTRAINT)
    return UpdatePostUnknownError(exc)


def classify_unknown(exc: Exception) -> UnknownRepositoryError:
    return UnknownRepositoryError(exc)


# -----------------------
# Async context manager to DRY error handling in repositories
# -----------------------

async def _safe_rollback(db: AsyncSession, model_name: str | None) -> None:
    try:
        await db.rollback()
    except Exception:
        # If rollback fails, that is unusual: log exception (with stack) at ERROR.
        logger.exception("Failed to rollback session after storage error", extra={"model": model_name})


@asynccontextmanager
async def storage_error_handler(
    db: AsyncSession,
    classify: Callable[[Exception], RepositoryError],
    *,
    operation: str,
    model_name: str | None = None,
    logger: logging.Logger = logger,
):
    """
    Usage:
        async with storage_error_handler(self.db, lambda e: classify_create_error(e, title),
                                         operation="create", model_name="Post"):
            ... DB ops that may fail ...

    Errors that are already a RepositoryError pass through untouched.
    """
    try:
        yield
    except RepositoryError:
        raise
    except Exception as exc:
        # A missing row is a query outcome, not a failed statement: keep the transaction.
        if not isinstance(exc, NoResultFound):
            await _safe_rollback(db, model_name)

        error = classify(exc)
        context = {"model": model_name, "operation": operation, "error_code": error.error_code}

        if isinstance(error, UnknownRepositoryError):
            # Unexpected: keep the stack trace for diagnostics
            logger.exception("repo.%s.unknown_error", operation, extra=context)
        else:
            # Expected client-level outcomes (409 / 404): no stack trace
            logger.info("repo.%s.%s", operation, error.error_code, extra={**context, "fields": error.fields})

        raise error from exc
