r"""
Diagnosis of SQLAlchemy `IntegrityError`s.

`diagnose_integrity_error()` answers three questions about a failed statement:
which kind of constraint fired, its name (when the driver reports one) and the
columns involved (when the message names them). It raises nothing; `mapper.py`
decides which post error a diagnosis stands for.

Sources, in order:
    - Postgres: SQLSTATE on the DBAPI error (`sqlstate` for psycopg 3, `pgcode` for
      psycopg2 and the asyncpg adapter) plus `diag.constraint_name`.
    - SQLite / MySQL: keywords in the driver message.
"""
import logging
import re
from enum import Enum
from typing import NamedTuple

from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


class ConstraintKind(str, Enum):
    UNIQUE = "unique"
    NOT_NULL = "not_null"
    FOREIGN_KEY = "foreign_key"
    CHECK = "check"
    UNKNOWN = "unknown"


class IntegrityDiagnosis(NamedTuple):
    kind: ConstraintKind
    constraint: str | None
    columns: tuple[str, ...]


# https://www.postgresql.org/docs/current/errcodes-appendix.html
SQLSTATE_KINDS = {
    "23505": ConstraintKind.UNIQUE,
    "23502": ConstraintKind.NOT_NULL,
    "23503": ConstraintKind.FOREIGN_KEY,
    "23514": ConstraintKind.CHECK,
}

MESSAGE_KEYWORDS = (
    (ConstraintKind.UNIQUE, ("unique constraint", "unique failed", "unique violation", "duplicate")),
    (ConstraintKind.NOT_NULL, ("not null", "null value in column")),
    (ConstraintKind.FOREIGN_KEY, ("foreign key", "is not present in table")),
    (ConstraintKind.CHECK, ("check constraint", "check failed")),
)

COLUMN_PATTERNS = (
    # Postgres NOT NULL: 'null value in column "body" violates not-null constraint'
    re.compile(r'null value in column "(?P<cols>[^"]+)"', re.IGNORECASE),
    # Postgres unique: 'DETAIL:  Key (title)=(Hello) already exists.'
    re.compile(r'key \((?P<cols>[^)]+)\)=', re.IGNORECASE),
    # SQLite: 'UNIQUE constraint failed: posts.title'
    re.compile(r'(?:UNIQUE|NOT NULL) constraint failed: (?P<cols>.+)$', re.IGNORECASE | re.MULTILINE),
    # MySQL: "Duplicate entry 'Hello' for key 'posts.uq_posts_title'"
    re.compile(r"Duplicate entry .* for key '?(?P<cols>[^']+)'?", re.IGNORECASE),
)


def _sqlstate(orig) -> str | None:
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def _constraint_name(orig) -> str | None:
    name = getattr(getattr(orig, "diag", None), "constraint_name", None)
    if name:
        return name
    # asyncpg: the native exception is chained as __cause__ of the adapted DBAPI error
    return getattr(getattr(orig, "__cause__", None), "constraint_name", None)


def _kind_from_message(message: str) -> ConstraintKind:
    normalized = message.lower()
    for kind, keywords in MESSAGE_KEYWORDS:
        if any(keyword in normalized for keyword in keywords):
            return kind
    logger.warning("Unrecognized integrity error message", extra={"message_snippet": message[:200]})
    return ConstraintKind.UNKNOWN


def extract_columns(message: str) -> tuple[str, ...]:
    """Column names named by a driver message, table prefixes stripped; empty when none."""
    for pattern in COLUMN_PATTERNS:
        match = pattern.search(message or "")
        if match:
            return tuple(
                part.strip().strip('"').split(".")[-1]
                for part in match.group("cols").split(",")
            )
    return ()


def diagnose_integrity_error(exc: IntegrityError) -> IntegrityDiagnosis:
    orig = exc.orig
    message = str(orig) if orig is not None else str(exc)

    sqlstate = _sqlstate(orig)
    if sqlstate:
        kind = SQLSTATE_KINDS.get(sqlstate, ConstraintKind.UNKNOWN)
        if kind is ConstraintKind.UNKNOWN:
            logger.warning("Unrecognized Postgres integrity code", extra={"sqlstate": sqlstate})
        constraint = _constraint_name(orig)
    else:
        kind = _kind_from_message(message)
        constraint = None

    diagnosis = IntegrityDiagnosis(kind, constraint, extract_columns(message))
    logger.debug("Integrity error diagnosed", extra={"diagnosis": diagnosis._asdict()})
    return diagnosis


__all__ = [
    "ConstraintKind",
    "IntegrityDiagnosis",
    "diagnose_integrity_error",
    "extract_columns",
]
