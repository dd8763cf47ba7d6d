# app/system_services/constraint_errors.py
"""
Constraint violation errors raised by the write layer.

The database is the single source of truth for uniqueness, references,
NOT NULL and enumerated values; these classes give its IntegrityError a
typed shape so callers can tell the four failure kinds apart.
"""
import logging
import re
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class ConstraintViolation(Exception):
    """A write was rejected by a schema constraint. Resubmit corrected data."""

    kind = "constraint"

    def __init__(self, detail: str, table: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.table = table

    def __str__(self):
        if self.table:
            return f"{self.kind} violation on {self.table}: {self.detail}"
        return f"{self.kind} violation: {self.detail}"


class UniquenessViolation(ConstraintViolation):
    kind = "uniqueness"


class ReferentialViolation(ConstraintViolation):
    kind = "referential"


class RequiredFieldViolation(ConstraintViolation):
    kind = "required field"


class EnumeratedValueViolation(ConstraintViolation):
    kind = "enumerated value"


# PostgreSQL SQLSTATE codes
_SQLSTATE = {
    "23505": UniquenessViolation,
    "23503": ReferentialViolation,
    "23502": RequiredFieldViolation,
    "23514": EnumeratedValueViolation,
}

# MySQL error numbers (duplicate entry, FK parent missing, column cannot be null, check failed)
_MYSQL_ERRNO = {
    1062: UniquenessViolation,
    1452: ReferentialViolation,
    1048: RequiredFieldViolation,
    3819: EnumeratedValueViolation,
}

# SQLite only reports a message, e.g. "UNIQUE constraint failed: patients.email"
_SQLITE_PREFIX = (
    ("UNIQUE constraint failed", UniquenessViolation),
    ("FOREIGN KEY constraint failed", ReferentialViolation),
    ("NOT NULL constraint failed", RequiredFieldViolation),
    ("CHECK constraint failed", EnumeratedValueViolation),
)

_SQLITE_TABLE = re.compile(r"constraint failed: (\w+)\.")


def _sqlstate(orig) -> Optional[str]:
    # asyncpg exposes .sqlstate, psycopg .sqlstate / psycopg2 .pgcode
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def _mysql_errno(orig) -> Optional[int]:
    args = getattr(orig, "args", ())
    if args and isinstance(args[0], int):
        return args[0]
    return None


def translate_integrity_error(exc: IntegrityError, table: Optional[str] = None) -> ConstraintViolation:
    """Map a driver IntegrityError onto the matching ConstraintViolation subclass."""
    orig = exc.orig
    message = str(orig) if orig is not None else str(exc)

    sqlstate = _sqlstate(orig)
    if sqlstate in _SQLSTATE:
        return _SQLSTATE[sqlstate](message, table)

    errno = _mysql_errno(orig)
    if errno in _MYSQL_ERRNO:
        return _MYSQL_ERRNO[errno](message, table)

    for prefix, violation_cls in _SQLITE_PREFIX:
        if prefix in message:
            if table is None:
                match = _SQLITE_TABLE.search(message)
                table = match.group(1) if match else None
            return violation_cls(message, table)

    return ConstraintViolation(message, table)


async def commit_or_raise(db: AsyncSession, table: str) -> None:
    """Commit the pending write; on IntegrityError roll back and raise the typed violation."""
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        violation = translate_integrity_error(e, table)
        logger.warning(f"⚠️ Write rejected: {violation}")
        raise violation from e
