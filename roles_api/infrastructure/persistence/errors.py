"""Translate persistence-layer errors into domain exceptions.

raise_persistence_error() never returns: recognized errors become the
matching RolesApiException subclass (chained to the original), anything
else is re-raised unchanged. Call it from an except block in place of a
return value.
"""

import logging
from typing import Any, NoReturn

from sqlalchemy.exc import IntegrityError, NoResultFound

from roles_api.domain.exceptions import (
    ConflictException,
    ReferentialIntegrityException,
    ResourceNotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "unique_violation"
FOREIGN_KEY_VIOLATION = "foreign_key_violation"
NOT_NULL_VIOLATION = "not_null_violation"

# PostgreSQL SQLSTATE codes (asyncpg/psycopg expose .sqlstate, psycopg2 .pgcode)
_SQLSTATE_KINDS: dict[str, str] = {
    "23505": UNIQUE_VIOLATION,
    "23503": FOREIGN_KEY_VIOLATION,
    "23502": NOT_NULL_VIOLATION,
}

# SQLite extended result code names (sqlite3.Error.sqlite_errorname)
_SQLITE_KINDS: dict[str, str] = {
    "SQLITE_CONSTRAINT_UNIQUE": UNIQUE_VIOLATION,
    "SQLITE_CONSTRAINT_PRIMARYKEY": UNIQUE_VIOLATION,
    "SQLITE_CONSTRAINT_FOREIGNKEY": FOREIGN_KEY_VIOLATION,
    "SQLITE_CONSTRAINT_NOTNULL": NOT_NULL_VIOLATION,
}


def _driver_errors(error: IntegrityError) -> list[BaseException]:
    """error.orig plus the native driver exception it wraps (asyncpg sets __cause__)."""
    orig = error.orig
    if orig is None:
        return []
    cause = orig.__cause__
    return [orig, cause] if cause is not None else [orig]


def _driver_attr(error: IntegrityError, name: str) -> Any:
    for exc in _driver_errors(error):
        value = getattr(exc, name, None)
        if value:
            return value
    return None


def classify_integrity_error(error: IntegrityError) -> str | None:
    """Return the violation kind for a driver-level integrity error, or None if unknown."""
    sqlstate = _driver_attr(error, "sqlstate") or _driver_attr(error, "pgcode")
    if sqlstate in _SQLSTATE_KINDS:
        return _SQLSTATE_KINDS[sqlstate]
    errorname = _driver_attr(error, "sqlite_errorname")
    if errorname in _SQLITE_KINDS:
        return _SQLITE_KINDS[errorname]
    return None


def _constraint_name(error: IntegrityError) -> str | None:
    """Constraint name reported by the driver, when available (asyncpg/psycopg)."""
    name = _driver_attr(error, "constraint_name")
    if name:
        return name
    diag = _driver_attr(error, "diag")
    return getattr(diag, "constraint_name", None)


def raise_persistence_error(
    error: Exception,
    resource_type: str = "Record",
    resource_id: str | int | None = None,
) -> NoReturn:
    """Raise the domain exception for a known persistence error; otherwise re-raise error.

    Args:
        error: Exception caught around a persistence call.
        resource_type: Name used in messages (e.g. 'Role').
        resource_id: Id the write targeted, reported when no row matched.

    Raises:
        ConflictException: Unique constraint violated.
        ReferentialIntegrityException: Foreign key constraint violated.
        ValidationException: Required column left null.
        ResourceNotFoundException: A write matched no row.
        Exception: error itself, when it is not recognized.
    """
    if isinstance(error, NoResultFound):
        raise ResourceNotFoundException(resource_type, resource_id) from error
    if isinstance(error, IntegrityError):
        kind = classify_integrity_error(error)
        constraint = _constraint_name(error)
        if kind == UNIQUE_VIOLATION:
            raise ConflictException(
                f"{resource_type} already exists", constraint=constraint
            ) from error
        if kind == FOREIGN_KEY_VIOLATION:
            raise ReferentialIntegrityException(
                f"{resource_type} is referenced by or references another record",
                constraint=constraint,
            ) from error
        if kind == NOT_NULL_VIOLATION:
            raise ValidationException(
                f"{resource_type} is missing a required value"
            ) from error
        logger.warning("Unrecognized integrity error: %s", error.orig)
    raise error
