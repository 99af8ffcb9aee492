"""Tests for raise_persistence_error (driver error -> domain exception)."""

import pytest
from sqlalchemy.exc import IntegrityError, NoResultFound, OperationalError

from roles_api.domain.exceptions import (
    ConflictException,
    ReferentialIntegrityException,
    ResourceNotFoundException,
    ValidationException,
)
from roles_api.infrastructure.persistence.errors import (
    FOREIGN_KEY_VIOLATION,
    NOT_NULL_VIOLATION,
    UNIQUE_VIOLATION,
    classify_integrity_error,
    raise_persistence_error,
)


class _PgError(Exception):
    """Stand-in for an asyncpg/psycopg error carrying a SQLSTATE."""

    def __init__(self, sqlstate: str, constraint_name: str | None = None) -> None:
        super().__init__(sqlstate)
        self.sqlstate = sqlstate
        self.constraint_name = constraint_name


class _Psycopg2Error(Exception):
    def __init__(self, pgcode: str) -> None:
        super().__init__(pgcode)
        self.pgcode = pgcode


class _SqliteError(Exception):
    def __init__(self, errorname: str) -> None:
        super().__init__(errorname)
        self.sqlite_errorname = errorname


def _integrity(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT INTO role ...", {}, orig)


@pytest.mark.parametrize(
    ("orig", "kind"),
    [
        (_PgError("23505"), UNIQUE_VIOLATION),
        (_PgError("23503"), FOREIGN_KEY_VIOLATION),
        (_PgError("23502"), NOT_NULL_VIOLATION),
        (_Psycopg2Error("23505"), UNIQUE_VIOLATION),
        (_SqliteError("SQLITE_CONSTRAINT_UNIQUE"), UNIQUE_VIOLATION),
        (_SqliteError("SQLITE_CONSTRAINT_FOREIGNKEY"), FOREIGN_KEY_VIOLATION),
        (_SqliteError("SQLITE_CONSTRAINT_CHECK"), None),
        (Exception("no code"), None),
    ],
)
def test_classify_integrity_error(orig: Exception, kind: str | None) -> None:
    assert classify_integrity_error(_integrity(orig)) == kind


def test_unique_violation_raises_conflict_with_constraint() -> None:
    error = _integrity(_PgError("23505", constraint_name="uq_role_name"))
    with pytest.raises(ConflictException) as exc_info:
        raise_persistence_error(error, "Role")
    assert exc_info.value.message == "Role already exists"
    assert exc_info.value.details == {"constraint": "uq_role_name"}
    assert exc_info.value.__cause__ is error


def test_foreign_key_violation_raises_referential_integrity() -> None:
    with pytest.raises(ReferentialIntegrityException):
        raise_persistence_error(_integrity(_SqliteError("SQLITE_CONSTRAINT_FOREIGNKEY")), "Role")


def test_not_null_violation_raises_validation() -> None:
    with pytest.raises(ValidationException):
        raise_persistence_error(_integrity(_PgError("23502")), "Role")


def test_no_result_on_write_raises_not_found() -> None:
    with pytest.raises(ResourceNotFoundException) as exc_info:
        raise_persistence_error(NoResultFound("No row was found when one was required"), "Role")
    assert exc_info.value.details == {"resource_type": "Role"}


def test_unrecognized_integrity_error_is_reraised_unchanged() -> None:
    error = _integrity(_SqliteError("SQLITE_CONSTRAINT_CHECK"))
    with pytest.raises(IntegrityError) as exc_info:
        raise_persistence_error(error, "Role")
    assert exc_info.value is error


def test_other_errors_are_reraised_unchanged() -> None:
    error = OperationalError("SELECT 1", {}, Exception("connection refused"))
    with pytest.raises(OperationalError) as exc_info:
        raise_persistence_error(error)
    assert exc_info.value is error


def test_plain_exception_is_reraised_unchanged() -> None:
    error = RuntimeError("boom")
    with pytest.raises(RuntimeError, match="boom"):
        raise_persistence_error(error)


def test_no_result_on_write_reports_target_id() -> None:
    with pytest.raises(ResourceNotFoundException) as exc_info:
        raise_persistence_error(NoResultFound("No row was found"), "Role", 7)
    assert exc_info.value.message == "Role not found: 7"
    assert exc_info.value.details == {"resource_type": "Role", "resource_id": 7}


class _AdaptedError(Exception):
    """Stands in for SQLAlchemy's asyncpg adapter error, which wraps the driver error."""

    def __init__(self, sqlstate: str, cause: Exception) -> None:
        super().__init__(str(cause))
        self.sqlstate = sqlstate
        self.__cause__ = cause


def test_constraint_name_read_from_wrapped_driver_error() -> None:
    native = _PgError("23505", constraint_name="uq_role_name")
    error = _integrity(_AdaptedError("23505", native))
    with pytest.raises(ConflictException) as exc_info:
        raise_persistence_error(error, "Role")
    assert exc_info.value.details == {"constraint": "uq_role_name"}


def test_sqlstate_read_from_wrapped_driver_error() -> None:
    native = _PgError("23503", constraint_name="role_has_permission_role_id_fkey")
    error = _integrity(_AdaptedError("", native))
    with pytest.raises(ReferentialIntegrityException) as exc_info:
        raise_persistence_error(error, "Role")
    assert exc_info.value.details == {"constraint": "role_has_permission_role_id_fkey"}
