# tests/test_constraint_errors.py
import pytest
from sqlalchemy.exc import IntegrityError

from app.system_services.constraint_errors import (
    ConstraintViolation,
    EnumeratedValueViolation,
    ReferentialViolation,
    RequiredFieldViolation,
    UniquenessViolation,
    translate_integrity_error,
)


class FakePostgresError(Exception):
    def __init__(self, sqlstate, message):
        super().__init__(message)
        self.sqlstate = sqlstate


def _integrity(orig):
    return IntegrityError("INSERT INTO patients ...", {}, orig)


@pytest.mark.parametrize("sqlstate,expected", [
    ("23505", UniquenessViolation),
    ("23503", ReferentialViolation),
    ("23502", RequiredFieldViolation),
    ("23514", EnumeratedValueViolation),
])
def test_postgres_sqlstate(sqlstate, expected):
    violation = translate_integrity_error(_integrity(FakePostgresError(sqlstate, "boom")), "patients")
    assert type(violation) is expected
    assert violation.table == "patients"


@pytest.mark.parametrize("errno,expected", [
    (1062, UniquenessViolation),
    (1452, ReferentialViolation),
    (1048, RequiredFieldViolation),
    (3819, EnumeratedValueViolation),
])
def test_mysql_error_numbers(errno, expected):
    violation = translate_integrity_error(_integrity(Exception(errno, "Duplicate entry '555-0100'")))
    assert type(violation) is expected


@pytest.mark.parametrize("message,expected,table", [
    ("UNIQUE constraint failed: patients.email", UniquenessViolation, "patients"),
    ("FOREIGN KEY constraint failed", ReferentialViolation, None),
    ("NOT NULL constraint failed: prescriptions.dosage", RequiredFieldViolation, "prescriptions"),
    ("CHECK constraint failed: ck_appointments_status_values", EnumeratedValueViolation, None),
])
def test_sqlite_messages(message, expected, table):
    violation = translate_integrity_error(_integrity(Exception(message)))
    assert type(violation) is expected
    assert violation.table == table


def test_unrecognised_error_falls_back_to_base_class():
    violation = translate_integrity_error(_integrity(Exception("something odd")), "doctors")
    assert type(violation) is ConstraintViolation
    assert str(violation) == "constraint violation on doctors: something odd"


def test_violation_message_names_kind():
    assert str(UniquenessViolation("dup", "patients")) == "uniqueness violation on patients: dup"
    assert str(ReferentialViolation("missing parent")) == "referential violation: missing parent"
