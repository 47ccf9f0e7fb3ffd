"""Unit tests: classifying IntegrityError by driver message."""
import pytest
from sqlalchemy.exc import IntegrityError

from db import is_unique_violation

pytestmark = pytest.mark.unit


def _integrity_error(message: str) -> IntegrityError:
    """IntegrityError whose statement mentions every vehicle column, as a real insert does."""
    return IntegrityError(
        "INSERT INTO vehicle (license, vehicle_type, apartment_id) VALUES (?, ?, ?)",
        ("FK-1", "CAR", 424242),
        Exception(message),
    )


def test_sqlite_unique_on_column():
    """SQLite's UNIQUE failure on the column is recognised."""
    assert is_unique_violation(_integrity_error("UNIQUE constraint failed: vehicle.license"), "license")


def test_postgres_unique_on_column():
    """PostgreSQL's duplicate key wording is recognised."""
    exc = _integrity_error('duplicate key value violates unique constraint "vehicle_license_key"')
    assert is_unique_violation(exc, "license")


def test_foreign_key_failure_is_not_unique():
    """A FK failure is not a duplicate even though the SQL names the license column."""
    assert not is_unique_violation(_integrity_error("FOREIGN KEY constraint failed"), "license")


def test_unique_on_other_column():
    """A UNIQUE failure on a different column does not match."""
    assert not is_unique_violation(_integrity_error("UNIQUE constraint failed: apartment.name"), "license")
