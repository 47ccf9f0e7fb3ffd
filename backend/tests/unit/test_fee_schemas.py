"""Unit tests: fee payload validation."""
import pytest
from pydantic import ValidationError

from schemas.fees import FeeCreate

pytestmark = pytest.mark.unit

VALID = {
    "type": "vehicle",
    "amount": 120000,
    "month": "2026-10",
    "description": "Parking fee",
    "compulsory": False,
}


def test_valid_fee():
    """A complete payload validates and keeps its values."""
    fee = FeeCreate(**VALID)
    assert fee.type == "vehicle"
    assert fee.amount == 120000
    assert fee.compulsory is False


def test_compulsory_defaults_true():
    """compulsory is optional and defaults to True."""
    body = {k: v for k, v in VALID.items() if k != "compulsory"}
    assert FeeCreate(**body).compulsory is True


def test_area_fee_forced_compulsory():
    """An area fee is compulsory even if the payload says otherwise."""
    assert FeeCreate(**{**VALID, "type": "area"}).compulsory is True


@pytest.mark.parametrize(
    "field,value",
    [
        ("type", "x"),
        ("type", "   "),
        ("amount", 0),
        ("amount", -5),
        ("month", ""),
        ("month", "  "),
        ("description", "a"),
        ("description", " a "),
    ],
)
def test_invalid_fields_rejected(field, value):
    """Short type/description, non-positive amount and blank month are rejected."""
    with pytest.raises(ValidationError):
        FeeCreate(**{**VALID, field: value})


def test_text_fields_stripped():
    """Surrounding whitespace is dropped from text fields."""
    fee = FeeCreate(**{**VALID, "type": " elevator ", "description": "  Lift upkeep "})
    assert fee.type == "elevator"
    assert fee.description == "Lift upkeep"
