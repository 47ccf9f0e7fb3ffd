"""Integration tests: fee repository with test DB session."""
import pytest

from repositories.fee_repository import create_fee, get_fee, list_fees

pytestmark = pytest.mark.integration


def test_create_fee_and_get(db_session):
    """create_fee then get_fee returns the stored fee."""
    fee = create_fee(
        db_session,
        type="area",
        amount=7000,
        month="2026-10",
        description="Area fee per m2",
        compulsory=True,
    )
    assert fee.id is not None
    found = get_fee(db_session, fee.id)
    assert found is not None
    assert found.type == "area"
    assert float(found.amount) == 7000.0
    assert found.compulsory is True


def test_get_fee_not_found(db_session):
    """get_fee returns None for unknown id."""
    assert get_fee(db_session, 999999) is None


def test_list_fees_filter_by_month(db_session):
    """list_fees with a month returns only that month's fees, ordered by type."""
    create_fee(db_session, type="vehicle", amount=100, month="2026-09", description="Parking")
    create_fee(db_session, type="vehicle", amount=100, month="2026-10", description="Parking")
    create_fee(db_session, type="area", amount=200, month="2026-10", description="Area")
    october = list_fees(db_session, "2026-10")
    assert [f.type for f in october] == ["area", "vehicle"]
    assert len(list_fees(db_session)) == 3
