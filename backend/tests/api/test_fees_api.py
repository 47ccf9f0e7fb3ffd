"""API tests: fees endpoints."""
import pytest

pytestmark = pytest.mark.api

FEE = {
    "type": "vehicle",
    "amount": 120000,
    "month": "2026-10",
    "description": "Parking fee",
    "compulsory": False,
}


def test_list_fees_empty(client):
    """GET /api/fees returns 200 and an empty list when no fees exist."""
    r = client.get("/api/fees")
    assert r.status_code == 200
    assert r.json() == []


def test_create_fee_success(client):
    """POST /api/fees returns 201 and the created fee."""
    r = client.post("/api/fees", json=FEE)
    assert r.status_code == 201
    data = r.json()
    assert isinstance(data["id"], int)
    assert data["type"] == "vehicle"
    assert data["amount"] == 120000.0
    assert data["month"] == "2026-10"
    assert data["description"] == "Parking fee"
    assert data["compulsory"] is False


def test_create_area_fee_is_compulsory(client):
    """POST /api/fees stores an area fee as compulsory."""
    r = client.post("/api/fees", json={**FEE, "type": "area"})
    assert r.status_code == 201
    assert r.json()["compulsory"] is True


@pytest.mark.parametrize(
    "field,value",
    [("type", "x"), ("amount", 0), ("month", ""), ("description", "a")],
)
def test_create_fee_invalid_422(client, field, value):
    """POST /api/fees rejects payloads that fail validation."""
    r = client.post("/api/fees", json={**FEE, field: value})
    assert r.status_code == 422


def test_create_fee_missing_field_422(client):
    """POST /api/fees without a month returns 422."""
    body = {k: v for k, v in FEE.items() if k != "month"}
    assert client.post("/api/fees", json=body).status_code == 422


def test_list_fees_filter_by_month(client):
    """GET /api/fees?month=... returns only that month."""
    client.post("/api/fees", json=FEE)
    client.post("/api/fees", json={**FEE, "month": "2026-11"})
    r = client.get("/api/fees", params={"month": "2026-11"})
    assert r.status_code == 200
    assert [f["month"] for f in r.json()] == ["2026-11"]
    assert len(client.get("/api/fees").json()) == 2


def test_get_fee(client):
    """GET /api/fees/{id} returns the created fee."""
    created = client.post("/api/fees", json=FEE).json()
    r = client.get(f"/api/fees/{created['id']}")
    assert r.status_code == 200
    assert r.json() == created


def test_get_fee_not_found_404(client):
    """GET /api/fees/{id} returns 404 for unknown id."""
    assert client.get("/api/fees/999999").status_code == 404
