"""Printify cache tests."""

from sqlalchemy import select

from app.db.models import PrintifyCache
from app.services.printify_cache_service import PrintifyCacheService


def test_put_and_get_entry(client):
    response = client.put(
        "/api/v1/printify-cache/product/123",
        json={"data": {"title": "Tee", "print_areas": [{"variant_ids": [1, 2]}]}},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["type"] == "product"
    assert data["externalId"] == "123"
    assert data["data"] == {"title": "Tee", "printAreas": [{"variantIds": [1, 2]}]}
    assert "lastUpdated" in data

    response = client.get("/api/v1/printify-cache/product/123")
    assert response.status_code == 200
    assert response.json()["id"] == data["id"]


def test_stored_payload_is_snake_case(client, db_session):
    client.put("/api/v1/printify-cache/shop/s1", json={"data": {"shopTitle": "ILYTAT"}})

    entry = db_session.scalars(select(PrintifyCache)).one()
    assert entry.data == {"shop_title": "ILYTAT"}


def test_put_overwrites_entry(client, db_session):
    first = client.put("/api/v1/printify-cache/order/o1", json={"data": {"status": "pending"}}).json()
    second = client.put("/api/v1/printify-cache/order/o1", json={"data": {"status": "shipped"}}).json()

    assert second["id"] == first["id"]
    assert second["data"] == {"status": "shipped"}
    assert len(db_session.scalars(select(PrintifyCache)).all()) == 1


def test_same_external_id_per_type(client):
    client.put("/api/v1/printify-cache/product/1", json={"data": {"kind": "product"}})
    client.put("/api/v1/printify-cache/shop/1", json={"data": {"kind": "shop"}})

    assert client.get("/api/v1/printify-cache/product/1").json()["data"] == {"kind": "product"}
    assert client.get("/api/v1/printify-cache/shop/1").json()["data"] == {"kind": "shop"}


def test_unknown_type_is_rejected(client):
    response = client.put("/api/v1/printify-cache/invoice/1", json={"data": {}})
    assert response.status_code == 422


def test_delete_entry(client):
    client.put("/api/v1/printify-cache/product/9", json={"data": [1, 2]})

    response = client.delete("/api/v1/printify-cache/product/9")
    assert response.json() == {"type": "product", "externalId": "9", "deleted": True}
    assert client.get("/api/v1/printify-cache/product/9").status_code == 404
    assert client.delete("/api/v1/printify-cache/product/9").status_code == 404


def test_service_get_missing(db_session):
    service = PrintifyCacheService(db_session)
    assert service.get("product", "nope") is None
    assert service.delete("product", "nope") is False
