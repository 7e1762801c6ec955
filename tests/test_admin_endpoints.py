"""Tests for admin endpoints."""

from fastapi.testclient import TestClient

from custody_scan.api.app import create_app


def test_admin_requires_token(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/admin/health").status_code == 401
    response = client.get("/admin/health", headers={"X-Admin-Token": "admin-token"})
    assert response.status_code == 200


def test_admin_creates_and_deletes_shipment(container) -> None:
    client = TestClient(create_app(container))
    container.catalog_service.id_factory = lambda: "JOB-7777"
    headers = {"X-Admin-Token": "admin-token"}

    response = client.post(
        "/admin/shipments",
        headers=headers,
        json={
            "destination": "Ipoh Specialist",
            "expected_vehicle_id": "TRUCK-C",
            "items": [{"name": "Pendant Arm", "quantity": 2, "sku": "PA-2"}],
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["id"] == "JOB-7777"
    assert data["items"][0]["sku"] == "PA-2"
    assert client.get("/shipments").json()["shipments"][0]["id"] == "JOB-7777"

    response = client.delete("/admin/shipments/JOB-7777", headers=headers)
    assert response.status_code == 204
    assert client.get("/shipments/JOB-7777").status_code == 404


def test_admin_rejects_unknown_vehicle(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/admin/shipments",
        headers={"X-Admin-Token": "admin-token"},
        json={
            "destination": "Ipoh Specialist",
            "expected_vehicle_id": "TRUCK-Z",
            "items": [{"name": "Pendant Arm"}],
        },
    )

    assert response.status_code == 422
