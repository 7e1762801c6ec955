"""Tests for catalog lookups and maintenance."""

from dataclasses import replace

import pytest

from custody_scan.domain.shipments import LineItem, ShipmentStatus
from custody_scan.errors import CatalogError, ShipmentNotFoundError
from tests.conftest import Services


def test_lookup_normalizes_code(services: Services) -> None:
    assert services.catalog.lookup("  jOb-Sj-102\n") is not None
    assert services.catalog.lookup("JOB-SJ-10") is None
    assert services.catalog.lookup("   ") is None


def test_create_shipment_drops_blank_items(services: Services) -> None:
    services.catalog.id_factory = lambda: "JOB-4242"

    shipment = services.catalog.create_shipment(
        destination="  Klang Clinic ",
        expected_vehicle_id="TRUCK-D",
        items=[
            LineItem(name="Oxygen Regulator", quantity=2, serial="SN-1"),
            LineItem(name="  ", quantity=1),
        ],
    )

    assert shipment.id == "JOB-4242"
    assert shipment.destination == "Klang Clinic"
    assert shipment.status == ShipmentStatus.CREATED
    assert [item.name for item in shipment.items] == ["Oxygen Regulator"]
    assert shipment.items[0].serial == "SN-1"
    assert services.catalog.list_shipments()[0] == shipment


def test_create_shipment_retries_taken_ids(services: Services) -> None:
    ids = iter(["JOB-KL-001", "JOB-5000"])
    services.catalog.id_factory = lambda: next(ids)

    shipment = services.catalog.create_shipment(
        "Site", "TRUCK-A", [LineItem(name="Panel", quantity=1)]
    )

    assert shipment.id == "JOB-5000"


@pytest.mark.parametrize(
    ("destination", "vehicle", "items"),
    [
        ("", "TRUCK-A", [LineItem(name="Panel", quantity=1)]),
        ("Site", "TRUCK-Z", [LineItem(name="Panel", quantity=1)]),
        ("Site", "TRUCK-A", [LineItem(name=" ", quantity=1)]),
        ("Site", "TRUCK-A", [LineItem(name="Panel", quantity=0)]),
    ],
)
def test_create_shipment_rejects_invalid_orders(
    services: Services, destination: str, vehicle: str, items: list[LineItem]
) -> None:
    with pytest.raises(CatalogError):
        services.catalog.create_shipment(destination, vehicle, items)


def test_delete_shipment(services: Services) -> None:
    services.catalog.delete_shipment("job-kl-003")

    assert services.catalog.lookup("JOB-KL-003") is None
    with pytest.raises(ShipmentNotFoundError):
        services.catalog.delete_shipment("JOB-KL-003")


def test_save_shipment_replaces_record(services: Services) -> None:
    shipment = services.catalog.get_shipment("JOB-KL-001")

    services.catalog.save_shipment(replace(shipment, status=ShipmentStatus.LOADED))

    assert services.catalog.get_shipment("JOB-KL-001").status == ShipmentStatus.LOADED
    assert len(services.catalog.list_shipments()) == len(services.shipments.shipments)


def test_vehicle_name_falls_back_to_id(services: Services) -> None:
    assert services.catalog.vehicle_name("TRUCK-D") == "Express Van"
    assert services.catalog.vehicle_name("TRUCK-Q") == "TRUCK-Q"
