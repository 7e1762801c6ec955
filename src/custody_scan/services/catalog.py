"""Shipment catalog lookups and maintenance."""

import logging
import random
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Protocol

from custody_scan.domain.fleet import Vehicle
from custody_scan.domain.shipments import LineItem, Shipment, normalize_code
from custody_scan.errors import CatalogError, ShipmentNotFoundError

logger = logging.getLogger(__name__)


class ShipmentRepository(Protocol):
    """Storage interface for shipment records."""

    def list_shipments(self) -> list[Shipment]:
        """Return shipments, most recently added first."""

    def get_shipment(self, shipment_id: str) -> Shipment | None:
        """Return a shipment by its exact id, if present."""

    def add_shipment(self, shipment: Shipment) -> None:
        """Store a new shipment."""

    def save_shipment(self, shipment: Shipment) -> None:
        """Replace the stored record with the same id."""

    def delete_shipment(self, shipment_id: str) -> bool:
        """Remove a shipment and return whether it existed."""


class FleetRepository(Protocol):
    """Storage interface for the vehicle fleet."""

    def list_vehicles(self) -> list[Vehicle]:
        """Return all vehicles."""

    def get_vehicle(self, vehicle_id: str) -> Vehicle | None:
        """Return a vehicle by id, if present."""


def _random_job_id() -> str:
    return f"JOB-{random.randint(1000, 9999)}"  # noqa: S311


@dataclass
class CatalogService:
    """Read and maintain the shipment catalog."""

    repository: ShipmentRepository
    fleet_repository: FleetRepository
    id_factory: Callable[[], str] = field(default=_random_job_id)

    def lookup(self, code: str) -> Shipment | None:
        """Resolve a scanned code to a shipment, ignoring case and padding."""
        wanted = normalize_code(code)
        if not wanted:
            return None
        for shipment in self.repository.list_shipments():
            if normalize_code(shipment.id) == wanted:
                return shipment
        return None

    def get_shipment(self, shipment_id: str) -> Shipment:
        """Return a shipment or raise when it is unknown."""
        shipment = self.lookup(shipment_id)
        if shipment is None:
            raise ShipmentNotFoundError(shipment_id)
        return shipment

    def list_shipments(self) -> list[Shipment]:
        """Return all shipments, newest first."""
        return self.repository.list_shipments()

    def create_shipment(
        self,
        destination: str,
        expected_vehicle_id: str,
        items: Iterable[LineItem],
    ) -> Shipment:
        """Create a shipment in the CREATED state with a generated job id."""
        cleaned_destination = destination.strip()
        if not cleaned_destination:
            raise CatalogError("Destination is required")
        if self.fleet_repository.get_vehicle(expected_vehicle_id) is None:
            raise CatalogError(f"Unknown vehicle {expected_vehicle_id}")
        named_items = tuple(
            LineItem(
                name=item.name.strip(),
                quantity=item.quantity,
                sku=item.sku,
                batch=item.batch,
                expiry=item.expiry,
                serial=item.serial,
            )
            for item in items
            if item.name.strip()
        )
        if not named_items:
            raise CatalogError("At least one named item is required")
        if any(item.quantity < 1 for item in named_items):
            raise CatalogError("Item quantities must be at least 1")

        shipment = Shipment(
            id=self._next_id(),
            destination=cleaned_destination,
            expected_vehicle_id=expected_vehicle_id,
            items=named_items,
        )
        self.repository.add_shipment(shipment)
        logger.info("Created shipment", extra={"shipment_id": shipment.id})
        return shipment

    def save_shipment(self, shipment: Shipment) -> None:
        """Persist an updated shipment record."""
        self.repository.save_shipment(shipment)

    def delete_shipment(self, shipment_id: str) -> None:
        """Remove a shipment from the catalog."""
        shipment = self.get_shipment(shipment_id)
        self.repository.delete_shipment(shipment.id)
        logger.info("Deleted shipment", extra={"shipment_id": shipment.id})

    def list_vehicles(self) -> list[Vehicle]:
        """Return the fleet."""
        return self.fleet_repository.list_vehicles()

    def vehicle_name(self, vehicle_id: str) -> str:
        """Return the display name of a vehicle, or its id when unknown."""
        vehicle = self.fleet_repository.get_vehicle(vehicle_id)
        return vehicle.name if vehicle else vehicle_id

    def _next_id(self) -> str:
        for _ in range(100):
            candidate = self.id_factory()
            if self.lookup(candidate) is None:
                return candidate
        raise CatalogError("Could not allocate a unique job id")
