"""In-memory repositories for the process-lifetime catalog and event log."""

from dataclasses import dataclass, field

from custody_scan.domain.events import ScanEvent
from custody_scan.domain.fleet import Vehicle
from custody_scan.domain.shipments import Shipment
from custody_scan.services.catalog import FleetRepository, ShipmentRepository
from custody_scan.services.event_log import ScanEventRepository


@dataclass
class InMemoryShipmentRepository(ShipmentRepository):
    """Shipment storage kept in a list, newest first."""

    shipments: list[Shipment] = field(default_factory=list)

    def list_shipments(self) -> list[Shipment]:
        """Return a copy of the stored shipments."""
        return list(self.shipments)

    def get_shipment(self, shipment_id: str) -> Shipment | None:
        """Return a shipment by exact id."""
        for shipment in self.shipments:
            if shipment.id == shipment_id:
                return shipment
        return None

    def add_shipment(self, shipment: Shipment) -> None:
        """Insert a shipment at the front of the catalog."""
        self.shipments.insert(0, shipment)

    def save_shipment(self, shipment: Shipment) -> None:
        """Replace the shipment with the same id in place."""
        for index, current in enumerate(self.shipments):
            if current.id == shipment.id:
                self.shipments[index] = shipment
                return
        raise KeyError(shipment.id)

    def delete_shipment(self, shipment_id: str) -> bool:
        """Remove a shipment by exact id."""
        remaining = [s for s in self.shipments if s.id != shipment_id]
        removed = len(remaining) != len(self.shipments)
        self.shipments = remaining
        return removed


@dataclass
class InMemoryFleetRepository(FleetRepository):
    """Fixed vehicle list."""

    vehicles: list[Vehicle] = field(default_factory=list)

    def list_vehicles(self) -> list[Vehicle]:
        """Return all vehicles."""
        return list(self.vehicles)

    def get_vehicle(self, vehicle_id: str) -> Vehicle | None:
        """Return a vehicle by id."""
        return next((v for v in self.vehicles if v.id == vehicle_id), None)


@dataclass
class InMemoryScanEventRepository(ScanEventRepository):
    """Append-only event list."""

    events: list[ScanEvent] = field(default_factory=list)

    def append_event(self, event: ScanEvent) -> None:
        """Append an event."""
        self.events.append(event)

    def list_events(self) -> list[ScanEvent]:
        """Return events in emission order."""
        return list(self.events)
