"""Domain models for shipments and their custody status."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class ShipmentStatus(StrEnum):
    """Displayed custody status of a shipment."""

    CREATED = "CREATED"
    PICKED_UP = "PICKED_UP"
    LOADED = "LOADED"
    ARRIVED = "ARRIVED"
    INSTALLED = "INSTALLED"


class ScanAction(StrEnum):
    """Custody transfer a worker confirms during a scan session."""

    PICKUP = "PICKUP"
    LOAD = "LOAD"
    ARRIVE = "ARRIVE"
    INSTALL = "INSTALL"


@dataclass(frozen=True)
class LineItem:
    """Single line of a shipment's packing list.

    The optional fields are informational only and never validated.
    """

    name: str
    quantity: int
    sku: str | None = None
    batch: str | None = None
    expiry: str | None = None
    serial: str | None = None


@dataclass(frozen=True)
class Shipment:
    """A trackable unit of goods identified by a job code."""

    id: str
    destination: str
    expected_vehicle_id: str
    items: tuple[LineItem, ...]
    status: ShipmentStatus = ShipmentStatus.CREATED
    last_action: ScanAction | None = None
    last_scanned_at: datetime | None = None
    last_scanned_by: str | None = None
    proof_photos: tuple[str, ...] = ()


def normalize_code(code: str) -> str:
    """Normalize a job code for comparison."""
    return code.strip().upper()
