"""Domain models for the scan event log."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from custody_scan.domain.shipments import ScanAction


@dataclass(frozen=True)
class ScanEvent:
    """Immutable audit record of one attempted custody confirmation."""

    id: UUID
    timestamp: datetime
    shipment_id: str
    actor: str
    action: ScanAction
    success: bool
    vehicle_id: str | None = None
    geolocation: str | None = None
    proof_photos: tuple[str, ...] = ()
    notes: str | None = None
