"""Finalize custody scans into the event log and shipment catalog."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import uuid4

from custody_scan.domain.events import ScanEvent
from custody_scan.domain.shipments import ScanAction, Shipment, ShipmentStatus
from custody_scan.services.catalog import CatalogService
from custody_scan.services.event_log import EventLogService

logger = logging.getLogger(__name__)

# ARRIVE and INSTALL are accepted by the workflow but have no status mapping.
STATUS_PROJECTION: dict[ScanAction, ShipmentStatus] = {
    ScanAction.PICKUP: ShipmentStatus.PICKED_UP,
    ScanAction.LOAD: ShipmentStatus.LOADED,
}


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def project_status(current: ShipmentStatus, action: ScanAction) -> ShipmentStatus:
    """Return the shipment status after a successful scan of ``action``."""
    return STATUS_PROJECTION.get(action, current)


@dataclass
class DispatchService:
    """Single mutation point for recording scan outcomes."""

    catalog: CatalogService
    event_log: EventLogService
    actor: str
    clock: Callable[[], datetime] = field(default=_utc_now)

    def finalize(  # noqa: PLR0913
        self,
        shipment_id: str,
        action: ScanAction,
        success: bool,
        vehicle_id: str | None = None,
        photos: Sequence[str] = (),
        geolocation: str | None = None,
        notes: str | None = None,
    ) -> ScanEvent:
        """Append one scan event and project it onto the shipment on success.

        The event is appended even when the shipment has since been removed
        from the catalog; only the projection needs the shipment record.
        """
        shipment = self.catalog.lookup(shipment_id)
        event = ScanEvent(
            id=uuid4(),
            timestamp=self.clock(),
            shipment_id=shipment.id if shipment else shipment_id,
            actor=self.actor,
            action=action,
            success=success,
            vehicle_id=vehicle_id if action is ScanAction.LOAD else None,
            geolocation=geolocation,
            proof_photos=tuple(photos),
            notes=notes,
        )
        self.event_log.append(event)
        log_extra = {"shipment_id": event.shipment_id, "scan_action": str(action)}

        if not success:
            logger.warning("Recorded failed scan", extra=log_extra)
            return event
        if shipment is None:
            logger.warning("Recorded scan for a removed shipment", extra=log_extra)
            return event

        self.catalog.save_shipment(_apply_event(shipment, event))
        logger.info("Recorded scan", extra=log_extra)
        return event


def _apply_event(shipment: Shipment, event: ScanEvent) -> Shipment:
    return replace(
        shipment,
        status=project_status(shipment.status, event.action),
        last_action=event.action,
        last_scanned_at=event.timestamp,
        last_scanned_by=event.actor,
        proof_photos=event.proof_photos,
    )
