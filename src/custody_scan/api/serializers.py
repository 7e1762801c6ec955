"""JSON payload builders for domain objects."""

from dataclasses import asdict

from custody_scan.domain.events import ScanEvent
from custody_scan.domain.fleet import Vehicle
from custody_scan.domain.sessions import SessionSnapshot
from custody_scan.domain.shipments import Shipment


def shipment_payload(shipment: Shipment) -> dict[str, object]:
    """Serialize a shipment for API responses."""
    return {
        "id": shipment.id,
        "destination": shipment.destination,
        "expected_vehicle_id": shipment.expected_vehicle_id,
        "items": [asdict(item) for item in shipment.items],
        "status": str(shipment.status),
        "last_action": str(shipment.last_action) if shipment.last_action else None,
        "last_scanned_at": (
            shipment.last_scanned_at.isoformat() if shipment.last_scanned_at else None
        ),
        "last_scanned_by": shipment.last_scanned_by,
        "proof_photos": list(shipment.proof_photos),
    }


def vehicle_payload(vehicle: Vehicle) -> dict[str, object]:
    """Serialize a vehicle."""
    return {"id": vehicle.id, "name": vehicle.name, "color": vehicle.color}


def event_payload(event: ScanEvent) -> dict[str, object]:
    """Serialize a scan event."""
    return {
        "id": str(event.id),
        "timestamp": event.timestamp.isoformat(),
        "shipment_id": event.shipment_id,
        "actor": event.actor,
        "action": str(event.action),
        "success": event.success,
        "vehicle_id": event.vehicle_id,
        "geolocation": event.geolocation,
        "proof_photos": list(event.proof_photos),
        "notes": event.notes,
    }


def snapshot_payload(snapshot: SessionSnapshot) -> dict[str, object]:
    """Serialize the scan session snapshot."""
    return {
        "state": snapshot.state,
        "shipment": shipment_payload(snapshot.shipment) if snapshot.shipment else None,
        "action": str(snapshot.action) if snapshot.action else None,
        "checked_items": list(snapshot.checked_items),
        "vehicle_id": snapshot.vehicle_id,
        "photos": list(snapshot.photos),
        "message": snapshot.message,
        "can_continue": snapshot.can_continue,
        "can_finalize": snapshot.can_finalize,
    }
