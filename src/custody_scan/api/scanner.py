"""Scan session endpoints.

Each endpoint maps to one session transition and returns the resulting
snapshot; nothing here changes session state directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from custody_scan.api.models import ActionRequest, LookupRequest, VehicleRequest
from custody_scan.api.serializers import snapshot_payload

if TYPE_CHECKING:
    from custody_scan.containers import AppContainer
    from custody_scan.services.sessions import ScanSessionService

router = APIRouter(prefix="/scanner", tags=["scanner"])


def _session(request: Request) -> ScanSessionService:
    container: AppContainer = request.app.state.container
    return container.scan_session_service


@router.get("")
async def get_session(request: Request) -> dict[str, object]:
    """Return the current session snapshot."""
    return snapshot_payload(_session(request).snapshot())


@router.post("/lookup")
async def lookup(body: LookupRequest, request: Request) -> dict[str, object]:
    """Bind a shipment by job code."""
    return snapshot_payload(_session(request).lookup(body.code))


@router.post("/action")
async def select_action(body: ActionRequest, request: Request) -> dict[str, object]:
    """Choose the custody action."""
    return snapshot_payload(_session(request).select_action(body.action))


@router.post("/checklist/continue")
async def continue_checklist(request: Request) -> dict[str, object]:
    """Leave the checklist when every item is acknowledged."""
    return snapshot_payload(_session(request).continue_checklist())


@router.post("/checklist/{index}")
async def toggle_item(index: int, request: Request) -> dict[str, object]:
    """Toggle a line item's checked mark."""
    return snapshot_payload(_session(request).toggle_item(index))


@router.post("/vehicle")
async def select_vehicle(body: VehicleRequest, request: Request) -> dict[str, object]:
    """Verify the vehicle for a LOAD."""
    return snapshot_payload(_session(request).select_vehicle(body.vehicle_id))


@router.post("/photos")
async def add_photo(request: Request) -> dict[str, object]:
    """Attach a photo sent as the raw request body."""
    image_bytes = await request.body()
    return snapshot_payload(_session(request).add_photo(image_bytes))


@router.delete("/photos/{index}")
async def remove_photo(index: int, request: Request) -> dict[str, object]:
    """Detach an attached photo."""
    return snapshot_payload(_session(request).remove_photo(index))


@router.post("/finalize")
async def finalize(request: Request) -> dict[str, object]:
    """Record the confirmation."""
    return snapshot_payload(_session(request).finalize())


@router.post("/cancel")
async def cancel(request: Request) -> dict[str, object]:
    """Abandon the in-progress session."""
    return snapshot_payload(_session(request).cancel())
