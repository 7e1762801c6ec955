"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from custody_scan.api.models import CreateShipmentRequest  # noqa: TC001
from custody_scan.api.serializers import shipment_payload
from custody_scan.domain.shipments import LineItem

if TYPE_CHECKING:
    from custody_scan.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.post(
    "/shipments",
    dependencies=[Depends(require_admin)],
    status_code=status.HTTP_201_CREATED,
)
async def create_shipment(
    body: CreateShipmentRequest, request: Request
) -> dict[str, object]:
    """Create a job order in the catalog."""
    container: AppContainer = request.app.state.container
    shipment = container.catalog_service.create_shipment(
        destination=body.destination,
        expected_vehicle_id=body.expected_vehicle_id,
        items=[LineItem(**item.model_dump()) for item in body.items],
    )
    return shipment_payload(shipment)


@router.delete(
    "/shipments/{shipment_id}",
    dependencies=[Depends(require_admin)],
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_shipment(shipment_id: str, request: Request) -> None:
    """Remove a job order from the catalog."""
    container: AppContainer = request.app.state.container
    container.catalog_service.delete_shipment(shipment_id)
