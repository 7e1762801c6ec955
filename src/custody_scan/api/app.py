"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse

from custody_scan.api.admin import router as admin_router
from custody_scan.api.scanner import router as scanner_router
from custody_scan.api.serializers import (
    event_payload,
    shipment_payload,
    vehicle_payload,
)
from custody_scan.app_logging import configure_logging
from custody_scan.containers import AppContainer
from custody_scan.errors import (
    CatalogError,
    InvalidTransitionError,
    SessionInputError,
    ShipmentNotFoundError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(scanner_router)
    app.include_router(admin_router)

    @app.exception_handler(InvalidTransitionError)
    async def invalid_transition(
        request: Request, exc: InvalidTransitionError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)}
        )

    @app.exception_handler(ShipmentNotFoundError)
    async def shipment_not_found(
        request: Request, exc: ShipmentNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(CatalogError)
    @app.exception_handler(SessionInputError)
    async def rejected_input(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/shipments")
    async def list_shipments(request: Request) -> dict[str, object]:
        """Return the job order catalog."""
        state_container: AppContainer = request.app.state.container
        shipments = state_container.catalog_service.list_shipments()
        return {"shipments": [shipment_payload(s) for s in shipments]}

    @app.get("/shipments/{shipment_id}")
    async def get_shipment(shipment_id: str, request: Request) -> dict[str, object]:
        """Return one job order."""
        state_container: AppContainer = request.app.state.container
        shipment = state_container.catalog_service.get_shipment(shipment_id)
        return shipment_payload(shipment)

    @app.get("/shipments/{shipment_id}/label")
    async def shipment_label(shipment_id: str, request: Request) -> Response:
        """Return a printable QR label for a job order."""
        state_container: AppContainer = request.app.state.container
        shipment = state_container.catalog_service.get_shipment(shipment_id)
        try:
            image = await state_container.label_client.fetch_label(shipment.id)
        except httpx.HTTPError as exc:
            logger.exception(
                "Failed to fetch QR label", extra={"shipment_id": shipment.id}
            )
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Label service unavailable",
            ) from exc
        return Response(content=image, media_type="image/png")

    @app.get("/vehicles")
    async def list_vehicles(request: Request) -> dict[str, object]:
        """Return the fleet."""
        state_container: AppContainer = request.app.state.container
        vehicles = state_container.catalog_service.list_vehicles()
        return {"vehicles": [vehicle_payload(v) for v in vehicles]}

    @app.get("/logs")
    async def list_logs(
        request: Request,
        shipment_id: str | None = None,
        success: bool | None = None,
    ) -> dict[str, object]:
        """Return the dispatch log, newest first."""
        state_container: AppContainer = request.app.state.container
        events = state_container.event_log_service.list_events(
            shipment_id=shipment_id, success=success
        )
        return {"events": [event_payload(e) for e in events]}

    return app
