"""Pydantic models for API request bodies."""

from pydantic import BaseModel, Field

from custody_scan.domain.shipments import ScanAction


class LookupRequest(BaseModel):
    """Decoded or manually typed job code."""

    code: str = Field(min_length=1)


class ActionRequest(BaseModel):
    """Custody action chosen by the worker."""

    action: ScanAction


class VehicleRequest(BaseModel):
    """Vehicle chosen by the worker during a LOAD."""

    vehicle_id: str = Field(min_length=1)


class LineItemPayload(BaseModel):
    """Line item of a new shipment."""

    name: str
    quantity: int = Field(default=1, ge=1)
    sku: str | None = None
    batch: str | None = None
    expiry: str | None = None
    serial: str | None = None


class CreateShipmentRequest(BaseModel):
    """Manual job order creation payload."""

    destination: str
    expected_vehicle_id: str
    items: list[LineItemPayload]
