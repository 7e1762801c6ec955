"""Domain exceptions for the custody scan service."""


class CustodyScanError(Exception):
    """Base class for custody scan errors."""


class InvalidTransitionError(CustodyScanError):
    """Raised when a session transition is not defined for the current state."""

    def __init__(self, operation: str, state: str) -> None:
        super().__init__(f"Cannot {operation} while session is {state}")
        self.operation = operation
        self.state = state


class ShipmentNotFoundError(CustodyScanError):
    """Raised when a job identifier does not resolve to a shipment."""

    def __init__(self, shipment_id: str) -> None:
        super().__init__(f"Shipment {shipment_id} not found")
        self.shipment_id = shipment_id


class CatalogError(CustodyScanError):
    """Raised when a catalog change is rejected."""


class CameraUnavailableError(CustodyScanError):
    """Raised when the scanning camera cannot be acquired."""


class SessionInputError(CustodyScanError):
    """Raised when a session input refers to something that does not exist."""
