"""Scan session state machine for custody confirmations."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import TypeVar

from custody_scan.adapters.geolocation import GeolocationProvider
from custody_scan.adapters.haptics import WRONG_VEHICLE_PATTERN, HapticAlert
from custody_scan.domain.sessions import (
    ActionSelect,
    Checklist,
    Error,
    Idle,
    PhotoProof,
    SessionErrorKind,
    SessionSnapshot,
    SessionState,
    Success,
    TerminalState,
    TruckSelect,
)
from custody_scan.domain.shipments import ScanAction
from custody_scan.errors import InvalidTransitionError, SessionInputError
from custody_scan.services.catalog import CatalogService
from custody_scan.services.dispatch import DispatchService
from custody_scan.services.photos import to_data_url
from custody_scan.services.scanner_feed import ScannerFeed

logger = logging.getLogger(__name__)

OUTCOME_DISPLAY_SECONDS = 3.0

_S = TypeVar("_S", Idle, ActionSelect, Checklist, TruckSelect, PhotoProof)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class ScanSessionService:
    """Owns the single in-progress confirmation workflow.

    Transitions are the only way to change the session. ``SUCCESS`` and
    ``ERROR`` are held for ``outcome_display_seconds`` and then reset to
    ``IDLE``; while they are displayed every transition is refused.
    """

    catalog: CatalogService
    dispatch: DispatchService
    geolocation: GeolocationProvider
    haptics: HapticAlert | None = None
    outcome_display_seconds: float = OUTCOME_DISPLAY_SECONDS
    clock: Callable[[], datetime] = field(default=_utc_now)
    _state: SessionState = field(default_factory=Idle, init=False)

    @property
    def state(self) -> SessionState:
        """Return the current state after applying the outcome timeout."""
        self.expire()
        return self._state

    def snapshot(self) -> SessionSnapshot:
        """Return a read-only view of the session for presentation."""
        return _snapshot(self.state)

    def expire(self) -> bool:
        """Reset a displayed outcome once its display interval has elapsed."""
        state = self._state
        if not isinstance(state, TerminalState):
            return False
        elapsed = self.clock() - state.entered_at
        if elapsed < timedelta(seconds=self.outcome_display_seconds):
            return False
        logger.debug("Outcome display elapsed", extra={"state": state.tag})
        self._state = Idle()
        return True

    async def scan(self, feed: ScannerFeed) -> SessionSnapshot:
        """Wait for the first decoded payload from the camera and look it up."""
        self._require(Idle, "scan")
        payload = await feed.first_payload()
        if payload is None:
            return self.snapshot()
        return self.lookup(payload)

    def lookup(self, code: str) -> SessionSnapshot:
        """Bind the shipment for a scanned or typed job code."""
        self._require(Idle, "look up a code")
        shipment = self.catalog.lookup(code)
        if shipment is None:
            logger.info("Lookup miss", extra={"code": code})
            self._state = Error(
                message=f'Order "{code}" not found.',
                entered_at=self.clock(),
                kind=SessionErrorKind.LOOKUP_MISS,
            )
            return self.snapshot()
        self._state = ActionSelect(shipment=shipment)
        return self.snapshot()

    def select_action(self, action: ScanAction) -> SessionSnapshot:
        """Choose the custody action being confirmed."""
        state = self._require(ActionSelect, "select an action")
        self._state = Checklist(shipment=state.shipment, action=ScanAction(action))
        return self.snapshot()

    def toggle_item(self, index: int) -> SessionSnapshot:
        """Mark or unmark a line item as physically checked."""
        state = self._require(Checklist, "check an item")
        if not 0 <= index < len(state.shipment.items):
            raise SessionInputError(f"No line item at index {index}")
        self._state = Checklist(
            shipment=state.shipment,
            action=state.action,
            checked=state.checked ^ {index},
        )
        return self.snapshot()

    def continue_checklist(self) -> SessionSnapshot:
        """Leave the checklist once every item has been acknowledged."""
        state = self._require(Checklist, "continue the checklist")
        if not state.is_complete:
            return self.snapshot()
        if state.action is ScanAction.LOAD:
            self._state = TruckSelect(shipment=state.shipment)
        else:
            self._state = PhotoProof(shipment=state.shipment, action=state.action)
        return self.snapshot()

    def select_vehicle(self, vehicle_id: str) -> SessionSnapshot:
        """Verify the vehicle a LOAD is going onto."""
        state = self._require(TruckSelect, "select a vehicle")
        shipment = state.shipment
        if vehicle_id == shipment.expected_vehicle_id:
            self._state = PhotoProof(
                shipment=shipment, action=ScanAction.LOAD, vehicle_id=vehicle_id
            )
            return self.snapshot()

        expected_name = self.catalog.vehicle_name(shipment.expected_vehicle_id)
        logger.warning(
            "Vehicle mismatch",
            extra={
                "shipment_id": shipment.id,
                "expected_vehicle_id": shipment.expected_vehicle_id,
                "vehicle_id": vehicle_id,
            },
        )
        self.dispatch.finalize(
            shipment_id=shipment.id,
            action=ScanAction.LOAD,
            success=False,
            vehicle_id=vehicle_id,
            notes=f"Expected {shipment.expected_vehicle_id}",
        )
        if self.haptics is not None:
            self.haptics.vibrate(WRONG_VEHICLE_PATTERN)
        self._state = Error(
            message=f"WRONG TRUCK! Goes to {expected_name}",
            entered_at=self.clock(),
            kind=SessionErrorKind.VEHICLE_MISMATCH,
        )
        return self.snapshot()

    def add_photo(self, image_bytes: bytes) -> SessionSnapshot:
        """Attach a captured or uploaded photo."""
        self._require(PhotoProof, "attach a photo")
        if not image_bytes:
            raise SessionInputError("Photo payload is empty")
        return self.add_photo_data_url(to_data_url(image_bytes))

    def add_photo_data_url(self, data_url: str) -> SessionSnapshot:
        """Attach a photo that is already encoded as a data URL."""
        state = self._require(PhotoProof, "attach a photo")
        if not data_url.startswith("data:"):
            raise SessionInputError("Photos must be data URLs")
        self._state = PhotoProof(
            shipment=state.shipment,
            action=state.action,
            vehicle_id=state.vehicle_id,
            photos=(*state.photos, data_url),
        )
        return self.snapshot()

    def remove_photo(self, index: int) -> SessionSnapshot:
        """Detach a previously attached photo."""
        state = self._require(PhotoProof, "remove a photo")
        if not 0 <= index < len(state.photos):
            raise SessionInputError(f"No photo at index {index}")
        photos = state.photos[:index] + state.photos[index + 1 :]
        self._state = PhotoProof(
            shipment=state.shipment,
            action=state.action,
            vehicle_id=state.vehicle_id,
            photos=photos,
        )
        return self.snapshot()

    def finalize(self) -> SessionSnapshot:
        """Record the confirmation once at least one photo is attached."""
        state = self._require(PhotoProof, "finalize")
        if not state.photos:
            return self.snapshot()
        event = self.dispatch.finalize(
            shipment_id=state.shipment.id,
            action=state.action,
            success=True,
            vehicle_id=state.vehicle_id,
            photos=state.photos,
            geolocation=self.geolocation.current_position(),
        )
        self._state = Success(
            shipment_id=state.shipment.id,
            message=f"{state.action} Complete!",
            entered_at=self.clock(),
            event_id=event.id,
        )
        return self.snapshot()

    def cancel(self) -> SessionSnapshot:
        """Discard the in-progress session and return to IDLE."""
        state = self.state
        if isinstance(state, TerminalState):
            raise InvalidTransitionError("cancel", state.tag)
        if not isinstance(state, Idle):
            logger.info("Session cancelled", extra={"state": state.tag})
        self._state = Idle()
        return self.snapshot()

    def _require(self, expected: type[_S], operation: str) -> _S:
        state = self.state
        if not isinstance(state, expected):
            raise InvalidTransitionError(operation, state.tag)
        return state


def _snapshot(state: SessionState) -> SessionSnapshot:
    if isinstance(state, Idle):
        return SessionSnapshot(state=state.tag)
    if isinstance(state, ActionSelect):
        return SessionSnapshot(state=state.tag, shipment=state.shipment)
    if isinstance(state, Checklist):
        return SessionSnapshot(
            state=state.tag,
            shipment=state.shipment,
            action=state.action,
            checked_items=tuple(sorted(state.checked)),
            can_continue=state.is_complete,
        )
    if isinstance(state, TruckSelect):
        return SessionSnapshot(
            state=state.tag, shipment=state.shipment, action=state.action
        )
    if isinstance(state, PhotoProof):
        return SessionSnapshot(
            state=state.tag,
            shipment=state.shipment,
            action=state.action,
            vehicle_id=state.vehicle_id,
            photos=state.photos,
            can_finalize=bool(state.photos),
        )
    return SessionSnapshot(state=state.tag, message=state.message)
