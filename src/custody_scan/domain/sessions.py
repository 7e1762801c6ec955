"""Domain models for scan session states.

Each state of the confirmation workflow is its own frozen dataclass carrying
only the data that is meaningful in that state.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import ClassVar
from uuid import UUID

from custody_scan.domain.shipments import ScanAction, Shipment


class SessionErrorKind(StrEnum):
    """Reason a session ended in the error state."""

    LOOKUP_MISS = "LOOKUP_MISS"
    VEHICLE_MISMATCH = "VEHICLE_MISMATCH"


@dataclass(frozen=True)
class Idle:
    """Waiting for a job code."""

    tag: ClassVar[str] = "IDLE"


@dataclass(frozen=True)
class ActionSelect:
    """A shipment is bound and the worker picks the custody action."""

    tag: ClassVar[str] = "ACTION_SELECT"

    shipment: Shipment


@dataclass(frozen=True)
class Checklist:
    """The worker acknowledges every line item of the shipment."""

    tag: ClassVar[str] = "CHECKLIST"

    shipment: Shipment
    action: ScanAction
    checked: frozenset[int] = frozenset()

    @property
    def is_complete(self) -> bool:
        return self.checked == frozenset(range(len(self.shipment.items)))


@dataclass(frozen=True)
class TruckSelect:
    """The worker picks the vehicle a LOAD goes onto."""

    tag: ClassVar[str] = "TRUCK_SELECT"

    shipment: Shipment

    @property
    def action(self) -> ScanAction:
        return ScanAction.LOAD


@dataclass(frozen=True)
class PhotoProof:
    """The worker attaches proof photos before finalizing."""

    tag: ClassVar[str] = "PHOTO_PROOF"

    shipment: Shipment
    action: ScanAction
    vehicle_id: str | None = None
    photos: tuple[str, ...] = ()


@dataclass(frozen=True)
class Success:
    """Terminal state after a successful finalize."""

    tag: ClassVar[str] = "SUCCESS"

    shipment_id: str
    message: str
    entered_at: datetime
    event_id: UUID


@dataclass(frozen=True)
class Error:
    """Terminal state after a lookup miss or vehicle mismatch."""

    tag: ClassVar[str] = "ERROR"

    message: str
    entered_at: datetime
    kind: SessionErrorKind


SessionState = (
    Idle | ActionSelect | Checklist | TruckSelect | PhotoProof | Success | Error
)
TerminalState = Success | Error


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of the session for presentation."""

    state: str
    shipment: Shipment | None = None
    action: ScanAction | None = None
    checked_items: tuple[int, ...] = ()
    vehicle_id: str | None = None
    photos: tuple[str, ...] = ()
    message: str | None = None
    can_continue: bool = False
    can_finalize: bool = False
