"""Append-only scan event log."""

from dataclasses import dataclass
from typing import Protocol

from custody_scan.domain.events import ScanEvent
from custody_scan.domain.shipments import normalize_code


class ScanEventRepository(Protocol):
    """Storage interface for scan events."""

    def append_event(self, event: ScanEvent) -> None:
        """Append an event to the end of the log."""

    def list_events(self) -> list[ScanEvent]:
        """Return all events in emission order."""


@dataclass
class EventLogService:
    """Service for appending and reading scan events."""

    repository: ScanEventRepository

    def append(self, event: ScanEvent) -> ScanEvent:
        """Append an event; identical events are never deduplicated."""
        self.repository.append_event(event)
        return event

    def list_events(
        self, shipment_id: str | None = None, success: bool | None = None
    ) -> list[ScanEvent]:
        """Return events newest first, optionally filtered."""
        events = list(reversed(self.repository.list_events()))
        if shipment_id is not None:
            wanted = normalize_code(shipment_id)
            events = [
                event
                for event in events
                if normalize_code(event.shipment_id) == wanted
            ]
        if success is not None:
            events = [event for event in events if event.success is success]
        return events
