"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from custody_scan.adapters.geolocation import FixedGeolocationProvider
from custody_scan.adapters.haptics import HapticAlert
from custody_scan.adapters.memory_repositories import (
    InMemoryFleetRepository,
    InMemoryScanEventRepository,
    InMemoryShipmentRepository,
)
from custody_scan.adapters.qr_label_client import LabelClient
from custody_scan.config import Settings
from custody_scan.containers import AppContainer
from custody_scan.errors import CameraUnavailableError
from custody_scan.seed import DEMO_SHIPMENTS, DEMO_VEHICLES
from custody_scan.services.catalog import CatalogService
from custody_scan.services.dispatch import DispatchService
from custody_scan.services.event_log import EventLogService
from custody_scan.services.scanner_feed import SymbolSource
from custody_scan.services.sessions import ScanSessionService

JPEG_BYTES = b"\xff\xd8\xff\xe0fake-jpeg"
PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-png"


@dataclass
class FakeClock:
    """Manually advanced clock."""

    now: datetime = field(
        default_factory=lambda: datetime(2024, 5, 1, 9, 0, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@dataclass
class FakeHapticAlert(HapticAlert):
    """Haptic alert that records vibration patterns."""

    patterns: list[tuple[int, ...]] = field(default_factory=list)

    def vibrate(self, pattern: tuple[int, ...]) -> None:
        self.patterns.append(pattern)


@dataclass
class FakeLabelClient(LabelClient):
    """Label client returning static PNG bytes."""

    content: bytes = PNG_BYTES
    requested: list[str] = field(default_factory=list)

    async def fetch_label(self, shipment_id: str) -> bytes:
        self.requested.append(shipment_id)
        return self.content


@dataclass
class FakeSymbolSource(SymbolSource):
    """Camera that replays a fixed sequence of decoded frames."""

    frames: list[str | None] = field(default_factory=list)
    available: bool = True
    started: int = 0
    stopped: int = 0
    reads: int = 0

    async def start(self) -> None:
        if not self.available:
            raise CameraUnavailableError("no camera")
        self.started += 1

    async def read_frame(self) -> str | None:
        self.reads += 1
        if self.frames:
            return self.frames.pop(0)
        return None

    async def stop(self) -> None:
        self.stopped += 1


@dataclass
class Services:
    """Engine wired to in-memory collaborators."""

    shipments: InMemoryShipmentRepository
    events: InMemoryScanEventRepository
    catalog: CatalogService
    event_log: EventLogService
    dispatch: DispatchService
    session: ScanSessionService
    haptics: FakeHapticAlert
    clock: FakeClock


def build_services(clock: FakeClock | None = None) -> Services:
    resolved_clock = clock or FakeClock()
    shipments = InMemoryShipmentRepository(shipments=list(DEMO_SHIPMENTS))
    events = InMemoryScanEventRepository()
    catalog = CatalogService(
        repository=shipments,
        fleet_repository=InMemoryFleetRepository(vehicles=list(DEMO_VEHICLES)),
    )
    event_log = EventLogService(events)
    dispatch = DispatchService(
        catalog=catalog,
        event_log=event_log,
        actor="Ali (Driver)",
        clock=resolved_clock,
    )
    haptics = FakeHapticAlert()
    session = ScanSessionService(
        catalog=catalog,
        dispatch=dispatch,
        geolocation=FixedGeolocationProvider(),
        haptics=haptics,
        clock=resolved_clock,
    )
    return Services(
        shipments=shipments,
        events=events,
        catalog=catalog,
        event_log=event_log,
        dispatch=dispatch,
        session=session,
        haptics=haptics,
        clock=resolved_clock,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def services(clock: FakeClock) -> Services:
    return build_services(clock)


@pytest.fixture
def settings() -> Settings:
    return Settings(admin_token="admin-token")


@pytest.fixture
def label_client() -> FakeLabelClient:
    return FakeLabelClient()


@pytest.fixture
def container(
    settings: Settings, services: Services, label_client: FakeLabelClient
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog_service=services.catalog,
        event_log_service=services.event_log,
        dispatch_service=services.dispatch,
        scan_session_service=services.session,
        label_client=label_client,
        close_resources=close_resources,
    )
