"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from custody_scan.adapters.geolocation import FixedGeolocationProvider
from custody_scan.adapters.haptics import LoggingHapticAlert
from custody_scan.adapters.memory_repositories import (
    InMemoryFleetRepository,
    InMemoryScanEventRepository,
    InMemoryShipmentRepository,
)
from custody_scan.adapters.qr_label_client import HttpxLabelClient, LabelClient
from custody_scan.config import Settings
from custody_scan.seed import DEMO_SHIPMENTS, DEMO_VEHICLES
from custody_scan.services.catalog import CatalogService
from custody_scan.services.dispatch import DispatchService
from custody_scan.services.event_log import EventLogService
from custody_scan.services.scanner_feed import ScannerFeed, SymbolSource
from custody_scan.services.sessions import ScanSessionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: CatalogService
    event_log_service: EventLogService
    dispatch_service: DispatchService
    scan_session_service: ScanSessionService
    label_client: LabelClient
    close_resources: Callable[[], Awaitable[None]]

    def scanner_feed(self, source: SymbolSource) -> ScannerFeed:
        """Wrap a camera in a feed polling at the configured frame rate."""
        return ScannerFeed(
            source=source, frame_interval=self.settings.frame_interval_seconds
        )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    shipment_repository = InMemoryShipmentRepository()
    fleet_repository = InMemoryFleetRepository()
    if resolved_settings.seed_demo_data:
        shipment_repository.shipments.extend(DEMO_SHIPMENTS)
        fleet_repository.vehicles.extend(DEMO_VEHICLES)
    catalog_service = CatalogService(
        repository=shipment_repository,
        fleet_repository=fleet_repository,
    )
    event_log_service = EventLogService(InMemoryScanEventRepository())
    dispatch_service = DispatchService(
        catalog=catalog_service,
        event_log=event_log_service,
        actor=resolved_settings.actor_name,
    )
    scan_session_service = ScanSessionService(
        catalog=catalog_service,
        dispatch=dispatch_service,
        geolocation=FixedGeolocationProvider(resolved_settings.geolocation_stamp),
        haptics=LoggingHapticAlert(),
        outcome_display_seconds=resolved_settings.outcome_display_seconds,
    )
    label_client = HttpxLabelClient.create(
        base_url=resolved_settings.qr_service_url,
        size=resolved_settings.qr_label_size,
    )

    async def close_resources() -> None:
        await label_client.close()

    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        event_log_service=event_log_service,
        dispatch_service=dispatch_service,
        scan_session_service=scan_session_service,
        label_client=label_client,
        close_resources=close_resources,
    )
