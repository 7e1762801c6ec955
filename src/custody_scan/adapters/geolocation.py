"""Geolocation provider adapters."""

from dataclasses import dataclass
from typing import Protocol

DEFAULT_STAMP = "3.1390° N, 101.6869° E"


class GeolocationProvider(Protocol):
    """Interface for obtaining a positioning stamp."""

    def current_position(self) -> str | None:
        """Return a lat/lng stamp, or None when no fix is available."""


@dataclass
class FixedGeolocationProvider(GeolocationProvider):
    """Provider that always reports the configured stamp."""

    stamp: str = DEFAULT_STAMP

    def current_position(self) -> str | None:
        """Return the fixed stamp."""
        return self.stamp
