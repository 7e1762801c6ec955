"""Haptic alert adapters."""

import logging
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)

WRONG_VEHICLE_PATTERN: tuple[int, ...] = (200, 100, 200)


class HapticAlert(Protocol):
    """Interface for vibrating the worker's device."""

    def vibrate(self, pattern: tuple[int, ...]) -> None:
        """Vibrate using alternating on/off durations in milliseconds."""


@dataclass
class LoggingHapticAlert(HapticAlert):
    """Haptic alert for hosts without a vibration motor."""

    def vibrate(self, pattern: tuple[int, ...]) -> None:
        """Log the requested vibration pattern."""
        logger.info("Haptic alert", extra={"pattern": list(pattern)})
