"""Camera-driven source of decoded job codes."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager, suppress
from dataclasses import dataclass
from typing import Protocol

from custody_scan.errors import CameraUnavailableError

logger = logging.getLogger(__name__)


class SymbolSource(Protocol):
    """Interface for a camera that decodes symbols frame by frame."""

    async def start(self) -> None:
        """Acquire the camera; raise CameraUnavailableError on failure."""

    async def read_frame(self) -> str | None:
        """Decode the current frame and return its payload, if any."""

    async def stop(self) -> None:
        """Stop all tracks and release the camera."""


@dataclass
class ScannerFeed:
    """Polls a symbol source and yields decoded payloads."""

    source: SymbolSource
    frame_interval: float = 1 / 30

    @asynccontextmanager
    async def _camera(self) -> AsyncIterator[SymbolSource]:
        await self.source.start()
        try:
            yield self.source
        finally:
            await self.source.stop()

    async def payloads(self) -> AsyncIterator[str]:
        """Yield non-blank payloads until the consumer stops iterating."""
        async with self._camera() as camera:
            while True:
                payload = await camera.read_frame()
                if payload and payload.strip():
                    yield payload
                await asyncio.sleep(self.frame_interval)

    async def first_payload(self) -> str | None:
        """Return the first decoded payload, or None if the camera is unavailable."""
        producer = asyncio.create_task(self._next_payload())
        try:
            return await producer
        except CameraUnavailableError:
            logger.warning("Camera unavailable, falling back to manual entry")
            return None
        finally:
            if not producer.done():
                producer.cancel()
                with suppress(asyncio.CancelledError):
                    await producer

    async def _next_payload(self) -> str:
        stream = self.payloads()
        try:
            return await anext(stream)
        finally:
            await stream.aclose()
