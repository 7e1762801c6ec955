"""QR label image client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class LabelClient(Protocol):
    """Interface for fetching printable QR labels."""

    async def fetch_label(self, shipment_id: str) -> bytes:
        """Return PNG bytes of a QR code encoding the job id."""


@dataclass
class HttpxLabelClient(LabelClient):
    """Label client backed by a public QR rendering service."""

    base_url: str
    size: int
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str, size: int = 300) -> "HttpxLabelClient":
        """Create a label client with a managed httpx session."""
        return cls(base_url=base_url, size=size, http_client=httpx.AsyncClient())

    async def fetch_label(self, shipment_id: str) -> bytes:
        """Download the QR image for a job id."""
        response = await self.http_client.get(
            self.base_url,
            params={"size": f"{self.size}x{self.size}", "data": shipment_id},
            timeout=10,
        )
        response.raise_for_status()
        return response.content

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
