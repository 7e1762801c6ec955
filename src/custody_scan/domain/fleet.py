"""Domain models for the delivery fleet."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Vehicle:
    """A truck or van that shipments are loaded onto."""

    id: str
    name: str
    color: str | None = None
