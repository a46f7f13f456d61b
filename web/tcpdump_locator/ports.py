"""
Interfaces (Ports) between the tracking core and its adapters.

Keep them small and implementation-agnostic so they're easy to fake in tests.
"""

from __future__ import annotations

from typing import Dict, Protocol

from .dto import Emission, GeoRecord


class GeoLookupPort(Protocol):
    """
    Resolves an address to city-level location data.
    Implementations may wrap a local MaxMind database or any other keyed service.
    """

    def city(self, address: str) -> GeoRecord:
        """
        Return the GeoRecord for `address`.

        MUST raise errors.GeoLookupError when the address cannot be resolved,
        including when it is not a valid IP address.
        """
        ...

    def close(self) -> None:
        """Release any underlying resources."""
        ...


class EmissionSinkPort(Protocol):
    """Receives output lines and the end-of-run metrics."""

    def on_emission(self, emission: Emission) -> None:
        """Receive one emitted address line."""
        ...

    def on_metrics(self, metrics: Dict[str, int]) -> None:
        """Receive a metrics snapshot when the input stream ends."""
        ...
