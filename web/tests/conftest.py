"""Shared fakes for the locator tests."""

from typing import Dict, List

import pytest

from tcpdump_locator.dto import Emission, GeoRecord
from tcpdump_locator.errors import GeoLookupError


class FakeLookup:
    """In-memory GeoLookupPort: known addresses resolve, everything else fails."""

    def __init__(self, records: Dict[str, GeoRecord] = None):
        self.records = dict(records or {})
        self.calls: List[str] = []
        self.closed = False

    def city(self, address: str) -> GeoRecord:
        self.calls.append(address)
        if address not in self.records:
            raise GeoLookupError(f"The address {address} is not in the database.")
        return self.records[address]

    def close(self) -> None:
        self.closed = True


class CollectingSink:
    def __init__(self):
        self.emissions: List[Emission] = []
        self.metrics: Dict[str, int] = {}

    def on_emission(self, emission: Emission) -> None:
        self.emissions.append(emission)

    def on_metrics(self, metrics: Dict[str, int]) -> None:
        self.metrics = dict(metrics)

    @property
    def addresses(self) -> List[str]:
        return [e.address for e in self.emissions]


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


US_GOOGLE = GeoRecord(
    country_iso_code="US",
    country_names={"en": "United States", "de": "USA"},
    city_names={"en": "Mountain View"},
    subdivision_names=({"en": "California"},),
)


@pytest.fixture
def lookup():
    return FakeLookup({"8.8.8.8": US_GOOGLE})


@pytest.fixture
def sink():
    return CollectingSink()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(autouse=True)
def _restore_package_loggers():
    """init_logging detaches the package loggers from root; undo that per test."""
    yield
    import logging

    for name in ("tcpdump_locator", "tcpdump_locator.output"):
        lg = logging.getLogger(name)
        for h in list(lg.handlers):
            lg.removeHandler(h)
        lg.propagate = True
        lg.setLevel(logging.NOTSET)
