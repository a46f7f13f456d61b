"""
Data Transfer Objects (DTOs) used across the locator pipeline.

These are intentionally small and independent of any I/O or lookup libraries.
`SeenAddress` is the only mutable one; it lives in the tracker's table for the
whole run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple


# === Tracker state ===
@dataclass
class SeenAddress:
    """One observed address and its current streak."""
    address: str             # dotted-quad text exactly as extracted (not validated)
    count: int               # observations in the current streak
    last_seen_at: float      # clock reading of the most recent observation


# === Geolocation lookup result ===
@dataclass(frozen=True)
class GeoRecord:
    """
    Minimal view of a city-level geolocation answer.

    Name mappings are keyed by language code ("en", "de", "zh-CN", ...).
    """
    country_iso_code: str = ""
    country_names: Dict[str, str] = field(default_factory=dict)
    city_names: Dict[str, str] = field(default_factory=dict)
    subdivision_names: Tuple[Dict[str, str], ...] = ()   # most general first
    is_anonymous_proxy: bool = False


# === Final record for emission ===
@dataclass(frozen=True)
class Emission:
    address: str
    body: str    # geolocation summary or lookup error text
    line: str    # address column + body, ready for output
