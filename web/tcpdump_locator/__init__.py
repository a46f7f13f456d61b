"""
tcpdump_locator: print where the chatty hosts in a packet trace are.

Reads tcpdump-style text lines, counts how often each IPv4 address shows up
within an idle window, and prints a geolocation line for an address once its
streak reaches the configured threshold.

Public API (stable):
- LocatorConfig            (configuration)
- run_stream               (processes one input stream to its end)
- LocatorPipeline          (per-line processing, for callers feeding lines)
- GeoLookupPort            (geolocation adapter interface)
- EmissionSinkPort         (output adapter interface)
- open_geo_lookup          (MaxMind-backed lookup, degraded when the DB is missing)
- DTOs: SeenAddress, GeoRecord, Emission
"""

from __future__ import annotations

# Configuration
from .config import LocatorConfig

# Orchestration
from .runner import LocatorPipeline, run_stream

# Ports
from .ports import EmissionSinkPort, GeoLookupPort

# Adapters
from .geo.maxmind import open_geo_lookup
from .sinks import LoggingSink

# DTOs
from .dto import Emission, GeoRecord, SeenAddress

# Errors
from .errors import ConfigError, GeoLookupError

__all__ = [
    "LocatorConfig",
    "run_stream",
    "LocatorPipeline",
    "EmissionSinkPort",
    "GeoLookupPort",
    "open_geo_lookup",
    "LoggingSink",
    "Emission",
    "GeoRecord",
    "SeenAddress",
    "ConfigError",
    "GeoLookupError",
]
