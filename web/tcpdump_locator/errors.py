"""
Exception types shared across the locator.

- ConfigError     : fatal, raised while building the pipeline at startup.
- GeoLookupError  : non-fatal, raised by a lookup adapter for one address;
                    its text becomes the emitted geolocation body.
"""

from __future__ import annotations


class ConfigError(ValueError):
    """Startup configuration that cannot be used (e.g. an ignore pattern that does not compile)."""


class GeoLookupError(Exception):
    """A single geolocation lookup failed."""
