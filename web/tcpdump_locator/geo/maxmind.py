"""
MaxMind GeoLite2 City adapter for GeoLookupPort.

- `MaxMindGeoLookup` wraps a geoip2 database Reader and converts its City
  model into a GeoRecord.
- `UnavailableGeoLookup` stands in when the database cannot be opened: every
  lookup fails with the same explanatory error, so the run continues with
  the error text as its geolocation output.
- `open_geo_lookup(path)` picks between the two and logs the degraded case.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import geoip2.database
import geoip2.errors
import maxminddb

from ..dto import GeoRecord
from ..errors import GeoLookupError

logger = logging.getLogger(__name__)


class MaxMindGeoLookup:
    """
    City lookups against a local .mmdb file.

    Usage:
        lookup = MaxMindGeoLookup("/var/db/GeoLite/GeoLite2-City.mmdb")
        record = lookup.city("8.8.8.8")
    """

    def __init__(self, db_path: str, *, reader: Optional[Any] = None) -> None:
        self.db_path = db_path
        self._reader = reader if reader is not None else geoip2.database.Reader(db_path)

    def city(self, address: str) -> GeoRecord:
        try:
            response = self._reader.city(address)
        except geoip2.errors.GeoIP2Error as e:
            raise GeoLookupError(str(e)) from e
        except ValueError as e:
            # not a parseable IP address, e.g. "999.1.1.1"
            raise GeoLookupError(str(e)) from e
        except TypeError as e:
            # opened database is not a City database (Country, ASN, ...)
            raise GeoLookupError(str(e)) from e
        except maxminddb.InvalidDatabaseError as e:
            raise GeoLookupError(str(e)) from e
        return to_geo_record(response)

    def close(self) -> None:
        """Close the underlying database reader."""
        self._reader.close()


class UnavailableGeoLookup:
    """Lookup used when no database could be opened; always fails."""

    def __init__(self, reason: str) -> None:
        self.reason = reason

    def city(self, address: str) -> GeoRecord:
        raise GeoLookupError(self.reason)

    def close(self) -> None:
        return


def to_geo_record(response: Any) -> GeoRecord:
    """Convert a geoip2 City response into a GeoRecord."""
    traits = response.traits
    return GeoRecord(
        country_iso_code=response.country.iso_code or "",
        country_names=dict(response.country.names or {}),
        city_names=dict(response.city.names or {}),
        subdivision_names=tuple(dict(s.names or {}) for s in response.subdivisions),
        # dropped from newer geoip2 releases; absent means "not flagged"
        is_anonymous_proxy=bool(getattr(traits, "is_anonymous_proxy", False)),
    )


def open_geo_lookup(db_path: str) -> MaxMindGeoLookup | UnavailableGeoLookup:
    """
    Open the database at `db_path`, falling back to UnavailableGeoLookup.

    A missing or unreadable database is not fatal; it is logged as a warning.
    """
    try:
        lookup = MaxMindGeoLookup(db_path)
    except Exception as e:
        logger.warning("Could not open %s: %s", db_path, e)
        return UnavailableGeoLookup(f"Could not open {db_path}: {e}")
    logger.info("GeoIP database loaded: %s", db_path)
    return lookup
