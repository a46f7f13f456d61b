"""
Emission (synchronous, minimal).

Purpose
-------
Turn a triggering address into one output line and forward it to the sink
(EmissionSinkPort), skipping an address that was also the last one emitted.

Behavior
--------
- `emit(address)` -> looks the address up, formats "<address>  <body>",
                     calls `sink.on_emission(...)` and remembers the address
- a lookup failure is not an error here: its text becomes the body
- only the single most recent address is remembered; any other address's
  emission in between re-enables it
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..config import DEFAULT_LANGUAGES
from ..dto import Emission
from ..errors import GeoLookupError
from ..ports import EmissionSinkPort, GeoLookupPort
from .geo_format import describe

logger = logging.getLogger(__name__)


class Emitter:
    """
    Parameters
    ----------
    lookup : GeoLookupPort
        Geolocation source; called inline, once per non-suppressed emission.
    sink : EmissionSinkPort
        Downstream consumer of formatted lines.
    address_width : int
        Minimum width of the right-aligned address column.
    languages : Sequence[str]
        Name preference order for country, subdivision and city names.
    """

    def __init__(
        self,
        *,
        lookup: GeoLookupPort,
        sink: EmissionSinkPort,
        address_width: int = 15,
        languages: Sequence[str] = DEFAULT_LANGUAGES,
    ) -> None:
        self._lookup = lookup
        self._sink = sink
        self._width = int(address_width)
        self._languages = tuple(languages)
        self._last_emitted = ""
        self.suppressed = 0

    @property
    def last_emitted(self) -> str:
        return self._last_emitted

    def emit(self, address: str) -> Optional[Emission]:
        """Emit `address` unless it was the last address emitted; return what was sent."""
        if address == self._last_emitted:
            self.suppressed += 1
            logger.debug("Suppressed repeat emission for %s", address)
            return None

        body = self.geolocate(address)
        emission = Emission(
            address=address,
            body=body,
            line=f"{address:>{self._width}}  {body}",
        )
        self._sink.on_emission(emission)
        self._last_emitted = address
        return emission

    def geolocate(self, address: str) -> str:
        """Return the geolocation body for `address`, or the lookup error text."""
        try:
            record = self._lookup.city(address)
        except GeoLookupError as e:
            return str(e)
        return describe(record, self._languages)
