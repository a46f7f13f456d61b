"""
Orchestration: stream -> extractor/filter -> tracker -> emitter.

Everything runs synchronously on the calling thread, one line at a time, in
input order. `run_stream` is the entry point used by the CLI; `LocatorPipeline`
is exposed for callers (and tests) that feed lines themselves.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Optional

from .config import LocatorConfig
from .dto import Emission
from .intake.line_reader import iter_lines
from .pipeline.emitter import Emitter
from .pipeline.extract import compile_ignore_patterns, filter_addresses, find_addresses
from .pipeline.tracker import AddressTracker, Clock
from .ports import EmissionSinkPort, GeoLookupPort

logger = logging.getLogger(__name__)


class LocatorPipeline:
    """
    Wires the per-line stages together and keeps run metrics.

    Raises errors.ConfigError at construction if an ignore pattern is invalid,
    before any input is read.
    """

    def __init__(
        self,
        *,
        cfg: LocatorConfig,
        lookup: GeoLookupPort,
        sink: EmissionSinkPort,
        clock: Clock = time.monotonic,
    ) -> None:
        self.cfg = cfg
        self.sink = sink
        self.ignore = compile_ignore_patterns(cfg.ignore_patterns)
        self.tracker = AddressTracker(
            threshold=cfg.print_after,
            reset_after_seconds=cfg.reset_after_seconds,
            clock=clock,
        )
        self.emitter = Emitter(
            lookup=lookup,
            sink=sink,
            address_width=cfg.address_width,
            languages=cfg.name_languages,
        )
        self._metrics: Dict[str, int] = {
            "lines_read": 0,
            "addresses_seen": 0,
            "addresses_ignored": 0,
            "triggers": 0,
            "emissions": 0,
        }

    def process_line(self, line: str) -> List[Emission]:
        """Feed one line through the pipeline; return the emissions it caused."""
        self._metrics["lines_read"] += 1

        candidates = find_addresses(line)
        if not candidates:
            return []

        kept = filter_addresses(candidates, self.ignore)
        self._metrics["addresses_ignored"] += len(candidates) - len(kept)

        out: List[Emission] = []
        for address in kept:
            self._metrics["addresses_seen"] += 1
            if not self.tracker.observe(address):
                continue
            self._metrics["triggers"] += 1
            emission = self.emitter.emit(address)
            if emission is not None:
                self._metrics["emissions"] += 1
                out.append(emission)
        return out

    def metrics(self) -> Dict[str, int]:
        """Snapshot of run counters (suppressed = triggers that did not emit)."""
        snap = dict(self._metrics)
        snap["suppressed"] = self.emitter.suppressed
        snap["distinct_addresses"] = len(self.tracker)
        return snap


def run_stream(
    stream: Iterable[str],
    *,
    cfg: LocatorConfig,
    lookup: GeoLookupPort,
    sink: EmissionSinkPort,
    clock: Optional[Clock] = None,
) -> Dict[str, int]:
    """
    Process `stream` until it ends and return the final metrics.

    Parameters
    ----------
    stream : Iterable[str]
        Text lines (e.g. sys.stdin carrying tcpdump output).
    cfg : LocatorConfig
        Startup configuration.
    lookup : GeoLookupPort
        Geolocation source for emitted addresses.
    sink : EmissionSinkPort
        Receives each emission and, at the end, the metrics.
    clock : Callable[[], float], optional
        Time source for the idle window; defaults to time.monotonic.

    Notes
    -----
    - A bad ignore pattern raises errors.ConfigError before the first read.
    - OSError from the stream propagates; end of stream returns normally.
    """
    pipeline = LocatorPipeline(
        cfg=cfg,
        lookup=lookup,
        sink=sink,
        clock=clock or time.monotonic,
    )

    for line in iter_lines(stream):
        pipeline.process_line(line)

    metrics = pipeline.metrics()
    sink.on_metrics(metrics)
    logger.debug("Input stream ended after %d lines", metrics["lines_read"])
    return metrics
