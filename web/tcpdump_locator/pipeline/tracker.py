"""
Per-address frequency tracking with an idle reset window.

Responsibilities:
- Keep one SeenAddress per distinct address for the whole run (never evicted).
- Count consecutive observations; an idle gap longer than the reset window
  starts a new streak at 1.
- Report a trigger when a streak count is exactly the threshold. Equality, not
  >=, so a streak fires once and only a fresh full streak can fire again.
"""

from __future__ import annotations

import time
from typing import Callable, Dict, Optional

from ..dto import SeenAddress

Clock = Callable[[], float]


class AddressTracker:
    """
    Owns the address table and applies the streak rules.

    Usage:
        tracker = AddressTracker(threshold=32, reset_after_seconds=2.0)
        if tracker.observe("8.8.8.8"):
            emitter.emit("8.8.8.8")
    """

    def __init__(
        self,
        *,
        threshold: int = 32,
        reset_after_seconds: float = 2.0,
        clock: Clock = time.monotonic,
    ) -> None:
        if threshold < 1:
            raise ValueError("threshold must be >= 1")
        self._threshold = int(threshold)
        self._reset_after = float(reset_after_seconds)
        self._clock = clock
        self._table: Dict[str, SeenAddress] = {}

    @property
    def threshold(self) -> int:
        return self._threshold

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, address: object) -> bool:
        return address in self._table

    def get(self, address: str) -> Optional[SeenAddress]:
        """Return the tracked entry for `address`, or None if never observed."""
        return self._table.get(address)

    # --- observation ---

    def observe(self, address: str, now: Optional[float] = None) -> bool:
        """
        Record one observation of `address`; return True if it triggers.

        Stale rule: if now - last_seen_at > reset window, the previous count is
        treated as 0 before this observation is added, so the count becomes 1.
        """
        ts = self._clock() if now is None else float(now)

        entry = self._table.get(address)
        if entry is None:
            entry = SeenAddress(address=address, count=0, last_seen_at=ts)
            self._table[address] = entry

        previous = entry.count
        if ts - entry.last_seen_at > self._reset_after:
            previous = 0
        entry.count = previous + 1
        entry.last_seen_at = ts

        return entry.count == self._threshold
