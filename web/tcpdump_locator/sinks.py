"""
Output adapters for EmissionSinkPort.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from .dto import Emission
from .utils import LOGGER_NAME, OUTPUT_LOGGER_NAME


class LoggingSink:
    """
    Write emission lines through the output logger (stdout once init_logging ran)
    and the end-of-run metrics through the diagnostics logger at DEBUG.
    """

    def __init__(
        self,
        output: Optional[logging.Logger] = None,
        diagnostics: Optional[logging.Logger] = None,
    ) -> None:
        self._out = output or logging.getLogger(OUTPUT_LOGGER_NAME)
        self._diag = diagnostics or logging.getLogger(LOGGER_NAME)

    def on_emission(self, emission: Emission) -> None:
        self._out.info("%s", emission.line)

    def on_metrics(self, metrics: Dict[str, int]) -> None:
        self._diag.debug(
            "Run summary: %s",
            ", ".join(f"{k}={v}" for k, v in metrics.items()),
        )
