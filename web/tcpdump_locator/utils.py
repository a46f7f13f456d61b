"""
Utility helpers: logging config and duration parsing.
"""

from __future__ import annotations

import logging
import re
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "tcpdump_locator"
OUTPUT_LOGGER_NAME = "tcpdump_locator.output"

_DIAG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
_OUTPUT_DATEFMT = "%Y/%m/%d %H:%M:%S"

# Go-style durations: "300ms", "1.5h", "2h45m", "2s"
_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")
_UNIT_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}


def ensure_dirs(*paths: Path) -> None:
    """Ensure each directory exists."""
    for p in paths:
        p.mkdir(parents=True, exist_ok=True)


def init_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    *,
    timestamps: bool = True,
) -> logging.Logger:
    """
    Configure the diagnostics logger (stderr + optional rotating file) and the
    output logger (stdout, message only).

    Safe to call more than once; handlers are replaced, not stacked.
    """
    log_level = getattr(logging, str(level).upper(), logging.INFO)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.propagate = False  # avoid duplicate logs if root has handlers
    _reset_handlers(logger)

    # Console
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(log_level)
    ch.setFormatter(logging.Formatter(_DIAG_FORMAT))
    logger.addHandler(ch)

    # File (rotating)
    if log_file:
        path = Path(log_file)
        ensure_dirs(path.parent)
        fh = RotatingFileHandler(path, maxBytes=1_000_000, backupCount=5)
        fh.setLevel(log_level)
        fh.setFormatter(logging.Formatter(_DIAG_FORMAT))
        logger.addHandler(fh)

    # Emission lines always go out, whatever the diagnostics level
    out = logging.getLogger(OUTPUT_LOGGER_NAME)
    out.setLevel(logging.INFO)
    out.propagate = False
    _reset_handlers(out)
    oh = logging.StreamHandler(sys.stdout)
    if timestamps:
        oh.setFormatter(logging.Formatter("%(asctime)s %(message)s", datefmt=_OUTPUT_DATEFMT))
    else:
        oh.setFormatter(logging.Formatter("%(message)s"))
    out.addHandler(oh)

    return logger


def _reset_handlers(logger: logging.Logger) -> None:
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()


def parse_duration(text: str) -> float:
    """
    Parse a duration into seconds.

    Accepts Go-style strings ("2s", "500ms", "1m30s", "1.5h") or a bare number
    of seconds ("2", "0.25"). Negative or malformed values raise ValueError.
    """
    s = str(text).strip()
    if not s:
        raise ValueError("empty duration")

    try:
        seconds = float(s)
    except ValueError:
        seconds = None
    if seconds is not None:
        if seconds < 0:
            raise ValueError(f"negative duration: {text!r}")
        return seconds

    total = 0.0
    pos = 0
    for m in _DURATION_PART.finditer(s):
        if m.start() != pos:
            break
        total += float(m.group(1)) * _UNIT_SECONDS[m.group(2)]
        pos = m.end()
    if pos != len(s):
        raise ValueError(f"invalid duration: {text!r}")
    return total
