"""
Command line entry point.

    tcpdump -nl -i em0 | tcpdump-locator -p 16 -x '127.*,10\\..*'

Exit status: 0 when input ends, 1 on a bad ignore pattern or a read error,
2 on invalid option values, 130 when interrupted.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional, TextIO

from pydantic import ValidationError

from .config import DEFAULT_GEOIP_DB, DEFAULT_IGNORE, DEFAULT_LANGUAGES, LocatorConfig
from .errors import ConfigError
from .geo.maxmind import open_geo_lookup
from .intake.line_reader import open_text
from .pipeline.extract import compile_ignore_patterns
from .runner import run_stream
from .sinks import LoggingSink
from .utils import LOGGER_NAME, init_logging


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tcpdump-locator",
        description="Print the location of chatty hosts seen in tcpdump output read from stdin.",
    )
    ap.add_argument(
        "-g", dest="geoip_db_path", metavar="DB",
        help="GeoLite2 City database (https://dev.maxmind.com/geoip/geolite2-free-geolocation-data). "
        f"If missing, lookup errors are printed instead of locations. Default: {DEFAULT_GEOIP_DB}",
    )
    ap.add_argument(
        "-p", dest="print_after", type=int, metavar="N",
        help="Print a line after this many packets. Default: 32",
    )
    ap.add_argument(
        "-x", dest="ignore_patterns", metavar="REGEXES",
        help="Comma-separated list of regular expressions describing IP addresses to ignore. "
        "Each must match the whole address. Default: " + ",".join(DEFAULT_IGNORE).replace("%", "%%"),
    )
    ap.add_argument(
        "-t", dest="reset_after_seconds", metavar="DURATION",
        help="Reset the count if no packets have been seen in this long. "
        "Suffixes such as ms, s, m and h may be used. Default: 2s",
    )
    ap.add_argument(
        "-l", dest="name_languages", metavar="LANGS",
        help="Comma-separated language preference for place names. Default: " + ",".join(DEFAULT_LANGUAGES),
    )
    ap.add_argument("--no-timestamps", dest="timestamps", action="store_false", default=None,
                    help="Do not prefix output lines with the date and time.")
    ap.add_argument("--log-level", dest="log_level", help="Diagnostics log level. Default: INFO")
    ap.add_argument("-v", "--verbose", action="store_true", help="Shorthand for --log-level DEBUG.")
    ap.add_argument("--log-file", dest="log_file", help="Also write diagnostics to this rotating file.")
    return ap


def config_from_args(args: argparse.Namespace) -> LocatorConfig:
    """Build a LocatorConfig from the options that were actually given."""
    fields = (
        "geoip_db_path", "print_after", "ignore_patterns", "reset_after_seconds",
        "name_languages", "timestamps", "log_level", "log_file",
    )
    given: Dict[str, Any] = {f: getattr(args, f) for f in fields if getattr(args, f) is not None}
    if args.verbose:
        given["log_level"] = "DEBUG"
    return LocatorConfig(**given)


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    try:
        cfg = config_from_args(args)
    except ValidationError as e:
        ap.error(str(e))

    init_logging(cfg.log_level, cfg.log_file, timestamps=cfg.timestamps)
    logger = logging.getLogger(LOGGER_NAME)

    # Fail on bad patterns before touching the database or the input
    try:
        compile_ignore_patterns(cfg.ignore_patterns)
    except ConfigError as e:
        logger.error("%s", e)
        return 1

    lookup = open_geo_lookup(cfg.geoip_db_path)
    stream = stdin if stdin is not None else open_text(sys.stdin.buffer)
    try:
        run_stream(stream, cfg=cfg, lookup=lookup, sink=LoggingSink())
    except OSError as e:
        logger.error("Error reading input: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    finally:
        lookup.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
