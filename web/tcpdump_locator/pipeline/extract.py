"""
Address extraction and ignore-list filtering.

Responsibilities (kept minimal):
- Find every IPv4-looking substring in a line (four 1-3 digit groups, no range
  check: "999.999.999.999" is still an address here).
- Compile the ignore patterns once at startup, each anchored to the whole address.
- Drop candidates matching any ignore pattern, keeping order and duplicates.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Pattern, Sequence

from ..errors import ConfigError

# ASCII digits only; matches may sit inside other tokens ("src=1.2.3.4:80")
ADDRESS_RE: Pattern[str] = re.compile(r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}", re.ASCII)


def compile_ignore_patterns(patterns: Iterable[str]) -> List[Pattern[str]]:
    """
    Compile ignore patterns as whole-address matches.

    Each pattern is wrapped as ^(?:pattern)$ so "10\\..*" cannot accidentally
    exclude "110.0.0.1" and alternations stay anchored on both sides.

    Raises
    ------
    ConfigError
        If any pattern fails to compile.
    """
    compiled: List[Pattern[str]] = []
    for p in patterns:
        try:
            compiled.append(re.compile(f"^(?:{p})$"))
        except re.error as e:
            raise ConfigError(f"Unable to compile {p}: {e}") from e
    return compiled


def find_addresses(line: str) -> List[str]:
    """Return all address-looking substrings of `line`, left to right."""
    return ADDRESS_RE.findall(line)


def is_ignored(address: str, ignore: Sequence[Pattern[str]]) -> bool:
    """True if any ignore pattern matches the whole address."""
    return any(r.match(address) for r in ignore)


def filter_addresses(candidates: Sequence[str], ignore: Sequence[Pattern[str]]) -> List[str]:
    """
    Keep the candidates (from find_addresses) that survive the ignore list.

    Duplicates are preserved; each one is a separate observation.
    """
    return [a for a in candidates if not is_ignored(a, ignore)]
