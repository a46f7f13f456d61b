"""
Geolocation body formatting (pure text, no tracker state).

Body rules, checked in order:
- anonymous proxy          -> "Anonymous Proxy"
- no country ISO code      -> "Countryless"
- otherwise                -> "<ISO>, <country>, <subdivision(s)>, <city>"
"""

from __future__ import annotations

from typing import Mapping, Sequence

from ..dto import GeoRecord

ANONYMOUS_PROXY = "Anonymous Proxy"
COUNTRYLESS = "Countryless"
NO_SUBDIVISION = "No Subdivision (State)"
MISSING = "Missing"


def pick_name(names: Mapping[str, str], languages: Sequence[str]) -> str:
    """
    Choose a display name from a language -> name mapping.

    The first language in `languages` present in `names` wins. Failing that,
    return "[<key>|<key>...]<longest name>" so the reader can still see what
    is there; an empty mapping gives "Missing".
    """
    for lang in languages:
        lang = lang.strip().lower()
        if not lang:
            continue
        if lang in names:
            return names[lang]

    if not names:
        return MISSING

    keys = sorted(names)
    longest = ""
    for k in keys:
        if len(names[k]) > len(longest):
            longest = names[k]
    return "[{}]{}".format("|".join(keys).lstrip("|"), longest)


def describe(record: GeoRecord, languages: Sequence[str]) -> str:
    """Render one GeoRecord as the emitted body text."""
    if record.is_anonymous_proxy:
        return ANONYMOUS_PROXY
    if not record.country_iso_code:
        return COUNTRYLESS

    if record.subdivision_names:
        subdivision = "".join(pick_name(n, languages) for n in record.subdivision_names)
    else:
        subdivision = NO_SUBDIVISION

    return ", ".join(
        (
            record.country_iso_code,
            pick_name(record.country_names, languages),
            subdivision,
            pick_name(record.city_names, languages),
        )
    )
