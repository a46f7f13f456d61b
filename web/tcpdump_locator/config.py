"""
Configuration schema for the locator.

Every knob is fixed at startup; nothing is reloaded while the stream is read.
List-valued fields accept either a sequence or the comma-separated string the
command line hands over.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from .utils import parse_duration

DEFAULT_GEOIP_DB = "/var/db/GeoLite/GeoLite2-City.mmdb"
DEFAULT_IGNORE = ("127.*", "255.255.255.0", "192.168.*", r"10\..*")
DEFAULT_LANGUAGES = ("en", "es", "fr", "de")


def _split_csv(value: Any) -> Any:
    if isinstance(value, str):
        return tuple(value.split(","))
    return value


class LocatorConfig(BaseModel):
    """
    Centralized, validated configuration for one run.
    Durations are seconds unless otherwise noted.
    """

    # === Geolocation ===
    geoip_db_path: str = Field(
        default=DEFAULT_GEOIP_DB,
        description="GeoLite2 City database. If it cannot be opened, lookups "
        "fail and their error text is printed instead of a location.",
    )
    name_languages: tuple[str, ...] = Field(
        default=DEFAULT_LANGUAGES,
        description="Preferred languages for place names, most preferred first.",
    )

    # === Tracking ===
    print_after: int = Field(
        default=32,
        ge=1,
        description="Print an address once its streak reaches exactly this many packets.",
    )
    reset_after_seconds: float = Field(
        default=2.0,
        ge=0.0,
        description="Restart an address's streak if it has been idle longer than this.",
    )
    ignore_patterns: tuple[str, ...] = Field(
        default=DEFAULT_IGNORE,
        description="Regular expressions for addresses to ignore; each must match "
        "the whole address.",
    )

    # === Output / logging ===
    address_width: int = Field(
        default=15,
        ge=1,
        description="Minimum width of the right-aligned address column.",
    )
    timestamps: bool = Field(
        default=True,
        description="Prefix emitted lines with a date and time.",
    )
    log_level: str = Field(default="INFO", description="Diagnostics log level.")
    log_file: Optional[str] = Field(
        default=None,
        description="Optional rotating log file for diagnostics.",
    )

    @field_validator("ignore_patterns", mode="before")
    @classmethod
    def _ignore_from_csv(cls, value: Any) -> Any:
        value = _split_csv(value)
        if isinstance(value, (list, tuple)):
            return tuple(p for p in value if p != "")
        return value

    @field_validator("name_languages", mode="before")
    @classmethod
    def _languages_from_csv(cls, value: Any) -> Any:
        value = _split_csv(value)
        if isinstance(value, (list, tuple)):
            cleaned = (str(lang).strip().lower() for lang in value)
            return tuple(lang for lang in cleaned if lang)
        return value

    @field_validator("reset_after_seconds", mode="before")
    @classmethod
    def _duration(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_duration(value)
        return value

    class Config:
        frozen = True
