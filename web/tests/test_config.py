"""Tests for LocatorConfig validation and duration parsing."""

import pytest
from pydantic import ValidationError

from tcpdump_locator.config import DEFAULT_IGNORE, LocatorConfig
from tcpdump_locator.utils import parse_duration


class TestParseDuration:

    @pytest.mark.parametrize(
        "text, seconds",
        [("2s", 2.0), ("500ms", 0.5), ("1m30s", 90.0), ("1.5h", 5400.0), ("3", 3.0), ("0", 0.0)],
    )
    def test_valid(self, text, seconds):
        assert parse_duration(text) == pytest.approx(seconds)

    @pytest.mark.parametrize("text", ["", "abc", "2 s", "5x", "-1", "s"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_duration(text)


class TestLocatorConfig:

    def test_defaults_match_original_tool(self):
        cfg = LocatorConfig()
        assert cfg.ignore_patterns == DEFAULT_IGNORE
        assert cfg.name_languages == ("en", "es", "fr", "de")
        assert cfg.address_width == 15

    def test_csv_ignore_list_drops_empty_entries(self):
        assert LocatorConfig(ignore_patterns="127.*,,10\\..*").ignore_patterns == ("127.*", "10\\..*")
        assert LocatorConfig(ignore_patterns="").ignore_patterns == ()

    def test_languages_cleaned(self):
        assert LocatorConfig(name_languages="EN, ,de ").name_languages == ("en", "de")

    def test_duration_string(self):
        assert LocatorConfig(reset_after_seconds="250ms").reset_after_seconds == pytest.approx(0.25)

    def test_rejects_bad_values(self):
        with pytest.raises(ValidationError):
            LocatorConfig(print_after=0)
        with pytest.raises(ValidationError):
            LocatorConfig(reset_after_seconds="soon")

    def test_frozen(self):
        cfg = LocatorConfig()
        with pytest.raises(ValidationError):
            cfg.print_after = 3
