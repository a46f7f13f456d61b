"""Tests for emission formatting and repeat suppression."""

import pytest

from tcpdump_locator.pipeline.emitter import Emitter


class TestEmitter:

    @pytest.fixture
    def emitter(self, lookup, sink):
        return Emitter(lookup=lookup, sink=sink)

    def test_formats_right_aligned_address_and_body(self, emitter, sink):
        emission = emitter.emit("8.8.8.8")
        assert emission.line == "        8.8.8.8  US, United States, California, Mountain View"
        assert sink.emissions == [emission]
        assert emitter.last_emitted == "8.8.8.8"

    def test_long_address_not_truncated(self, emitter):
        emission = emitter.emit("255.255.255.255")
        assert emission.line.startswith("255.255.255.255  ")

    def test_lookup_error_text_becomes_body(self, emitter):
        emission = emitter.emit("999.1.1.1")
        assert emission.body == "The address 999.1.1.1 is not in the database."

    def test_same_address_twice_is_suppressed(self, emitter, sink, lookup):
        emitter.emit("8.8.8.8")
        assert emitter.emit("8.8.8.8") is None
        assert sink.addresses == ["8.8.8.8"]
        assert lookup.calls == ["8.8.8.8"]
        assert emitter.suppressed == 1

    def test_other_address_in_between_re_enables(self, emitter, sink):
        emitter.emit("8.8.8.8")
        emitter.emit("1.1.1.1")
        emitter.emit("8.8.8.8")
        assert sink.addresses == ["8.8.8.8", "1.1.1.1", "8.8.8.8"]

    def test_failed_lookup_still_counts_as_emitted(self, emitter, sink):
        emitter.emit("1.1.1.1")
        assert emitter.emit("1.1.1.1") is None
        assert emitter.last_emitted == "1.1.1.1"

    def test_custom_width_and_languages(self, lookup, sink):
        emitter = Emitter(lookup=lookup, sink=sink, address_width=9, languages=("de",))
        emission = emitter.emit("8.8.8.8")
        assert emission.line == "  8.8.8.8  US, USA, [en]California, [en]Mountain View"
