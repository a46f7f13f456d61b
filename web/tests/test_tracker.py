"""Tests for streak counting, the idle reset window and the threshold trigger."""

import pytest

from tcpdump_locator.pipeline.tracker import AddressTracker


class TestAddressTracker:

    @pytest.fixture
    def tracker(self, clock):
        return AddressTracker(threshold=3, reset_after_seconds=2.0, clock=clock)

    def test_first_observation_creates_entry(self, tracker, clock):
        assert "1.2.3.4" not in tracker
        assert tracker.observe("1.2.3.4") is False
        entry = tracker.get("1.2.3.4")
        assert entry.count == 1
        assert entry.last_seen_at == clock.now
        assert len(tracker) == 1

    def test_triggers_exactly_at_threshold(self, tracker):
        results = [tracker.observe("1.2.3.4", now=t) for t in (0.0, 0.5, 0.9)]
        assert results == [False, False, True]

    def test_no_trigger_past_threshold(self, tracker):
        for t in (0.0, 0.1, 0.2):
            tracker.observe("1.2.3.4", now=t)
        later = [tracker.observe("1.2.3.4", now=0.3 + i * 0.1) for i in range(10)]
        assert not any(later)
        assert tracker.get("1.2.3.4").count == 13

    def test_idle_gap_restarts_streak_at_one(self, tracker):
        for t in (0.0, 0.5, 0.9):
            tracker.observe("1.2.3.4", now=t)
        assert tracker.observe("1.2.3.4", now=5.0) is False
        assert tracker.get("1.2.3.4").count == 1
        assert tracker.get("1.2.3.4").last_seen_at == 5.0

    def test_gap_equal_to_window_keeps_streak(self, tracker):
        tracker.observe("1.2.3.4", now=0.0)
        tracker.observe("1.2.3.4", now=2.0)
        assert tracker.get("1.2.3.4").count == 2

    def test_new_full_streak_triggers_again(self, tracker):
        for t in (0.0, 0.1, 0.2):
            tracker.observe("1.2.3.4", now=t)
        results = [tracker.observe("1.2.3.4", now=t) for t in (10.0, 10.1, 10.2)]
        assert results == [False, False, True]

    def test_window_measured_from_last_observation(self, tracker):
        # steady traffic every 1.5s never goes stale
        for i in range(3):
            triggered = tracker.observe("1.2.3.4", now=i * 1.5)
        assert triggered is True

    def test_addresses_tracked_independently(self, tracker):
        tracker.observe("1.1.1.1", now=0.0)
        tracker.observe("2.2.2.2", now=0.0)
        tracker.observe("1.1.1.1", now=0.1)
        assert tracker.get("1.1.1.1").count == 2
        assert tracker.get("2.2.2.2").count == 1

    def test_uses_clock_when_now_not_given(self, tracker, clock):
        tracker.observe("1.2.3.4")
        clock.advance(3.0)
        tracker.observe("1.2.3.4")
        assert tracker.get("1.2.3.4").count == 1

    def test_threshold_of_one_triggers_on_first_sighting(self, clock):
        tracker = AddressTracker(threshold=1, reset_after_seconds=2.0, clock=clock)
        assert tracker.observe("9.9.9.9") is True
        assert tracker.observe("9.9.9.9") is False

    def test_rejects_zero_threshold(self):
        with pytest.raises(ValueError):
            AddressTracker(threshold=0)

    def test_entries_are_never_evicted(self, tracker):
        tracker.observe("1.2.3.4", now=0.0)
        tracker.observe("5.6.7.8", now=1000.0)
        assert "1.2.3.4" in tracker
