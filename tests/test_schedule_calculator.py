"""
Unit tests for end time and duration calculations (services/schedule_calculator.py).
"""

import pytest
from pydantic import ValidationError
from models.itinerary import Activity
from services.schedule_calculator import (
    compute_end,
    compute_duration_from_end_time,
    reconcile_end_time,
    annotate_activity,
    format_day_offset_badge,
    format_duration_hours,
)


class TestComputeEnd:
    """Tests for compute_end()"""

    def test_overnight_24_hour(self):
        result = compute_end("22:00", 3)

        assert result.end_text == "01:00"
        assert result.day_offset == 1

    def test_same_day_12_hour(self):
        result = compute_end("9:30 AM", 1.5)

        assert result.end_text == "11:00 AM"
        assert result.day_offset == 0

    def test_zero_duration_ends_at_start(self):
        result = compute_end("10:00", 0)

        assert result.end_text == "10:00"
        assert result.day_offset == 0

    def test_absent_duration_treated_as_zero(self):
        result = compute_end("10am", None)

        assert result.end_text == "10:00 AM"
        assert result.day_offset == 0

    def test_multi_day_duration(self):
        """30h starting at 20:00 crosses two midnights."""
        result = compute_end("20:00", 30)

        assert result.end_text == "02:00"
        assert result.day_offset == 2

    def test_end_exactly_at_midnight(self):
        result = compute_end("22:00", 2)

        assert result.end_text == "00:00"
        assert result.day_offset == 1

    def test_keeps_start_convention(self):
        assert compute_end("14", 1).end_text == "15:00"
        assert compute_end("11pm", 2).end_text == "1:00 AM"
        assert compute_end("11pm", 2).day_offset == 1

    def test_unparseable_start(self):
        assert compute_end("Morning", 2) is None
        assert compute_end("", 2) is None

    @pytest.mark.parametrize("duration", [float("inf"), float("nan"), 1e308])
    def test_non_finite_duration(self, duration):
        """Durations too large for minute arithmetic yield no end time."""
        assert compute_end("9:00", duration) is None


class TestComputeDurationFromEndTime:
    """Tests for compute_duration_from_end_time()"""

    def test_overnight_wrap(self):
        assert compute_duration_from_end_time("23:00", "01:00") == 2

    def test_mixed_conventions(self):
        assert compute_duration_from_end_time("9:00 AM", "2pm") == 5.0
        assert compute_duration_from_end_time("9:00", "2pm") == 5.0

    def test_fractional(self):
        assert compute_duration_from_end_time("9:15", "9:45") == 0.5

    def test_same_time_is_zero(self):
        assert compute_duration_from_end_time("10:00", "10:00") == 0

    def test_single_wrap_only(self):
        """An earlier end is always read as the next day, never later."""
        assert compute_duration_from_end_time("10:00", "09:00") == 23

    @pytest.mark.parametrize("start,end", [
        ("Morning", "10:00"),
        ("10:00", "later"),
        ("13pm", "2pm"),
    ])
    def test_unparseable(self, start, end):
        assert compute_duration_from_end_time(start, end) is None


class TestReconcileEndTime:
    """Tests for reconcile_end_time()"""

    def test_canonicalizes_typed_end(self):
        result = reconcile_end_time("9:00 AM", "2pm")

        assert result.duration_hours == 5.0
        assert result.end_text == "2:00 PM"

    def test_end_follows_start_convention(self):
        """A 24-hour start renders the end in 24-hour form too."""
        result = reconcile_end_time("22:00", "1am")

        assert result.duration_hours == 3.0
        assert result.end_text == "01:00"

    def test_unparseable_end(self):
        assert reconcile_end_time("9:00", "whenever") is None


class TestAnnotateActivity:
    """Tests for annotate_activity()"""

    def test_multi_day_activity(self):
        activity = Activity(id="a", time="23:00", duration=2)

        timing = annotate_activity(activity)

        assert timing.activity_id == "a"
        assert timing.end_text == "01:00"
        assert timing.day_offset == 1
        assert timing.is_multi_day is True

    def test_free_text_start(self):
        activity = Activity(id="b", time="Afternoon", duration=2)

        timing = annotate_activity(activity)

        assert timing.end_text is None
        assert timing.day_offset == 0
        assert timing.is_multi_day is False

    @pytest.mark.parametrize("duration", [float("inf"), float("nan"), -1, 24 * 366 + 1])
    def test_activity_rejects_unusable_duration(self, duration):
        with pytest.raises(ValidationError):
            Activity(id="x", time="9:00", duration=duration)

    def test_does_not_touch_activity(self):
        activity = Activity(id="c", time="9:00", duration=1)

        annotate_activity(activity)

        assert activity.time == "9:00"
        assert activity.duration == 1


def test_format_day_offset_badge():
    assert format_day_offset_badge(0) == ""
    assert format_day_offset_badge(1) == "+1 DAY"
    assert format_day_offset_badge(2) == "+2 DAYS"


def test_format_duration_hours():
    assert format_duration_hours(1.5) == "1.50h"
    assert format_duration_hours(None) == "0.00h"
