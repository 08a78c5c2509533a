"""
Unit tests for free-form time parsing and formatting (utils/time_parser.py).
"""

import pytest
from utils.time_parser import (
    ParsedTime,
    parse_time_to_minutes,
    format_minutes_to_time,
    hours_to_minutes,
)


# Tests for parse_time_to_minutes()

@pytest.mark.parametrize("text,minutes", [
    ("9:30", 570),
    ("09:30", 570),
    ("9.30", 570),
    ("9,30", 570),
    ("00:00", 0),
    ("23:59", 1439),
    ("14", 840),
    ("0", 0),
])
def test_parse_24_hour_forms(text, minutes):
    """Strict and lazy forms without a marker use the 24-hour clock."""
    result = parse_time_to_minutes(text)

    assert result is not None
    assert result.minutes == minutes
    assert result.has_am_pm is False
    assert result.is_12_hour is False


@pytest.mark.parametrize("text,minutes", [
    ("9:30 am", 570),
    ("9:30AM", 570),
    ("9:30 p.m.", 1290),
    ("9:30 P.M.", 1290),
    ("2pm", 840),
    ("2 pm", 840),
    ("2 a.m.", 120),
    ("12am", 0),
    ("12:30 am", 30),
    ("12pm", 720),
    ("12:45 PM", 765),
    ("  11:15 pm  ", 1395),
])
def test_parse_12_hour_forms(text, minutes):
    result = parse_time_to_minutes(text)

    assert result is not None
    assert result.minutes == minutes
    assert result.has_am_pm is True
    assert result.is_12_hour is True


@pytest.mark.parametrize("text", [
    "13pm",      # 12-hour clock only goes to 12
    "0am",
    "24:00",
    "25",
    "9:60",
    "9:5",       # minutes need two digits
    "123",
    "9:30 xm",
    "Morning",
    "noon",
    "",
    "   ",
    "١٤:٣٠",     # Arabic-Indic digits
    "９:３０ pm",  # fullwidth digits
])
def test_parse_rejects_invalid(text):
    """Invalid text yields None instead of raising."""
    assert parse_time_to_minutes(text) is None


def test_parse_none_input():
    assert parse_time_to_minutes(None) is None


def test_2pm_and_14_differ_only_in_convention():
    pm = parse_time_to_minutes("2pm")
    h24 = parse_time_to_minutes("14:00")

    assert pm.minutes == h24.minutes == 840
    assert pm.has_am_pm is True
    assert h24.has_am_pm is False
    assert format_minutes_to_time(pm.minutes, pm.has_am_pm) == "2:00 PM"
    assert format_minutes_to_time(h24.minutes, h24.has_am_pm) == "14:00"


def test_bare_hour_stays_24_hour():
    """A bare "14" must render as 24-hour, not be promoted to PM."""
    parsed = parse_time_to_minutes("14")

    assert format_minutes_to_time(parsed.minutes, parsed.has_am_pm) == "14:00"


def test_parsed_time_is_immutable():
    parsed = parse_time_to_minutes("9:30")

    with pytest.raises(Exception):
        parsed.minutes = 0


# Tests for format_minutes_to_time()

@pytest.mark.parametrize("text,canonical", [
    ("9:30", "09:30"),
    ("09:30", "09:30"),
    ("9.05", "09:05"),
    ("23:59", "23:59"),
    ("9:30 am", "9:30 AM"),
    ("09:30 PM", "9:30 PM"),
    ("12:00 am", "12:00 AM"),
    ("12:00 p.m.", "12:00 PM"),
])
def test_format_round_trip(text, canonical):
    """Formatting a parsed time gives the zero-padded canonical form."""
    parsed = parse_time_to_minutes(text)

    assert format_minutes_to_time(parsed.minutes, parsed.has_am_pm) == canonical


def test_format_wraps_overflow():
    assert format_minutes_to_time(1500, False) == "01:00"
    assert format_minutes_to_time(1440, True) == "12:00 AM"
    assert format_minutes_to_time(3000, False) == "02:00"


def test_format_wraps_negative():
    assert format_minutes_to_time(-60, False) == "23:00"
    assert format_minutes_to_time(-1, True) == "11:59 PM"


def test_format_12_hour_noon_and_midnight():
    assert format_minutes_to_time(0, True) == "12:00 AM"
    assert format_minutes_to_time(750, True) == "12:30 PM"
    assert format_minutes_to_time(61, True) == "1:01 AM"


# Tests for hours_to_minutes()

def test_hours_to_minutes():
    assert hours_to_minutes(1.5) == 90
    assert hours_to_minutes(0.75) == 45
    assert hours_to_minutes(2) == 120
    assert hours_to_minutes(0) == 0
    assert hours_to_minutes(None) == 0


def test_hours_to_minutes_non_finite():
    assert hours_to_minutes(float("inf")) is None
    assert hours_to_minutes(float("nan")) is None
    assert hours_to_minutes(1e308) is None


def test_parsed_time_model_bounds():
    with pytest.raises(Exception):
        ParsedTime(minutes=1440, is_12_hour=False, has_am_pm=False)
