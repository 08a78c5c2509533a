"""
Free-form clock time parsing and formatting.

Users type start/end times however they like ("14:30", "9.15 am", "2pm", "14").
This module turns that text into a minute-of-day offset and renders offsets back
in the same clock convention the user typed.
"""

import logging
import math
import re
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60

# H:MM / HH:MM with ':', '.' or ',' as separator, optional am/pm marker
# Digits are ASCII only; "١٤:٣٠" or fullwidth "９:３０" do not parse
_STRICT_RE = re.compile(r"^([0-9]{1,2})[:.,]([0-9]{2})(?:\s*([ap]\.?m\.?))?$")
# "2pm", "14", "5" -> minute defaults to 00
_LAZY_RE = re.compile(r"^([0-9]{1,2})(?:\s*([ap]\.?m\.?))?$")


class ParsedTime(BaseModel):
    """Minute-of-day offset plus the clock convention of the original text."""
    model_config = ConfigDict(frozen=True)

    minutes: int = Field(..., ge=0, lt=MINUTES_PER_DAY, description="Minutes since midnight")
    is_12_hour: bool = Field(..., description="Text used the 12-hour clock")
    has_am_pm: bool = Field(..., description="Text carried an explicit AM/PM marker")


def parse_time_to_minutes(time_str: Optional[str]) -> Optional[ParsedTime]:
    """
    Parse free-form time text into a ParsedTime.

    Accepted forms, first match wins:
    1. Strict: "9:30", "09.30", "9,30", optionally followed by am/a.m./pm/p.m.
    2. Lazy: "9", "14", "2pm", "2 p.m." (minute defaults to 00)

    Args:
        time_str: Raw text typed by the user

    Returns:
        ParsedTime, or None when the text cannot be interpreted as a clock time.
        Unparseable text is an ordinary input here, never an exception.

    Example:
        >>> parse_time_to_minutes("2pm").minutes
        840
        >>> parse_time_to_minutes("14:00").has_am_pm
        False
        >>> parse_time_to_minutes("13pm") is None
        True
    """
    if not time_str:
        return None

    cleaned = time_str.strip().lower()

    match = _STRICT_RE.match(cleaned)
    if match:
        hour_raw, minute_raw, period = match.group(1), match.group(2), match.group(3)
    else:
        lazy = _LAZY_RE.match(cleaned)
        if not lazy:
            logger.debug(f"Unparseable time text: {time_str!r}")
            return None
        hour_raw, minute_raw, period = lazy.group(1), "00", lazy.group(2)

    hours = int(hour_raw)
    minutes = int(minute_raw)

    if minutes < 0 or minutes > 59:
        return None

    if period:
        # 12-hour clock limits
        if hours < 1 or hours > 12:
            return None
        is_pm = period.startswith("p")
        if is_pm and hours != 12:
            hours += 12
        elif not is_pm and hours == 12:
            hours = 0
        return ParsedTime(minutes=hours * 60 + minutes, is_12_hour=True, has_am_pm=True)

    if hours < 0 or hours > 23:
        return None
    return ParsedTime(minutes=hours * 60 + minutes, is_12_hour=False, has_am_pm=False)


def format_minutes_to_time(total_minutes: int, use_12_hour: bool) -> str:
    """
    Render a minute offset as clock text.

    Offsets outside a single day (negative or >= 1440) wrap around midnight.

    Args:
        total_minutes: Minutes since midnight, may overflow either way
        use_12_hour: Render "H:MM AM/PM" instead of zero-padded "HH:MM"

    Example:
        >>> format_minutes_to_time(1500, False)
        "01:00"
        >>> format_minutes_to_time(0, True)
        "12:00 AM"
    """
    normalized = total_minutes % MINUTES_PER_DAY

    hour = normalized // 60
    minute = normalized % 60

    if use_12_hour:
        period = "PM" if hour >= 12 else "AM"
        hour = hour % 12
        if hour == 0:
            hour = 12
        return f"{hour}:{minute:02d} {period}"

    return f"{hour:02d}:{minute:02d}"


def hours_to_minutes(duration_hours: Optional[float]) -> Optional[int]:
    """
    Convert a fractional hour count to whole minutes, rounding halves up.

    Returns None for inf/nan and for values so large that the minute count
    overflows to inf.
    """
    if not duration_hours:
        return 0
    minutes = duration_hours * 60 + 0.5
    if not math.isfinite(minutes):
        return None
    return math.floor(minutes)
