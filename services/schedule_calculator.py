"""
End-time and duration calculations for activities.

An activity persists only its start time text and its duration in hours.
The end time and the number of midnights it crosses are derived on demand
from those two fields and are never written back into the activity.
"""

import logging
from typing import Optional
from pydantic import BaseModel, Field
from models.itinerary import Activity
from utils.time_parser import (
    MINUTES_PER_DAY,
    parse_time_to_minutes,
    format_minutes_to_time,
    hours_to_minutes,
)

logger = logging.getLogger(__name__)


class EndTimeResult(BaseModel):
    """Computed end of an activity"""
    end_text: str = Field(..., description="End time in the start time's clock convention")
    day_offset: int = Field(..., ge=0, description="Number of midnights crossed")


class EndTimeReconciliation(BaseModel):
    """Duration derived from an end time, plus the canonical end time text"""
    duration_hours: float = Field(..., ge=0)
    end_text: str


class ActivityTiming(BaseModel):
    """Display-only timing values of one activity"""
    activity_id: str
    end_text: Optional[str] = None
    day_offset: int = 0
    is_multi_day: bool = False


def compute_end(start_text: str, duration_hours: Optional[float] = 0) -> Optional[EndTimeResult]:
    """
    Compute the end time of an activity from its start and duration.

    Args:
        start_text: Start time as typed by the user
        duration_hours: Duration in hours (fractional allowed, None treated as 0)

    Returns:
        EndTimeResult, or None when the start time cannot be parsed or the
        duration is not a finite number of hours

    Note:
        - day_offset counts every midnight crossed, so a 30h activity reports 2
          when it starts late enough
        - end_text follows the start's convention: "9:30 AM" start gives a
          12-hour end, "22:00" start gives a 24-hour end

    Example:
        >>> compute_end("22:00", 3)
        EndTimeResult(end_text='01:00', day_offset=1)
    """
    parsed = parse_time_to_minutes(start_text)
    if parsed is None:
        return None

    duration_minutes = hours_to_minutes(duration_hours)
    if duration_minutes is None:
        logger.warning(f"Duration {duration_hours!r} is not a finite number of hours")
        return None

    end_total = parsed.minutes + duration_minutes
    day_offset = end_total // MINUTES_PER_DAY

    return EndTimeResult(
        end_text=format_minutes_to_time(end_total, parsed.has_am_pm),
        day_offset=day_offset,
    )


def compute_duration_from_end_time(start_text: str, end_text: str) -> Optional[float]:
    """
    Derive a duration in hours from a start and an end clock time.

    An end earlier than the start is taken to be on the next day. Only one wrap
    is applied: clock times alone cannot express an end two or more days later.

    Returns:
        Duration in hours, or None if either time cannot be parsed

    Example:
        >>> compute_duration_from_end_time("23:00", "01:00")
        2.0
    """
    start = parse_time_to_minutes(start_text)
    end = parse_time_to_minutes(end_text)
    if start is None or end is None:
        return None

    diff = end.minutes - start.minutes
    if diff < 0:
        diff += MINUTES_PER_DAY

    return diff / 60


def reconcile_end_time(start_text: str, end_text: str) -> Optional[EndTimeReconciliation]:
    """
    Turn a user-typed end time into a duration and a canonical end time text.

    The returned end_text replaces what the user typed, so "2pm" typed as the end
    of a "9:00 AM" activity comes back as "2:00 PM".

    Returns:
        EndTimeReconciliation, or None if either time cannot be parsed
    """
    duration_hours = compute_duration_from_end_time(start_text, end_text)
    if duration_hours is None:
        logger.debug(f"Cannot derive duration from start={start_text!r} end={end_text!r}")
        return None

    result = compute_end(start_text, duration_hours)
    # start parsed above, so compute_end cannot fail here
    return EndTimeReconciliation(duration_hours=duration_hours, end_text=result.end_text)


def annotate_activity(activity: Activity) -> ActivityTiming:
    """Derived display values for one activity; end_text is None when the start is free text."""
    result = compute_end(activity.time, activity.duration)
    if result is None:
        return ActivityTiming(activity_id=activity.id)

    return ActivityTiming(
        activity_id=activity.id,
        end_text=result.end_text,
        day_offset=result.day_offset,
        is_multi_day=result.day_offset > 0,
    )


def format_day_offset_badge(day_offset: int) -> str:
    """
    Badge text shown next to an activity that ends on a later day.

    Example:
        >>> format_day_offset_badge(0)
        ""
        >>> format_day_offset_badge(2)
        "+2 DAYS"
    """
    if day_offset <= 0:
        return ""
    suffix = "S" if day_offset > 1 else ""
    return f"+{day_offset} DAY{suffix}"


def format_duration_hours(duration_hours: Optional[float]) -> str:
    """Duration as shown in the activity editor, e.g. "1.50h"."""
    return f"{(duration_hours or 0):.2f}h"
