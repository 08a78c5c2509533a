"""
Structural edits of an itinerary: reorder, add and delete activities, add days.

Every function returns a new Itinerary and leaves its input untouched. Only the
days an edit touches are copied; untouched Day and Activity instances are shared
between the old and the new value, which is safe because all models are frozen.

Stale references (unknown day number, index out of range, unknown activity id)
and edits on an empty itinerary are no-ops that return the input unchanged.
"""

import logging
import uuid
from datetime import datetime, timedelta
from typing import List, Optional
from config import settings
from models.itinerary import Activity, Day, Itinerary

logger = logging.getLogger(__name__)

LONG_DATE_FORMAT = "%B %d, %Y"
ISO_DATE_FORMAT = "%Y-%m-%d"


def _replace_day(itinerary: Itinerary, day_index: int, activities: List[Activity]) -> List[Day]:
    days = list(itinerary.days)
    days[day_index] = days[day_index].model_copy(update={"activities": activities})
    return days


def move_activity(
    itinerary: Itinerary,
    source_day_number: int,
    source_index: int,
    dest_day_number: int,
    dest_index: int
) -> Itinerary:
    """
    Move one activity to another position, within the same day or across days.

    Args:
        itinerary: Current itinerary
        source_day_number: Day number (not list position) holding the activity
        source_index: Position of the activity in the source day
        dest_day_number: Day number receiving the activity (may equal source)
        dest_index: Position the activity ends up at in the destination day

    Returns:
        New itinerary with the activity moved, or the input itself when either
        day number is unknown or source_index is out of range

    Note:
        - Positions after source_index shift down, positions at/after dest_index shift up
        - dest_index beyond the end appends
    """
    source_pos = itinerary.find_day_index(source_day_number)
    dest_pos = itinerary.find_day_index(dest_day_number)
    if source_pos is None or dest_pos is None:
        logger.warning(
            f"Move ignored: unknown day (source={source_day_number}, dest={dest_day_number})"
        )
        return itinerary

    source_activities = list(itinerary.days[source_pos].activities)
    if not 0 <= source_index < len(source_activities):
        logger.warning(
            f"Move ignored: index {source_index} out of range for day {source_day_number}"
        )
        return itinerary

    moved = source_activities.pop(source_index)

    if source_pos == dest_pos:
        dest_activities = source_activities
    else:
        dest_activities = list(itinerary.days[dest_pos].activities)

    dest_index = max(0, min(dest_index, len(dest_activities)))
    dest_activities.insert(dest_index, moved)

    days = _replace_day(itinerary, source_pos, source_activities)
    days[dest_pos] = days[dest_pos].model_copy(update={"activities": dest_activities})

    logger.debug(
        f"Moved activity {moved.id}: day {source_day_number}[{source_index}] "
        f"-> day {dest_day_number}[{dest_index}]"
    )
    return itinerary.model_copy(update={"days": days})


def generate_activity_id(itinerary: Itinerary) -> str:
    """Fresh activity id that does not collide with any id in the itinerary."""
    existing = set(itinerary.activity_ids())
    while True:
        candidate = f"activity-new-{uuid.uuid4().hex[:12]}"
        if candidate not in existing:
            return candidate


def new_activity(activity_id: str) -> Activity:
    return Activity(
        id=activity_id,
        time=settings.default_activity_time,
        duration=settings.default_activity_duration,
        description=settings.default_activity_description,
        category=settings.default_activity_category,
        notes="",
        link="",
        photo=None,
    )


def add_activity(itinerary: Itinerary, day_index: int) -> Itinerary:
    """
    Append a placeholder activity to the day at position day_index.

    Returns:
        New itinerary, or the input when day_index is out of range
    """
    if not 0 <= day_index < len(itinerary.days):
        logger.warning(f"Add activity ignored: no day at index {day_index}")
        return itinerary

    activity = new_activity(generate_activity_id(itinerary))
    activities = list(itinerary.days[day_index].activities) + [activity]

    logger.info(f"Added activity {activity.id} to day {itinerary.days[day_index].day}")
    return itinerary.model_copy(update={"days": _replace_day(itinerary, day_index, activities)})


def delete_activity(itinerary: Itinerary, day_index: int, activity_id: str) -> Itinerary:
    """Remove the activity with activity_id from the day at position day_index."""
    if not 0 <= day_index < len(itinerary.days):
        logger.warning(f"Delete ignored: no day at index {day_index}")
        return itinerary

    activities = [a for a in itinerary.days[day_index].activities if a.id != activity_id]
    if len(activities) == len(itinerary.days[day_index].activities):
        logger.warning(f"Delete ignored: activity {activity_id} not in day index {day_index}")
        return itinerary

    logger.info(f"Deleted activity {activity_id}")
    return itinerary.model_copy(update={"days": _replace_day(itinerary, day_index, activities)})


def replace_activity(itinerary: Itinerary, activity: Activity) -> Itinerary:
    """Swap in an edited activity for the committed one with the same id."""
    for day_index, day in enumerate(itinerary.days):
        for position, current in enumerate(day.activities):
            if current.id == activity.id:
                activities = list(day.activities)
                activities[position] = activity
                return itinerary.model_copy(
                    update={"days": _replace_day(itinerary, day_index, activities)}
                )

    logger.warning(f"Replace ignored: activity {activity.id} no longer in itinerary")
    return itinerary


def update_day_theme(itinerary: Itinerary, day_index: int, theme: str) -> Itinerary:
    if not 0 <= day_index < len(itinerary.days):
        logger.warning(f"Theme update ignored: no day at index {day_index}")
        return itinerary

    days = list(itinerary.days)
    days[day_index] = days[day_index].model_copy(update={"theme": theme})
    return itinerary.model_copy(update={"days": days})


def next_date_string(date_str: str) -> Optional[str]:
    """
    The calendar day after date_str, rendered in the same style.

    Supports the long style ("October 15, 2024") and ISO ("2024-10-15").

    Example:
        >>> next_date_string("December 31, 2024")
        "January 1, 2025"
        >>> next_date_string("2024-02-28")
        "2024-02-29"
    """
    cleaned = date_str.strip()

    try:
        parsed = datetime.strptime(cleaned, ISO_DATE_FORMAT)
        return (parsed + timedelta(days=1)).strftime(ISO_DATE_FORMAT)
    except ValueError:
        pass

    try:
        parsed = datetime.strptime(cleaned, LONG_DATE_FORMAT)
    except ValueError:
        return None

    following = parsed + timedelta(days=1)
    return f"{following.strftime('%B')} {following.day}, {following.year}"


def add_day(itinerary: Itinerary) -> Itinerary:
    """
    Append an empty day after the last one.

    The new day is numbered one past the last day and dated one calendar day
    after it. An empty itinerary has nothing to extrapolate from and is
    returned unchanged.
    """
    if not itinerary.days:
        logger.warning("Add day ignored: itinerary is empty")
        return itinerary

    last_day = itinerary.days[-1]
    new_date = next_date_string(last_day.date)
    if new_date is None:
        logger.warning(f"Could not parse date {last_day.date!r} of day {last_day.day}")
        new_date = ""

    day = Day(
        day=last_day.day + 1,
        date=new_date,
        theme=settings.default_day_theme,
        activities=[],
    )

    logger.info(f"Added day {day.day} ({day.date})")
    return itinerary.model_copy(update={"days": list(itinerary.days) + [day]})
