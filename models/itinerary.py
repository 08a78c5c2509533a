from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

# One leap year
MAX_DURATION_HOURS = 24 * 366


class Activity(BaseModel):
    """A single scheduled item within a day"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(
        ...,
        description="Unique id within the itinerary, stable across reorders"
    )
    time: str = Field(
        ...,
        description="Start time as typed by the user (free-form, e.g. '9:30 AM', '14', 'Morning')"
    )
    duration: Optional[float] = Field(
        default=None,
        ge=0,
        le=MAX_DURATION_HOURS,
        allow_inf_nan=False,
        description="Duration in hours, may be fractional; None when not set"
    )
    description: str = Field(
        default="",
        description="What happens"
    )
    category: str = Field(
        default="",
        description="Open category label (Food, Sightseeing, Culture, ...)"
    )
    notes: str = Field(
        default="",
        description="Free-text notes"
    )
    link: str = Field(
        default="",
        description="Optional URL, empty when not set"
    )
    photo: Optional[str] = Field(
        default=None,
        description="Embedded image payload (data URL)"
    )


class Day(BaseModel):
    """One calendar day of the trip"""
    model_config = ConfigDict(frozen=True)

    day: int = Field(
        ...,
        ge=1,
        description="1-based sequential day number"
    )
    date: str = Field(
        ...,
        description="Human-readable date (e.g. 'October 15, 2024')"
    )
    theme: str = Field(
        default="",
        description="Theme label of the day"
    )
    activities: List[Activity] = Field(
        default_factory=list,
        description="Activities in display order; position is the order"
    )


class Itinerary(BaseModel):
    """The whole trip, an ordered list of days"""
    model_config = ConfigDict(frozen=True)

    days: List[Day] = Field(
        default_factory=list,
        description="Days of the trip in order"
    )

    def find_day_index(self, day_number: int) -> Optional[int]:
        """Position of the day whose day number matches, or None."""
        for index, day in enumerate(self.days):
            if day.day == day_number:
                return index
        return None

    def find_activity(self, activity_id: str) -> Optional[Activity]:
        for day in self.days:
            for activity in day.activities:
                if activity.id == activity_id:
                    return activity
        return None

    def activity_ids(self) -> List[str]:
        return [activity.id for day in self.days for activity in day.activities]
