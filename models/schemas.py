from typing import List, Optional
from pydantic import BaseModel, Field
from models.itinerary import Itinerary, MAX_DURATION_HOURS


class MoveActivityRequest(BaseModel):
    itinerary: Itinerary = Field(..., description="Current itinerary")
    source_day: int = Field(..., description="Day number the activity is dragged from")
    source_index: int = Field(..., description="Position in the source day")
    dest_day: int = Field(..., description="Day number the activity is dropped on")
    dest_index: int = Field(..., description="Position in the destination day")


class AddActivityRequest(BaseModel):
    itinerary: Itinerary
    day_index: int = Field(..., description="Position of the day in the itinerary (0-based)")


class DeleteActivityRequest(BaseModel):
    itinerary: Itinerary
    day_index: int = Field(..., description="Position of the day in the itinerary (0-based)")
    activity_id: str


class AddDayRequest(BaseModel):
    itinerary: Itinerary


class DayThemeRequest(BaseModel):
    itinerary: Itinerary
    day_index: int = Field(..., description="Position of the day in the itinerary (0-based)")
    theme: str


class ParseTimeRequest(BaseModel):
    text: str = Field(..., description="Free-form time text")


class ParseTimeResponse(BaseModel):
    parsed: bool
    minutes: Optional[int] = Field(default=None, description="Minutes since midnight")
    has_am_pm: Optional[bool] = None
    canonical: Optional[str] = Field(default=None, description="Time rendered in its own clock convention")


class EndTimeRequest(BaseModel):
    start: str = Field(..., description="Start time text")
    duration_hours: Optional[float] = Field(
        default=None,
        ge=0,
        le=MAX_DURATION_HOURS,
        allow_inf_nan=False,
        description="Duration in hours"
    )


class EndTimeResponse(BaseModel):
    parsed: bool
    end_text: Optional[str] = None
    day_offset: Optional[int] = None
    badge: str = ""


class DurationRequest(BaseModel):
    start: str = Field(..., description="Start time text")
    end: str = Field(..., description="End time text as typed")


class DurationResponse(BaseModel):
    parsed: bool
    duration_hours: Optional[float] = None
    end_text: Optional[str] = Field(default=None, description="Canonical end time replacing the typed one")


class ActivityDisplay(BaseModel):
    """Derived values rendered next to an activity, never persisted"""
    activity_id: str
    day: int
    end_text: Optional[str] = None
    day_offset: int = 0
    is_multi_day: bool = False
    badge: str = ""
    duration_label: str = ""
    icon: str
    color: str


class TimingsResponse(BaseModel):
    activities: List[ActivityDisplay]
