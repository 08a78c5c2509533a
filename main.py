import logging
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from config import settings
from models.itinerary import Itinerary
from models.schemas import (
    MoveActivityRequest,
    AddActivityRequest,
    DeleteActivityRequest,
    AddDayRequest,
    DayThemeRequest,
    ParseTimeRequest,
    ParseTimeResponse,
    EndTimeRequest,
    EndTimeResponse,
    DurationRequest,
    DurationResponse,
    ActivityDisplay,
    TimingsResponse,
)
from services import itinerary_editor
from services.schedule_calculator import (
    compute_end,
    reconcile_end_time,
    annotate_activity,
    format_day_offset_badge,
    format_duration_hours,
)
from utils.categories import get_category_icon, get_category_color
from utils.time_parser import parse_time_to_minutes, format_minutes_to_time

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.api_title,
    description="Time normalization and reordering engine for trip itineraries",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _run_edit(name: str, edit, *args) -> Itinerary:
    try:
        return edit(*args)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"{name} failed: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}"
        )


@app.get("/")
async def root():
    """
    Health check endpoint

    Returns:
        API status information
    """
    return {
        "status": "ok",
        "message": "Itinerary engine is running",
        "version": "1.0.0"
    }


@app.post("/api/itinerary/activities/move", response_model=Itinerary)
async def move_activity(request: MoveActivityRequest):
    """
    Apply a finished drag: move one activity to a position in the same or another day.

    Unknown day numbers or a stale source index return the itinerary unchanged.
    """
    logger.info(
        f"Move request: day {request.source_day}[{request.source_index}] "
        f"-> day {request.dest_day}[{request.dest_index}]"
    )
    return _run_edit(
        "Move activity",
        itinerary_editor.move_activity,
        request.itinerary,
        request.source_day,
        request.source_index,
        request.dest_day,
        request.dest_index,
    )


@app.post("/api/itinerary/activities/add", response_model=Itinerary)
async def add_activity(request: AddActivityRequest):
    return _run_edit("Add activity", itinerary_editor.add_activity, request.itinerary, request.day_index)


@app.post("/api/itinerary/activities/delete", response_model=Itinerary)
async def delete_activity(request: DeleteActivityRequest):
    return _run_edit(
        "Delete activity",
        itinerary_editor.delete_activity,
        request.itinerary,
        request.day_index,
        request.activity_id,
    )


@app.post("/api/itinerary/days/add", response_model=Itinerary)
async def add_day(request: AddDayRequest):
    return _run_edit("Add day", itinerary_editor.add_day, request.itinerary)


@app.post("/api/itinerary/days/theme", response_model=Itinerary)
async def update_day_theme(request: DayThemeRequest):
    return _run_edit(
        "Update day theme",
        itinerary_editor.update_day_theme,
        request.itinerary,
        request.day_index,
        request.theme,
    )


@app.post("/api/itinerary/timings", response_model=TimingsResponse)
async def itinerary_timings(itinerary: Itinerary):
    """
    Derived display values (end time, day offset badge, icon) for every activity.

    Activities whose start time is free text ("Morning") get no end time.
    """
    displays = []
    for day in itinerary.days:
        for activity in day.activities:
            timing = annotate_activity(activity)
            displays.append(ActivityDisplay(
                activity_id=activity.id,
                day=day.day,
                end_text=timing.end_text,
                day_offset=timing.day_offset,
                is_multi_day=timing.is_multi_day,
                badge=format_day_offset_badge(timing.day_offset),
                duration_label=format_duration_hours(activity.duration) if activity.duration else "",
                icon=get_category_icon(activity.category),
                color=get_category_color(activity.category),
            ))
    return TimingsResponse(activities=displays)


@app.post("/api/time/parse", response_model=ParseTimeResponse)
async def parse_time(request: ParseTimeRequest):
    parsed = parse_time_to_minutes(request.text)
    if parsed is None:
        return ParseTimeResponse(parsed=False)

    return ParseTimeResponse(
        parsed=True,
        minutes=parsed.minutes,
        has_am_pm=parsed.has_am_pm,
        canonical=format_minutes_to_time(parsed.minutes, parsed.has_am_pm),
    )


@app.post("/api/time/end", response_model=EndTimeResponse)
async def end_time(request: EndTimeRequest):
    result = compute_end(request.start, request.duration_hours)
    if result is None:
        return EndTimeResponse(parsed=False)

    return EndTimeResponse(
        parsed=True,
        end_text=result.end_text,
        day_offset=result.day_offset,
        badge=format_day_offset_badge(result.day_offset),
    )


@app.post("/api/time/duration", response_model=DurationResponse)
async def duration_from_end_time(request: DurationRequest):
    """
    Derive a duration from start and end clock times.

    The returned end_text is the canonical form the client should show in place
    of what the user typed (e.g. "2pm" -> "2:00 PM").
    """
    reconciled = reconcile_end_time(request.start, request.end)
    if reconciled is None:
        return DurationResponse(parsed=False)

    return DurationResponse(
        parsed=True,
        duration_hours=reconciled.duration_hours,
        end_text=reconciled.end_text,
    )


if __name__ == "__main__":
    import uvicorn
    logger.info("Starting itinerary engine API server on port 8000...")
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
