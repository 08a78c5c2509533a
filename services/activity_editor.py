"""
Single-focus editing state machines for activities and day themes.

EditorState is either IdleState or EditingState. While editing, every field
change goes to a detached working copy; the committed itinerary only changes
on save. Cancel drops the working copy with no side effects.

Only one activity can be in editing at a time: starting an edit on another
activity discards the current working copy.
"""

import logging
from typing import Any, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, ValidationError
from models.itinerary import Activity, Itinerary
from services.itinerary_editor import replace_activity, update_day_theme
from services.schedule_calculator import compute_end, reconcile_end_time

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("time", "duration", "description", "category", "notes", "link", "photo")


class EditorStateError(Exception):
    """Editor operation is not valid in the current state."""
    pass


class IdleState(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["idle"] = "idle"


class EditingState(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["editing"] = "editing"
    activity_id: str
    working_copy: Activity
    # Raw text of the end time input, kept separately from the activity
    end_time_text: str = ""


EditorState = Union[IdleState, EditingState]


class DayThemeEditingState(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["editing_day"] = "editing_day"
    day_number: int
    theme: str


DayThemeState = Union[IdleState, DayThemeEditingState]


def _end_text_for(activity: Activity) -> str:
    result = compute_end(activity.time, activity.duration)
    return result.end_text if result else ""


class ActivityEditor:
    """Holds the one global editing slot for activities"""

    def __init__(self):
        self.state: EditorState = IdleState()

    @property
    def is_editing(self) -> bool:
        return isinstance(self.state, EditingState)

    @property
    def editing_id(self) -> Optional[str]:
        return self.state.activity_id if isinstance(self.state, EditingState) else None

    @property
    def working_copy(self) -> Optional[Activity]:
        return self.state.working_copy if isinstance(self.state, EditingState) else None

    @property
    def end_time_text(self) -> str:
        return self.state.end_time_text if isinstance(self.state, EditingState) else ""

    def _require_editing(self) -> EditingState:
        if not isinstance(self.state, EditingState):
            raise EditorStateError("No activity is being edited")
        return self.state

    def start(self, activity: Activity) -> None:
        """Enter editing for activity, replacing any edit already in progress."""
        if isinstance(self.state, EditingState) and self.state.activity_id != activity.id:
            logger.info(f"Discarding unsaved edit of {self.state.activity_id}")

        self.state = EditingState(
            activity_id=activity.id,
            working_copy=activity.model_copy(),
            end_time_text=_end_text_for(activity),
        )

    def update_field(self, field: str, value: Any) -> None:
        """
        Apply a field change to the working copy.

        Changing time or duration refreshes the end time text when the start
        parses; otherwise the previous end time text is left as it was.
        Values the Activity model rejects (negative or non-numeric duration,
        missing time) raise EditorStateError and leave the working copy as is.
        """
        state = self._require_editing()
        if field not in EDITABLE_FIELDS:
            raise EditorStateError(f"Field {field!r} cannot be edited")

        try:
            updated = Activity.model_validate({**state.working_copy.model_dump(), field: value})
        except ValidationError as e:
            raise EditorStateError(f"Invalid value for {field!r}: {value!r}") from e
        end_time_text = state.end_time_text

        if field in ("time", "duration"):
            result = compute_end(updated.time, updated.duration)
            if result:
                end_time_text = result.end_text

        self.state = state.model_copy(
            update={"working_copy": updated, "end_time_text": end_time_text}
        )

    def set_end_time_text(self, text: str) -> None:
        """Store raw end time input while the user is still typing."""
        state = self._require_editing()
        self.state = state.model_copy(update={"end_time_text": text})

    def commit_end_time(self) -> None:
        """
        Derive the duration from the typed end time and normalize its text.

        Nothing changes when the end input is empty or either time is unparseable.
        """
        state = self._require_editing()
        if not state.end_time_text:
            return

        reconciled = reconcile_end_time(state.working_copy.time, state.end_time_text)
        if reconciled is None:
            return

        updated = state.working_copy.model_copy(update={"duration": reconciled.duration_hours})
        self.state = state.model_copy(
            update={"working_copy": updated, "end_time_text": reconciled.end_text}
        )

    def save(self, itinerary: Itinerary) -> Itinerary:
        """Commit the working copy into the itinerary and return to idle."""
        state = self._require_editing()
        self.state = IdleState()
        return replace_activity(itinerary, state.working_copy)

    def cancel(self) -> None:
        self.state = IdleState()


class DayThemeEditor:
    """Holds the editing slot for a day header theme"""

    def __init__(self):
        self.state: DayThemeState = IdleState()

    @property
    def editing_day(self) -> Optional[int]:
        return self.state.day_number if isinstance(self.state, DayThemeEditingState) else None

    @property
    def theme(self) -> Optional[str]:
        return self.state.theme if isinstance(self.state, DayThemeEditingState) else None

    def _require_editing(self) -> DayThemeEditingState:
        if not isinstance(self.state, DayThemeEditingState):
            raise EditorStateError("No day theme is being edited")
        return self.state

    def start(self, day_number: int, theme: str) -> None:
        self.state = DayThemeEditingState(day_number=day_number, theme=theme)

    def update(self, theme: str) -> None:
        state = self._require_editing()
        self.state = state.model_copy(update={"theme": theme})

    def save(self, itinerary: Itinerary) -> Itinerary:
        state = self._require_editing()
        self.state = IdleState()

        day_index = itinerary.find_day_index(state.day_number)
        if day_index is None:
            logger.warning(f"Theme save ignored: day {state.day_number} no longer exists")
            return itinerary
        return update_day_theme(itinerary, day_index, state.theme)

    def cancel(self) -> None:
        self.state = IdleState()
