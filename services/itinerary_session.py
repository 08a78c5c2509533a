import logging
from typing import Any, List
from models.itinerary import Itinerary
from services.activity_editor import ActivityEditor, DayThemeEditor
from services import itinerary_editor
from services.schedule_calculator import ActivityTiming, annotate_activity

logger = logging.getLogger(__name__)


class ItinerarySession:
    """Interactive editing session that owns the current itinerary value"""

    def __init__(self, itinerary: Itinerary):
        self.itinerary = itinerary
        self.activity_editor = ActivityEditor()
        self.day_editor = DayThemeEditor()
        logger.info(f"Session opened with {len(itinerary.days)} days")

    def move_activity(self, source_day: int, source_index: int, dest_day: int, dest_index: int) -> Itinerary:
        """Drop of a dragged activity, applied as one atomic move."""
        self.itinerary = itinerary_editor.move_activity(
            self.itinerary, source_day, source_index, dest_day, dest_index
        )
        return self.itinerary

    def add_activity(self, day_index: int) -> Itinerary:
        """Append a placeholder activity and open it in the editor right away."""
        before = self.itinerary
        self.itinerary = itinerary_editor.add_activity(before, day_index)
        if self.itinerary is not before:
            self.activity_editor.start(self.itinerary.days[day_index].activities[-1])
        return self.itinerary

    def delete_activity(self, day_index: int, activity_id: str) -> Itinerary:
        self.itinerary = itinerary_editor.delete_activity(self.itinerary, day_index, activity_id)
        return self.itinerary

    def add_day(self) -> Itinerary:
        self.itinerary = itinerary_editor.add_day(self.itinerary)
        return self.itinerary

    def start_editing(self, activity_id: str) -> bool:
        activity = self.itinerary.find_activity(activity_id)
        if activity is None:
            logger.warning(f"Cannot edit unknown activity {activity_id}")
            return False
        self.activity_editor.start(activity)
        return True

    def edit_field(self, field: str, value: Any) -> None:
        self.activity_editor.update_field(field, value)

    def type_end_time(self, text: str) -> None:
        self.activity_editor.set_end_time_text(text)

    def commit_end_time(self) -> None:
        self.activity_editor.commit_end_time()

    def save_edit(self) -> Itinerary:
        self.itinerary = self.activity_editor.save(self.itinerary)
        return self.itinerary

    def cancel_edit(self) -> None:
        self.activity_editor.cancel()

    def start_editing_day(self, day_number: int) -> bool:
        day_index = self.itinerary.find_day_index(day_number)
        if day_index is None:
            return False
        self.day_editor.start(day_number, self.itinerary.days[day_index].theme)
        return True

    def edit_day_theme(self, theme: str) -> None:
        self.day_editor.update(theme)

    def save_day_theme(self) -> Itinerary:
        self.itinerary = self.day_editor.save(self.itinerary)
        return self.itinerary

    def cancel_day_theme(self) -> None:
        self.day_editor.cancel()

    def timings(self) -> List[ActivityTiming]:
        return [
            annotate_activity(activity)
            for day in self.itinerary.days
            for activity in day.activities
        ]
