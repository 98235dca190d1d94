"""Weekly class timetable. One entry per class, day and time slot."""

from typing import Any, Dict, Optional, Tuple

from campushub.core.exceptions import ValidationError
from campushub.schemas.common import EntityType
from campushub.schemas.timetable import (
    DAYS_OF_WEEK,
    TIME_SLOTS,
    TimetableEntry,
    TimetableEntryCreate,
)
from campushub.services.entity_manager import EntityDefinition, EntityListManager


def _slot_order(entry: TimetableEntry):
    slot = TIME_SLOTS.index(entry.time) if entry.time in TIME_SLOTS else len(TIME_SLOTS)
    return (DAYS_OF_WEEK.index(entry.day), slot, entry.time, entry.class_id)


def one_entry_per_slot(manager: EntityListManager, values: Dict[str, Any],
                       exclude_id: Optional[str]) -> None:
    slot = (values["class_id"], values["day"], values["time"])
    for entry in manager.query():
        if entry.id == exclude_id:
            continue
        if (entry.class_id, entry.day, entry.time) == slot:
            raise ValidationError.for_field(
                "time",
                f"Class {entry.class_id} already has {entry.subject} on "
                f"{entry.day.capitalize()} at {entry.time}.",
            )


TIMETABLE_DEFINITION = EntityDefinition(
    entity_type=EntityType.TIMETABLE,
    label="Timetable entry",
    id_prefix="TT",
    form_model=TimetableEntryCreate,
    record_model=TimetableEntry,
    sort_key=_slot_order,
    constraints=(one_entry_per_slot,),
)


class TimetableService:
    def __init__(self, manager: EntityListManager[TimetableEntry]):
        self.manager = manager

    def for_class(self, class_id: str) -> Tuple[TimetableEntry, ...]:
        return self.manager.filter_by(class_id=class_id)

    def slot(self, class_id: str, day: str, time: str) -> Optional[TimetableEntry]:
        matches = self.manager.filter_by(class_id=class_id, day=day.lower(), time=time)
        return matches[0] if matches else None

    def class_ids(self):
        return sorted({entry.class_id for entry in self.manager.query()})
