from pydantic import Field
from typing import List, Literal

from campushub.schemas.common import CamelModel, RecordBase

Weekday = Literal["monday", "tuesday", "wednesday", "thursday", "friday", "saturday"]

DAYS_OF_WEEK: List[str] = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday"]
TIME_SLOTS: List[str] = [
    "09:00 - 10:00", "10:00 - 11:00", "11:00 - 12:00",
    "12:00 - 13:00",
    "13:00 - 14:00", "14:00 - 15:00",
]


class TimetableEntryBase(CamelModel):
    class_id: str = Field(..., min_length=1)
    day: Weekday
    time: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1)
    teacher: str = Field(..., min_length=1)
    room: str = Field(..., min_length=1)


class TimetableEntryCreate(TimetableEntryBase):
    pass


class TimetableEntry(RecordBase, TimetableEntryBase):
    pass
