from pydantic import Field, ValidationInfo, field_validator
from typing import List, Literal
from datetime import date

from campushub.schemas.common import CamelModel, RecordBase, CLASS_FORM_OPTIONS

ExamStatus = Literal["Upcoming", "Ongoing", "Completed", "Results Declared"]


class ExamScheduleBase(CamelModel):
    exam_name: str = Field(..., min_length=3)
    applicable_classes: List[str] = Field(..., min_length=1)
    start_date: date
    end_date: date
    status: ExamStatus = "Upcoming"

    @field_validator('applicable_classes')
    @classmethod
    def classes_must_exist(cls, v: List[str]) -> List[str]:
        unknown = [label for label in v if label not in CLASS_FORM_OPTIONS]
        if unknown:
            raise ValueError(f"Unknown class(es): {', '.join(unknown)}")
        # keep the school's class order, drop duplicates
        return [label for label in CLASS_FORM_OPTIONS if label in v]

    @field_validator('end_date')
    @classmethod
    def end_not_before_start(cls, v: date, info: ValidationInfo) -> date:
        start = info.data.get('start_date')
        if start is not None and v < start:
            raise ValueError("End date cannot be before start date.")
        return v


class ExamScheduleCreate(ExamScheduleBase):
    pass


class ExamSchedule(RecordBase, ExamScheduleBase):
    pass
