from pydantic import BeforeValidator, Field, field_validator
from typing import Annotated, Optional, Literal
from datetime import date

from campushub.schemas.common import (
    CamelModel,
    RecordBase,
    CLASS_LABELS,
    PHONE_PATTERN,
    OptionalDate,
    OptionalStr,
    blank_to_none,
)

Gender = Literal["Male", "Female", "Other"]


class StudentBase(CamelModel):
    name: str = Field(..., min_length=2)
    class_name: str
    section: str = Field(..., min_length=1, max_length=2)
    admission_date: date
    roll_number: OptionalStr = None
    date_of_birth: OptionalDate = None
    gender: Annotated[Optional[Gender], BeforeValidator(blank_to_none)] = None
    guardian_name: OptionalStr = None
    guardian_phone: OptionalStr = None
    address: OptionalStr = None

    @field_validator('class_name')
    @classmethod
    def class_must_exist(cls, v: str) -> str:
        if v not in CLASS_LABELS:
            raise ValueError(f"Unknown class '{v}'")
        return v

    @field_validator('section')
    @classmethod
    def normalize_section(cls, v: str) -> str:
        return v.upper()

    @field_validator('guardian_phone')
    @classmethod
    def validate_guardian_phone(cls, v: Optional[str]) -> Optional[str]:
        if v and not (PHONE_PATTERN.match(v) or len(v) >= 7):
            raise ValueError("Invalid phone number format (min 7 digits)")
        return v


class StudentCreate(StudentBase):
    """Admission / edit form"""


class Student(RecordBase, StudentBase):
    pass


class PromotionResult(CamelModel):
    student: Student
    previous_class: str
    promoted: bool
    message: str
