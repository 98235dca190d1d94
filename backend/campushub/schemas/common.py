"""Shared schema building blocks for all managed records."""

import enum
import re
from datetime import date
from typing import Annotated, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


class EntityType(str, enum.Enum):
    """Every record collection managed by the application"""
    STUDENTS = "students"
    TEACHERS = "teachers"
    FEE_STRUCTURES = "fee_structures"
    FEE_RECORDS = "fee_records"
    SALARIES = "salaries"
    BOOKS = "books"
    EXAMS = "exams"
    TIMETABLE = "timetable"
    NOTICES = "notices"
    GALLERY = "gallery"
    LEAVE_REQUESTS = "leave_requests"


# Class labels in promotion order
CLASS_FORM_OPTIONS: List[str] = ["NC", "1", "2", "3", "4", "5", "6", "7", "8", "9", "10", "11", "12"]
GRADUATED = "Graduated"
CLASS_LABELS: List[str] = CLASS_FORM_OPTIONS + [GRADUATED]

PHONE_PATTERN = re.compile(r'^[+]?[(]?[0-9]{3}[)]?[-\s.]?[0-9]{3}[-\s.]?[0-9]{4,6}$')


class CamelModel(BaseModel):
    """snake_case in Python, camelCase on the wire"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class RecordBase(CamelModel):
    """A stored record. Frozen so it can only change through its manager."""

    model_config = ConfigDict(frozen=True)

    id: str


def blank_to_none(value):
    """Treat empty optional form inputs as missing"""
    if isinstance(value, str) and not value.strip():
        return None
    return value


OptionalStr = Annotated[Optional[str], BeforeValidator(blank_to_none)]
OptionalDate = Annotated[Optional[date], BeforeValidator(blank_to_none)]
