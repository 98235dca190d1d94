from pydantic import EmailStr, Field, field_validator
from typing import Optional

from campushub.schemas.common import CamelModel, RecordBase, OptionalStr, PHONE_PATTERN


class TeacherBase(CamelModel):
    name: str = Field(..., min_length=2)
    subject: str = Field(..., min_length=2)
    email: EmailStr
    phone: OptionalStr = None

    @field_validator('phone')
    @classmethod
    def validate_phone(cls, v: Optional[str]) -> Optional[str]:
        if v and not PHONE_PATTERN.match(v):
            raise ValueError("Invalid phone number format")
        return v


class TeacherCreate(TeacherBase):
    pass


class Teacher(RecordBase, TeacherBase):
    pass
