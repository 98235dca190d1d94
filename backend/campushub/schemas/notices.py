from pydantic import BeforeValidator, Field, field_validator
from typing import Annotated, List, Literal, Optional
from datetime import datetime

from campushub.schemas.common import CamelModel, RecordBase, OptionalDate, blank_to_none

NoticeType = Literal["General", "Academic", "Event", "Urgent", "Administrative", "Holiday"]
TargetAudience = Literal["All", "Teachers", "Students", "Parents"]


class NoticeBase(CamelModel):
    title: str = Field(..., min_length=5)
    content: str = Field(..., min_length=10)
    author: str = Field(..., min_length=2)
    expiry_date: OptionalDate = None
    notice_type: Annotated[Optional[NoticeType], BeforeValidator(blank_to_none)] = None
    target_audience: List[TargetAudience] = Field(default_factory=lambda: ["All"])

    @field_validator('target_audience')
    @classmethod
    def default_audience(cls, v: List[str]) -> List[str]:
        return list(dict.fromkeys(v)) or ["All"]


class NoticeCreate(NoticeBase):
    pass


class Notice(RecordBase, NoticeBase):
    issued_date: datetime
