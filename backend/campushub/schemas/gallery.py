import datetime as dt

from pydantic import BeforeValidator, Field, HttpUrl, field_validator
from typing import Annotated, Optional

from campushub.schemas.common import CamelModel, RecordBase, OptionalStr, blank_to_none


class GalleryItemCreate(CamelModel):
    title: str = Field(..., min_length=3)
    image_url: Annotated[Optional[HttpUrl], BeforeValidator(blank_to_none)] = None
    image_hint: str = Field(..., min_length=1)
    event_tag: OptionalStr = None

    @field_validator('image_hint')
    @classmethod
    def one_or_two_words(cls, v: str) -> str:
        words = v.split()
        if not 1 <= len(words) <= 2:
            raise ValueError("Hint must be one or two words (e.g., 'sports children', 'science fair').")
        return " ".join(words)


class GalleryItem(RecordBase):
    title: str = Field(..., min_length=3)
    image_url: str
    image_hint: str
    date: dt.date
    event_tag: OptionalStr = None
