import re

from pydantic import Field, ValidationInfo, field_validator
from typing import Optional

from campushub.schemas.common import CamelModel, RecordBase, OptionalStr

# 10 or 13 digits, hyphens allowed anywhere
ISBN_PATTERN = re.compile(r'^(?=(?:\D*\d){10}(?:(?:\D*\d){3})?$)[\d-]+$')


class BookBase(CamelModel):
    title: str = Field(..., min_length=3)
    author: str = Field(..., min_length=2)
    isbn: OptionalStr = None
    total_copies: int = Field(..., gt=0)
    available_copies: int = Field(..., ge=0)

    @field_validator('isbn')
    @classmethod
    def validate_isbn(cls, v: Optional[str]) -> Optional[str]:
        if v and not ISBN_PATTERN.match(v):
            raise ValueError("Invalid ISBN format (10 or 13 digits, can include hyphens).")
        return v

    @field_validator('available_copies')
    @classmethod
    def available_within_total(cls, v: int, info: ValidationInfo) -> int:
        total = info.data.get('total_copies')
        if total is not None and v > total:
            raise ValueError("Available copies cannot exceed total copies.")
        return v


class BookCreate(BookBase):
    pass


class Book(RecordBase, BookBase):
    pass
