from pydantic import Field, field_validator
from typing import List

from campushub.schemas.common import CamelModel


class StudyQuestionsRequest(CamelModel):
    document_content: str = Field(
        ...,
        description="The content of the document for which to generate study questions.",
    )

    @field_validator('document_content')
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Document content cannot be empty.")
        return v


class StudyQuestionsResult(CamelModel):
    questions: List[str] = Field(
        ...,
        min_length=1,
        description="An array of study questions generated from the document content.",
    )

    @field_validator('questions')
    @classmethod
    def questions_not_blank(cls, v: List[str]) -> List[str]:
        if any(not question.strip() for question in v):
            raise ValueError("Generated questions must be non-empty strings.")
        return v
