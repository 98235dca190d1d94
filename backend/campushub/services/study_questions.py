"""
Study Question Generation

Turns the text of a document into an ordered list of study questions using
the language model. The flow is all-or-nothing: either a validated list of
questions comes back, or GenerationFailure is raised.
"""

import hashlib
import threading
from typing import Optional, Set, Tuple

from pydantic import ValidationError as PydanticValidationError

from campushub.core.config import settings
from campushub.core.exceptions import (
    AIResponseParseError,
    DuplicateRequestError,
    GenerationFailure,
    ValidationError,
)
from campushub.core.logging_config import logger
from campushub.core.session import Session
from campushub.schemas.study_questions import StudyQuestionsRequest, StudyQuestionsResult
from campushub.services.entity_manager import errors_from_pydantic
from campushub.utils.response_parser import JSONResponseParser

FLOW_NAME = "study_questions"

SYSTEM_PROMPT = (
    "You are an expert educator. You write clear, thought-provoking study "
    "questions that help students review and understand course material."
)

USER_PROMPT_TEMPLATE = """Generate study questions based on the following document content:

{content}

Ensure the questions are comprehensive and cover the key concepts in the document.
Return ONLY a JSON object of the form {{"questions": ["question 1", "question 2"]}}, with each question as a string."""


def build_prompt(content: str) -> str:
    return USER_PROMPT_TEMPLATE.format(content=content)


class StudyQuestionGenerator:
    """Structured generation flow for study questions"""

    def __init__(self, client=None, max_content_chars: Optional[int] = None):
        self._client = client
        self.max_content_chars = max_content_chars or settings.STUDY_QUESTIONS_MAX_CONTENT_CHARS
        self._in_flight: Set[Tuple[str, str]] = set()
        self._lock = threading.Lock()

    @property
    def client(self):
        if self._client is None:
            from campushub.utils.claude_client import get_claude_client
            self._client = get_claude_client()
        return self._client

    def validate_request(self, content: str) -> StudyQuestionsRequest:
        """Local checks, before anything is sent to the model"""
        try:
            request = StudyQuestionsRequest.model_validate({"document_content": content})
        except PydanticValidationError as e:
            raise ValidationError(errors_from_pydantic(e, StudyQuestionsRequest))

        if len(request.document_content) > self.max_content_chars:
            raise ValidationError.for_field(
                "document_content",
                f"Document content is too long (maximum {self.max_content_chars} characters).",
            )
        return request

    async def generate(self, content: str, session: Optional[Session] = None) -> StudyQuestionsResult:
        request = self.validate_request(content)

        key = (
            session.user_id if session else "anonymous",
            hashlib.sha256(request.document_content.encode("utf-8")).hexdigest(),
        )
        with self._lock:
            if key in self._in_flight:
                raise DuplicateRequestError("Study questions for this document are already being generated.")
            self._in_flight.add(key)

        try:
            return await self._run(request)
        finally:
            with self._lock:
                self._in_flight.discard(key)

    async def _run(self, request: StudyQuestionsRequest) -> StudyQuestionsResult:
        logger.log_generation_event(FLOW_NAME, "started", content_chars=len(request.document_content))

        try:
            response = await self.client.generate(
                prompt=build_prompt(request.document_content),
                system_prompt=SYSTEM_PROMPT,
            )
        except Exception as e:
            logger.log_error_with_context(e, context=FLOW_NAME)
            raise GenerationFailure(f"Study question generation failed: {e}", flow=FLOW_NAME) from e

        text = response.get("content", "") if isinstance(response, dict) else str(response)
        parsed = JSONResponseParser.extract(text)
        if isinstance(parsed, list):
            parsed = {"questions": parsed}
        if not isinstance(parsed, dict):
            logger.log_generation_event(FLOW_NAME, "unparseable")
            raise AIResponseParseError("The model response did not contain valid JSON.", flow=FLOW_NAME)

        try:
            result = StudyQuestionsResult.model_validate(parsed)
        except PydanticValidationError as e:
            logger.log_generation_event(FLOW_NAME, "invalid_output", errors=e.error_count())
            raise GenerationFailure(
                "The model response did not match the expected question list.", flow=FLOW_NAME
            ) from e

        tokens = response.get("total_tokens", 0) if isinstance(response, dict) else 0
        logger.log_generation_event(FLOW_NAME, "completed", tokens_used=tokens,
                                    question_count=len(result.questions))
        return result
