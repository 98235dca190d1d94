"""
Unit Tests for Study Question Generation
Tests for: local validation, parsing, failure handling, in-flight guard
"""
import asyncio
import json

import pytest

from campushub.core.exceptions import (
    AIResponseParseError,
    DuplicateRequestError,
    GenerationFailure,
    ValidationError,
)
from campushub.services.study_questions import SYSTEM_PROMPT, StudyQuestionGenerator

DOCUMENT = (
    "Photosynthesis is the process by which green plants use sunlight, water and "
    "carbon dioxide to produce glucose and oxygen. It takes place in the chloroplasts."
)


class TestLocalValidation:
    """Requests rejected before the model is called"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   ", "\n\t"])
    async def test_blank_content_rejected(self, question_generator, mock_claude, content):
        with pytest.raises(ValidationError) as exc_info:
            await question_generator.generate(content)

        assert exc_info.value.fields == ["document_content"]
        assert mock_claude.call_count == 0

    @pytest.mark.asyncio
    async def test_too_long_content_rejected(self, mock_claude):
        generator = StudyQuestionGenerator(client=mock_claude, max_content_chars=20)

        with pytest.raises(ValidationError) as exc_info:
            await generator.generate("x" * 21)

        assert "document_content" in exc_info.value.errors
        assert mock_claude.call_count == 0


class TestGeneration:
    """Happy path and output handling"""

    @pytest.mark.asyncio
    async def test_returns_questions_in_order(self, question_generator, mock_claude):
        mock_claude.set_questions(["First?", "Second?", "Third?"])

        result = await question_generator.generate(DOCUMENT)

        assert result.questions == ["First?", "Second?", "Third?"]
        assert mock_claude.call_count == 1

    @pytest.mark.asyncio
    async def test_prompt_embeds_document(self, question_generator, mock_claude):
        await question_generator.generate(DOCUMENT)

        assert DOCUMENT in mock_claude.last_prompt
        assert '"questions"' in mock_claude.last_prompt
        assert mock_claude.last_system == SYSTEM_PROMPT

    @pytest.mark.asyncio
    async def test_fenced_json_accepted(self, question_generator, mock_claude):
        mock_claude.set_response(
            "Here are your questions:\n```json\n" + json.dumps({"questions": ["Why?"]}) + "\n```"
        )

        result = await question_generator.generate(DOCUMENT)

        assert result.questions == ["Why?"]

    @pytest.mark.asyncio
    async def test_bare_array_accepted(self, question_generator, mock_claude):
        mock_claude.set_response('["What is a chloroplast?"]')

        result = await question_generator.generate(DOCUMENT)

        assert result.questions == ["What is a chloroplast?"]


class TestFailures:
    """All failures surface as GenerationFailure"""

    @pytest.mark.asyncio
    async def test_collaborator_error(self, question_generator, mock_claude):
        mock_claude.set_error(RuntimeError("upstream unavailable"))

        with pytest.raises(GenerationFailure) as exc_info:
            await question_generator.generate(DOCUMENT)

        assert "upstream unavailable" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_unparseable_response(self, question_generator, mock_claude):
        mock_claude.set_response("I could not think of any questions.")

        with pytest.raises(AIResponseParseError):
            await question_generator.generate(DOCUMENT)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [
        {"questions": []},
        {"questions": ["Fine?", "  "]},
        {"questions": [1, 2]},
        {"items": ["Why?"]},
    ])
    async def test_schema_mismatch(self, question_generator, mock_claude, payload):
        mock_claude.set_response(json.dumps(payload))

        with pytest.raises(GenerationFailure):
            await question_generator.generate(DOCUMENT)

    @pytest.mark.asyncio
    async def test_failure_releases_in_flight_slot(self, question_generator, mock_claude):
        mock_claude.set_error(RuntimeError("boom"))
        with pytest.raises(GenerationFailure):
            await question_generator.generate(DOCUMENT)

        mock_claude.reset()
        result = await question_generator.generate(DOCUMENT)

        assert len(result.questions) == 3


class TestInFlightGuard:
    """Duplicate submissions while a request is suspended"""

    @pytest.mark.asyncio
    async def test_duplicate_refused_while_in_flight(self, question_generator, mock_claude, admin_session):
        mock_claude.hold()
        first = asyncio.create_task(question_generator.generate(DOCUMENT, session=admin_session))
        await mock_claude.entered.wait()

        with pytest.raises(DuplicateRequestError):
            await question_generator.generate(DOCUMENT, session=admin_session)

        mock_claude.release()
        result = await first

        assert len(result.questions) == 3
        assert mock_claude.call_count == 1

    @pytest.mark.asyncio
    async def test_different_content_not_blocked(self, question_generator, mock_claude, admin_session):
        mock_claude.hold()
        first = asyncio.create_task(question_generator.generate(DOCUMENT, session=admin_session))
        await mock_claude.entered.wait()

        second = asyncio.create_task(question_generator.generate(DOCUMENT + " Extra.", session=admin_session))
        await asyncio.sleep(0)
        mock_claude.release()

        results = await asyncio.gather(first, second)
        assert all(r.questions for r in results)
        assert mock_claude.call_count == 2
