"""
API Tests for Study Question Generation
"""
import pytest

from mocks.mock_claude import DEFAULT_QUESTIONS

API = "/api/v1"

DOCUMENT = "Photosynthesis converts light energy into chemical energy in the chloroplasts."


class TestGenerateStudyQuestions:
    """Test /study-questions/generate"""

    @pytest.mark.asyncio
    async def test_generate(self, client, login_as, mock_claude):
        headers = await login_as("student")

        response = await client.post(
            f"{API}/study-questions/generate",
            json={"documentContent": DOCUMENT},
            headers=headers,
        )

        assert response.status_code == 200
        assert response.json() == {"questions": DEFAULT_QUESTIONS}
        assert DOCUMENT in mock_claude.last_prompt

    @pytest.mark.asyncio
    async def test_blank_document_never_reaches_model(self, client, login_as, mock_claude):
        headers = await login_as("teacher")

        response = await client.post(
            f"{API}/study-questions/generate",
            json={"documentContent": "   "},
            headers=headers,
        )

        assert response.status_code == 422
        assert "documentContent" in response.json()["error"]["details"]["errors"]
        assert mock_claude.call_count == 0

    @pytest.mark.asyncio
    async def test_parent_not_allowed(self, client, login_as):
        headers = await login_as("parent")

        response = await client.post(
            f"{API}/study-questions/generate",
            json={"documentContent": DOCUMENT},
            headers=headers,
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_requires_session(self, client):
        response = await client.post(f"{API}/study-questions/generate", json={"documentContent": DOCUMENT})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_model_error_is_generation_failure(self, client, login_as, mock_claude):
        headers = await login_as("admin")
        mock_claude.set_error(RuntimeError("upstream timeout"))

        response = await client.post(
            f"{API}/study-questions/generate",
            json={"documentContent": DOCUMENT},
            headers=headers,
        )

        assert response.status_code == 502
        assert response.json()["error"]["code"] == "GENERATION_FAILED"

    @pytest.mark.asyncio
    async def test_malformed_model_output(self, client, login_as, mock_claude):
        headers = await login_as("admin")
        mock_claude.set_response("Here are some questions, sorry no JSON today")

        response = await client.post(
            f"{API}/study-questions/generate",
            json={"documentContent": DOCUMENT},
            headers=headers,
        )

        assert response.status_code == 502
        assert response.json()["error"]["code"] == "AI_PARSE_ERROR"
