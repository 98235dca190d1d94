"""
API Tests for Authentication Endpoints
"""
import pytest
from faker import Faker

fake = Faker()

API = "/api/v1"


class TestLogin:
    """Test /auth/login"""

    @pytest.mark.asyncio
    async def test_login_returns_token_and_user(self, client):
        email = fake.email()

        response = await client.post(f"{API}/auth/login", json={"email": email, "role": "teacher"})

        assert response.status_code == 200
        data = response.json()
        assert data["tokenType"] == "bearer"
        assert data["accessToken"]
        assert data["user"]["email"] == email
        assert data["user"]["role"] == "teacher"
        assert data["user"]["name"] == email.split("@")[0]

    @pytest.mark.asyncio
    async def test_login_invalid_email(self, client):
        response = await client.post(f"{API}/auth/login", json={"email": "nobody", "role": "admin"})

        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert "email" in body["error"]["details"]["errors"]

    @pytest.mark.asyncio
    async def test_login_unknown_role(self, client):
        response = await client.post(f"{API}/auth/login", json={"email": fake.email(), "role": "janitor"})

        assert response.status_code == 422
        assert "role" in response.json()["error"]["details"]["errors"]


class TestSessionEndpoints:
    """Test /auth/me and /auth/logout"""

    @pytest.mark.asyncio
    async def test_me(self, client, login_as):
        headers = await login_as("principal")

        response = await client.get(f"{API}/auth/me", headers=headers)

        assert response.status_code == 200
        assert response.json()["role"] == "principal"

    @pytest.mark.asyncio
    async def test_me_without_token(self, client):
        response = await client.get(f"{API}/auth/me")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTH_FAILED"

    @pytest.mark.asyncio
    async def test_me_with_garbage_token(self, client):
        response = await client.get(f"{API}/auth/me", headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "INVALID_TOKEN"

    @pytest.mark.asyncio
    async def test_logout_ends_session(self, client, login_as):
        headers = await login_as("student")

        response = await client.post(f"{API}/auth/logout", headers=headers)
        assert response.status_code == 204

        response = await client.get(f"{API}/auth/me", headers=headers)
        assert response.status_code == 401
        assert response.json()["error"]["code"] == "SESSION_EXPIRED"
