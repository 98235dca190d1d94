"""
Campus Hub - Test Configuration and Fixtures
"""
import os
from typing import AsyncGenerator
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from faker import Faker

# Set testing environment
os.environ['ENVIRONMENT'] = 'testing'
os.environ['SECRET_KEY'] = 'test-secret-key-for-testing-only'
os.environ['JWT_SECRET_KEY'] = 'test-jwt-secret-key-for-testing'
os.environ['ANTHROPIC_API_KEY'] = 'test-api-key'
os.environ['RATE_LIMIT_ENABLED'] = 'false'
os.environ['SEED_DEMO_DATA'] = 'true'

from campushub.main import app, init_app_state
from campushub.core.session import SessionManager, UserRole
from campushub.db.seed_data import demo_seed
from campushub.services.registry import CampusRegistry
from campushub.services.study_questions import StudyQuestionGenerator
from mocks.mock_claude import MockClaudeClient

fake = Faker()

API = "/api/v1"


@pytest.fixture
def registry() -> CampusRegistry:
    """Registry loaded with the demo records"""
    return CampusRegistry(demo_seed())


@pytest.fixture
def empty_registry() -> CampusRegistry:
    return CampusRegistry()


@pytest.fixture
def session_manager() -> SessionManager:
    sessions = SessionManager()
    yield sessions
    sessions.clear()


@pytest.fixture
def admin_session(session_manager: SessionManager):
    return session_manager.login(fake.email(), role=UserRole.ADMIN)


@pytest.fixture
def mock_claude() -> MockClaudeClient:
    return MockClaudeClient()


@pytest.fixture
def question_generator(mock_claude: MockClaudeClient) -> StudyQuestionGenerator:
    return StudyQuestionGenerator(client=mock_claude, max_content_chars=5000)


@pytest_asyncio.fixture
async def client(
    registry: CampusRegistry,
    question_generator: StudyQuestionGenerator,
) -> AsyncGenerator[AsyncClient, None]:
    """Test client over a fresh demo registry and a mocked model"""
    init_app_state(app, registry=registry, question_generator=question_generator)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac

    app.state.sessions.clear()


@pytest.fixture
def login_as(client: AsyncClient):
    """Sign in with a role and return the bearer header"""
    async def _login(role: str, email: str = None) -> dict:
        response = await client.post(
            f"{API}/auth/login",
            json={"email": email or fake.email(), "role": role},
        )
        assert response.status_code == 200, response.text
        return {'Authorization': f"Bearer {response.json()['accessToken']}"}

    return _login


@pytest_asyncio.fixture
async def admin_headers(login_as) -> dict:
    return await login_as("admin")
