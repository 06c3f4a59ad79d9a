"""
Pytest configuration and shared fixtures for backend tests.
"""

import random
import sys
from pathlib import Path

# Add backend directory to path for imports
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

import pytest
from typing import Any, AsyncGenerator, Dict, List, Optional
from unittest.mock import AsyncMock, Mock
from uuid import uuid4

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Import after path is set
from adapters.ai import ChatTurn, GeneratedText, LLMProvider
from adapters.news import NewsAPIAdapter, get_news_adapter
from api.dependencies import get_rng
from core.ai_router import ModelSelection
from core.security import PasswordHasher, TokenService
from infrastructure.config import get_settings
from infrastructure.database.connection import get_db
from infrastructure.database.models import Base, User
from services import AIService, get_ai_service

# Initialize security services
password_hasher = PasswordHasher()
settings = get_settings()
token_service = TokenService(secret_key=settings.jwt_secret_key)


# Database URL for testing (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class ScriptedProvider(LLMProvider):
    """LLM provider that replays a fixed list of chat turns."""

    name = "scripted"

    def __init__(self, turns: Optional[List[ChatTurn]] = None, text: str = "Generated text"):
        super().__init__(model="scripted-model", max_tokens=1000)
        self.turns = list(turns or [])
        self.text = text
        self.chat_calls: List[Dict[str, Any]] = []

    @property
    def is_configured(self) -> bool:
        return True

    async def generate_text(self, prompt, system=None, temperature=0.7, max_tokens=None, model=None):
        return GeneratedText(text=self.text, model=model or self.model, usage_tokens=42)

    async def chat(self, messages, system=None, tools=None, temperature=0.7, model=None):
        self.chat_calls.append(
            {"messages": [dict(m) for m in messages], "system": system, "tools": tools, "model": model}
        )
        if self.turns:
            return self.turns.pop(0)
        return ChatTurn(text="Done.", model=self.model)


@pytest.fixture
async def db_engine():
    """Create a test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Drop all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = sessionmaker(
        db_engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def test_user(db_session: AsyncSession) -> User:
    """Create a test user on the pro plan."""
    user = User(
        id=str(uuid4()),
        email="test@example.com",
        password_hash=password_hasher.hash("Testpassword123"),
        name="Test User",
        status="active",
        plan="pro",
        credits_balance=1000,
        total_revenue_generated=250.0,
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
async def other_user(db_session: AsyncSession) -> User:
    """A second user, for ownership checks."""
    user = User(
        id=str(uuid4()),
        email="other@example.com",
        password_hash=password_hasher.hash("Otherpassword123"),
        name="Other User",
        status="active",
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
def auth_headers(test_user: User) -> dict:
    """Generate authentication headers for test user."""
    access_token = token_service.create_access_token(user_id=test_user.id)
    return {"Authorization": f"Bearer {access_token}"}


@pytest.fixture
def other_auth_headers(other_user: User) -> dict:
    access_token = token_service.create_access_token(user_id=other_user.id)
    return {"Authorization": f"Bearer {access_token}"}


@pytest.fixture
def scripted_provider() -> ScriptedProvider:
    """Provider the copilot routes stream from; tests append turns to ``.turns``."""
    return ScriptedProvider()


@pytest.fixture
def mock_ai_service(scripted_provider: ScriptedProvider) -> Mock:
    """AIService stand-in: routes every task to the scripted provider."""
    service = Mock(spec=AIService)
    service.provider_for_task.return_value = (
        scripted_provider,
        ModelSelection(provider="groq", model="llama-3.3-70b-versatile", name="Llama 3.3 70B"),
    )
    service.generate_for_task = AsyncMock(
        return_value=GeneratedText(text="Generated text", model="gpt-4o", usage_tokens=100)
    )
    return service


@pytest.fixture
def mock_news() -> Mock:
    """NewsAPI adapter without a key; tests attach AsyncMocks as needed."""
    news = Mock(spec=NewsAPIAdapter)
    news.is_configured = False
    return news


@pytest.fixture
async def async_client(
    db_session: AsyncSession,
    mock_ai_service: Mock,
    mock_news: Mock,
) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client for testing."""
    # Import app here to avoid circular imports
    from main import app

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_ai_service] = lambda: mock_ai_service
    app.dependency_overrides[get_news_adapter] = lambda: mock_news
    app.dependency_overrides[get_rng] = lambda: random.Random(42)

    # Reset rate limiter state between tests to prevent cross-test 429s
    app.state.limiter.reset()

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
