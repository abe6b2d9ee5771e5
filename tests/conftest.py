"""
Shared fixtures: an in-memory SQLite database, the repository built on it,
and an HTTP client bound to a fully wired app.
"""

from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from auth.jwt import TokenIssuer
from auth.password import PasswordHasher
from config.settings import Settings
from database.models import Message
from database.session import build_engine, build_session_factory, init_db
from database.users import UserRepository
from main import create_app
from utils.schemas import RegisterRequest

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


def make_user(username: str, **overrides) -> RegisterRequest:
    fields = dict(
        username=username,
        password="secret",
        first_name=username.title(),
        last_name="Tester",
        phone="555-0100",
    )
    fields.update(overrides)
    return RegisterRequest(**fields)


def make_message(msg_id: int, from_username: str, to_username: str, body: str, read: bool = False) -> Message:
    now = datetime.now(timezone.utc)
    return Message(
        id=msg_id,
        from_username=from_username,
        to_username=to_username,
        body=body,
        sent_at=now,
        read_at=now if read else None,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        secret_key="test-secret",
        bcrypt_work_factor=4,
        database_url=TEST_DB_URL,
        cors_origins=["*"],
    )


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(work_factor=4)


@pytest.fixture
def issuer() -> TokenIssuer:
    return TokenIssuer("test-secret")


@pytest_asyncio.fixture
async def engine():
    engine = build_engine(TEST_DB_URL)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    async with build_session_factory(engine)() as session:
        yield session


@pytest.fixture
def repo(session, hasher) -> UserRepository:
    return UserRepository(session, hasher)


@pytest_asyncio.fixture
async def app(settings):
    app = create_app(settings)
    await init_db(app.state.engine)
    yield app
    await app.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
