"""Shared pytest fixtures."""

from dataclasses import dataclass

import pytest
import pytest_asyncio
import yaml
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import folio.db.models  # noqa: F401
from folio.auth.delegate import AuthenticatedUser
from folio.db.base import Base
from folio.db.session import enable_sqlite_foreign_keys

ADMIN_TOKEN = "admin-token"
USER_TOKEN = "user-token"
ADMIN_EMAIL = "owner@example.com"


@pytest.fixture
def temp_app_yaml(tmp_path):
    """Create a temporary app.yaml file for testing."""
    config_path = tmp_path / "app.yaml"

    def _create_config(config: dict):
        with open(config_path, "w") as f:
            yaml.safe_dump(config, f)
        return config_path

    return _create_config


@pytest_asyncio.fixture
async def engine():
    """In-memory SQLite engine with every table created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


@dataclass
class FakeAuthDelegate:
    """Accepts two fixed tokens instead of calling Supabase."""

    tokens: dict

    async def resolve(self, token: str):
        return self.tokens.get(token)


@pytest.fixture
def fake_auth_delegate():
    return FakeAuthDelegate(
        tokens={
            ADMIN_TOKEN: AuthenticatedUser(id="admin-1", email=ADMIN_EMAIL),
            USER_TOKEN: AuthenticatedUser(id="user-1", email="visitor@example.com"),
        }
    )


class RecordingNotifier:
    """Email notifier stand-in that records messages instead of sending them."""

    def __init__(self, result: bool = True) -> None:
        self.sent = []
        self.result = result

    async def send_new_message_notification(self, message) -> bool:
        self.sent.append(message)
        return self.result


@pytest.fixture
def notifier():
    return RecordingNotifier()
