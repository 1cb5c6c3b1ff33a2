import os
from typing import AsyncGenerator, Awaitable, Callable, Dict, List, Optional

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("SEED_ON_STARTUP", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from review_portal.auth.models import AdminSetting, User
from review_portal.auth.security import create_access_token
from review_portal.core.config import settings
from review_portal.core.models import Student
from review_portal.db.session import Base, get_db
from review_portal.main import app


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_PUBLIC_BASE_URL = "https://reviews.test"

SAMPLE_STUDENT_NAMES = ["Alex Johnson", "Maya Patel", "Jordan Lee", "Sam Rivera"]


@pytest.fixture()
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory SQLite DB per test. StaticPool keeps every session on the same connection."""
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        future=True,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture()
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session for a test and override FastAPI dependency."""
    async_session = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:

        async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
            yield session

        app.dependency_overrides[get_db] = override_get_db
        yield session

    app.dependency_overrides.clear()


@pytest.fixture()
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the FastAPI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture(autouse=True)
def public_base_url(monkeypatch: pytest.MonkeyPatch) -> str:
    monkeypatch.setattr(settings, "public_base_url", TEST_PUBLIC_BASE_URL)
    monkeypatch.setattr(settings, "seed_sample_size", 3)
    return TEST_PUBLIC_BASE_URL


@pytest.fixture()
async def students(db_session: AsyncSession) -> List[Student]:
    rows = [
        Student(
            external_id=f"pike13-student-{1001 + i}",
            full_name=name,
            guardian_email=f"guardian{i}@example.com",
            account_manager_email="account.manager@example.com",
        )
        for i, name in enumerate(SAMPLE_STUDENT_NAMES)
    ]
    db_session.add_all(rows)
    await db_session.commit()
    return rows


@pytest.fixture()
def make_user(db_session: AsyncSession) -> Callable[..., Awaitable[Dict[str, str]]]:
    """Create a user row (optionally an admin) and return bearer auth headers for it."""

    async def _make(
        user_id: str,
        email: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        admin: bool = False,
    ) -> Dict[str, str]:
        db_session.add(User(id=user_id, email=email, first_name=first_name, last_name=last_name))
        if admin:
            db_session.add(AdminSetting(admin_user_id=(email or user_id).lower()))
        await db_session.commit()
        token = create_access_token(subject={"sub": user_id})
        return {"Authorization": f"Bearer {token}"}

    return _make
