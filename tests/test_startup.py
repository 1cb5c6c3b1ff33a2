"""Application startup against an empty database."""

import pytest
from sqlalchemy import func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from review_portal import main
from review_portal.core.config import settings
from review_portal.core.models import ReviewTemplate, Student
from review_portal.db.seed_data import DEFAULT_TEMPLATES, SAMPLE_STUDENTS


@pytest.mark.asyncio
async def test_startup_creates_tables_then_seeds(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    file_engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'fresh.db'}")
    session_factory = async_sessionmaker(bind=file_engine, class_=AsyncSession, expire_on_commit=False)
    monkeypatch.setattr(main, "engine", file_engine)
    monkeypatch.setattr(main, "AsyncSessionLocal", session_factory)
    monkeypatch.setattr(settings, "seed_on_startup", True)

    try:
        async with main.lifespan(main.app):
            pass
        # A second startup finds the data in place and adds nothing
        async with main.lifespan(main.app):
            pass

        async with session_factory() as db:
            templates = (await db.execute(select(func.count(ReviewTemplate.id)))).scalar()
            students = (await db.execute(select(func.count(Student.id)))).scalar()
        assert templates == len(DEFAULT_TEMPLATES)
        assert students == len(SAMPLE_STUDENTS)
    finally:
        await file_engine.dispose()


@pytest.mark.asyncio
async def test_startup_skips_seeding_when_disabled(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    file_engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'untouched.db'}")
    monkeypatch.setattr(main, "engine", file_engine)
    monkeypatch.setattr(settings, "seed_on_startup", False)

    try:
        async with main.lifespan(main.app):
            pass
        async with file_engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        assert tables == []
    finally:
        await file_engine.dispose()
