"""
Create any missing tables for the review portal.

Run once against a fresh database:
  python -m review_portal.db.schema_check
"""
import asyncio

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncEngine

# Import all models so Base.metadata knows every table
from review_portal.auth.models import AdminSetting, User  # noqa: F401
from review_portal.core import models  # noqa: F401
from review_portal.db.session import Base, engine


async def ensure_tables(db_engine: AsyncEngine) -> None:
    async with db_engine.begin() as conn:
        existing = set(await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names()))
        await conn.run_sync(Base.metadata.create_all)

    missing = [name for name in Base.metadata.tables if name not in existing]
    if missing:
        print("Created missing tables: " + ", ".join(sorted(missing)))
    else:
        print("All required tables already exist in the database.")


async def main() -> None:
    await ensure_tables(engine)


if __name__ == "__main__":
    asyncio.run(main())
