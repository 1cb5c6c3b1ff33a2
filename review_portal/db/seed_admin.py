"""
Grant admin rights to a user id or email.

There is deliberately no HTTP endpoint for this; run it with database access:
  python -m review_portal.db.seed_admin someone@example.com
"""
import argparse
import asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from review_portal.auth.models import AdminSetting
from review_portal.db.session import AsyncSessionLocal


async def seed_admin(db: AsyncSession, admin_user_id: str) -> bool:
    """Returns True when a new admin row was created."""
    normalized = admin_user_id.strip().lower()
    if not normalized:
        raise ValueError("admin user id must not be empty")
    result = await db.execute(select(AdminSetting).where(AdminSetting.admin_user_id == normalized))
    if result.scalar_one_or_none():
        return False
    db.add(AdminSetting(admin_user_id=normalized))
    await db.commit()
    return True


async def main(admin_user_id: str) -> None:
    async with AsyncSessionLocal() as db:
        created = await seed_admin(db, admin_user_id)
    if created:
        print(f"Admin {admin_user_id.strip().lower()} seeded.")
    else:
        print(f"Admin {admin_user_id.strip().lower()} already exists.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("admin_user_id", help="User id or email to mark as admin")
    args = parser.parse_args()
    asyncio.run(main(args.admin_user_id))
