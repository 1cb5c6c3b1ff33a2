from fastapi import Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from review_portal.auth.dependencies import get_current_user
from review_portal.auth.models import AdminSetting
from review_portal.auth.schemas import CurrentUser
from review_portal.db.session import get_db


async def is_admin(db: AsyncSession, user: CurrentUser) -> bool:
    """Admin is a presence check in admin_settings, keyed by user id or lowercased email."""
    keys = {user.id, user.id.strip().lower()}
    if user.email:
        keys.add(user.email.strip().lower())
    result = await db.execute(
        select(AdminSetting.id).where(AdminSetting.admin_user_id.in_(keys)).limit(1)
    )
    return result.scalar_one_or_none() is not None


async def require_admin(
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> CurrentUser:
    if not await is_admin(db, current_user):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden",
        )
    return current_user
