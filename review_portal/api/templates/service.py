from typing import List, Optional

from fastapi import status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from review_portal.core.exceptions import ServiceError
from review_portal.core.models import ReviewTemplate

from .schemas import ReviewTemplateCreate


async def list_templates(db: AsyncSession) -> List[ReviewTemplate]:
    result = await db.execute(select(ReviewTemplate).order_by(ReviewTemplate.name, ReviewTemplate.id))
    return list(result.scalars().all())


async def get_template_or_404(db: AsyncSession, template_id: int) -> ReviewTemplate:
    template = await db.get(ReviewTemplate, template_id)
    if not template:
        raise ServiceError("Template not found", status.HTTP_404_NOT_FOUND)
    return template


async def create_template(
    db: AsyncSession,
    created_by_user_id: Optional[str],
    payload: ReviewTemplateCreate,
) -> ReviewTemplate:
    template = ReviewTemplate(
        name=payload.name,
        subject=payload.subject,
        body=payload.body,
        created_by_user_id=created_by_user_id,
    )
    db.add(template)
    await db.commit()
    await db.refresh(template)
    return template
