from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from review_portal.auth.dependencies import get_current_user
from review_portal.auth.schemas import CurrentUser
from review_portal.db.session import get_db

from . import service
from .schemas import ReviewTemplateCreate, ReviewTemplateResponse

router = APIRouter(prefix="/api/templates", tags=["templates"])


@router.get("", response_model=List[ReviewTemplateResponse])
async def list_templates(
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
):
    """All templates, shared across instructors."""
    return await service.list_templates(db)


@router.post("", response_model=ReviewTemplateResponse, status_code=status.HTTP_201_CREATED)
async def create_template(
    payload: ReviewTemplateCreate,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
):
    return await service.create_template(db, current_user.id, payload)
