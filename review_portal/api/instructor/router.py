"""Instructor API router."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from review_portal.auth.dependencies import get_current_user
from review_portal.auth.schemas import CurrentUser
from review_portal.core.exceptions import ServiceError
from review_portal.core.models import Instructor
from review_portal.core.months import normalize_month
from review_portal.db.session import get_db

from . import service
from .schemas import (
    ApplyTemplateRequest,
    DashboardSummaryResponse,
    InstructorStatusResponse,
    MonthlyReviewResponse,
    ReviewDetailResponse,
    ReviewDraftUpdate,
    SendReviewRequest,
    StudentReviewRow,
)

router = APIRouter(prefix="/api/instructor", tags=["instructor"])


async def get_current_instructor(
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> Instructor:
    """Every signed-in user gets an instructor record on first use (inactive until an admin enables it)."""
    return await service.ensure_instructor_for_user(db, current_user.id)


@router.get("/status", response_model=InstructorStatusResponse)
async def get_status(instructor: Instructor = Depends(get_current_instructor)):
    return InstructorStatusResponse(instructor_id=instructor.id, is_active=instructor.is_active)


@router.get("/dashboard", response_model=DashboardSummaryResponse)
async def get_dashboard(
    month: Optional[str] = Query(None, description="YYYY-MM-DD; day is ignored. Defaults to previous month."),
    db: AsyncSession = Depends(get_db),
    instructor: Instructor = Depends(get_current_instructor),
):
    return await service.get_dashboard_summary(db, instructor.id, normalize_month(month))


@router.get("/reviews", response_model=List[StudentReviewRow])
async def list_reviews(
    month: Optional[str] = Query(None, description="YYYY-MM-DD; day is ignored. Defaults to previous month."),
    db: AsyncSession = Depends(get_db),
    instructor: Instructor = Depends(get_current_instructor),
):
    """Assigned students for the month with their review rows (created on first read)."""
    # ensure_review may roll back on a lost insert race, which expires loaded rows
    instructor_id = instructor.id
    return await service.list_student_reviews(db, instructor_id, normalize_month(month))


@router.get("/reviews/{review_id}", response_model=ReviewDetailResponse)
async def get_review(
    review_id: int,
    db: AsyncSession = Depends(get_db),
    instructor: Instructor = Depends(get_current_instructor),
):
    try:
        return await service.get_review_detail(db, instructor.id, review_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.put("/reviews/{review_id}", response_model=MonthlyReviewResponse)
async def save_draft(
    review_id: int,
    payload: ReviewDraftUpdate,
    db: AsyncSession = Depends(get_db),
    instructor: Instructor = Depends(get_current_instructor),
):
    try:
        return await service.save_draft(db, instructor.id, review_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/reviews/{review_id}/apply-template", response_model=MonthlyReviewResponse)
async def apply_template(
    review_id: int,
    payload: ApplyTemplateRequest,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
    instructor: Instructor = Depends(get_current_instructor),
):
    try:
        return await service.apply_template(db, instructor.id, current_user.name, review_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/reviews/{review_id}/send", response_model=MonthlyReviewResponse)
async def send_review(
    review_id: int,
    payload: SendReviewRequest,
    db: AsyncSession = Depends(get_db),
    instructor: Instructor = Depends(get_current_instructor),
):
    try:
        return await service.send_review(db, instructor, review_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
