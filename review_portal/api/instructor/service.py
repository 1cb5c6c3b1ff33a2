"""Instructor review service: lazy review records, draft/send lifecycle and dashboard counts."""

import logging
from datetime import date, datetime, timezone
from typing import List, Optional

from fastapi import status
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from review_portal.api.templates.service import get_template_or_404
from review_portal.core.config import settings
from review_portal.core.enums import Placeholder, ReviewStatus
from review_portal.core.exceptions import ServiceError
from review_portal.core.mailer import deliver_review_email
from review_portal.core.models import Instructor, InstructorStudent, MonthlyReview, Student
from review_portal.core.months import month_label
from review_portal.core.placeholders import build_feedback_link, inject_feedback_link, render_placeholders

from .schemas import (
    ApplyTemplateRequest,
    DashboardSummaryResponse,
    MonthlyReviewResponse,
    ReviewDetailResponse,
    ReviewDraftUpdate,
    SendReviewRequest,
    StudentResponse,
    StudentReviewRow,
)

logger = logging.getLogger(__name__)

DEFAULT_INSTRUCTOR_NAME = "Your Instructor"
DEFAULT_PROGRESS_SUMMARY = "Progress summary goes here..."
DEFAULT_NEXT_STEPS = "Next steps go here..."


# ----- Instructor -----
async def _find_instructor(db: AsyncSession, user_id: str) -> Optional[Instructor]:
    result = await db.execute(select(Instructor).where(Instructor.user_id == user_id))
    return result.scalar_one_or_none()


async def ensure_instructor_for_user(db: AsyncSession, user_id: str) -> Instructor:
    instructor = await _find_instructor(db, user_id)
    if instructor:
        return instructor
    instructor = Instructor(user_id=user_id, is_active=False)
    db.add(instructor)
    try:
        await db.commit()
    except IntegrityError:
        # Another request created it first
        await db.rollback()
        instructor = await _find_instructor(db, user_id)
        if instructor is None:
            raise
        return instructor
    await db.refresh(instructor)
    logger.info("Created inactive instructor %s for user %s", instructor.id, user_id)
    return instructor


# ----- Review records -----
async def _find_review(
    db: AsyncSession, instructor_id: int, student_id: int, month: date
) -> Optional[MonthlyReview]:
    result = await db.execute(
        select(MonthlyReview).where(
            MonthlyReview.instructor_id == instructor_id,
            MonthlyReview.student_id == student_id,
            MonthlyReview.month == month,
        )
    )
    return result.scalar_one_or_none()


async def ensure_review(
    db: AsyncSession, instructor_id: int, student_id: int, month: date
) -> MonthlyReview:
    """
    Get-or-create the single review for (instructor, student, month).

    The unique index is the guard: when a concurrent request wins the insert,
    the conflict is rolled back and the winner's row is returned.
    """
    review = await _find_review(db, instructor_id, student_id, month)
    if review:
        return review
    review = MonthlyReview(
        instructor_id=instructor_id,
        student_id=student_id,
        month=month,
        status=ReviewStatus.PENDING.value,
    )
    db.add(review)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        review = await _find_review(db, instructor_id, student_id, month)
        if review is None:
            raise
        return review
    await db.refresh(review)
    logger.info(
        "Created pending review %s (instructor=%s student=%s month=%s)",
        review.id, instructor_id, student_id, month.isoformat(),
    )
    return review


async def _get_owned_review_or_404(db: AsyncSession, instructor_id: int, review_id: int) -> MonthlyReview:
    # Reviews of other instructors look exactly like missing ones
    result = await db.execute(
        select(MonthlyReview).where(
            MonthlyReview.id == review_id,
            MonthlyReview.instructor_id == instructor_id,
        )
    )
    review = result.scalar_one_or_none()
    if not review:
        raise ServiceError("Not found", status.HTTP_404_NOT_FOUND)
    return review


async def _get_student_or_404(db: AsyncSession, student_id: int) -> Student:
    student = await db.get(Student, student_id)
    if not student:
        raise ServiceError("Not found", status.HTTP_404_NOT_FOUND)
    return student


async def list_student_reviews(db: AsyncSession, instructor_id: int, month: date) -> List[StudentReviewRow]:
    result = await db.execute(
        select(Student.id, Student.full_name)
        .join(InstructorStudent, InstructorStudent.student_id == Student.id)
        .where(
            InstructorStudent.instructor_id == instructor_id,
            InstructorStudent.month == month,
        )
        .order_by(Student.full_name, Student.id)
    )
    assigned = result.all()

    rows: List[StudentReviewRow] = []
    for student_id, student_name in assigned:
        review = await ensure_review(db, instructor_id, student_id, month)
        rows.append(
            StudentReviewRow(
                monthly_review_id=review.id,
                student_id=student_id,
                student_name=student_name,
                month=month,
                status=review.status,
                subject=review.subject,
                sent_at=review.sent_at,
            )
        )
    return rows


async def get_review_detail(db: AsyncSession, instructor_id: int, review_id: int) -> ReviewDetailResponse:
    review = await _get_owned_review_or_404(db, instructor_id, review_id)
    student = await _get_student_or_404(db, review.student_id)
    return ReviewDetailResponse(
        monthly_review=MonthlyReviewResponse.model_validate(review),
        student=StudentResponse.model_validate(student),
    )


async def save_draft(
    db: AsyncSession,
    instructor_id: int,
    review_id: int,
    payload: ReviewDraftUpdate,
) -> MonthlyReview:
    review = await _get_owned_review_or_404(db, instructor_id, review_id)
    if review.status == ReviewStatus.SENT.value:
        raise ServiceError("Review has already been sent and can no longer be edited", status.HTTP_409_CONFLICT)
    new_status = payload.status or ReviewStatus.DRAFT
    if new_status == ReviewStatus.SENT:
        raise ServiceError("Use the send action to mark a review as sent", status.HTTP_400_BAD_REQUEST)

    if payload.subject is not None:
        review.subject = payload.subject
    if payload.body is not None:
        review.body = payload.body
    review.status = new_status.value
    review.updated_at = datetime.now(timezone.utc)
    await db.commit()
    await db.refresh(review)
    logger.info("Saved review %s as %s", review.id, review.status)
    return review


# ----- Templates -----
async def apply_template(
    db: AsyncSession,
    instructor_id: int,
    instructor_name: Optional[str],
    review_id: int,
    payload: ApplyTemplateRequest,
) -> MonthlyReview:
    """Copy a template's rendered text into the review as a draft. {{feedback_link}} is filled at send time."""
    review = await _get_owned_review_or_404(db, instructor_id, review_id)
    student = await _get_student_or_404(db, review.student_id)
    template = await get_template_or_404(db, payload.template_id)

    values = {
        Placeholder.STUDENT_NAME.value: student.full_name,
        Placeholder.MONTH.value: month_label(review.month),
        Placeholder.INSTRUCTOR_NAME.value: instructor_name or DEFAULT_INSTRUCTOR_NAME,
        Placeholder.PROGRESS_SUMMARY.value: payload.progress_summary or DEFAULT_PROGRESS_SUMMARY,
        Placeholder.NEXT_STEPS.value: payload.next_steps or DEFAULT_NEXT_STEPS,
    }
    update = ReviewDraftUpdate(
        subject=render_placeholders(template.subject, values),
        body=render_placeholders(template.body, values),
        status=ReviewStatus.DRAFT,
    )
    return await save_draft(db, instructor_id, review_id, update)


# ----- Send -----
async def send_review(
    db: AsyncSession,
    instructor: Instructor,
    review_id: int,
    payload: SendReviewRequest,
) -> MonthlyReview:
    if not instructor.is_active:
        raise ServiceError("Instructor not active", status.HTTP_403_FORBIDDEN)
    review = await _get_owned_review_or_404(db, instructor.id, review_id)
    if review.status == ReviewStatus.SENT.value:
        raise ServiceError("Review has already been sent", status.HTTP_409_CONFLICT)
    student = await _get_student_or_404(db, review.student_id)

    feedback_link = build_feedback_link(settings.public_base_url, review.id)
    subject = (review.subject or f"Monthly progress update for {student.full_name}").strip()
    body = inject_feedback_link((review.body or "").strip(), feedback_link)

    # All finalized fields in one write so no partially-sent state is ever visible
    now = datetime.now(timezone.utc)
    review.subject = subject
    review.body = body
    review.status = ReviewStatus.SENT.value
    review.sent_at = now
    review.updated_at = now
    await db.commit()
    await db.refresh(review)
    logger.info("Review %s sent by instructor %s", review.id, instructor.id)

    cc = [student.account_manager_email] if payload.cc_account_manager and student.account_manager_email else []
    deliver_review_email(
        review_id=review.id,
        to_email=str(payload.to_email),
        subject=subject,
        body=body,
        cc=cc,
    )
    return review


# ----- Dashboard -----
async def _count_reviews(db: AsyncSession, instructor_id: int, month: date, review_status: ReviewStatus) -> int:
    result = await db.execute(
        select(func.count(MonthlyReview.id)).where(
            MonthlyReview.instructor_id == instructor_id,
            MonthlyReview.month == month,
            MonthlyReview.status == review_status.value,
        )
    )
    return int(result.scalar() or 0)


async def get_dashboard_summary(db: AsyncSession, instructor_id: int, month: date) -> DashboardSummaryResponse:
    result = await db.execute(
        select(func.count(InstructorStudent.id)).where(
            InstructorStudent.instructor_id == instructor_id,
            InstructorStudent.month == month,
        )
    )
    total_assigned = int(result.scalar() or 0)
    sent = await _count_reviews(db, instructor_id, month, ReviewStatus.SENT)
    draft = await _count_reviews(db, instructor_id, month, ReviewStatus.DRAFT)
    # Reviews can outlive their assignment sample; never report negative pending work
    pending = max(total_assigned - sent - draft, 0)
    return DashboardSummaryResponse(
        month=month,
        total_assigned=total_assigned,
        sent=sent,
        draft=draft,
        pending=pending,
    )
