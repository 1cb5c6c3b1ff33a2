"""Service tests for the send pipeline and write-once guardian feedback."""

from datetime import date

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from review_portal.api.feedback.schemas import ServiceFeedbackCreate
from review_portal.api.feedback.service import submit_feedback
from review_portal.api.instructor import service
from review_portal.api.instructor.schemas import ReviewDraftUpdate, SendReviewRequest
from review_portal.core.enums import ReviewStatus
from review_portal.core.exceptions import ServiceError
from review_portal.core.models import MonthlyReview, ServiceFeedback

MONTH = date(2026, 9, 1)
SEND = SendReviewRequest(to_email="guardian@example.com")


@pytest.fixture()
async def active_instructor(db_session: AsyncSession, make_user):
    await make_user("instructor-1")
    instructor = await service.ensure_instructor_for_user(db_session, "instructor-1")
    instructor.is_active = True
    await db_session.commit()
    return instructor


@pytest.fixture()
async def review(db_session: AsyncSession, active_instructor, students) -> MonthlyReview:
    return await service.ensure_review(db_session, active_instructor.id, students[0].id, MONTH)


@pytest.mark.asyncio
async def test_send_replaces_feedback_token(db_session: AsyncSession, active_instructor, review, public_base_url) -> None:
    await service.save_draft(
        db_session, active_instructor.id, review.id, ReviewDraftUpdate(subject="Update", body="Hi {{feedback_link}} bye")
    )

    sent = await service.send_review(db_session, active_instructor, review.id, SEND)

    assert sent.body == f"Hi {public_base_url}/feedback/{review.id} bye"
    assert sent.status == ReviewStatus.SENT.value
    assert sent.sent_at is not None
    assert sent.subject == "Update"


@pytest.mark.asyncio
async def test_send_appends_footer_without_token(db_session: AsyncSession, active_instructor, review, public_base_url) -> None:
    await service.save_draft(
        db_session, active_instructor.id, review.id, ReviewDraftUpdate(body="  A strong month overall.  ")
    )

    sent = await service.send_review(db_session, active_instructor, review.id, SEND)

    link = f"{public_base_url}/feedback/{review.id}"
    assert sent.body == f"A strong month overall.\n\nFeedback: {link}"


@pytest.mark.asyncio
async def test_send_pending_review_uses_default_subject(db_session: AsyncSession, active_instructor, review) -> None:
    sent = await service.send_review(db_session, active_instructor, review.id, SEND)

    assert sent.subject == "Monthly progress update for Alex Johnson"
    assert sent.body.startswith("\n\nFeedback: ")


@pytest.mark.asyncio
async def test_send_requires_active_instructor(db_session: AsyncSession, active_instructor, review) -> None:
    active_instructor.is_active = False
    await db_session.commit()

    with pytest.raises(ServiceError) as exc:
        await service.send_review(db_session, active_instructor, review.id, SEND)

    assert exc.value.status_code == 403
    await db_session.refresh(review)
    assert review.status == ReviewStatus.PENDING.value


@pytest.mark.asyncio
async def test_send_unknown_review_is_not_found(db_session: AsyncSession, active_instructor) -> None:
    with pytest.raises(ServiceError) as exc:
        await service.send_review(db_session, active_instructor, 9999, SEND)
    assert exc.value.status_code == 404


@pytest.mark.asyncio
async def test_sent_review_is_terminal(db_session: AsyncSession, active_instructor, review) -> None:
    await service.send_review(db_session, active_instructor, review.id, SEND)

    with pytest.raises(ServiceError) as exc:
        await service.send_review(db_session, active_instructor, review.id, SEND)
    assert exc.value.status_code == 409


@pytest.mark.asyncio
async def test_feedback_is_write_once(db_session: AsyncSession, review) -> None:
    await submit_feedback(db_session, review.id, ServiceFeedbackCreate(stars=5, message="Wonderful"))
    await submit_feedback(db_session, review.id, ServiceFeedbackCreate(stars=1, message="Changed my mind"))

    result = await db_session.execute(
        select(ServiceFeedback).where(ServiceFeedback.monthly_review_id == review.id)
    )
    rows = result.scalars().all()
    assert len(rows) == 1
    assert rows[0].stars == 5
    assert rows[0].message == "Wonderful"


@pytest.mark.asyncio
async def test_feedback_for_missing_review(db_session: AsyncSession) -> None:
    with pytest.raises(ServiceError) as exc:
        await submit_feedback(db_session, 424242, ServiceFeedbackCreate(stars=4))
    assert exc.value.status_code == 404


@pytest.mark.asyncio
async def test_feedback_accepted_for_unsent_review(db_session: AsyncSession, review) -> None:
    await submit_feedback(db_session, review.id, ServiceFeedbackCreate(stars=3))
    result = await db_session.execute(select(ServiceFeedback.stars))
    assert result.scalars().all() == [3]
