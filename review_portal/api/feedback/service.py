"""Public feedback intake for sent reviews."""

import logging

from fastapi import status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from review_portal.core.exceptions import ServiceError
from review_portal.core.models import MonthlyReview, ServiceFeedback

from .schemas import ServiceFeedbackCreate

logger = logging.getLogger(__name__)


async def submit_feedback(db: AsyncSession, review_id: int, payload: ServiceFeedbackCreate) -> None:
    """
    Store the first rating for a review. Repeat submissions succeed without
    overwriting. Review status is not checked; any existing review accepts feedback.
    """
    review = await db.get(MonthlyReview, review_id)
    if not review:
        raise ServiceError("Not found", status.HTTP_404_NOT_FOUND)

    existing = await db.execute(
        select(ServiceFeedback.id).where(ServiceFeedback.monthly_review_id == review_id)
    )
    if existing.scalar_one_or_none() is not None:
        logger.info("Feedback for review %s already recorded; ignoring resubmission", review_id)
        return

    db.add(
        ServiceFeedback(
            monthly_review_id=review_id,
            stars=payload.stars,
            message=payload.message,
        )
    )
    try:
        await db.commit()
    except IntegrityError:
        # Lost the race to a concurrent submission; first write wins
        await db.rollback()
        return
    logger.info("Stored %s-star feedback for review %s", payload.stars, review_id)
