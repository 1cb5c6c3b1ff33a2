from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from review_portal.core.exceptions import ServiceError
from review_portal.db.session import get_db

from . import service
from .schemas import ServiceFeedbackAck, ServiceFeedbackCreate

router = APIRouter(prefix="/api/public/feedback", tags=["feedback"])


@router.post(
    "/{review_id}",
    response_model=ServiceFeedbackAck,
    status_code=status.HTTP_201_CREATED,
)
async def submit_feedback(
    review_id: int,
    payload: ServiceFeedbackCreate,
    db: AsyncSession = Depends(get_db),
):
    """Guardian feedback from the link in a sent review. No authentication."""
    try:
        await service.submit_feedback(db, review_id, payload)
        return ServiceFeedbackAck()
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
