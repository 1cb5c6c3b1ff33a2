from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from review_portal.api.instructor.router import get_current_instructor
from review_portal.core.models import Instructor
from review_portal.core.months import normalize_month
from review_portal.db.session import get_db

from . import service
from .schemas import SyncResponse

router = APIRouter(prefix="/api/pike13", tags=["pike13"])


@router.post("/sync", response_model=SyncResponse)
async def sync_my_students(
    db: AsyncSession = Depends(get_db),
    instructor: Instructor = Depends(get_current_instructor),
):
    """Refresh the current instructor's roster for the previous month (stubbed, no Pike13 call yet)."""
    instructor_id = instructor.id
    await service.seed_assignments(db, instructor_id, normalize_month())
    return SyncResponse(message="Synced (stub) and refreshed assignments.")
