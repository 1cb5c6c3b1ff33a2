from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from review_portal.auth.rbac import require_admin
from review_portal.core.exceptions import ServiceError
from review_portal.core.months import normalize_month
from review_portal.db.session import get_db

from . import service
from .schemas import AdminAck, AdminInstructorRow, ComplianceRow, InstructorActiveUpdate

router = APIRouter(
    prefix="/api/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("/instructors", response_model=List[AdminInstructorRow])
async def list_instructors(db: AsyncSession = Depends(get_db)):
    return await service.list_instructors_for_admin(db)


@router.post("/instructors/{instructor_id}/active", response_model=AdminAck)
async def set_instructor_active(
    instructor_id: int,
    payload: InstructorActiveUpdate,
    db: AsyncSession = Depends(get_db),
):
    try:
        await service.set_instructor_active(db, instructor_id, payload.is_active)
        return AdminAck()
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/compliance", response_model=List[ComplianceRow])
async def get_compliance(
    month: Optional[str] = Query(None, description="YYYY-MM-DD; day is ignored. Defaults to previous month."),
    db: AsyncSession = Depends(get_db),
):
    return await service.get_compliance(db, normalize_month(month))
