"""Admin service: instructor activation and the monthly compliance roll-up."""

import logging
from datetime import date
from typing import List

from fastapi import status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from review_portal.api.instructor.service import get_dashboard_summary
from review_portal.auth.models import User, format_display_name
from review_portal.core.exceptions import ServiceError
from review_portal.core.models import Instructor

from .schemas import AdminInstructorRow, ComplianceRow

logger = logging.getLogger(__name__)


def _instructors_with_identity():
    return select(
        Instructor.id,
        Instructor.user_id,
        Instructor.is_active,
        User.email,
        User.first_name,
        User.last_name,
    ).outerjoin(User, User.id == Instructor.user_id)


async def list_instructors_for_admin(db: AsyncSession) -> List[AdminInstructorRow]:
    result = await db.execute(
        _instructors_with_identity().order_by(Instructor.created_at.desc(), Instructor.id.desc())
    )
    return [
        AdminInstructorRow(
            instructor_id=r.id,
            user_id=r.user_id,
            name=format_display_name(r.first_name, r.last_name),
            email=r.email,
            is_active=r.is_active,
        )
        for r in result.all()
    ]


async def set_instructor_active(db: AsyncSession, instructor_id: int, is_active: bool) -> Instructor:
    instructor = await db.get(Instructor, instructor_id)
    if not instructor:
        raise ServiceError("Not found", status.HTTP_404_NOT_FOUND)
    instructor.is_active = is_active
    await db.commit()
    await db.refresh(instructor)
    logger.info("Instructor %s %s", instructor_id, "activated" if is_active else "deactivated")
    return instructor


async def get_compliance(db: AsyncSession, month: date) -> List[ComplianceRow]:
    """Dashboard counts for every instructor, ascending by id. Not paginated."""
    result = await db.execute(_instructors_with_identity().order_by(Instructor.id))
    rows: List[ComplianceRow] = []
    for r in result.all():
        summary = await get_dashboard_summary(db, r.id, month)
        rows.append(
            ComplianceRow(
                instructor_id=r.id,
                name=format_display_name(r.first_name, r.last_name),
                email=r.email,
                month=summary.month,
                total_assigned=summary.total_assigned,
                sent=summary.sent,
                pending=summary.pending,
            )
        )
    return rows
