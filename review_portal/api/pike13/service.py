"""
Roster stub standing in for the Pike13 sync.

Assigns the first N students (by id) to the instructor for the month and makes
sure each has a review row. Safe to re-run: existing assignments and reviews are
kept, nothing is removed.
"""

import logging
from datetime import date
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from review_portal.api.instructor.service import ensure_review
from review_portal.core.config import settings
from review_portal.core.models import InstructorStudent, Student

logger = logging.getLogger(__name__)


async def _ensure_assignment(db: AsyncSession, instructor_id: int, student_id: int, month: date) -> None:
    existing = await db.execute(
        select(InstructorStudent.id).where(
            InstructorStudent.instructor_id == instructor_id,
            InstructorStudent.student_id == student_id,
            InstructorStudent.month == month,
        )
    )
    if existing.scalar_one_or_none() is not None:
        return
    db.add(InstructorStudent(instructor_id=instructor_id, student_id=student_id, month=month))
    try:
        await db.commit()
    except IntegrityError:
        # Concurrent sync already inserted it
        await db.rollback()


async def seed_assignments(db: AsyncSession, instructor_id: int, month: date) -> List[int]:
    """Returns the ids of the sampled students."""
    result = await db.execute(select(Student.id).order_by(Student.id).limit(settings.seed_sample_size))
    student_ids = list(result.scalars().all())
    for student_id in student_ids:
        await _ensure_assignment(db, instructor_id, student_id, month)
        await ensure_review(db, instructor_id, student_id, month)
    logger.info(
        "Seeded %d assignment(s) for instructor %s, month %s",
        len(student_ids), instructor_id, month.isoformat(),
    )
    return student_ids
