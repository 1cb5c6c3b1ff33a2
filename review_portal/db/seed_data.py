"""
Seed the default review templates and the sample student roster.

Both steps only run when their table is empty, so this is safe on every startup:
  python -m review_portal.db.seed_data
"""
import asyncio
from typing import Dict, List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

# Import all models so every table is mapped
from review_portal.auth.models import User  # noqa: F401
from review_portal.core.models import ReviewTemplate, Student
from review_portal.db.session import AsyncSessionLocal


DEFAULT_TEMPLATES: List[Dict[str, str]] = [
    {
        "name": "Monthly progress update",
        "subject": "Monthly progress update for {{student_name}}",
        "body": (
            "Hello,\n\nHere is {{student_name}}'s progress update for {{month}}.\n\n"
            "Progress summary:\n{{progress_summary}}\n\n"
            "Next steps:\n{{next_steps}}\n\n"
            "Thank you,\n{{instructor_name}}\n\n"
            "Feedback: {{feedback_link}}"
        ),
    },
    {
        "name": "Short update",
        "subject": "{{student_name}} - {{month}} progress",
        "body": (
            "Hello,\n\nQuick update for {{student_name}} ({{month}}):\n\n"
            "{{progress_summary}}\n\n"
            "Next steps:\n{{next_steps}}\n\n"
            "Thank you,\n{{instructor_name}}\n\n"
            "Feedback: {{feedback_link}}"
        ),
    },
]

SAMPLE_STUDENTS: List[Dict[str, str]] = [
    {
        "external_id": "pike13-student-1001",
        "full_name": "Alex Johnson",
        "guardian_email": "guardian.alex@example.com",
        "account_manager_email": "account.manager@example.com",
    },
    {
        "external_id": "pike13-student-1002",
        "full_name": "Maya Patel",
        "guardian_email": "guardian.maya@example.com",
        "account_manager_email": "account.manager@example.com",
    },
    {
        "external_id": "pike13-student-1003",
        "full_name": "Jordan Lee",
        "guardian_email": "guardian.jordan@example.com",
        "account_manager_email": "account.manager@example.com",
    },
]


async def seed_if_empty(db: AsyncSession) -> None:
    template_count = (await db.execute(select(func.count(ReviewTemplate.id)))).scalar() or 0
    if template_count == 0:
        db.add_all([ReviewTemplate(**t) for t in DEFAULT_TEMPLATES])

    student_count = (await db.execute(select(func.count(Student.id)))).scalar() or 0
    if student_count == 0:
        db.add_all([Student(**s) for s in SAMPLE_STUDENTS])

    await db.commit()


async def main() -> None:
    async with AsyncSessionLocal() as db:
        try:
            await seed_if_empty(db)
            print("Seed data is in place.")
        except Exception as e:
            print(f"Error seeding data: {e}")
            await db.rollback()
            raise


if __name__ == "__main__":
    asyncio.run(main())
