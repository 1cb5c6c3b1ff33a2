"""Roster assignment: ONE student on ONE instructor's list for ONE month.
Rows are only ever added; a student dropped from a later sync keeps its old row."""

from datetime import datetime

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, UniqueConstraint

from review_portal.db.session import Base


class InstructorStudent(Base):
    __tablename__ = "instructor_students"
    __table_args__ = (
        UniqueConstraint(
            "instructor_id", "student_id", "month",
            name="uq_instructor_student_month",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    instructor_id = Column(Integer, ForeignKey("instructors.id", ondelete="CASCADE"), nullable=False)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False)
    month = Column(Date, nullable=False)  # always the 1st of the month
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, nullable=False)

