"""Monthly progress review models."""

from datetime import datetime

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint

from review_portal.db.session import Base


class MonthlyReview(Base):
    """One progress email per instructor, student and month. pending -> draft -> sent; sent is terminal."""

    __tablename__ = "monthly_reviews"
    __table_args__ = (
        UniqueConstraint(
            "instructor_id", "student_id", "month",
            name="uq_monthly_review_instructor_student_month",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    instructor_id = Column(Integer, ForeignKey("instructors.id", ondelete="CASCADE"), nullable=False)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False)
    month = Column(Date, nullable=False)
    status = Column(String(20), nullable=False, default="pending")  # pending | draft | sent
    subject = Column(Text, nullable=True)
    body = Column(Text, nullable=True)
    sent_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=datetime.utcnow, nullable=False)


class ServiceFeedback(Base):
    """Guardian rating for a review. Write-once: later submissions are ignored."""

    __tablename__ = "service_feedback"

    id = Column(Integer, primary_key=True, autoincrement=True)
    monthly_review_id = Column(
        Integer,
        ForeignKey("monthly_reviews.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    stars = Column(Integer, nullable=False)  # 1..5
    message = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, nullable=False)
