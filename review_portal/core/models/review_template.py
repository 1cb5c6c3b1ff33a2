from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, Text

from review_portal.db.session import Base


class ReviewTemplate(Base):
    """Reusable subject/body text. Copied into a review when applied; reviews never point back here."""

    __tablename__ = "review_templates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    subject = Column(Text, nullable=False)
    body = Column(Text, nullable=False)
    created_by_user_id = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, nullable=False)
