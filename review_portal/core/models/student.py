from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, Text

from review_portal.db.session import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Roster id from Pike13
    external_id = Column(String(255), nullable=False, unique=True)
    full_name = Column(Text, nullable=False)
    guardian_email = Column(Text, nullable=True)
    account_manager_email = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, nullable=False)
