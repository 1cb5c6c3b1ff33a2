from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, Integer, String

from review_portal.db.session import Base


def format_display_name(first_name: Optional[str], last_name: Optional[str]) -> Optional[str]:
    if not first_name and not last_name:
        return None
    return f"{first_name or ''} {last_name or ''}".strip()


class User(Base):
    """Identity record mirrored from the sign-in provider. The token subject is the primary key."""

    __tablename__ = "users"

    id = Column(String(255), primary_key=True)
    email = Column(String(255), nullable=True, unique=True)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, nullable=False)

    @property
    def display_name(self) -> Optional[str]:
        return format_display_name(self.first_name, self.last_name)


class AdminSetting(Base):
    """Presence of a row marks the identifier (user id or lowercased email) as an admin."""

    __tablename__ = "admin_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    admin_user_id = Column(String(255), nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, nullable=False)
