from datetime import date
from typing import Optional

from pydantic import BaseModel


class AdminInstructorRow(BaseModel):
    instructor_id: int
    user_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    is_active: bool


class InstructorActiveUpdate(BaseModel):
    is_active: bool


class AdminAck(BaseModel):
    ok: bool = True


class ComplianceRow(BaseModel):
    instructor_id: int
    name: Optional[str] = None
    email: Optional[str] = None
    month: date
    total_assigned: int
    sent: int
    pending: int
