"""Instructor review schemas."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from review_portal.core.enums import ReviewStatus


class InstructorStatusResponse(BaseModel):
    instructor_id: int
    is_active: bool


class DashboardSummaryResponse(BaseModel):
    month: date
    total_assigned: int
    sent: int
    draft: int
    pending: int


class StudentReviewRow(BaseModel):
    monthly_review_id: int
    student_id: int
    student_name: str
    month: date
    status: ReviewStatus
    subject: Optional[str] = None
    sent_at: Optional[datetime] = None


class StudentResponse(BaseModel):
    id: int
    external_id: str
    full_name: str
    guardian_email: Optional[str] = None
    account_manager_email: Optional[str] = None

    class Config:
        from_attributes = True


class MonthlyReviewResponse(BaseModel):
    id: int
    instructor_id: int
    student_id: int
    month: date
    status: ReviewStatus
    subject: Optional[str] = None
    body: Optional[str] = None
    sent_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ReviewDetailResponse(BaseModel):
    monthly_review: MonthlyReviewResponse
    student: StudentResponse


class ReviewDraftUpdate(BaseModel):
    subject: Optional[str] = None
    body: Optional[str] = None
    status: Optional[ReviewStatus] = Field(None, description="pending | draft. Defaults to draft.")


class SendReviewRequest(BaseModel):
    to_email: EmailStr
    cc_account_manager: bool = True


class ApplyTemplateRequest(BaseModel):
    template_id: int
    progress_summary: Optional[str] = Field(None, description="Text for {{progress_summary}}")
    next_steps: Optional[str] = Field(None, description="Text for {{next_steps}}")
