from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ReviewTemplateCreate(BaseModel):
    name: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1, description="May contain {{student_name}}, {{month}}, {{feedback_link}}, ...")


class ReviewTemplateResponse(BaseModel):
    id: int
    name: str
    subject: str
    body: str
    created_by_user_id: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
