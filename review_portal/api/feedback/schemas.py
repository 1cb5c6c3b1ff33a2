from typing import Optional

from pydantic import BaseModel, Field, StrictInt


class ServiceFeedbackCreate(BaseModel):
    stars: StrictInt = Field(..., ge=1, le=5)
    message: Optional[str] = Field(None, max_length=2000)


class ServiceFeedbackAck(BaseModel):
    ok: bool = True
