from pydantic import BaseModel


class SyncResponse(BaseModel):
    ok: bool = True
    message: str
