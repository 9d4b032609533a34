from pydantic import BaseModel
from typing import Optional

class DebugRequest(BaseModel):
    token: Optional[str] = None
    problem: Optional[str] = None
    debug_img: Optional[str] = None  # base64-encoded PNG (or data: URL)

class DebugResponse(BaseModel):
    type: str
    reply: str
