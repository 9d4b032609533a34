from pydantic import BaseModel
from typing import Optional, Dict, Any

class ChatRequest(BaseModel):
    token: Optional[str] = None
    user_input: Optional[str] = None

class ChatResponse(BaseModel):
    model_config = {"protected_namespaces": ()}

    reply: str
    model_data: Dict[str, Any]
    type: str

class ErrorResponse(BaseModel):
    reply: str
    type: str = "error"
