from fastapi import APIRouter
from fastapi.responses import JSONResponse
from app.schemas.chat import ChatRequest, ChatResponse, ErrorResponse
from bloxi_tools.runner import run_chat

router = APIRouter()

@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def chat_endpoint(req: ChatRequest):
    """Describe a system in plain language; get a Simulink model or a follow-up question."""
    status, body = run_chat(req.user_input, token=req.token)
    if status != 200:
        return JSONResponse(status_code=status, content=body)
    return body
