from fastapi import APIRouter
from fastapi.responses import JSONResponse
from app.schemas.chat import ErrorResponse
from app.schemas.debug import DebugRequest, DebugResponse
from bloxi_tools.runner import run_debug

router = APIRouter()

@router.post(
    "/debug",
    response_model=DebugResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def debug_endpoint(req: DebugRequest):
    """Screenshot + problem description in, one paragraph of debugging advice out."""
    status, body = run_debug(req.problem, req.debug_img, token=req.token)
    if status != 200:
        return JSONResponse(status_code=status, content=body)
    return body


@router.get("/health")
async def health_check():
    return {"status": "ok", "message": "Bloxi FastAPI server running"}
