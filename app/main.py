import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.routers.chat import router as chat_router
from app.routers.debug import router as debug_router
from bloxi_tools.config import CORS_ORIGINS, get_llm_client

log = logging.getLogger("BloxiAPI")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Build the shared completion client once; requests report errors if it is missing
    try:
        get_llm_client()
    except (ValueError, ImportError) as e:
        log.warning(f"⚠️ LLM client not configured: {e}")
    yield


app = FastAPI(
    title="Bloxi API",
    description="FastAPI backend for Bloxi natural-language Simulink modelling and debugging",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routes
app.include_router(chat_router)
app.include_router(debug_router)


@app.get("/")
async def root():
    return {"message": "Welcome to Bloxi API"}
