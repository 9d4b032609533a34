"""
bloxi_tools/config.py
=====================
Central configuration for LLM providers and global options.
"""

import os
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional

from dotenv import load_dotenv

load_dotenv()

log = logging.getLogger("BloxiConfig")


def env_number(name: str, default, cast=float):
    """Read a positive numeric setting; malformed values fall back to the default."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw)
    except ValueError:
        log.warning(f"⚠️ {name}={raw!r} is not a valid {cast.__name__}; using default {default}")
        return default
    if value <= 0:
        log.warning(f"⚠️ {name}={raw!r} must be positive; using default {default}")
        return default
    return value


# Seconds allowed for a single completion call (no retries are attempted)
LLM_TIMEOUT = env_number("LLM_TIMEOUT", 60.0)

# Output cap for the screenshot debugging call
DEBUG_MAX_TOKENS = env_number("DEBUG_MAX_TOKENS", 400, cast=int)

CORS_ORIGINS = [o.strip() for o in os.getenv("BLOXI_CORS_ORIGINS", "*").split(",") if o.strip()]


@dataclass(frozen=True)
class LLMClient:
    """Provider handle shared by every request in the process."""
    provider: str
    model: str
    vision_model: str
    client: Any
    base_url: Optional[str] = None


@lru_cache(maxsize=1)
def get_llm_client() -> LLMClient:
    """Build the completion client once per process from the environment."""
    provider = os.getenv("LLM_PROVIDER", "openai").strip().lower()

    if provider == "openai":
        from openai import OpenAI
        key = os.getenv("OPENAI_API_KEY")
        if not key:
            raise ValueError("Missing OPENAI_API_KEY in environment")
        client = OpenAI(api_key=key, timeout=LLM_TIMEOUT, max_retries=0)
        model = os.getenv("OPENAI_MODEL", "gpt-4")
        vision_model = os.getenv("OPENAI_VISION_MODEL", "gpt-4o")
        handle = LLMClient(provider, model, vision_model, client)

    elif provider == "gemini":
        import google.generativeai as genai
        key = os.getenv("GEMINI_API_KEY")
        if not key:
            raise ValueError("Missing GEMINI_API_KEY in environment")
        genai.configure(api_key=key)
        model = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
        vision_model = os.getenv("GEMINI_VISION_MODEL", model)
        handle = LLMClient(provider, model, vision_model, genai)

    elif provider == "ollama":
        import requests
        base_url = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434").rstrip("/")
        model = os.getenv("OLLAMA_MODEL", "llama3")
        vision_model = os.getenv("OLLAMA_VISION_MODEL", "llava")
        handle = LLMClient(provider, model, vision_model, requests.Session(), base_url=base_url)

    else:
        raise ValueError(f"Unknown LLM provider: {provider}")

    log.info(f"✅ Using LLM provider={provider}, model={handle.model}, vision_model={handle.vision_model}")
    return handle
