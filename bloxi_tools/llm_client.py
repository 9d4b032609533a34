"""
llm_client.py — completion calls for every supported provider.

Two entry points are exposed:
    complete_text(system, prompt)                       → str
    complete_with_image(system, prompt, image, max_tokens) → str

Both return the stripped completion text and raise CompletionError on any
provider failure. Nothing here retries.
"""

from __future__ import annotations

import base64
import logging
import re
from typing import Tuple

from .config import LLM_TIMEOUT, LLMClient, get_llm_client

log = logging.getLogger("BloxiLLM")

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<data>.*)$", re.DOTALL)


class CompletionError(RuntimeError):
    """The completion service could not produce a reply."""


# ---------------------------------------------------------------------
# Image helpers
# ---------------------------------------------------------------------
def split_data_url(image: str) -> Tuple[str, str]:
    """Return (mime_type, base64_payload); bare base64 is assumed to be PNG."""
    image = image.strip()
    m = _DATA_URL_RE.match(image)
    if m:
        return m.group("mime"), m.group("data")
    return "image/png", image


def to_data_url(image: str) -> str:
    mime, data = split_data_url(image)
    return f"data:{mime};base64,{data}"


# ---------------------------------------------------------------------
# Provider calls
# ---------------------------------------------------------------------
def _resolve_client() -> LLMClient:
    try:
        return get_llm_client()
    except (ValueError, ImportError) as e:
        raise CompletionError(f"LLM client unavailable: {e}") from e


def _openai_call(handle: LLMClient, model: str, messages: list, max_tokens: int | None) -> str:
    kwargs = {"model": model, "messages": messages}
    if max_tokens:
        kwargs["max_tokens"] = max_tokens
    resp = handle.client.chat.completions.create(**kwargs)
    return resp.choices[0].message.content


def _ollama_call(handle: LLMClient, model: str, messages: list, max_tokens: int | None) -> str:
    payload = {"model": model, "messages": messages, "stream": False}
    if max_tokens:
        payload["options"] = {"num_predict": max_tokens}
    r = handle.client.post(f"{handle.base_url}/api/chat", json=payload, timeout=LLM_TIMEOUT)
    r.raise_for_status()
    return r.json()["message"]["content"]


def _gemini_call(handle: LLMClient, model: str, system: str, parts: list, max_tokens: int | None) -> str:
    model_obj = handle.client.GenerativeModel(model, system_instruction=system)
    config = {"max_output_tokens": max_tokens} if max_tokens else None
    resp = model_obj.generate_content(
        parts,
        generation_config=config,
        request_options={"timeout": LLM_TIMEOUT},
    )
    return resp.text


def complete_text(system: str, prompt: str) -> str:
    """Single text completion: system instruction + one user message."""
    handle = _resolve_client()
    log.info(f"Text completion → provider={handle.provider}, model={handle.model}")
    try:
        if handle.provider == "gemini":
            text = _gemini_call(handle, handle.model, system, [prompt], None)
        else:
            messages = [
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ]
            if handle.provider == "ollama":
                text = _ollama_call(handle, handle.model, messages, None)
            else:
                text = _openai_call(handle, handle.model, messages, None)
    except Exception as e:
        raise CompletionError(f"{handle.provider} text completion failed: {e}") from e

    if text is None:
        raise CompletionError(f"{handle.provider} returned an empty completion")
    return text.strip()


def complete_with_image(system: str, prompt: str, image: str, max_tokens: int) -> str:
    """Multimodal completion: prompt text plus one inline base64 image."""
    handle = _resolve_client()
    mime, data = split_data_url(image)
    log.info(f"Image completion → provider={handle.provider}, model={handle.vision_model}, max_tokens={max_tokens}")
    try:
        if handle.provider == "gemini":
            parts = [prompt, {"mime_type": mime, "data": base64.b64decode(data)}]
            text = _gemini_call(handle, handle.vision_model, system, parts, max_tokens)
        elif handle.provider == "ollama":
            messages = [
                {"role": "system", "content": system},
                {"role": "user", "content": prompt, "images": [data]},
            ]
            text = _ollama_call(handle, handle.vision_model, messages, max_tokens)
        else:
            messages = [
                {"role": "system", "content": system},
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt},
                        {"type": "image_url", "image_url": {"url": to_data_url(image)}},
                    ],
                },
            ]
            text = _openai_call(handle, handle.vision_model, messages, max_tokens)
    except Exception as e:
        raise CompletionError(f"{handle.provider} image completion failed: {e}") from e

    if text is None:
        raise CompletionError(f"{handle.provider} returned an empty completion")
    return text.strip()
