#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
runner.py — Unified Backend Layer

This file exposes the two request handlers used by FastAPI / Streamlit / CLI:
    run_chat(user_input, token=None)            → (status_code, envelope)
    run_debug(problem, debug_img, token=None)   → (status_code, envelope)

Each handler:
    - validates its input (no external call on rejection)
    - builds the fixed instruction prompt
    - makes exactly one completion call (no retries)
    - classifies the reply into a stable envelope
"""

from __future__ import annotations

import argparse
import base64
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from . import llm_client
from .classifier import ReplyKind, classify_debug_reply, classify_model_reply
from .config import DEBUG_MAX_TOKENS
from .llm_client import CompletionError
from .prompts import DEBUG_SYSTEM_PROMPT, MODEL_SYSTEM_PROMPT, build_debug_prompt, build_model_prompt

# ---------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] [%(levelname)-7s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
log = logging.getLogger("BloxiRunner")

CHAT_ERROR_REPLY = "[⚠️ OpenAI API error]"
DEBUG_ERROR_REPLY = "[⚠️ Debug OpenAI API error]"
CHAT_MISSING_REPLY = "'user_input' is required."
DEBUG_MISSING_REPLY = "Both 'problem' and 'debug_img' are required."

Envelope = Dict[str, Any]


def _blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


# --------------------------------------------------------------------
# /chat
# --------------------------------------------------------------------
def run_chat(user_input: Optional[str], token: Optional[str] = None) -> Tuple[int, Envelope]:
    """
    Turn a plain-language system description into a Simulink model or a
    follow-up question.

    Returns (status_code, envelope) where envelope is one of:
        {"reply": str, "model_data": {...}, "type": "model" | "clarification"}
        {"reply": str, "type": "error"}
    """
    if _blank(user_input):
        log.warning("Rejected /chat request: missing user_input")
        return 400, {"reply": CHAT_MISSING_REPLY, "type": "error"}

    prompt = build_model_prompt(user_input)
    try:
        text = llm_client.complete_text(MODEL_SYSTEM_PROMPT, prompt)
    except CompletionError:
        log.exception("Completion error on /chat")
        return 500, {"reply": CHAT_ERROR_REPLY, "type": "error"}

    result = classify_model_reply(text)
    log.info(f"/chat reply classified as {result.kind.value}")

    model_data = result.payload if result.kind is ReplyKind.MODEL else {}
    return 200, {
        "reply": result.reply,
        "model_data": model_data,
        "type": result.response_type,
    }


# --------------------------------------------------------------------
# /debug
# --------------------------------------------------------------------
def run_debug(problem: Optional[str], debug_img: Optional[str], token: Optional[str] = None) -> Tuple[int, Envelope]:
    """Diagnose a model screenshot; returns {"type": "feedback" | "clarification", "reply": str}."""
    if _blank(problem) or _blank(debug_img):
        log.warning("Rejected /debug request: missing problem or debug_img")
        return 400, {"reply": DEBUG_MISSING_REPLY, "type": "error"}

    prompt = build_debug_prompt(problem)
    try:
        text = llm_client.complete_with_image(DEBUG_SYSTEM_PROMPT, prompt, debug_img, DEBUG_MAX_TOKENS)
    except CompletionError:
        log.exception("Completion error on /debug")
        return 500, {"reply": DEBUG_ERROR_REPLY, "type": "error"}

    result = classify_debug_reply(text)
    log.info(f"/debug reply classified as {result.kind.value}")
    return 200, {"type": result.response_type, "reply": result.reply}


# --------------------------------------------------------------------
# CLI
# --------------------------------------------------------------------
def main_cli(argv=None):
    p = argparse.ArgumentParser(description="Bloxi: describe a system, get a Simulink model.")
    p.add_argument("user_input", nargs="*", help="System description (chat mode)")
    p.add_argument("--debug-image", type=Path, help="Screenshot of a model to debug (PNG)")
    p.add_argument("--problem", help="What is going wrong (debug mode)")
    args = p.parse_args(argv)

    if args.debug_image:
        img_b64 = base64.b64encode(args.debug_image.read_bytes()).decode("utf-8")
        status, body = run_debug(args.problem, img_b64)
    else:
        status, body = run_chat(" ".join(args.user_input).strip())

    print(json.dumps(body, indent=2, ensure_ascii=False))
    return 0 if status == 200 else 1


if __name__ == "__main__":
    sys.exit(main_cli())
