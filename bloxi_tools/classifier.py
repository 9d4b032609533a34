"""
classifier.py — interprets raw completion text into a response shape.

The completion service is asked for JSON but is not trusted to comply, so
every reply lands in exactly one of:

    clarification  the model asked a follow-up question
    model          blocks / connections / layout payload (passed through as-is)
    feedback       debugging advice (debug path only)
    unrecognized   anything else; the raw text is relayed as a clarification
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict

MODEL_CONFIRMATION = "Here is your Bloxi model."

_FENCE_RE = re.compile(r"^```(?:json)?\s*(?P<body>.*?)\s*```$", re.DOTALL | re.IGNORECASE)


class ReplyKind(str, Enum):
    CLARIFICATION = "clarification"
    MODEL = "model"
    FEEDBACK = "feedback"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class Classification:
    kind: ReplyKind
    reply: str
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def response_type(self) -> str:
        """Type string sent to clients; unrecognized replies read as clarifications."""
        if self.kind is ReplyKind.UNRECOGNIZED:
            return ReplyKind.CLARIFICATION.value
        return self.kind.value


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are not JSON and would come back out as null
    raise ValueError(f"non-JSON constant {name}")


def _parse(text: str) -> Any:
    m = _FENCE_RE.match(text)
    body = m.group("body") if m else text
    return json.loads(body, parse_constant=_reject_constant)


def _classify(text: str, debug: bool) -> Classification:
    text = (text or "").strip()
    try:
        parsed = _parse(text)
    except (ValueError, RecursionError):
        return Classification(ReplyKind.UNRECOGNIZED, text)

    if not isinstance(parsed, dict):
        return Classification(ReplyKind.UNRECOGNIZED, text)

    kind = parsed.get("type")
    reply = parsed.get("reply")

    if kind == "clarification" and isinstance(reply, str):
        return Classification(ReplyKind.CLARIFICATION, reply)

    if debug:
        if kind == "feedback" and isinstance(reply, str):
            return Classification(ReplyKind.FEEDBACK, reply)
    elif "blocks" in parsed or "connections" in parsed:
        return Classification(ReplyKind.MODEL, MODEL_CONFIRMATION, parsed)

    return Classification(ReplyKind.UNRECOGNIZED, text)


def classify_model_reply(text: str) -> Classification:
    """Classify a reply to the modelling prompt (clarification / model)."""
    return _classify(text, debug=False)


def classify_debug_reply(text: str) -> Classification:
    """Classify a reply to the screenshot debugging prompt (clarification / feedback)."""
    return _classify(text, debug=True)
