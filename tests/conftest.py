import pytest
from fastapi.testclient import TestClient

from app.main import app
from bloxi_tools import llm_client


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def fake_llm(monkeypatch):
    """Replace both completion calls; records every call made."""
    calls = []
    state = {"reply": "", "error": None}

    def _complete_text(system, prompt):
        calls.append({"kind": "text", "system": system, "prompt": prompt})
        if state["error"]:
            raise state["error"]
        return state["reply"]

    def _complete_with_image(system, prompt, image, max_tokens):
        calls.append({"kind": "image", "system": system, "prompt": prompt,
                      "image": image, "max_tokens": max_tokens})
        if state["error"]:
            raise state["error"]
        return state["reply"]

    monkeypatch.setattr(llm_client, "complete_text", _complete_text)
    monkeypatch.setattr(llm_client, "complete_with_image", _complete_with_image)
    state["calls"] = calls
    return state
