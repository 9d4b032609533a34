#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import base64

import streamlit as st
from bloxi_tools.runner import run_chat, run_debug

# -------------------------------------------------------------
# Streamlit Page Config
# -------------------------------------------------------------
st.set_page_config(
    page_title="Bloxi — Simulink Modelling Chat",
    page_icon="🧱",
    layout="wide"
)

# -------------------------------------------------------------
# Session State Setup
# -------------------------------------------------------------
if "messages" not in st.session_state:
    st.session_state["messages"] = []

# -------------------------------------------------------------
# Sidebar: screenshot debugging
# -------------------------------------------------------------
st.sidebar.title("🐞 Debug a model")

debug_file = st.sidebar.file_uploader("Screenshot of your model", type=["png"])
debug_problem = st.sidebar.text_area("What is going wrong?")

if st.sidebar.button("Diagnose"):
    img_b64 = base64.b64encode(debug_file.getvalue()).decode("utf-8") if debug_file else None
    status, out = run_debug(debug_problem, img_b64)
    if status == 200:
        st.sidebar.success(out["reply"])
    else:
        st.sidebar.error(out["reply"])

with st.sidebar.expander("💡 Example descriptions to try", expanded=True):
    st.markdown(
        """
- `x'' + 3x' + 2x = 5sin(t)`
- `A mass-spring-damper with m=1, b=3, k=2 driven by 5sin(t)`
- `Series RLC circuit with R=10, L=0.5, C=0.01 and a 12V step input`
- `First-order system tau*y' + y = u with tau = 2`
        """
    )

# -------------------------------------------------------------
# Title Section
# -------------------------------------------------------------
st.title("🧱 Bloxi — Describe a system, get a Simulink model")

st.write(
    "Describe a dynamical system or write its differential equation. "
    "Bloxi either asks a follow-up question or returns blocks, connections "
    "and a layout ready for the MATLAB builder."
)


# -------------------------------------------------------------
# Chat History Renderer
# -------------------------------------------------------------
def render_model(model_data):
    st.markdown("**Blocks**")
    st.table(model_data.get("blocks", []))
    st.markdown("**Connections**")
    st.table(model_data.get("connections", []))
    with st.expander("Raw model JSON"):
        st.json(model_data)


def render_message(role, content, model_data=None):
    """Chat bubble renderer."""
    with st.chat_message(role):
        st.markdown(content)
        if model_data:
            render_model(model_data)


for msg in st.session_state["messages"]:
    render_message(msg["role"], msg["content"], msg.get("model_data"))


# -------------------------------------------------------------
# MAIN CHAT INPUT
# -------------------------------------------------------------
user_input = st.chat_input("Describe your system…")

if user_input:
    st.session_state["messages"].append({"role": "user", "content": user_input})
    render_message("user", user_input)

    status, out = run_chat(user_input)
    model_data = out.get("model_data") or None

    render_message("assistant", out["reply"], model_data)

    st.session_state["messages"].append({
        "role": "assistant",
        "content": out["reply"],
        "model_data": model_data,
    })
