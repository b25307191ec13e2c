"""
Viewlytics browser UI.

Run with: streamlit run app_ui.py
The forwarding endpoint (main.py) must be reachable at FORWARD_ENDPOINT_URL.
"""

import asyncio
import logging

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

from client.controller import AnalysisController
from client.exports import clamp_score
from client.state import ControllerState
from config import settings

logging.basicConfig(level=settings.LOG_LEVEL)


def get_controller() -> AnalysisController:
    """One controller per browser session; state is gone on reload."""
    if "controller" not in st.session_state:
        st.session_state["controller"] = AnalysisController()
    return st.session_state["controller"]


def render_result(controller: AnalysisController, state: ControllerState):
    result = state.result

    st.subheader("Summary")
    st.write(result.summary)

    col_score, col_access = st.columns(2)
    with col_score:
        st.metric("Score", result.score)
        st.progress(int(clamp_score(result.score)))
    with col_access:
        st.metric("Accessibility", result.accessibility)
        st.progress(int(clamp_score(result.accessibility)))

    st.subheader("Top suggestions")
    for i, suggestion in enumerate(result.suggestions, 1):
        st.markdown(f"**{i}.** {suggestion}")

    st.download_button(
        "Download JSON",
        data=controller.download_payload(),
        file_name=settings.EXPORT_FILENAME,
        mime="application/json",
    )
    with st.expander("Copy Summary"):
        # st.code renders a copy-to-clipboard button
        st.code(controller.clipboard_payload(), language="json")


def main():
    st.set_page_config(page_title="Viewlytics", layout="wide")
    st.title("Viewlytics")
    st.caption(
        "Inspect any webpage and get clear suggestions to improve performance, accessibility and SEO."
    )

    controller = get_controller()

    with st.form("analyze"):
        raw_url = st.text_input("URL", placeholder="https://example.com or example.com")
        submitted = st.form_submit_button("Analyze")

    if submitted:
        with st.spinner("Analyzing..."):
            asyncio.run(controller.submit(raw_url))

    state = controller.state
    if state.error:
        st.error(state.error)
    if state.result is not None:
        render_result(controller, state)


if __name__ == "__main__":
    main()
