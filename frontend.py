# frontend.py
# Streamlit page for the resume analyzer. Widget events are queued in callbacks
# and handed to the PageController on the next script run.
import logging

import streamlit as st

from client import AnalysisClient
from controller import PageController
from page import PageView
from render import render_ring, render_suggestions, message_region

logging.basicConfig(level=logging.INFO)

st.set_page_config(page_title="SkillLens: Smart Resume Analyzer", page_icon="📄")

# ---------------------------
# SESSION STATE
# ---------------------------
if "view" not in st.session_state:
    st.session_state.view = PageView()
    st.session_state.uploader_key = 0
    st.session_state.resume_text = ""
view: PageView = st.session_state.view

# Push controller-side changes into the widgets before they are created
if st.session_state.pop("sync_widgets", False):
    st.session_state.resume_text = view.text_area
    if view.file_selector is None:
        st.session_state.uploader_key += 1

uploader_widget_key = f"resume_file_{st.session_state.uploader_key}"


def queue(action: str):
    st.session_state.pending_action = action
    st.session_state.view.text_area = st.session_state.get("resume_text", "")


def draw_progress(v: PageView):
    """Redraw the non-interactive regions. Safe to call repeatedly in one run."""
    if v.spinner_visible:
        spinner_slot.info("⏳ Analyzing your resume...")
    else:
        spinner_slot.empty()
    if v.results_visible:
        with results_slot.container():
            render_ring(v.score_text, v.ring_offset)
            render_suggestions(v.suggestions)
    else:
        results_slot.empty()


# ---------------------------
# LAYOUT
# ---------------------------
st.title("SkillLens: Smart Resume Analyzer")

message_slot = st.container()
upload_slot = st.empty()
spinner_slot = st.empty()
results_slot = st.empty()

controller = PageController(view, client=AnalysisClient(), on_update=draw_progress)

pending = st.session_state.pop("pending_action", None)
if pending == "submit":
    controller.submit_typed_text()
elif pending == "file":
    controller.handle_file_selection(st.session_state.get(uploader_widget_key))
elif pending == "reset":
    controller.reset_ui()

if pending is not None:
    st.session_state.sync_widgets = True
    st.rerun()

with message_slot:
    message_region(view)

if view.upload_visible:
    with upload_slot.container():
        st.text_area("Paste your resume", key="resume_text", height=260)
        st.file_uploader("...or upload a .txt file", type=["txt"], key=uploader_widget_key,
                         on_change=queue, args=("file",))
        st.button("Analyze Resume", type="primary", on_click=queue, args=("submit",))

draw_progress(view)
if view.results_visible:
    st.button("Analyze Another Resume", on_click=queue, args=("reset",))
