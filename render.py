# render.py
# Streamlit drawing helpers for the analysis page. Nothing here runs at import.
import html
from typing import List, Optional

import streamlit as st

from page import PageView, Message, RING_RADIUS, RING_CIRCUMFERENCE

# Seconds between automatic redraws of the message region
MESSAGE_REFRESH_SECONDS = 1


def render_ring(score_text: str, offset: float):
    st.markdown(f"""
    <div style="display:flex; justify-content:center;">
      <svg width="150" height="150" viewBox="0 0 150 150">
        <circle cx="75" cy="75" r="{RING_RADIUS}" fill="none" stroke="#e5e7eb" stroke-width="12"/>
        <circle cx="75" cy="75" r="{RING_RADIUS}" fill="none" stroke="#6366f1" stroke-width="12"
                stroke-linecap="round" transform="rotate(-90 75 75)"
                stroke-dasharray="{RING_CIRCUMFERENCE:.2f}" stroke-dashoffset="{offset:.2f}"/>
        <text x="75" y="85" text-anchor="middle" font-size="32" font-weight="700" fill="#6366f1">{html.escape(score_text)}</text>
      </svg>
    </div>
    """, unsafe_allow_html=True)


def render_suggestions(suggestions):
    st.markdown("#### 💡 Suggestions")
    for suggestion in suggestions:
        st.markdown(f"- {suggestion}")


def render_messages(view: PageView, now: Optional[float] = None) -> List[Message]:
    """
    Draw the unexpired messages with a dismiss button each.
    Expired messages are dropped from the view; returns what was drawn.
    """
    shown = view.active_messages(now)
    for i, message in enumerate(shown):
        cols = st.columns([9, 1])
        cols[0].error(message.text)
        if cols[1].button("✕", key=f"dismiss_{i}"):
            view.dismiss(message)
            st.rerun()
    return shown


@st.fragment(run_every=MESSAGE_REFRESH_SECONDS)
def message_region(view: PageView):
    # Reruns on its own timer so messages disappear once they expire
    render_messages(view)
