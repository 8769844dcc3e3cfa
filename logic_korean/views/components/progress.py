"""
views/components/progress.py

진행률 바 + 현재 점수 표시 컴포넌트.
"""

from __future__ import annotations

import streamlit as st

from logic_korean.models.session_state import SessionSnapshot


def render(snap: SessionSnapshot) -> None:
    st.markdown(
        f"""
        <div style="display:flex; justify-content:space-between;
                    font-size:0.85rem; color:#6b7280; margin-bottom:4px;">
            <span>Question <b>{snap.question_number}</b> / {snap.total}</span>
            <span>Score: <b>{snap.score}</b></span>
        </div>
        """,
        unsafe_allow_html=True,
    )
    st.progress(snap.progress)
