"""
views/login_view.py: 이름 입력 / 시작 화면
"""

from __future__ import annotations

import streamlit as st

from logic_korean.errors import EmptyNameError
from logic_korean.services.quiz_service import QuizSession


def render(quiz: QuizSession, available: int) -> None:
    """로그인 화면 렌더링."""
    total = quiz.snapshot().total

    st.markdown(
        "<h1 style='text-align:center; color:#4f46e5;'>Logic Korean</h1>",
        unsafe_allow_html=True,
    )
    st.markdown(
        "<p style='text-align:center; color:#6b7280;'>Enter your name to start the quiz.</p>",
        unsafe_allow_html=True,
    )

    with st.form("login_form"):
        name = st.text_input("Your Name", placeholder="Your Name", label_visibility="collapsed")
        submitted = st.form_submit_button("Start Quiz →", type="primary", use_container_width=True)

    if submitted:
        try:
            quiz.start(name)
        except EmptyNameError as e:
            st.warning(str(e))
        else:
            st.rerun()

    st.caption(
        f"Total {available} questions available. "
        f"You will solve {total} random questions."
    )
