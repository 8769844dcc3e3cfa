"""
views/result_view.py: 결과 화면

표시 내용:
  - 최종 점수 (맞힌 수 / 전체)
  - 다시 하기 버튼 (새 샘플로 로그인 화면부터)
"""

from __future__ import annotations

import html

import streamlit as st

from logic_korean.services.quiz_service import QuizSession


def render(quiz: QuizSession) -> None:
    """결과 화면 렌더링."""
    snap = quiz.snapshot()

    _, col, _ = st.columns([0.8, 2.5, 0.8])
    with col:
        st.markdown("<div style='text-align:center; font-size:3.5rem;'>🏆</div>", unsafe_allow_html=True)
        st.markdown(
            "<h2 style='text-align:center;'>Quiz Completed!</h2>",
            unsafe_allow_html=True,
        )
        st.markdown(
            f"<p style='text-align:center; color:#6b7280;'>Good job, "
            f"<b style='color:#4f46e5;'>{html.escape(snap.name)}</b>!</p>",
            unsafe_allow_html=True,
        )
        st.markdown(
            f"<p style='text-align:center; font-size:3rem; font-weight:800; color:#4f46e5;'>"
            f"{snap.score} <span style='font-size:1.5rem; color:#9ca3af;'>/ {snap.total}</span></p>",
            unsafe_allow_html=True,
        )

        if st.button("Try Again", type="primary", use_container_width=True):
            quiz.reset()
            st.rerun()
