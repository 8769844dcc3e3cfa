"""
views/components/question_card.py

현재 문제를 카드 형태로 렌더링하는 컴포넌트.
빈칸은 선택 전 '?', 선택 후 고른 보기로 채워진다.
"""

from __future__ import annotations

import html

import streamlit as st

from logic_korean.models.session_state import SessionSnapshot


def render(snap: SessionSnapshot, prompt: str) -> None:
    """
    문제 카드를 렌더링한다.

    Args:
        snap:   현재 세션 스냅샷 (active 단계)
        prompt: 빈칸을 채운 문장 (QuizSession.render_prompt 결과)
    """
    item = snap.current
    if item is None:
        return

    if snap.locked and snap.outcome is not None:
        color = "#16a34a" if snap.outcome.correct else "#ef4444"
    else:
        color = "#1f2937"

    # ── 분류 / 발문 ────────────────────────────────────────────────────────
    st.markdown(
        f"<p style='text-align:center; font-size:0.8rem; letter-spacing:0.05em; "
        f"color:#9ca3af; font-weight:700; text-transform:uppercase;'>{html.escape(item.category)}</p>",
        unsafe_allow_html=True,
    )
    st.markdown(
        f"<p style='text-align:center; font-size:1.1rem; color:#374151;'>{html.escape(item.question)}</p>",
        unsafe_allow_html=True,
    )

    # ── 빈칸 문장 ──────────────────────────────────────────────────────────
    st.markdown(
        f"""
        <div style="text-align:center; font-size:1.6rem; font-weight:700; color:{color};
                    background:#eef2ff; padding:24px 12px; border-radius:10px;
                    border:1px solid #e0e7ff; margin-bottom:16px;">
            {html.escape(prompt)}
        </div>
        """,
        unsafe_allow_html=True,
    )
