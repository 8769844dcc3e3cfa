"""
views/quiz_view.py: 문제 풀기 화면

레이아웃:
  - 진행률 + 현재 점수
  - 문제 카드 (분류 / 발문 / 빈칸 문장)
  - 보기 2열 그리드 (선택 후 잠김)
  - 해설 패널 + 다음 버튼 (선택 후에만 표시)
"""

from __future__ import annotations

import streamlit as st

from logic_korean.errors import AlreadyLockedError
from logic_korean.services.quiz_service import QuizSession
from logic_korean.views.components import progress
from logic_korean.views.components import question_card as qcard


def _select(quiz: QuizSession, option: str) -> None:
    try:
        quiz.select_option(option)
    except AlreadyLockedError:
        pass  # 중복 클릭 무시
    st.rerun()


def _options_grid(quiz: QuizSession) -> None:
    snap = quiz.snapshot()
    item = snap.current
    cols = st.columns(2)

    for idx, option in enumerate(item.options):
        label = option
        if snap.locked:
            if option == item.answer:
                label = f"✅ {option}"
            elif option == snap.selection:
                label = f"❌ {option}"

        with cols[idx % 2]:
            if st.button(
                label,
                key=f"opt_{snap.index}_{idx}",
                disabled=snap.locked,
                use_container_width=True,
            ):
                _select(quiz, option)


def _explanation_panel(quiz: QuizSession) -> None:
    snap = quiz.snapshot()
    outcome = snap.outcome
    if outcome is None:
        return

    if outcome.correct:
        st.success("Correct! 🎉")
    else:
        st.error(f"Incorrect. The answer is **{outcome.correct_answer}**.")
    st.info(outcome.explanation)

    is_last = snap.question_number >= snap.total
    if st.button(
        "See Results →" if is_last else "Next Question →",
        key=f"next_{snap.index}",
        type="primary",
        use_container_width=True,
    ):
        quiz.advance()
        st.rerun()


def render(quiz: QuizSession) -> None:
    """퀴즈 화면 렌더링."""
    snap = quiz.snapshot()
    progress.render(snap)
    qcard.render(snap, quiz.render_prompt())
    _options_grid(quiz)
    _explanation_panel(quiz)
