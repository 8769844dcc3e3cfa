"""
app.py: Streamlit 진입점

실행: streamlit run logic_korean/app.py

상태 관리:
  - 문제 데이터: 프로세스당 한 번 로드 (st.cache_resource)
  - st.session_state.quiz : 브라우저 세션별 QuizSession
  - 화면은 quiz.snapshot().phase 로 분기
"""

from __future__ import annotations

import logging
import os
import sys

# streamlit run 은 스크립트 디렉토리만 sys.path 에 넣으므로 저장소 루트를 추가
_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)

import streamlit as st

from config import QUESTIONS_PER_SESSION
from logic_korean.errors import LoadError
from logic_korean.models.question_model import QuizItem
from logic_korean.models.session_state import Phase
from logic_korean.services.question_loader import load_questions
from logic_korean.services.quiz_service import QuizSession
from logic_korean.services.reporter import dispatch
from logic_korean.views import login_view, quiz_view, result_view

logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(message)s')
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Logic Korean", page_icon="🇰🇷", layout="centered")


@st.cache_resource(show_spinner=False)
def _load_bank() -> tuple[list[QuizItem], str | None]:
    """문제 데이터를 한 번만 로드. 실패도 캐시해 자동 재시도하지 않는다."""
    try:
        return load_questions(), None
    except LoadError as e:
        logger.error(f"문제 데이터 로드 실패: {e}")
        return [], str(e)


def main() -> None:
    with st.spinner("Loading questions..."):
        items, error = _load_bank()

    if error:
        st.error(f"Error: {error}")
        return

    if "quiz" not in st.session_state:
        st.session_state.quiz = QuizSession(
            items, size=QUESTIONS_PER_SESSION, on_finish=dispatch,
        )

    quiz: QuizSession = st.session_state.quiz
    phase = quiz.snapshot().phase

    if phase is Phase.LOGIN:
        login_view.render(quiz, available=len(items))
    elif phase is Phase.ACTIVE:
        quiz_view.render(quiz)
    else:
        result_view.render(quiz)


main()
