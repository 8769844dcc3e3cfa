"""
services/quiz_service.py

퀴즈 세션 상태 머신.

    login ──start(name)──▶ active ──advance() (마지막 문제)──▶ finished
                             │  ▲
                select_option│  │advance() (다음 문제)
                             ▼  │
                           (locked)

- 상태 변경은 start / select_option / advance / reset 으로만 일어난다.
- score 는 select_option 에서만 바뀐다.
- 잘못된 순서의 호출은 StateError 로 즉시 실패한다 (상태는 그대로).
- finished 전이 때 SessionResult 를 한 번 만들어 on_finish 로 넘긴다.
  네트워크 전송은 on_finish 쪽(services/reporter.py)의 책임이고
  이 클래스는 I/O 없이 동기적으로만 동작한다.
"""

import logging
import random
import threading
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence

from config import QUESTIONS_PER_SESSION
from logic_korean.errors import AlreadyLockedError, EmptyNameError, StateError
from logic_korean.models.question_model import QuizItem
from logic_korean.models.session_state import (
    AnswerOutcome,
    Phase,
    SessionResult,
    SessionSnapshot,
    SessionState,
)
from logic_korean.services.prompt_renderer import render_prompt
from logic_korean.services.sampler import sample

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QuizSession:
    """
    한 사용자의 퀴즈 세션을 소유하는 객체.

    Args:
        items:     정규화된 전체 문제 (question_loader.normalize 결과).
        size:      세션당 출제 수.
        rng:       샘플링 난수원. None이면 새 Random().
        on_finish: finished 전이 시 SessionResult 를 받는 콜백 (한 번만 호출).
        clock:     완료 시각 공급 함수 (테스트용).
    """

    def __init__(
        self,
        items: Sequence[QuizItem],
        size: int = QUESTIONS_PER_SESSION,
        rng: Optional[random.Random] = None,
        on_finish: Optional[Callable[[SessionResult], object]] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._items: List[QuizItem] = list(items)
        self._size = size
        self._rng = rng or random.Random()
        self._on_finish = on_finish
        self._clock = clock
        self._lock = threading.Lock()
        self._result: Optional[SessionResult] = None
        self._state = self._fresh_state()

    # ── 조회 ────────────────────────────────────────────────────────────────

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def result(self) -> Optional[SessionResult]:
        """finished 이후의 완료 이벤트. 그 전에는 None."""
        return self._result

    def snapshot(self) -> SessionSnapshot:
        """현재 상태의 읽기 전용 스냅샷. 상태를 바꾸지 않는다."""
        with self._lock:
            return self._snapshot()

    def render_prompt(self) -> str:
        """현재 문제의 빈칸 템플릿을 현재 선택으로 채운 문자열."""
        with self._lock:
            current = self._current()
            if current is None:
                return ""
            return render_prompt(current.korean, self._state.selection)

    # ── 전이 ────────────────────────────────────────────────────────────────

    def start(self, name: str) -> SessionSnapshot:
        """
        login → active.

        Raises:
            StateError:     login 단계가 아님.
            EmptyNameError: 이름이 공백뿐. 상태 변화 없음.
        """
        with self._lock:
            self._require(Phase.LOGIN, "start")
            name = (name or "").strip()
            if not name:
                raise EmptyNameError()
            if not self._state.pool:
                # 빈 풀로는 시작할 수 없다 (로드 단계에서 NoDataError 로 걸러져야 함)
                self._fail("start: 출제할 문제가 없습니다.")

            self._state = self._state.model_copy(update={
                "phase": Phase.ACTIVE,
                "name": name,
                "index": 0,
                "score": 0,
                "selection": None,
                "locked": False,
                "last_outcome": None,
            })
            logger.info(f"세션 시작: {name} ({len(self._state.pool)}문제)")
            return self._snapshot()

    def select_option(self, option: str) -> AnswerOutcome:
        """
        현재 문제에 보기를 선택하고 잠근다. 점수가 바뀌는 유일한 지점.

        Raises:
            StateError:         active 단계가 아님.
            AlreadyLockedError: 이미 선택한 문제. 상태 변화 없음.
        """
        with self._lock:
            self._require(Phase.ACTIVE, "select_option")
            if self._state.locked:
                logger.debug(f"Q{self._state.index + 1}: 이미 선택됨, 무시 ({option!r})")
                raise AlreadyLockedError("This question has already been answered.")

            item = self._state.pool[self._state.index]
            correct = option == item.answer
            outcome = AnswerOutcome(
                selected=option,
                correct=correct,
                correct_answer=item.answer,
                explanation=item.explanation,
            )
            self._state = self._state.model_copy(update={
                "selection": option,
                "locked": True,
                "score": self._state.score + (1 if correct else 0),
                "last_outcome": outcome,
            })
            return outcome

    def advance(self) -> SessionSnapshot:
        """
        다음 문제로 이동하거나, 마지막 문제였으면 finished 로 전이한다.

        Raises:
            StateError: active 가 아니거나 아직 답을 고르지 않음.
        """
        with self._lock:
            self._require(Phase.ACTIVE, "advance")
            if not self._state.locked:
                self._fail("advance: 답을 고르기 전에는 넘어갈 수 없습니다.")

            next_index = self._state.index + 1
            if next_index < len(self._state.pool):
                self._state = self._state.model_copy(update={
                    "index": next_index,
                    "selection": None,
                    "locked": False,
                    "last_outcome": None,
                })
                return self._snapshot()

            finished_at = self._clock()
            self._state = self._state.model_copy(update={
                "phase": Phase.FINISHED,
                "finished_at": finished_at,
            })
            self._result = SessionResult(
                name=self._state.name,
                score=self._state.score,
                total=len(self._state.pool),
                finished_at=finished_at,
            )
            snapshot = self._snapshot()
            result = self._result

        logger.info(f"세션 종료: {result.name} {result.score}/{result.total}")
        self._emit(result)
        return snapshot

    def reset(self) -> SessionSnapshot:
        """이전 세션 데이터를 버리고 새 샘플로 login 상태로 돌아간다."""
        with self._lock:
            self._result = None
            self._state = self._fresh_state()
            return self._snapshot()

    # ── 내부 ────────────────────────────────────────────────────────────────

    def _fresh_state(self) -> SessionState:
        return SessionState(pool=sample(self._items, self._size, self._rng))

    def _current(self) -> Optional[QuizItem]:
        if self._state.phase is not Phase.ACTIVE:
            return None
        return self._state.pool[self._state.index]

    def _snapshot(self) -> SessionSnapshot:
        s = self._state
        return SessionSnapshot(
            phase=s.phase,
            name=s.name,
            index=s.index,
            total=len(s.pool),
            score=s.score,
            selection=s.selection,
            locked=s.locked,
            current=self._current(),
            outcome=s.last_outcome,
            finished_at=s.finished_at,
        )

    def _require(self, phase: Phase, operation: str) -> None:
        if self._state.phase is not phase:
            self._fail(
                f"{operation}: '{self._state.phase.value}' 단계에서는 호출할 수 없습니다 "
                f"(필요: '{phase.value}')."
            )

    def _fail(self, message: str) -> None:
        logger.error(message)
        raise StateError(message)

    def _emit(self, result: SessionResult) -> None:
        if self._on_finish is None:
            return
        try:
            self._on_finish(result)
        except Exception as e:
            # 점수는 이미 확정됨. 전송 측 오류는 기록만 한다
            logger.warning(f"on_finish 콜백 실패: {type(e).__name__}: {e}")
