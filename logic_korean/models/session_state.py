"""
models/session_state.py

퀴즈 세션 상태 모델.
Pydantic BaseModel 기반. 상태 전이는 services/quiz_service.py 가 담당하고
이 모듈에는 데이터 구조만 둔다. UI 코드 없음.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field

from logic_korean.models.question_model import QuizItem


class Phase(str, Enum):
    """세션 단계. login → active → finished 순서로만 진행한다."""

    LOGIN = "login"
    ACTIVE = "active"
    FINISHED = "finished"


class AnswerOutcome(BaseModel):
    """보기 선택 직후 공개되는 채점 결과."""

    selected: str
    correct: bool
    correct_answer: str
    explanation: str


class SessionState(BaseModel):
    """
    한 사용자의 퀴즈 세션 전체 상태.

    Attributes:
        phase:        현재 단계.
        name:         로그인한 사용자 이름 (login 단계에서는 빈 문자열).
        pool:         이번 세션에 출제될 문제 목록. 샘플링 후 고정.
        index:        현재 문제 인덱스 (0-based). active 동안 0 <= index < len(pool).
        score:        맞힌 문제 수. 세션 안에서 감소하지 않는다.
        selection:    현재 문제에서 고른 보기. 다음 문제로 넘어가면 None.
        locked:       현재 문제에 답을 골랐는지 여부. True이면 재선택 불가.
        last_outcome: 현재 문제의 채점 결과 (해설 패널 표시용).
        finished_at:  finished 전이 시각.
    """

    phase: Phase = Phase.LOGIN
    name: str = ""
    pool: List[QuizItem] = Field(default_factory=list)
    index: int = Field(default=0, ge=0)
    score: int = Field(default=0, ge=0)
    selection: Optional[str] = None
    locked: bool = False
    last_outcome: Optional[AnswerOutcome] = None
    finished_at: Optional[datetime] = None


class SessionSnapshot(BaseModel):
    """화면 렌더링용 읽기 전용 스냅샷."""

    phase: Phase
    name: str
    index: int
    total: int
    score: int
    selection: Optional[str] = None
    locked: bool = False
    current: Optional[QuizItem] = None
    outcome: Optional[AnswerOutcome] = None
    finished_at: Optional[datetime] = None

    model_config = {"frozen": True}

    @computed_field
    @property
    def question_number(self) -> int:
        """1-based 문제 번호 (표시용)."""
        return min(self.index + 1, self.total)

    @computed_field
    @property
    def progress(self) -> float:
        if not self.total:
            return 0.0
        if self.phase is Phase.FINISHED:
            return 1.0
        return self.index / self.total


class SessionResult(BaseModel):
    """finished 전이 시 한 번 만들어지는 완료 이벤트 (점수 수집기로 전달)."""

    name: str
    score: int
    total: int
    finished_at: datetime

    def to_payload(self) -> dict:
        """수집기 전송 형식: {name, score, date(ISO-8601)}"""
        return {
            "name": self.name,
            "score": self.score,
            "date": self.finished_at.isoformat(),
        }
