"""
api/session.py: 쿠키 세션 ID ↔ QuizSession 보관소

브라우저마다 세션 ID 하나, 세션 ID마다 QuizSession 하나.
마지막 접근 후 SESSION_TTL 이 지나면 만료된다. 프로세스 메모리에만 존재.
"""

import threading
import time
import uuid
from typing import Callable, Optional

from logic_korean.services.quiz_service import QuizSession

SESSION_TTL = 3600  # 1시간

_lock = threading.Lock()
_quizzes: dict[str, Optional[QuizSession]] = {}   # 첫 퀴즈 요청 전에는 None
_last_seen: dict[str, float] = {}


def _expired(sid: str, now: float) -> bool:
    return now - _last_seen[sid] > SESSION_TTL


def _drop(sid: str) -> None:
    _quizzes.pop(sid, None)
    _last_seen.pop(sid, None)


def create_session() -> str:
    """퀴즈 없이 세션 ID만 발급."""
    sid = uuid.uuid4().hex
    with _lock:
        _quizzes[sid] = None
        _last_seen[sid] = time.time()
    return sid


def is_active(sid: str) -> bool:
    """세션이 존재하고 만료되지 않았으면 True (접근 시각 갱신)."""
    now = time.time()
    with _lock:
        if sid not in _last_seen:
            return False
        if _expired(sid, now):
            _drop(sid)
            return False
        _last_seen[sid] = now
        return True


def get_quiz(sid: str) -> Optional[QuizSession]:
    with _lock:
        return _quizzes.get(sid)


def get_or_create_quiz(sid: str, factory: Callable[[], QuizSession]) -> QuizSession:
    """세션의 QuizSession 을 반환. 아직 없으면 factory 로 만들어 보관한다."""
    with _lock:
        quiz = _quizzes.get(sid)
        if quiz is None:
            quiz = factory()
            _quizzes[sid] = quiz
        _last_seen[sid] = time.time()
        return quiz


def cleanup_expired() -> int:
    """만료된 세션을 정리. 제거된 수 반환."""
    now = time.time()
    with _lock:
        expired = [sid for sid in _last_seen if _expired(sid, now)]
        for sid in expired:
            _drop(sid)
    return len(expired)


def clear() -> None:
    """모든 세션 삭제 (테스트용)."""
    with _lock:
        _quizzes.clear()
        _last_seen.clear()
