"""
errors.py

퀴즈 도메인 예외 계층.

  QuizError
  ├── LoadError            문제 데이터 로드/파싱 실패 (종료 상태, 재시도 없음)
  │   └── NoDataError      유효한 문제가 0개
  ├── EmptyNameError       빈 이름으로 로그인 시도 (재입력 요청)
  └── StateError           잘못된 단계에서 호출된 연산 (프로그래머 오류)
      └── AlreadyLockedError  이미 답한 문제에 재선택 (무시 대상)
"""


class QuizError(Exception):
    """퀴즈 도메인 예외의 공통 부모."""


class LoadError(QuizError):
    """문제 데이터를 가져오거나 파싱하지 못함."""


class NoDataError(LoadError):
    """정규화 후 남은 문제가 없음."""

    def __init__(self, message: str = "No quiz data found in the spreadsheet."):
        super().__init__(message)


class EmptyNameError(QuizError, ValueError):
    """이름이 비어 있음."""

    def __init__(self, message: str = "Please enter your name first!"):
        super().__init__(message)


class StateError(QuizError, RuntimeError):
    """현재 단계에서 허용되지 않는 연산."""


class AlreadyLockedError(StateError):
    """현재 문제는 이미 답이 선택되어 잠겨 있음."""
