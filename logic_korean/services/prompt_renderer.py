"""
services/prompt_renderer.py

빈칸 템플릿(korean 필드) 표시용 헬퍼.
화면 표시 전용이며 채점에는 쓰이지 않는다 (채점은 selection == answer 비교만).
"""

import re
from typing import List, Optional

from config import BLANK_PATTERN

PLACEHOLDER = "?"

_BLANK_RE = re.compile(BLANK_PATTERN)


def split_blanks(template: str) -> List[str]:
    """'저는 ___ 먹어요' → ['저는 ', ' 먹어요']. 빈칸이 없으면 원문 한 조각."""
    return _BLANK_RE.split(template or "")


def render_prompt(
    template: str,
    selection: Optional[str] = None,
    placeholder: str = PLACEHOLDER,
) -> str:
    """
    모든 빈칸을 현재 선택한 보기로 채운 문자열을 반환한다.
    아직 고르지 않았으면 placeholder('?')로 채운다.
    """
    fill = selection if selection else placeholder
    return fill.join(split_blanks(template))
