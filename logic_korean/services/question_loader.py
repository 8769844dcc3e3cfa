"""
services/question_loader.py

문제 데이터 로드 서비스 (Google Sheets CSV).
Public API:
  - load_questions(url, client) -> List[QuizItem] : 가져오기 → 파싱 → 정규화
  - fetch_csv(url, client) -> str                  : HTTP GET
  - parse_csv(text) -> List[dict]                  : 헤더 기반 행 매핑
  - normalize(rows) -> List[QuizItem]              : 검증 + 정규화 (순수 함수)

설계 원칙:
- 불완전한 행은 조용히 버리고, 남은 행의 순서는 입력 순서 그대로 유지
- id는 걸러진 결과 기준 1-based 순번으로 부여
- 로드 실패는 LoadError, 유효 문제 0개는 NoDataError (둘 다 재시도 없음)
"""

import csv
import io
import logging
from typing import Iterable, List, Mapping, Optional

import httpx
from pydantic import ValidationError

from config import CSV_FIELDS, FETCH_TIMEOUT, QUIZ_SHEET_URL
from logic_korean.errors import LoadError, NoDataError
from logic_korean.models.question_model import QuizItem

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════════
# Public API
# ══════════════════════════════════════════════════════════════════════════════

def load_questions(
    url: str = QUIZ_SHEET_URL,
    client: Optional[httpx.Client] = None,
) -> List[QuizItem]:
    """
    시트 URL → QuizItem 리스트.

    Raises:
        LoadError:   네트워크/HTTP/CSV 파싱 실패.
        NoDataError: 유효한 문제가 하나도 없음.
    """
    text = fetch_csv(url, client=client)
    rows = parse_csv(text)
    items = normalize(rows)
    logger.info(f"load_questions: {len(rows)}행 중 {len(items)}개 문제 로드 완료")
    return items


def fetch_csv(
    url: str,
    client: Optional[httpx.Client] = None,
    timeout: float = FETCH_TIMEOUT,
) -> str:
    """URL에서 CSV 본문을 가져온다. 실패 시 LoadError."""
    logger.info(f"fetch_csv: {url}")
    try:
        if client is not None:
            response = client.get(url, timeout=timeout)
        else:
            response = httpx.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.error(f"fetch_csv: HTTP {e.response.status_code}")
        raise LoadError("Failed to load quiz data from Google Sheets.") from e
    except httpx.HTTPError as e:
        logger.error(f"fetch_csv: 요청 실패 - {type(e).__name__}: {e}")
        raise LoadError("Failed to load quiz data from Google Sheets.") from e
    return response.text


def parse_csv(text: str) -> List[dict]:
    """
    헤더 행 + 데이터 행 CSV → dict 리스트.

    빈 줄은 건너뛴다. 인식하는 헤더는 CSV_FIELDS 이며 나머지 열은 무시한다.
    """
    try:
        reader = csv.DictReader(io.StringIO(text))
        rows = []
        for raw in reader:
            if not any((v or "").strip() for v in raw.values() if isinstance(v, str)):
                continue
            rows.append({k: raw.get(k) for k in CSV_FIELDS})
    except csv.Error as e:
        logger.error(f"parse_csv: CSV 파싱 실패 - {e}")
        raise LoadError("Failed to parse quiz data.") from e
    return rows


def normalize(rows: Iterable[Mapping[str, object]]) -> List[QuizItem]:
    """
    원시 행 → 검증된 QuizItem 리스트.

    - options 필드는 쉼표로 나누고 각 항목을 trim (빈 필드 → 빈 리스트 → 탈락)
    - 나머지 필드는 그대로 복사
    - id는 출력 리스트 기준 1-based 위치

    Raises:
        NoDataError: 살아남은 행이 없음.
    """
    items: List[QuizItem] = []
    dropped = 0

    for idx, row in enumerate(rows):
        try:
            item = QuizItem(
                id=len(items) + 1,
                category=_text(row.get("category")),
                question=_text(row.get("question")),
                korean=_text(row.get("korean")),
                answer=_text(row.get("answer")),
                options=split_options(row.get("options")),
                explanation=_text(row.get("explanation")),
            )
        except ValidationError as e:
            dropped += 1
            logger.debug(f"row[{idx}]: QuizItem 생성 실패, {e.error_count()}개 오류")
            continue
        items.append(item)

    if dropped:
        logger.warning(f"normalize: 불완전한 행 {dropped}개 제외")
    if not items:
        raise NoDataError()
    return items


def split_options(raw: object) -> List[str]:
    """'a, b ,c' → ['a', 'b', 'c']. 빈 값은 빈 리스트."""
    if not raw:
        return []
    return [opt.strip() for opt in str(raw).split(",") if opt.strip()]


# ══════════════════════════════════════════════════════════════════════════════
# 내부 헬퍼
# ══════════════════════════════════════════════════════════════════════════════

def _text(value: object) -> str:
    if value is None:
        return ""
    return str(value)
