"""
services/reporter.py

최종 점수 전송 서비스 (Google Apps Script 수집기).
Public API:
  - report(result, url, client) -> bool          : 동기 전송 (실패는 기록 후 False)
  - dispatch(result, url, client) -> Thread|None : 데몬 스레드로 report 실행, 즉시 반환

수집기 응답은 확인하지 않는다. 어떤 실패도 호출자에게 전파하지 않는다.
"""

import logging
import threading
from typing import Optional

import httpx

from config import REPORT_TIMEOUT, SCORE_API_URL
from logic_korean.models.session_state import SessionResult

logger = logging.getLogger(__name__)


def report(
    result: SessionResult,
    url: str = SCORE_API_URL,
    client: Optional[httpx.Client] = None,
    timeout: float = REPORT_TIMEOUT,
) -> bool:
    """
    {name, score, date} JSON을 POST 한다.

    Returns:
        요청이 예외 없이 끝났으면 True. 응답 본문/상태 코드는 보지 않는다.
    """
    if not url:
        logger.info("report: SCORE_API_URL 미설정, 전송 생략")
        return False

    payload = result.to_payload()
    try:
        if client is not None:
            client.post(url, json=payload, timeout=timeout)
        else:
            httpx.post(url, json=payload, timeout=timeout)
    except Exception as e:
        # 잘못된 URL 포함, 어떤 전송 실패도 호출자에게 올리지 않는다
        logger.warning(f"report: 점수 전송 실패 ({result.name}) - {type(e).__name__}: {e}")
        return False

    logger.info(f"report: 점수 전송 완료 ({result.name}, {result.score}/{result.total})")
    return True


def dispatch(
    result: SessionResult,
    url: str = SCORE_API_URL,
    client: Optional[httpx.Client] = None,
) -> Optional[threading.Thread]:
    """report 를 백그라운드 스레드로 실행하고 기다리지 않는다."""
    if not url:
        logger.info("dispatch: SCORE_API_URL 미설정, 전송 생략")
        return None

    t = threading.Thread(
        target=report,
        args=(result,),
        kwargs={"url": url, "client": client},
        name=f"score-report-{result.name}",
        daemon=True,
    )
    t.start()
    return t
