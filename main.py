"""
main.py: Logic Korean 퀴즈 서버 실행

uvicorn 을 메인 스레드에서 돌리고, 포트가 열리면 브라우저를 띄운다.
"""

import logging
import socket
import sys
import threading
import time
import webbrowser

import uvicorn

from config import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_TIMEOUT, LOG_FILE
from api.app import create_app

logger = logging.getLogger(__name__)


def _setup_logging() -> None:
    handlers = [logging.StreamHandler(sys.stdout)]
    try:
        handlers.append(logging.FileHandler(LOG_FILE, encoding='utf-8'))
    except OSError:
        pass  # 로그 파일을 열 수 없으면 콘솔만 사용
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
        handlers=handlers,
    )


def _pick_port(preferred: int = DEFAULT_PORT) -> int:
    """preferred 가 사용 중이면 OS 가 고른 빈 포트."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        try:
            s.bind((DEFAULT_HOST, preferred))
        except OSError:
            s.bind((DEFAULT_HOST, 0))
        return s.getsockname()[1]


def _open_browser_when_ready(url: str, port: int) -> None:
    # 문제 데이터 로드(lifespan)가 끝나야 포트가 열린다
    deadline = time.time() + DEFAULT_TIMEOUT
    while time.time() < deadline:
        try:
            with socket.create_connection((DEFAULT_HOST, port), timeout=0.5):
                logger.info(f"서버 준비 완료: {url}")
                webbrowser.open(url)
                return
        except OSError:
            time.sleep(0.2)
    logger.error("서버 시작 제한 시간을 초과했습니다. 브라우저는 열지 않습니다.")


def main() -> None:
    _setup_logging()
    port = _pick_port()
    url = f"http://{DEFAULT_HOST}:{port}"
    logger.info(f"=== Logic Korean Quiz: {url} ===")

    threading.Thread(
        target=_open_browser_when_ready, args=(url, port), daemon=True,
    ).start()
    uvicorn.run(create_app(), host=DEFAULT_HOST, port=port, log_level="warning")


if __name__ == "__main__":
    main()
