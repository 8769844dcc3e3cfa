"""
api/app.py: FastAPI 앱 인스턴스 + 세션 미들웨어 + static 파일 서빙

문제 데이터는 앱 기동 시 한 번만 로드한다. 실패하면 오류를 app.state 에 기록하고
모든 퀴즈 API 가 503 으로 응답한다 (자동 재시도 없음).
"""

import asyncio
import logging
import os
import threading
from contextlib import asynccontextmanager
from typing import Callable, List

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse

from config import STATIC_DIR
from api.routes import router
import api.session as session
from logic_korean.errors import LoadError
from logic_korean.models.question_model import QuizItem
from logic_korean.services.question_loader import load_questions
from logic_korean.services.reporter import dispatch

SESSION_COOKIE = "lk_session"

logger = logging.getLogger(__name__)

CLEANUP_INTERVAL = 300  # 만료 세션 정리 주기 (초)
CLEANUP_THREAD_NAME = "session-cleanup"


def _cleanup_loop(stop: threading.Event) -> None:
    while not stop.wait(CLEANUP_INTERVAL):
        removed = session.cleanup_expired()
        if removed:
            logger.info(f"만료 세션 {removed}개 정리")


def create_app(
    loader: Callable[[], List[QuizItem]] = load_questions,
    on_finish: Callable = dispatch,
) -> FastAPI:

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.questions = []
        app.state.load_error = None
        try:
            app.state.questions = await asyncio.to_thread(loader)
        except LoadError as e:
            logger.error(f"문제 데이터 로드 실패: {e}")
            app.state.load_error = str(e)

        stop = threading.Event()
        cleaner = threading.Thread(
            target=_cleanup_loop, args=(stop,), name=CLEANUP_THREAD_NAME, daemon=True,
        )
        cleaner.start()
        try:
            yield
        finally:
            stop.set()
            cleaner.join(timeout=5)

    app = FastAPI(title="Logic Korean", docs_url=None, redoc_url=None, lifespan=lifespan)
    app.state.questions = []
    app.state.load_error = None
    app.state.on_finish = on_finish

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 세션 미들웨어: 쿠키에서 세션 ID를 읽고, 없으면 새로 발급
    @app.middleware("http")
    async def session_middleware(request: Request, call_next):
        sid = request.cookies.get(SESSION_COOKIE)
        if not sid or not session.is_active(sid):
            sid = session.create_session()

        request.state.session_id = sid
        response: Response = await call_next(request)
        response.set_cookie(
            key=SESSION_COOKIE,
            value=sid,
            httponly=True,
            samesite="lax",
            max_age=session.SESSION_TTL,
        )
        return response

    app.include_router(router)

    # static 파일 마운트
    if os.path.isdir(STATIC_DIR):
        app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    # 루트 → index.html
    @app.get("/")
    async def serve_index():
        index_path = os.path.join(STATIC_DIR, "index.html")
        if os.path.exists(index_path):
            return FileResponse(index_path)
        return {"error": "index.html not found"}

    return app
