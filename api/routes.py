"""
api/routes.py: FastAPI 엔드포인트

화면은 스냅샷(/api/state)만 읽고, 전이는 start / select / next / reset 으로만 요청한다.
"""

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

import config
import api.session as session

from logic_korean.errors import AlreadyLockedError, EmptyNameError, StateError
from logic_korean.models.session_state import SessionSnapshot
from logic_korean.services.prompt_renderer import render_prompt
from logic_korean.services.quiz_service import QuizSession

router = APIRouter()

# ── Pydantic request bodies ──────────────────────────────────────────────────

class StartBody(BaseModel):
    name: str

class SelectBody(BaseModel):
    option: str


# ── 헬퍼 ─────────────────────────────────────────────────────────────────────

def _snapshot_to_dict(snap: SessionSnapshot) -> dict:
    d = snap.model_dump(mode="json")
    current = d.get("current")
    if current is not None:
        # 답을 고르기 전에는 정답/해설을 내려보내지 않음
        if not snap.locked:
            current.pop("answer", None)
            current.pop("explanation", None)
        d["prompt"] = render_prompt(snap.current.korean, snap.selection)
    else:
        d["prompt"] = ""
    return d


def _get_quiz(request: Request) -> QuizSession:
    state = request.app.state
    if state.load_error:
        raise HTTPException(status_code=503, detail=state.load_error)

    return session.get_or_create_quiz(
        request.state.session_id,
        lambda: QuizSession(
            state.questions,
            size=config.QUESTIONS_PER_SESSION,
            on_finish=state.on_finish,
        ),
    )


# ── 엔드포인트 ───────────────────────────────────────────────────────────────

@router.get("/api/status")
async def status(request: Request):
    state = request.app.state
    return {
        "loaded": state.load_error is None,
        "error": state.load_error,
        "question_count": len(state.questions),
        "questions_per_session": min(config.QUESTIONS_PER_SESSION, len(state.questions)),
    }


@router.post("/api/start")
async def start(body: StartBody, request: Request):
    quiz = _get_quiz(request)
    try:
        snap = quiz.start(body.name)
    except EmptyNameError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _snapshot_to_dict(snap)


@router.get("/api/state")
async def get_state(request: Request):
    return _snapshot_to_dict(_get_quiz(request).snapshot())


@router.post("/api/select")
async def select(body: SelectBody, request: Request):
    quiz = _get_quiz(request)
    ignored = False
    try:
        quiz.select_option(body.option)
    except AlreadyLockedError:
        # 중복 클릭은 무시하고 현재 상태를 그대로 돌려준다
        ignored = True
    except StateError as e:
        raise HTTPException(status_code=409, detail=str(e))

    d = _snapshot_to_dict(quiz.snapshot())
    d["ignored"] = ignored
    return d


@router.post("/api/next")
async def next_question(request: Request):
    quiz = _get_quiz(request)
    try:
        snap = quiz.advance()
    except StateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _snapshot_to_dict(snap)


@router.post("/api/reset")
async def reset(request: Request):
    return _snapshot_to_dict(_get_quiz(request).reset())
