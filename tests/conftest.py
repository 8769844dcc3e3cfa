"""Test configuration helpers."""

from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from logic_korean.models.question_model import QuizItem  # noqa: E402


def make_item(idx: int, answer: str = "을", options: list[str] | None = None) -> QuizItem:
    return QuizItem(
        id=idx,
        category="Particles",
        question=f"Choose the correct particle ({idx})",
        korean="저는 사과___ 먹어요",
        answer=answer,
        options=options or ["을", "를", "이", "가"],
        explanation="받침이 있으면 '을'을 씁니다.",
    )


@pytest.fixture
def rows() -> list[dict]:
    return [
        {
            "category": "Particles",
            "question": "Object particle",
            "korean": "저는 밥___ 먹어요",
            "answer": "을",
            "options": "을, 를, 이, 가",
            "explanation": "밥 has a final consonant.",
        },
        {
            "category": "Particles",
            "question": "Subject particle",
            "korean": "날씨___ 좋아요",
            "answer": "가",
            "options": "이,가",
            "explanation": "날씨 ends in a vowel.",
        },
        {
            "category": "Verbs",
            "question": "Past tense",
            "korean": "어제 학교에 ___",
            "answer": "갔어요",
            "options": "가요, 갔어요, 갈 거예요",
            "explanation": "어제 means yesterday.",
        },
        {
            "category": "Verbs",
            "question": "Future tense",
            "korean": "내일 영화를 ___",
            "answer": "볼 거예요",
            "options": "봐요, 봤어요, 볼 거예요",
            "explanation": "내일 means tomorrow.",
        },
    ]


@pytest.fixture
def items() -> list[QuizItem]:
    return [make_item(i) for i in range(1, 6)]


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
