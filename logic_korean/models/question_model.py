import re
from typing import Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from config import BLANK_PATTERN


class QuizItem(BaseModel):
    """
    빈칸 채우기 객관식 문제 모델
    Pydantic v2 적용
    """
    id: int = Field(
        ...,
        ge=1,
        description="문제 번호 (정규화 시 부여되는 1-based 순번, 원본 데이터와 무관)"
    )
    category: str = Field(
        "",
        description="분류 라벨 (자유 텍스트)"
    )
    question: str = Field(
        ...,
        min_length=1,
        description="발문"
    )
    korean: str = Field(
        "",
        description="빈칸 표시(___)가 들어간 한국어 문장 템플릿"
    )
    answer: str = Field(
        ...,
        min_length=1,
        description="정답 (options 중 하나와 정확히 일치)"
    )
    options: Tuple[str, ...] = Field(
        ...,
        description="보기 리스트"
    )
    explanation: str = Field(
        ...,
        min_length=1,
        description="해설"
    )

    model_config = {"frozen": True}

    @field_validator('options')
    @classmethod
    def validate_options_not_empty(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """
        검증 로직 1: 보기는 최소 1개 이상이어야 한다.
        """
        if not v:
            raise ValueError("보기(options)가 비어 있습니다.")
        return v

    @model_validator(mode='after')
    def validate_answer_in_options(self) -> 'QuizItem':
        """
        검증 로직 2: 정답은 반드시 보기 리스트 안에 있어야 한다.
        """
        if self.answer not in self.options:
            raise ValueError(f"정답('{self.answer}')이 보기 리스트({self.options})에 존재하지 않습니다.")
        return self

    @property
    def blank_count(self) -> int:
        """템플릿 안의 빈칸 개수. 채점과는 무관하다."""
        return len(re.findall(BLANK_PATTERN, self.korean))
