"""
services/sampler.py

세션 출제 문제 샘플링.
순수 Python 함수. 난수원은 호출자가 주입한다 (전역 random 상태 사용 안 함).
"""

import random
from typing import List, Sequence, TypeVar

T = TypeVar("T")


def sample(items: Sequence[T], n: int, rng: random.Random) -> List[T]:
    """
    items를 균등하게 섞은 뒤 앞에서 min(n, len(items))개를 반환한다.

    random.Random.shuffle 은 Fisher–Yates 교환 방식이므로 모든 순열이
    같은 확률로 나온다. 입력 시퀀스는 변경하지 않는다.

    Args:
        items: 후보 문제 리스트.
        n:     뽑을 개수 (음수는 0으로 취급).
        rng:   난수원. 테스트에서는 시드 고정 Random을 넘긴다.
    """
    pool = list(items)
    rng.shuffle(pool)
    return pool[: max(0, n)]
