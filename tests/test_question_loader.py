from __future__ import annotations

import httpx
import pytest

from logic_korean.errors import LoadError, NoDataError
from logic_korean.models.question_model import QuizItem
from logic_korean.services.question_loader import (
    fetch_csv,
    load_questions,
    normalize,
    parse_csv,
    split_options,
)
from logic_korean.services.sampler import sample

CSV_TEXT = (
    "category,question,korean,answer,options,explanation\n"
    'Particles,Object particle,저는 밥___ 먹어요,을,"을, 를, 이, 가",밥 has a final consonant.\n'
    "\n"
    'Particles,Subject particle,날씨___ 좋아요,가,"이,가",날씨 ends in a vowel.\n'
    'Broken,No answer,___,,"a,b",nothing\n'
)


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_split_options_trims_and_drops_empty() -> None:
    assert split_options(" 을, 를 ,이 ") == ["을", "를", "이"]
    assert split_options("") == []
    assert split_options(None) == []


def test_normalize_drops_row_missing_answer(rows: list[dict]) -> None:
    bad = dict(rows[0], answer="")
    result = normalize(rows + [bad])

    assert len(result) == 4
    assert [item.question for item in result] == [row["question"] for row in rows]


def test_normalize_assigns_ids_after_filtering(rows: list[dict]) -> None:
    bad = dict(rows[0], explanation="")
    result = normalize([bad] + rows)

    assert [item.id for item in result] == [1, 2, 3, 4]
    assert result[0].question == "Object particle"


def test_normalize_splits_options(rows: list[dict]) -> None:
    item = normalize(rows)[0]
    assert item.options == ("을", "를", "이", "가")
    assert item.korean == "저는 밥___ 먹어요"


@pytest.mark.parametrize(
    "override",
    [
        {"question": ""},
        {"answer": ""},
        {"explanation": ""},
        {"options": ""},
        {"answer": "는"},          # 보기에 없는 정답
        {"question": None},
    ],
)
def test_normalize_rejects_invalid_rows(rows: list[dict], override: dict) -> None:
    bad = dict(rows[0], **override)
    result = normalize([bad, rows[1]])

    assert len(result) == 1
    assert result[0].question == rows[1]["question"]


def test_normalize_output_never_longer_than_input(rows: list[dict]) -> None:
    mixed = rows + [{"question": "x"}, {}]
    assert len(normalize(mixed)) <= len(mixed)


def test_normalize_raises_no_data_when_nothing_survives() -> None:
    with pytest.raises(NoDataError):
        normalize([{"question": "q", "answer": "", "options": "a,b", "explanation": "e"}])

    with pytest.raises(NoDataError):
        normalize([])


def test_normalize_does_not_mutate_rows(rows: list[dict]) -> None:
    before = [dict(r) for r in rows]
    normalize(rows)
    assert rows == before


def test_parse_csv_skips_empty_lines() -> None:
    parsed = parse_csv(CSV_TEXT)

    assert len(parsed) == 3
    assert parsed[0]["options"] == "을, 를, 이, 가"
    assert set(parsed[0]) == {"category", "question", "korean", "answer", "options", "explanation"}


def test_parse_csv_missing_columns_become_none() -> None:
    parsed = parse_csv("question,answer\nq1,a\n")
    assert parsed[0]["explanation"] is None
    assert parsed[0]["question"] == "q1"


def test_fetch_csv_raises_load_error_on_http_error() -> None:
    client = _client(lambda request: httpx.Response(500, text="boom"))
    with pytest.raises(LoadError):
        fetch_csv("https://sheet.test/csv", client=client)


def test_fetch_csv_raises_load_error_on_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("offline", request=request)

    with pytest.raises(LoadError):
        fetch_csv("https://sheet.test/csv", client=_client(handler))


def test_load_questions_end_to_end() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, text=CSV_TEXT)

    items = load_questions("https://sheet.test/csv", client=_client(handler))

    assert seen == ["https://sheet.test/csv"]
    assert [type(i) for i in items] == [QuizItem, QuizItem]
    assert [i.id for i in items] == [1, 2]
    assert items[1].answer == "가"


def test_load_questions_no_data() -> None:
    client = _client(lambda request: httpx.Response(200, text="category,question\n"))
    with pytest.raises(NoDataError):
        load_questions("https://sheet.test/csv", client=client)


def test_four_valid_rows_sample_to_all_four(rows: list[dict], rng) -> None:
    items = normalize(rows + [dict(rows[2], answer=None)])
    assert len(items) == 4

    picked = sample(items, 20, rng)
    assert sorted(i.id for i in picked) == [1, 2, 3, 4]
