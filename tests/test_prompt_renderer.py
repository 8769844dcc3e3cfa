from logic_korean.services.prompt_renderer import render_prompt, split_blanks


def test_split_blanks_on_underscore_runs() -> None:
    assert split_blanks("저는 밥___ 먹어요") == ["저는 밥", " 먹어요"]
    assert split_blanks("a_b__c") == ["a", "b", "c"]
    assert split_blanks("빈칸 없음") == ["빈칸 없음"]


def test_render_prompt_placeholder_before_selection() -> None:
    assert render_prompt("저는 밥___ 먹어요") == "저는 밥? 먹어요"


def test_render_prompt_fills_every_blank_with_selection() -> None:
    assert render_prompt("___ 그리고 ___", "을") == "을 그리고 을"


def test_render_prompt_empty_template() -> None:
    assert render_prompt("", "을") == ""
