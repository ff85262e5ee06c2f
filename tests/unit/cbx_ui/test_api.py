import asyncio

import pytest

from cbx_common.errors import ConfigurationError, PromptValidationError
from cbx_ui import api
from cbx_ui.api import checkbox_plus, checkbox_plus_sync, prompt_questions

pytestmark = pytest.mark.unit_ui


def test_checkbox_plus_headless_returns_defaults() -> None:
    values = asyncio.run(
        checkbox_plus("Pick", ["a", "b"], headless=True, default=["b"])
    )

    assert values == ["b"]


def test_checkbox_plus_sync_passes_options() -> None:
    with pytest.raises(PromptValidationError, match="Need two"):
        checkbox_plus_sync("Pick", ["a", "b"], headless=True, minimum_choices=(2, "Need two"))


def test_missing_tty_falls_back_to_headless(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(api, "is_tty_available", lambda: False)

    assert checkbox_plus_sync("Pick", ["a"], default="a") == ["a"]


def test_questions_see_previous_answers() -> None:
    seen = []

    def second_source(answers, query):
        seen.append(dict(answers))
        return [f"{value}-x" for value in answers["first"]]

    questions = [
        {"type": "checkbox-plus", "name": "first", "source": ["a", "b"], "default": ["a", "b"]},
        {"name": "second", "source": second_source, "default": ["b-x"]},
    ]

    answers = asyncio.run(prompt_questions(questions, {"seed": 1}, headless=True))

    assert answers == {"seed": 1, "first": ["a", "b"], "second": ["b-x"]}
    assert seen == [{"seed": 1, "first": ["a", "b"]}]


def test_unsupported_question_type() -> None:
    with pytest.raises(ConfigurationError, match="Unsupported question type: list"):
        asyncio.run(prompt_questions([{"type": "list", "name": "x", "source": []}], headless=True))


def test_question_without_name() -> None:
    with pytest.raises(ConfigurationError, match="needs a `name`"):
        asyncio.run(prompt_questions([{"source": ["a"]}], headless=True))
