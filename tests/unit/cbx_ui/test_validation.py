import pytest

from cbx_ui.tui.system.components.validation import (
    INVALID_SELECTION_MESSAGE,
    ValidationGate,
    decompose_criteria,
)
from cbx_ui.tui.system.options import CheckboxPlusOptions

pytestmark = pytest.mark.unit_ui


def _gate(**options) -> ValidationGate:
    return ValidationGate.from_options(CheckboxPlusOptions.build(source=[], **options))


def test_decompose_criteria_forms() -> None:
    message = lambda n: f"need {n}"  # noqa: E731

    assert decompose_criteria(None, message) == (None, "")
    assert decompose_criteria(2, message) == (2, "need 2")
    assert decompose_criteria((3, "custom"), message) == (3, "custom")


def test_minimum_is_checked_first() -> None:
    gate = _gate(minimum_choices=2, maximum_choices=3, validate=lambda values: "never")

    assert gate.validate(["a"]) == "You have to check at least 2 choice(s)"


def test_maximum_message_says_at_most() -> None:
    gate = _gate(maximum_choices=1)

    assert gate.validate(["a", "b"]) == "You have to check at most 1 choice(s)"
    assert gate.validate(["a"]) is True


def test_custom_bound_messages_are_used_verbatim() -> None:
    gate = _gate(minimum_choices=(1, "Pick one"), maximum_choices=(2, "Too many"))

    assert gate.validate([]) == "Pick one"
    assert gate.validate([1, 2, 3]) == "Too many"


def test_zero_bounds_are_disabled() -> None:
    gate = _gate(minimum_choices=0, maximum_choices=0)

    assert gate.validate([]) is True
    assert gate.validate(list(range(50))) is True


def test_validator_receives_values_after_bounds_pass() -> None:
    seen = []

    def validator(values):
        seen.append(values)
        return True if "red" in values else "You cannot abandon red!"

    gate = _gate(minimum_choices=1, validator=validator)

    assert gate.validate(["blue"]) == "You cannot abandon red!"
    assert gate.validate(["red", "blue"]) is True
    assert seen == [["blue"], ["red", "blue"]]


@pytest.mark.parametrize("outcome", [False, None, "", 0])
def test_falsy_validator_results_become_generic_message(outcome) -> None:
    gate = _gate(validate=lambda values: outcome)

    assert gate.validate(["a"]) == INVALID_SELECTION_MESSAGE


def test_camel_case_aliases_are_accepted() -> None:
    gate = _gate(minimumChoices=1, maximumChoices=(2, "max two"))

    assert (gate.minimum, gate.maximum, gate.maximum_message) == (1, 2, "max two")
