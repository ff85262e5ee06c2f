import pytest

from cbx_ui.tui.system.components import navigation
from cbx_ui.tui.system.components.choices import ChoiceSet
from cbx_ui.tui.system.components.state import PromptState
from cbx_ui.tui.system.models import Separator

pytestmark = pytest.mark.unit_ui


def _state(items) -> PromptState:
    return PromptState(choices=ChoiceSet(items))


def _checked(state: PromptState) -> list:
    return [c.value for c in state.choices.choices() if c.checked]


def _assert_in_step(state: PromptState) -> None:
    assert [c.value for c in state.selection.checked_choices] == state.selection.values
    assert sorted(state.selection.values) == sorted(_checked(state))


def test_pointer_wraps_in_both_directions() -> None:
    state = _state(["a", Separator(), "b", "c"])

    navigation.move_pointer(state, -1)
    assert state.pointer == 2
    navigation.move_pointer(state, 1)
    assert state.pointer == 0
    navigation.move_pointer(state, 1)
    navigation.move_pointer(state, 1)
    assert state.choices.get_choice(state.pointer).value == "c"


def test_pointer_stays_at_zero_on_empty_list() -> None:
    state = _state([])
    state.pointer = 3

    navigation.move_pointer(state, 1)

    assert state.pointer == 0
    assert navigation.toggle_current(state) is False
    assert state.selection.values == []


def test_pointer_skips_disabled_choices() -> None:
    state = _state(["a", {"name": "b", "disabled": True}, "c"])

    navigation.move_pointer(state, 1)

    assert state.choices.get_choice(state.pointer).value == "c"


def test_jump_to_number_moves_and_toggles() -> None:
    state = _state(["a", "b", "c"])

    assert navigation.jump_to_number(state, 2) is True
    assert state.pointer == 1
    assert state.selection.values == ["b"]

    assert navigation.jump_to_number(state, 2) is True
    assert state.selection.values == []


@pytest.mark.parametrize("number", [0, 4, 9])
def test_jump_out_of_range_is_ignored(number: int) -> None:
    state = _state(["a", "b", "c"])
    state.pointer = 1

    assert navigation.jump_to_number(state, number) is False
    assert state.pointer == 1
    assert state.selection.values == []


def test_toggle_all_checks_then_clears() -> None:
    state = _state(["a", "b", {"name": "c", "disabled": "sold out"}])
    navigation.toggle_current(state)

    navigation.toggle_all(state)
    assert sorted(state.selection.values) == ["a", "b"]
    _assert_in_step(state)

    navigation.toggle_all(state)
    assert state.selection.values == []
    _assert_in_step(state)


def test_invert_flips_each_selectable_choice() -> None:
    state = _state(["a", "b", "c", {"name": "d", "disabled": True}])
    navigation.jump_to_number(state, 2)

    navigation.invert_selection(state)

    assert sorted(state.selection.values) == ["a", "c"]
    assert state.choices.choices()[3].checked is False
    _assert_in_step(state)


def test_selection_outside_the_visible_list_is_kept() -> None:
    state = _state(["a", "b"])
    navigation.toggle_all(state)
    state.choices = ChoiceSet(["c"])

    navigation.invert_selection(state)

    assert state.selection.values == ["a", "b", "c"]
