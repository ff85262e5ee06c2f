"""Pointer movement and toggling over the selectable choices."""

from __future__ import annotations

from cbx_ui.tui.system.components.state import PromptState


def move_pointer(state: PromptState, delta: int) -> None:
    length = state.choices.real_length
    if length == 0:
        state.pointer = 0
        return
    state.pointer = (state.pointer + delta) % length


def toggle_current(state: PromptState) -> bool:
    """Toggle the choice under the pointer; False when the list is empty."""
    choice = state.choices.get_choice(state.pointer)
    if choice is None:
        return False
    state.selection.toggle(choice)
    return True


def jump_to_number(state: PromptState, number: int) -> bool:
    """Move to the 1-based ``number`` and toggle it, if it is in range."""
    if number < 1 or number > state.choices.real_length:
        return False
    state.pointer = number - 1
    return toggle_current(state)


def toggle_all(state: PromptState) -> None:
    # Check everything unless everything is already checked.
    selectable = state.choices.selectable()
    should_check = any(not choice.checked for choice in selectable)
    for choice in selectable:
        state.selection.toggle(choice, should_check)


def invert_selection(state: PromptState) -> None:
    for choice in state.choices.selectable():
        state.selection.toggle(choice, not choice.checked)
