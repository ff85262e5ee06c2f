"""Selection model: checked values kept in step with the checked choices."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from cbx_ui.tui.system.models import Choice


@dataclass
class SelectionState:
    """Checked values and the choices that carry them, in check order.

    Values are compared with ``==`` (deep equality for containers and
    dataclasses), so they do not need to be hashable. ``values[i]`` always
    equals ``checked_choices[i].value``.
    """

    values: list[Any] = field(default_factory=list)
    checked_choices: list[Choice] = field(default_factory=list)

    def contains(self, value: Any) -> bool:
        return any(existing == value for existing in self.values)

    def toggle(self, choice: Choice, checked: bool | None = None) -> None:
        """Set ``choice`` checked or unchecked; flips it when ``checked`` is None.

        Any entry whose value equals ``choice.value`` is dropped first, so a
        choice rebuilt by a re-fetch replaces the stale one instead of
        duplicating it.
        """
        if checked is None:
            checked = not choice.checked

        self.values = [value for value in self.values if value != choice.value]
        self.checked_choices = [
            existing for existing in self.checked_choices if existing.value != choice.value
        ]

        choice.checked = checked
        if checked:
            self.values.append(choice.value)
            self.checked_choices.append(choice)

    def shorts(self) -> list[str]:
        return [choice.short or choice.name for choice in self.checked_choices]
