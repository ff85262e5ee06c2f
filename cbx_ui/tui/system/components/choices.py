"""Ordered choice registry rebuilt from every source result."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from cbx_ui.tui.system.models import Choice, Separator

ChoiceEntry = Choice | Separator


class ChoiceSet:
    """An ordered list of choices and separators.

    Pointer positions address only the selectable entries (not separators and
    not disabled choices); ``real_length`` counts them.
    """

    def __init__(self, raw_items: Iterable[Any] | None = None) -> None:
        self._entries: list[ChoiceEntry] = [
            Choice.from_raw(raw) for raw in (raw_items or ())
        ]
        self._selectable: list[Choice] = [
            entry for entry in self._entries if isinstance(entry, Choice) and entry.is_selectable
        ]

    def __iter__(self) -> Iterator[ChoiceEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[ChoiceEntry, ...]:
        return tuple(self._entries)

    @property
    def real_length(self) -> int:
        return len(self._selectable)

    def choices(self) -> list[Choice]:
        """Return every non-separator entry, disabled ones included."""

        return [entry for entry in self._entries if isinstance(entry, Choice)]

    def selectable(self) -> list[Choice]:
        return list(self._selectable)

    def get_choice(self, pointer: int) -> Choice | None:
        if pointer < 0 or pointer >= len(self._selectable):
            return None
        return self._selectable[pointer]
