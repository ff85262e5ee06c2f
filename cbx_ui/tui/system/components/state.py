from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from cbx_ui.tui.system.components.choices import ChoiceSet
from cbx_ui.tui.system.components.selection import SelectionState
from cbx_ui.tui.system.models import PromptStatus


@dataclass
class QueryState:
    last_query: str | None = None
    generation: int = 0  # id of the most recently issued fetch
    searching: bool = False


@dataclass
class PromptState:
    """All mutable prompt state, owned by one prompt instance.

    ``selection`` survives re-fetches; ``choices`` is replaced on each one.
    """

    choices: ChoiceSet = field(default_factory=ChoiceSet)
    selection: SelectionState = field(default_factory=SelectionState)
    query: QueryState = field(default_factory=QueryState)
    pointer: int = 0
    pending_default: list[Any] | None = None
    first_load_completed: bool = False
    status: PromptStatus = PromptStatus.ACTIVE
    error: str | None = None
    line: str = ""
