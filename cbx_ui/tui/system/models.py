from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from rich.text import Text

DEFAULT_SEPARATOR_LINE = "──────────────"

# Marks an omitted value; None is a legitimate choice value.
_MISSING: Any = object()


@dataclass
class Choice:
    name: str
    value: Any = _MISSING
    short: str | None = None
    disabled: bool | str = False
    checked: bool = False

    def __post_init__(self) -> None:
        if self.value is _MISSING:
            self.value = self.name
        if self.short is None:
            self.short = self.name

    @property
    def is_separator(self) -> bool:
        return False

    @property
    def is_selectable(self) -> bool:
        return not self.disabled

    @classmethod
    def from_raw(cls, raw: Any) -> "Choice | Separator":
        """Build a fresh choice from a source item (string, mapping or Choice)."""
        if isinstance(raw, Separator):
            return raw
        if isinstance(raw, Choice):
            return cls(
                name=raw.name,
                value=raw.value,
                short=raw.short,
                disabled=raw.disabled,
            )
        if isinstance(raw, Mapping):
            if raw.get("type") == "separator":
                return Separator(raw.get("line") or DEFAULT_SEPARATOR_LINE)
            name = str(raw.get("name", raw.get("value", "")))
            return cls(
                name=name,
                value=raw["value"] if "value" in raw else name,
                short=raw.get("short"),
                disabled=raw.get("disabled", False),
            )
        return cls(name=str(raw), value=raw)


@dataclass(frozen=True)
class Separator:
    line: str = DEFAULT_SEPARATOR_LINE

    @property
    def is_separator(self) -> bool:
        return True

    @property
    def is_selectable(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.line


class EventKind(str, Enum):
    UP = "up"
    DOWN = "down"
    SPACE = "space"
    SUBMIT = "submit"
    KEYPRESS = "keypress"
    NUMBER = "number"
    ALL = "all"
    INVERSE = "inverse"


@dataclass(frozen=True)
class PromptEvent:
    kind: EventKind
    line: str = ""  # buffered input line at the time of the event
    digit: int | None = None


class PromptStatus(str, Enum):
    ACTIVE = "active"
    ANSWERED = "answered"


@dataclass(frozen=True)
class RenderModel:
    """Snapshot of everything the render projection needs."""

    message: str
    status: PromptStatus
    searchable: bool
    highlight: bool
    first_load_completed: bool
    searching: bool
    line: str
    choices: tuple[Choice | Separator, ...]
    pointer: int
    page_size: int
    error: str | None = None
    answer_shorts: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RenderedFrame:
    message: Text
    bottom: Text = field(default_factory=Text)
