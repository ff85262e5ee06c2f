from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Mapping, Protocol, Sequence

from rich.text import Text

from cbx_ui.tui.system.models import PromptEvent, RenderModel


class Source(Protocol):
    def __call__(
        self, answers: Mapping[str, Any], query: str | None
    ) -> Sequence[Any] | Awaitable[Sequence[Any]]: ...


class ScreenRenderer(Protocol):
    def render(self, message: Text, bottom_content: Text) -> None: ...

    def done(self) -> None: ...


class Paginator(Protocol):
    def paginate(self, rendered: Text, active_index: int, page_size: int) -> Text: ...


class Prompt(Protocol):
    """What a host needs from a prompt: it feeds events and reads state."""

    def initialize(self, line: str = "") -> asyncio.Task[None] | None: ...

    def handle_event(self, event: PromptEvent) -> asyncio.Task[None] | None: ...

    def current_render_model(self) -> RenderModel: ...

    @property
    def is_complete(self) -> bool: ...

    def result(self) -> list[Any]: ...
