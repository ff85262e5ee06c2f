from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Iterable

from rich.text import Text

from cbx_common.errors import PromptValidationError
from cbx_ui.tui.core.protocols import Paginator, ScreenRenderer
from cbx_ui.tui.system.components.checkbox_plus import CheckboxPlusPrompt
from cbx_ui.tui.system.components.paginator import Paginator as WindowPaginator
from cbx_ui.tui.system.components.render import render_prompt
from cbx_ui.tui.system.models import EventKind, PromptEvent


@dataclass
class RecordedFrame:
    message: str
    bottom: str


@dataclass
class HeadlessScreen(ScreenRenderer):
    frames: list[RecordedFrame] = field(default_factory=list)
    finished: bool = False

    def render(self, message: Text, bottom_content: Text) -> None:
        self.frames.append(RecordedFrame(message.plain, bottom_content.plain))

    def done(self) -> None:
        self.finished = True

    @property
    def last(self) -> RecordedFrame | None:
        return self.frames[-1] if self.frames else None


class HeadlessSession:
    """Drives a prompt from scripted events, without a terminal.

    ``dispatch`` hands an event over and returns any fetch it started without
    waiting for it; ``send`` waits for that fetch to settle.
    """

    def __init__(
        self,
        prompt: CheckboxPlusPrompt,
        *,
        screen: ScreenRenderer | None = None,
        paginator: Paginator | None = None,
    ) -> None:
        self.prompt = prompt
        self.screen = screen if screen is not None else HeadlessScreen()
        self._paginator = paginator or WindowPaginator()
        self._emitted = False

    async def start(self, line: str = "") -> None:
        await self._settle(self.prompt.initialize(line))

    def dispatch(self, event: PromptEvent) -> asyncio.Task[None] | None:
        task = self.prompt.handle_event(event)
        self.redraw()
        return task

    async def send(self, event: PromptEvent) -> None:
        await self._settle(self.dispatch(event))
        if self.prompt.is_complete and not self._emitted:
            self._emitted = True
            self.screen.done()

    async def type(self, line: str) -> None:
        await self.send(PromptEvent(EventKind.KEYPRESS, line=line))

    async def submit(self) -> bool:
        await self.send(PromptEvent(EventKind.SUBMIT))
        return self.prompt.is_complete

    async def run(self, events: Iterable[PromptEvent] = (), *, line: str = "") -> list[Any]:
        """Start, replay ``events``, then submit; returns the selected values.

        Raises PromptValidationError when the final selection is rejected,
        since nobody is there to correct it.
        """
        await self.start(line)
        for event in events:
            await self.send(event)
        if not self.prompt.is_complete and not await self.submit():
            message = self.prompt.state.error or "Selection rejected"
            raise PromptValidationError(
                message, context={"values": self.prompt.current_values()}
            )
        return self.prompt.result()

    def redraw(self) -> None:
        frame = render_prompt(self.prompt.current_render_model(), self._paginator)
        self.screen.render(frame.message, frame.bottom)

    async def _settle(self, task: asyncio.Task[None] | None) -> None:
        if task is not None:
            self.redraw()
            await task
        self.redraw()
