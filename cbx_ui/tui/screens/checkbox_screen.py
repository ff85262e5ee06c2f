from __future__ import annotations

import asyncio
from typing import Any

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from rich.console import Console
from rich.text import Text

from cbx_common.errors import CBXError, PromptAbortedError
from cbx_ui.tui.core.protocols import Paginator
from cbx_ui.tui.system.components.checkbox_plus import CheckboxPlusPrompt
from cbx_ui.tui.system.components.paginator import Paginator as WindowPaginator
from cbx_ui.tui.system.components.render import render_prompt
from cbx_ui.tui.system.models import EventKind, PromptEvent


class CheckboxScreen:
    """prompt_toolkit host for a CheckboxPlusPrompt.

    Owns the keyboard and the event loop, turns key presses into prompt
    events and redraws from the prompt's render model. Also acts as the
    screen renderer: ``render`` swaps the displayed frame.
    """

    def __init__(
        self,
        prompt: CheckboxPlusPrompt,
        *,
        paginator: Paginator | None = None,
        initial_line: str = "",
    ) -> None:
        self._prompt = prompt
        self._paginator = paginator or WindowPaginator()
        self._line = initial_line
        self._message = Text()
        self._bottom = Text()
        self._tasks: set[asyncio.Task[None]] = set()
        self.rich = Console(force_terminal=True, color_system="truecolor")

        self.message_control = FormattedTextControl(self._message_ansi, show_cursor=False)
        self.bottom_control = FormattedTextControl(self._bottom_ansi, show_cursor=False)
        self.kb = self._bindings()

        self.app: Application[list[Any]] = Application(
            layout=Layout(
                HSplit(
                    [
                        Window(self.message_control, wrap_lines=True),
                        Window(self.bottom_control, height=Dimension(max=1)),
                    ]
                )
            ),
            key_bindings=self.kb,
            full_screen=False,
        )

    @property
    def line(self) -> str:
        return self._line

    def render(self, message: Text, bottom_content: Text) -> None:
        self._message = message
        self._bottom = bottom_content
        self.app.invalidate()

    def done(self) -> None:
        self._bottom = Text()
        self.app.invalidate()

    def redraw(self) -> None:
        frame = render_prompt(self._prompt.current_render_model(), self._paginator)
        self.render(frame.message, frame.bottom)

    def _to_ansi(self, text: Text) -> ANSI:
        with self.rich.capture() as cap:
            self.rich.print(text, end="", soft_wrap=True)
        return ANSI(cap.get())

    def _message_ansi(self) -> ANSI:
        return self._to_ansi(self._message)

    def _bottom_ansi(self) -> ANSI:
        return self._to_ansi(self._bottom)

    def _exit(self, *, result: Any = None, exception: BaseException | None = None) -> None:
        """Exit the prompt safely, ignoring duplicate-exit errors."""
        if not self.app.is_running:
            return
        try:
            if exception is not None:
                self.app.exit(exception=exception)
            else:
                self.app.exit(result=result)
        except Exception as exc:  # pragma: no cover
            if "Return value already set" in str(exc):
                return
            raise

    def _track(self, task: asyncio.Task[None] | None) -> None:
        if task is None:
            return
        self._tasks.add(task)
        task.add_done_callback(self._on_query_done)

    def _on_query_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self._exit(exception=exc)
            return
        self.redraw()

    def _dispatch(self, event: PromptEvent) -> None:
        try:
            task = self._prompt.handle_event(event)
        except CBXError as exc:
            self._exit(exception=exc)
            return
        self._track(task)
        self.redraw()
        if self._prompt.is_complete:
            self.done()
            self._exit(result=self._prompt.result())

    def _set_line(self, line: str) -> None:
        self._line = line
        self._dispatch(PromptEvent(EventKind.KEYPRESS, line=line))

    def _bindings(self) -> KeyBindings:
        kb = KeyBindings()
        searchable = self._prompt.searchable

        @kb.add("up")
        @kb.add("c-p")
        def _(event: Any) -> None:
            self._dispatch(PromptEvent(EventKind.UP, line=self._line))

        @kb.add("down")
        @kb.add("c-n")
        def _(event: Any) -> None:
            self._dispatch(PromptEvent(EventKind.DOWN, line=self._line))

        @kb.add("space")
        def _(event: Any) -> None:
            self._dispatch(PromptEvent(EventKind.SPACE, line=self._line))
            if searchable and not self._prompt.is_complete:
                self._set_line(self._line + " ")

        @kb.add("enter")
        def _(event: Any) -> None:
            self._dispatch(PromptEvent(EventKind.SUBMIT, line=self._line))

        @kb.add("c-c")
        @kb.add("escape", eager=True)
        def _(event: Any) -> None:
            self._exit(exception=PromptAbortedError("Prompt cancelled by user"))

        if searchable:

            @kb.add("backspace")
            def _(event: Any) -> None:
                self._set_line(self._line[:-1])

            @kb.add("c-u")
            def _(event: Any) -> None:
                self._set_line("")

            @kb.add(Keys.Any)
            def _(event: Any) -> None:
                if event.data.isprintable():
                    self._set_line(self._line + event.data)

            return kb

        @kb.add("k")
        def _(event: Any) -> None:
            self._dispatch(PromptEvent(EventKind.UP))

        @kb.add("j")
        def _(event: Any) -> None:
            self._dispatch(PromptEvent(EventKind.DOWN))

        @kb.add("a")
        def _(event: Any) -> None:
            self._dispatch(PromptEvent(EventKind.ALL))

        @kb.add("i")
        def _(event: Any) -> None:
            self._dispatch(PromptEvent(EventKind.INVERSE))

        for digit in "123456789":

            @kb.add(digit)
            def _(event: Any) -> None:
                self._dispatch(PromptEvent(EventKind.NUMBER, digit=int(event.data)))

        return kb

    def _start(self) -> None:
        try:
            self._track(self._prompt.initialize(self._line))
        except CBXError as exc:
            self._exit(exception=exc)
            return
        self.redraw()

    async def run_async(self) -> list[Any]:
        return await self.app.run_async(pre_run=self._start)

    def run(self) -> list[Any]:
        return asyncio.run(self.run_async())
