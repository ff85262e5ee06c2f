from __future__ import annotations

from rich.console import Console

from cbx_ui.tui.core import theme


class RichPresenter:
    def __init__(self, console: Console) -> None:
        self._console = console

    def _emit(self, level: str, message: str) -> None:
        self._console.print(theme.presenter_message(level, message))

    def warning(self, message: str) -> None:
        self._emit("warning", message)

    def error(self, message: str) -> None:
        self._emit("error", message)
