from __future__ import annotations

from rich.text import Text

from cbx_ui.tui.core import theme


class Paginator:
    """Windows a rendered list so the active line stays on screen."""

    def paginate(self, rendered: Text, active_index: int, page_size: int) -> Text:
        lines = rendered.split("\n", allow_blank=True)
        if page_size <= 0 or len(lines) <= page_size:
            return rendered

        # Keep the active line in the middle of the window when possible.
        start = active_index - page_size // 2
        start = max(0, min(start, len(lines) - page_size))
        window = Text("\n").join(lines[start : start + page_size])
        window.append("\n")
        window.append(theme.PAGINATION_HINT, style=theme.PAGINATION_HINT_STYLE)
        return window
