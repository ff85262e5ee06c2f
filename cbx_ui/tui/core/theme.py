from __future__ import annotations

RICH_ACCENT = "cyan"
RICH_ACCENT_BOLD = f"bold {RICH_ACCENT}"

FIGURE_POINTER = "❯"
FIGURE_RADIO_ON = "◉"
FIGURE_RADIO_OFF = "◯"

QUESTION_MARK = "?"
QUESTION_MARK_STYLE = "green"
QUESTION_MESSAGE_STYLE = "bold"
ANSWER_STYLE = RICH_ACCENT
POINTER_STYLE = RICH_ACCENT
CHECKED_STYLE = "green"
HIGHLIGHT_STYLE = "bright_black"
HELP_KEY_STYLE = RICH_ACCENT_BOLD
SEARCHING_STYLE = RICH_ACCENT
NO_RESULTS_STYLE = "yellow"
ERROR_PREFIX = ">> "
ERROR_PREFIX_STYLE = "red"
PAGINATION_HINT = "(Move up and down to reveal more choices)"
PAGINATION_HINT_STYLE = "dim"

PRESENTER_TEMPLATES: dict[str, str] = {
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
}


def presenter_message(level: str, message: str) -> str:
    template = PRESENTER_TEMPLATES.get(level, "{message}")
    return template.format(message=message)

