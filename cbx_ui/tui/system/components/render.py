"""Render projection: prompt snapshot in, styled text out."""

from __future__ import annotations

from typing import Sequence

from rich.text import Text

from cbx_ui.tui.core import theme
from cbx_ui.tui.system.components.paginator import Paginator
from cbx_ui.tui.system.models import (
    Choice,
    PromptStatus,
    RenderedFrame,
    RenderModel,
    Separator,
)


def checkbox_figure(checked: bool) -> Text:
    if checked:
        return Text(theme.FIGURE_RADIO_ON, style=theme.CHECKED_STYLE)
    return Text(theme.FIGURE_RADIO_OFF)


def help_text(searchable: bool) -> Text:
    text = Text("(Press ")
    text.append("<space>", style=theme.HELP_KEY_STYLE)
    if searchable:
        text.append(" to select, or type anything to filter the list)")
        return text
    text.append(" to select, ")
    text.append("<a>", style=theme.HELP_KEY_STYLE)
    text.append(" to toggle all, ")
    text.append("<i>", style=theme.HELP_KEY_STYLE)
    text.append(" to invert selection)")
    return text


def render_choices(
    choices: Sequence[Choice | Separator], pointer: int, *, highlight: bool = False
) -> Text:
    """One line per entry; ``pointer`` counts selectable entries only."""
    lines: list[Text] = []
    skipped = 0
    for index, entry in enumerate(choices):
        if isinstance(entry, Separator):
            skipped += 1
            lines.append(Text(f" {entry}"))
            continue

        if entry.disabled:
            skipped += 1
            reason = entry.disabled if isinstance(entry.disabled, str) else "Disabled"
            lines.append(Text(f" - {entry.name} ({reason})"))
            continue

        line = Text()
        if index - skipped == pointer:
            line.append(theme.FIGURE_POINTER, style=theme.POINTER_STYLE)
            line.append_text(checkbox_figure(entry.checked))
            line.append(" ")
            line.append(entry.name, style=theme.HIGHLIGHT_STYLE if highlight else "")
        else:
            line.append(" ")
            line.append_text(checkbox_figure(entry.checked))
            line.append(f" {entry.name}")
        lines.append(line)
    return Text("\n").join(lines)


def pointer_line_index(choices: Sequence[Choice | Separator], pointer: int) -> int:
    """Translate a selectable pointer into a line index of the full list."""
    seen = 0
    for index, entry in enumerate(choices):
        if isinstance(entry, Choice) and entry.is_selectable:
            if seen == pointer:
                return index
            seen += 1
    return 0


def render_prompt(model: RenderModel, paginator: Paginator | None = None) -> RenderedFrame:
    paginator = paginator or Paginator()

    message = Text()
    message.append(f"{theme.QUESTION_MARK} ", style=theme.QUESTION_MARK_STYLE)
    message.append(model.message, style=theme.QUESTION_MESSAGE_STYLE)
    message.append(" ")

    if model.status is PromptStatus.ANSWERED:
        message.append(", ".join(model.answer_shorts), style=theme.ANSWER_STYLE)
        return RenderedFrame(message=message)

    if not model.first_load_completed:
        message.append_text(help_text(model.searchable))

    if model.searchable:
        message.append(model.line)

    if model.searching:
        message.append("\n  ")
        message.append("Searching...", style=theme.SEARCHING_STYLE)
    elif not model.choices:
        message.append("\n  ")
        message.append("No results...", style=theme.NO_RESULTS_STYLE)
    else:
        rendered = render_choices(model.choices, model.pointer, highlight=model.highlight)
        active = pointer_line_index(model.choices, model.pointer)
        message.append("\n")
        message.append_text(paginator.paginate(rendered, active, model.page_size))

    bottom = Text()
    if model.error:
        bottom.append(theme.ERROR_PREFIX, style=theme.ERROR_PREFIX_STYLE)
        bottom.append(model.error)
    return RenderedFrame(message=message, bottom=bottom)
