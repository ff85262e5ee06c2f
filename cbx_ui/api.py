"""Stable prompt API surface."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable, Mapping

from cbx_common.errors import ConfigurationError
from cbx_ui.tui.core.capabilities import is_tty_available
from cbx_ui.tui.screens.checkbox_screen import CheckboxScreen
from cbx_ui.tui.system.components.checkbox_plus import CheckboxPlusPrompt
from cbx_ui.tui.system.headless import HeadlessScreen, HeadlessSession
from cbx_ui.tui.system.models import Choice, Separator
from cbx_ui.tui.system.options import CheckboxPlusOptions

logger = logging.getLogger(__name__)

PROMPT_TYPE = "checkbox-plus"


async def run_prompt(
    prompt: CheckboxPlusPrompt,
    *,
    headless: bool | None = None,
    initial_line: str = "",
) -> list[Any]:
    """Run an already built prompt and return the selected values.

    Without a terminal (or with ``headless=True``) the prompt fetches once
    and submits the seeded selection as-is.
    """
    if headless is None:
        headless = not is_tty_available()
    if headless:
        logger.debug("Running prompt %r headless", prompt.options.name)
        return await HeadlessSession(prompt, screen=HeadlessScreen()).run(line=initial_line)
    return await CheckboxScreen(prompt, initial_line=initial_line).run_async()


async def checkbox_plus(
    message: str = "",
    source: Any = None,
    *,
    answers: Mapping[str, Any] | None = None,
    headless: bool | None = None,
    **options: Any,
) -> list[Any]:
    """Ask a single checkbox-plus question.

    Keyword options are those of CheckboxPlusOptions (``searchable``,
    ``highlight``, ``default``, ``minimum_choices``, ``maximum_choices``,
    ``validate``, ``page_size``).
    """
    resolved = CheckboxPlusOptions.build(message=message, source=source, **options)
    return await run_prompt(CheckboxPlusPrompt(resolved, answers), headless=headless)


def checkbox_plus_sync(message: str = "", source: Any = None, **kwargs: Any) -> list[Any]:
    return asyncio.run(checkbox_plus(message, source, **kwargs))


async def prompt_questions(
    questions: Iterable[Mapping[str, Any]],
    answers: Mapping[str, Any] | None = None,
    *,
    headless: bool | None = None,
) -> dict[str, Any]:
    """Ask questions in order, passing the answers so far to each source."""
    collected: dict[str, Any] = dict(answers or {})
    for question in questions:
        kind = question.get("type", PROMPT_TYPE)
        if kind != PROMPT_TYPE:
            raise ConfigurationError(
                f"Unsupported question type: {kind}", context={"type": kind}
            )
        if not question.get("name"):
            raise ConfigurationError("Every question needs a `name`")
        prompt = CheckboxPlusPrompt(CheckboxPlusOptions.from_mapping(question), collected)
        collected[question["name"]] = await run_prompt(prompt, headless=headless)
    return collected


__all__ = [
    "Choice",
    "Separator",
    "CheckboxPlusOptions",
    "CheckboxPlusPrompt",
    "checkbox_plus",
    "checkbox_plus_sync",
    "prompt_questions",
    "run_prompt",
]
