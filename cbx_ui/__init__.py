"""Searchable checkbox prompt with bounded selection.

Provides the prompt state machine, its terminal host and a small CLI.
"""

from cbx_ui.api import (
    CheckboxPlusOptions,
    CheckboxPlusPrompt,
    Choice,
    Separator,
    checkbox_plus,
    checkbox_plus_sync,
    prompt_questions,
)

__all__ = [
    "CheckboxPlusOptions",
    "CheckboxPlusPrompt",
    "Choice",
    "Separator",
    "checkbox_plus",
    "checkbox_plus_sync",
    "prompt_questions",
]
