"""
Prompt core plus its prompt_toolkit and headless hosts.
"""

from cbx_ui.tui.core.protocols import Paginator, Prompt, ScreenRenderer, Source
from cbx_ui.tui.screens.checkbox_screen import CheckboxScreen
from cbx_ui.tui.system.components.checkbox_plus import CheckboxPlusPrompt
from cbx_ui.tui.system.headless import HeadlessScreen, HeadlessSession

__all__ = [
    "CheckboxPlusPrompt",
    "CheckboxScreen",
    "HeadlessScreen",
    "HeadlessSession",
    "Paginator",
    "Prompt",
    "ScreenRenderer",
    "Source",
]
