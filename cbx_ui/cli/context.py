from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from typing import Any, Optional

import typer
from rich.console import Console

from cbx_common.errors import CBXError, PromptAbortedError, error_to_payload
from cbx_ui.api import checkbox_plus
from cbx_ui.tui.system.components.presenter import RichPresenter

ABORT_EXIT_CODE = 130


@dataclass
class CLIContext:
    """Container for CLI state, initialized lazily."""

    headless: bool = False
    _present: Optional[RichPresenter] = None

    @property
    def present(self) -> RichPresenter:
        if self._present is None:
            self._present = RichPresenter(Console(stderr=True))
        return self._present

    @present.setter
    def present(self, value: RichPresenter) -> None:
        self._present = value

    def ask(self, *, as_json: bool = False, **options: Any) -> list[Any]:
        """Run one prompt, mapping typed failures to exit codes.

        With ``as_json`` a failure is also written to stdout as a payload.
        """
        headless = True if self.headless else None
        try:
            return asyncio.run(checkbox_plus(headless=headless, **options))
        except PromptAbortedError as exc:
            self.present.warning(str(exc))
            raise typer.Exit(ABORT_EXIT_CODE) from exc
        except CBXError as exc:
            self.present.error(str(exc))
            if as_json:
                typer.echo(json.dumps(error_to_payload(exc)))
            raise typer.Exit(1) from exc
