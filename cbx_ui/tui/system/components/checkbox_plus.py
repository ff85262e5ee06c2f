"""The checkbox-plus prompt: searchable checkbox list with bounded selection."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Mapping

from cbx_common.errors import PromptStateError
from cbx_ui.tui.system.components import navigation
from cbx_ui.tui.system.components.query import SourceQueryPipeline
from cbx_ui.tui.system.components.state import PromptState
from cbx_ui.tui.system.components.validation import ValidationGate
from cbx_ui.tui.system.models import EventKind, PromptEvent, PromptStatus, RenderModel
from cbx_ui.tui.system.options import CheckboxPlusOptions

logger = logging.getLogger(__name__)


class CheckboxPlusPrompt:
    """Event-driven prompt state machine.

    The host owns the loop: it calls ``initialize`` once, then
    ``handle_event`` per key, redraws from ``current_render_model`` and
    collects ``result`` once ``is_complete`` turns true. Methods that may
    start a source fetch return the scheduled task (or None) so the host can
    redraw when it settles and surface its failure; they must be called with
    a running event loop.
    """

    def __init__(
        self,
        options: CheckboxPlusOptions | Mapping[str, Any],
        answers: Mapping[str, Any] | None = None,
    ) -> None:
        if not isinstance(options, CheckboxPlusOptions):
            options = CheckboxPlusOptions.from_mapping(options)
        self.options = options
        self.answers: dict[str, Any] = dict(answers or {})
        self.state = PromptState(
            pending_default=list(options.default) if options.default else None
        )
        self._pipeline = SourceQueryPipeline(
            options.source, searchable=options.searchable, answers=self.answers
        )
        self._gate = ValidationGate.from_options(options)
        self._page_size = options.resolved_page_size
        self._answer: list[Any] | None = None
        self._answer_shorts: list[str] = []

    @property
    def searchable(self) -> bool:
        return self.options.searchable

    @property
    def is_complete(self) -> bool:
        return self.state.status is PromptStatus.ANSWERED

    def initialize(self, line: str = "") -> asyncio.Task[None] | None:
        return self._execute_query(line)

    def handle_event(self, event: PromptEvent) -> asyncio.Task[None] | None:
        if self.is_complete:
            return None

        # A pending validation message lasts for one frame only.
        self.state.error = None
        kind = event.kind

        if kind is EventKind.UP:
            navigation.move_pointer(self.state, -1)
        elif kind is EventKind.DOWN:
            navigation.move_pointer(self.state, 1)
        elif kind is EventKind.SPACE:
            navigation.toggle_current(self.state)
        elif kind is EventKind.SUBMIT:
            self._submit()
        elif kind is EventKind.KEYPRESS:
            if self.searchable:
                return self._execute_query(event.line)
        elif self.searchable:
            # digit, select-all and invert keys are plain text while searching
            return None
        elif kind is EventKind.NUMBER and event.digit is not None:
            navigation.jump_to_number(self.state, event.digit)
        elif kind is EventKind.ALL:
            navigation.toggle_all(self.state)
        elif kind is EventKind.INVERSE:
            navigation.invert_selection(self.state)
        return None

    def current_render_model(self) -> RenderModel:
        state = self.state
        return RenderModel(
            message=self.options.message,
            status=state.status,
            searchable=self.searchable,
            highlight=self.options.highlight,
            first_load_completed=state.first_load_completed,
            searching=state.query.searching,
            line=state.line,
            choices=state.choices.entries,
            pointer=state.pointer,
            page_size=self._page_size,
            error=state.error,
            answer_shorts=tuple(self._answer_shorts),
        )

    def current_values(self) -> list[Any]:
        return list(self.state.selection.values)

    def validate(self, values: list[Any]) -> bool | str:
        return self._gate.validate(values)

    def result(self) -> list[Any]:
        if self._answer is None:
            raise PromptStateError(
                "The prompt has not been answered yet",
                context={"status": self.state.status.value},
            )
        return list(self._answer)

    @property
    def answer_shorts(self) -> list[str]:
        return list(self._answer_shorts)

    def _execute_query(self, line: str) -> asyncio.Task[None] | None:
        completion = self._pipeline.execute(self.state, line)
        if completion is None:
            return None
        return asyncio.ensure_future(completion)

    def _submit(self) -> None:
        values = self.current_values()
        outcome = self._gate.validate(values)
        if outcome is not True:
            logger.debug("Submission rejected: %s", outcome)
            self.state.error = str(outcome)
            return

        self._answer = values
        self._answer_shorts = self.state.selection.shorts()
        self.state.status = PromptStatus.ANSWERED
        logger.debug("Prompt answered with %d value(s)", len(values))
