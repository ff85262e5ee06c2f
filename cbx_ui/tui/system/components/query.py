"""Source query pipeline: one authoritative fetch at a time, last write wins."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Mapping, Sequence

from cbx_common.errors import SourceError, wrap_error
from cbx_ui.tui.system.components.choices import ChoiceSet
from cbx_ui.tui.system.components.state import PromptState
from cbx_ui.tui.system.models import Choice

logger = logging.getLogger(__name__)


def matches_default(choice: Choice, defaults: Sequence[Any]) -> bool:
    """True when a default entry equals the choice value or is a ``{name}`` matcher."""
    for entry in defaults:
        if entry == choice.value:
            return True
        if isinstance(entry, Mapping) and set(entry) == {"name"} and entry["name"] == choice.name:
            return True
    return False


class SourceQueryPipeline:
    """Issues source fetches and applies only the most recent one.

    Every issued query bumps ``state.query.generation``; a completion whose
    generation is no longer current is dropped, results and failures alike.
    Fetches are never cancelled.
    """

    def __init__(
        self,
        source: Any,
        *,
        searchable: bool,
        answers: Mapping[str, Any] | None = None,
    ) -> None:
        self._source = source
        self._searchable = searchable
        self._answers = answers if answers is not None else {}

    def execute(self, state: PromptState, line: str) -> Awaitable[None] | None:
        """Issue a fetch for ``line``; returns the completion, or None for a no-op."""
        query = line.strip()
        if query == state.query.last_query:
            return None

        pending = self._invoke_source(query)

        state.query.last_query = query
        state.query.generation += 1
        state.query.searching = True
        state.line = query
        generation = state.query.generation
        logger.debug("Issued source query %d: %r", generation, query)
        return self._complete(state, generation, pending)

    def _invoke_source(self, query: str) -> Any:
        if not callable(self._source):
            return self._source
        try:
            return self._source(self._answers, query if self._searchable else None)
        except Exception as exc:
            logger.warning("Source raised while issuing query %r", query, exc_info=True)
            raise wrap_error(
                SourceError, f"Source failed: {exc}", context={"query": query}, cause=exc
            ) from exc

    async def _complete(self, state: PromptState, generation: int, pending: Any) -> None:
        try:
            raw = (await pending) if inspect.isawaitable(pending) else pending
        except Exception as exc:
            if generation != state.query.generation:
                logger.debug("Dropping failure of superseded query %d: %s", generation, exc)
                return
            state.query.searching = False
            logger.warning("Source failed for query %r", state.query.last_query, exc_info=True)
            raise wrap_error(
                SourceError,
                f"Source failed: {exc}",
                context={"query": state.query.last_query, "generation": generation},
                cause=exc,
            ) from exc

        if generation != state.query.generation:
            logger.debug(
                "Discarding stale result of query %d (current is %d)",
                generation,
                state.query.generation,
            )
            return

        self._apply(state, raw, generation)

    def _apply(self, state: PromptState, raw: Any, generation: int) -> None:
        if raw is None:
            raw = []
        if isinstance(raw, (str, bytes)) or not isinstance(raw, (Sequence, ChoiceSet)):
            state.query.searching = False
            raise SourceError(
                "Source must return a list of choices",
                context={"query": state.query.last_query, "type": type(raw).__name__},
            )

        state.query.searching = False
        state.choices = ChoiceSet(raw)
        for choice in state.choices.choices():
            state.selection.toggle(choice, state.selection.contains(choice.value))
            if state.pending_default and matches_default(choice, state.pending_default):
                state.selection.toggle(choice, True)

        if state.pending_default is not None:
            logger.debug("Applied default selection on query %d", generation)
        state.pending_default = None
        state.pointer = 0
        state.first_load_completed = True
