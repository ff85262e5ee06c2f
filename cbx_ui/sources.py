"""Ready-made sources that filter a static list with rapidfuzz."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from rapidfuzz import fuzz, process

from cbx_ui.tui.system.models import Choice, Separator


@dataclass(frozen=True)
class FuzzySourceConfig:
    """Configuration for FuzzySource behavior."""

    limit: int = 200
    score_cutoff: int = 50
    delay: float = 0.0  # simulated latency, for demos


def _search_text(item: Any) -> str:
    if isinstance(item, Mapping):
        return str(item.get("name", item.get("value", "")))
    if isinstance(item, Choice):
        return item.name
    return str(item)


class FuzzySource:
    """Async source returning ``items`` ranked by fuzzy match on their names.

    Separators are dropped while a query is active; an empty query returns
    the list untouched.
    """

    def __init__(self, items: Sequence[Any], config: FuzzySourceConfig | None = None) -> None:
        self._items = list(items)
        self._config = config or FuzzySourceConfig()

    async def __call__(self, answers: Mapping[str, Any], query: str | None) -> list[Any]:
        if self._config.delay:
            await asyncio.sleep(self._config.delay)
        return self.filter(query or "")

    def filter(self, query: str) -> list[Any]:
        query = query.strip()
        if not query:
            return list(self._items)

        candidates = [item for item in self._items if not isinstance(item, Separator)]
        # match on strings only; payloads may be unhashable
        matches = process.extract(
            query,
            [_search_text(item) for item in candidates],
            scorer=fuzz.WRatio,
            limit=self._config.limit,
            score_cutoff=self._config.score_cutoff,
        )
        # matches is list of (match_string, score, index)
        return [candidates[m[2]] for m in matches]
