import asyncio

import pytest

from cbx_ui.sources import FuzzySource, FuzzySourceConfig
from cbx_ui.tui.system.models import Separator

pytestmark = pytest.mark.unit_ui

ITEMS = [
    {"name": "The red color", "value": "red"},
    Separator(),
    {"name": "The green color", "value": {"hex": "#00ff00"}},
    "purple",
]


def test_empty_query_returns_everything_in_order() -> None:
    source = FuzzySource(ITEMS)

    assert source.filter("  ") == ITEMS
    assert asyncio.run(source({}, None)) == ITEMS


def test_query_ranks_matches_and_drops_separators() -> None:
    source = FuzzySource(ITEMS)

    result = source.filter("green")

    assert result[0] == ITEMS[2]
    assert all(not isinstance(item, Separator) for item in result)


def test_score_cutoff_filters_unrelated_items() -> None:
    source = FuzzySource(["alpha", "beta", "gamma"], FuzzySourceConfig(score_cutoff=90))

    assert source.filter("gamma") == ["gamma"]


def test_limit_caps_result_count() -> None:
    source = FuzzySource([f"item {i}" for i in range(20)], FuzzySourceConfig(limit=5))

    assert len(source.filter("item")) == 5
