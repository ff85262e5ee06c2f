from __future__ import annotations

from typing import Any

import typer

from cbx_ui.cli.context import CLIContext
from cbx_ui.cli.output import emit_values
from cbx_ui.sources import FuzzySource, FuzzySourceConfig

COLORS: list[dict[str, Any]] = [
    {"name": "The red color", "value": "red", "short": "red", "disabled": False},
    {"name": "The blue color", "value": "blue", "short": "blue", "disabled": True},
    {"name": "The green color", "value": "green", "short": "green", "disabled": False},
    {"name": "The yellow color", "value": "yellow", "short": "yellow", "disabled": False},
    {"name": "The black color", "value": "black", "short": "black", "disabled": False},
    {"name": "The purple color", "value": "purple", "short": "purple", "disabled": False},
]

DEMO_DEFAULT = ["yellow", "red", {"name": "The black color"}]


def keep_red(values: list[Any]) -> bool | str:
    if "red" not in values:
        return "You cannot abandon red!"
    return True


def register_demo_command(app: typer.Typer, ctx: CLIContext) -> None:
    @app.command("demo")
    def demo(
        searchable: bool = typer.Option(
            True, "--searchable/--no-searchable", help="Filter the list while typing."
        ),
        delay: float = typer.Option(
            0.0, "--delay", min=0.0, help="Simulated source latency in seconds."
        ),
        as_json: bool = typer.Option(False, "--json", help="Print the selection as JSON."),
    ) -> None:
        """Pick colors: 1 to 4 of them, red included."""
        values = ctx.ask(
            as_json=as_json,
            message="Enter colors",
            source=FuzzySource(COLORS, FuzzySourceConfig(delay=delay)),
            searchable=searchable,
            highlight=True,
            page_size=10,
            default=DEMO_DEFAULT,
            minimum_choices=1,
            maximum_choices=4,
            validate=keep_red,
        )
        emit_values(values, as_json=as_json)
