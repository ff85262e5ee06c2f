from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional

import typer
import yaml

from cbx_ui.cli.context import CLIContext
from cbx_ui.cli.output import emit_values
from cbx_ui.sources import FuzzySource


def load_choices(path: Path) -> list[Any]:
    """Read a YAML (or JSON) file holding a list, or a mapping with ``choices``."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Cannot read choices from {path}: {exc}") from exc
    if isinstance(data, dict):
        data = data.get("choices")
    if not isinstance(data, list):
        raise typer.BadParameter(f"{path} must contain a list of choices")
    return data


def parse_default(raw: str) -> Any:
    """Read a ``--default`` the way the choices file is read, so ``2`` matches ``value: 2``."""
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw


def register_pick_command(app: typer.Typer, ctx: CLIContext) -> None:
    @app.command("pick")
    def pick(
        file: Path = typer.Argument(..., exists=True, dir_okay=False, help="YAML/JSON list of choices."),
        message: str = typer.Option("Select items", "--message", "-m"),
        searchable: bool = typer.Option(False, "--searchable", "-s", help="Filter the list while typing."),
        minimum: Optional[int] = typer.Option(None, "--min", min=0, help="Minimum number of choices."),
        maximum: Optional[int] = typer.Option(None, "--max", min=0, help="Maximum number of choices."),
        default: Optional[List[str]] = typer.Option(None, "--default", "-d", help="Value checked up front (repeatable)."),
        page_size: Optional[int] = typer.Option(None, "--page-size", min=1),
        as_json: bool = typer.Option(False, "--json", help="Print the selection as JSON."),
    ) -> None:
        """Pick items from a file and print the selected values."""
        choices = load_choices(file)
        values = ctx.ask(
            as_json=as_json,
            message=message,
            source=FuzzySource(choices) if searchable else choices,
            searchable=searchable,
            default=[parse_default(raw) for raw in default] if default else None,
            minimum_choices=minimum,
            maximum_choices=maximum,
            page_size=page_size,
        )
        emit_values(values, as_json=as_json)
