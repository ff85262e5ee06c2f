from __future__ import annotations

import json
from typing import Any, Sequence

import typer


def emit_values(values: Sequence[Any], *, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(list(values), default=str))
        return
    for value in values:
        typer.echo(value if isinstance(value, str) else json.dumps(value, default=str))
