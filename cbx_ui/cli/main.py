"""
Command-line interface for checkbox-plus.

Exposes a demo prompt and a generic picker over a choices file.
"""

from __future__ import annotations

from typing import Optional

import typer

from cbx_common.logging import configure_logging
from cbx_ui.cli.commands.demo import register_demo_command
from cbx_ui.cli.commands.pick import register_pick_command
from cbx_ui.cli.context import CLIContext

ctx_store = CLIContext()

app = typer.Typer(help="Searchable checkbox prompts for the terminal.", no_args_is_help=True)


@app.callback(invoke_without_command=True)
def entry(
    ctx: typer.Context,
    headless: bool = typer.Option(
        False,
        "--headless",
        help="Skip the interactive prompt and submit the defaults (useful in CI).",
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level."),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Global entry point handling interactive vs headless modes."""
    configure_logging(level=log_level, debug=debug, force=True)
    ctx_store.headless = headless

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


register_demo_command(app, ctx_store)
register_pick_command(app, ctx_store)


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
