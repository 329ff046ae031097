"""
Command-line interface for dropdowns-py.

Lists collection files, picks from them interactively (or headless with
scripted actions) and runs the chained demo selectors.
"""

from __future__ import annotations

import typer

from dd_ui.cli.commands.collection import register_collection_commands
from dd_ui.cli.commands.demo import register_demo_command
from dd_ui.wiring.dependencies import UIContext, configure_logging, load_headless_default

# Initialize global context (lazy)
ctx_store = UIContext()

app = typer.Typer(help="Searchable single and multi selection over collections.", no_args_is_help=True)


@app.callback(invoke_without_command=True)
def entry(
    ctx: typer.Context,
    headless: bool = typer.Option(
        False,
        "--headless",
        help="Force headless output (useful in CI). Defaults to DD_HEADLESS.",
    ),
) -> None:
    """Global entry point handling interactive vs headless modes."""
    configure_logging(force=True)
    ctx_store.headless = headless or load_headless_default()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


register_collection_commands(app, ctx_store)
register_demo_command(app, ctx_store)


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
