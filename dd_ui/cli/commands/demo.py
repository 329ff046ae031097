"""`demo` command: the chained sample selectors."""

from __future__ import annotations

from typing import List, Optional

import typer

from dd_common.api import DDError
from dd_ui.cli.commands.collection import fail
from dd_ui.flows.selection import DEMOS, run_demo
from dd_ui.tui.headless import HeadlessUI
from dd_ui.wiring.dependencies import UIContext


def register_demo_command(app: typer.Typer, ctx: UIContext) -> None:
    @app.command("demo")
    def demo_command(
        name: str = typer.Argument(..., help=f"One of: {', '.join(DEMOS)}."),
        action: Optional[List[str]] = typer.Option(
            None,
            "--action",
            "-a",
            help="Scripted action; use done to move on to the next selector.",
        ),
    ) -> None:
        """Run a sample where one selector's commit feeds the next."""
        if name not in DEMOS:
            ctx.ui.present.error(f"Unknown demo {name!r}; choose from {', '.join(DEMOS)}.")
            raise typer.Exit(1)
        if action:
            ctx.headless = True
        ui = ctx.ui
        if action and isinstance(ui, HeadlessUI):
            ui.next_actions = list(action)
        try:
            outcome = run_demo(ui, name)
        except DDError as exc:
            fail(ctx, exc)
        if outcome is None:
            raise typer.Exit(1)
