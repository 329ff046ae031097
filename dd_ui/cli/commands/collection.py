"""`list` and `pick` commands over a collection file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional

import typer

from dd_common.api import DDError, error_to_payload
from dd_engine.api import create_selector
from dd_ui.data import load_collection
from dd_ui.flows.selection import (
    items_table,
    report_selection,
    resolve_defaults,
    run_selector,
)
from dd_ui.tui.headless import HeadlessUI
from dd_ui.wiring.dependencies import UIContext

logger = logging.getLogger(__name__)


def fail(ctx: UIContext, exc: DDError) -> None:
    """Report a typed error and exit with status 1."""
    logger.debug("Command failed: %s", error_to_payload(exc))
    ctx.ui.present.error(str(exc))
    raise typer.Exit(1)


def _selector_options(
    data: Path,
    display_field: Optional[str],
    value_field: Optional[str],
    sort: Optional[List[str]],
    order: str,
) -> dict[str, Any]:
    return {
        "data": load_collection(data),
        "displayField": display_field,
        "valueField": value_field,
        "sortFields": sort or None,
        "sortOrder": order,
    }


def register_collection_commands(app: typer.Typer, ctx: UIContext) -> None:
    """Register `list` and `pick` on the root app."""

    @app.command("list")
    def list_command(
        data: Path = typer.Argument(..., help="YAML or JSON file holding a list."),
        search: str = typer.Option("", "--search", "-s", help="Case-insensitive filter."),
        display_field: Optional[str] = typer.Option(
            None, "--display-field", help="Record field shown to the user."
        ),
        value_field: Optional[str] = typer.Option(
            None, "--value-field", help="Record field used as the value."
        ),
        sort: Optional[List[str]] = typer.Option(
            None, "--sort", help='Sort key, e.g. "name" or "age desc". Repeatable.'
        ),
        order: str = typer.Option("asc", "--order", help="asc or desc."),
    ) -> None:
        """Print the sorted (and optionally filtered) collection."""
        try:
            selector = create_selector(
                _selector_options(data, display_field, value_field, sort, order)
            )
        except DDError as exc:
            fail(ctx, exc)
        if search:
            selector.type_search(search)
        items = selector.sorted_visible_items
        title = f"{data.name} ({len(items)} of {len(selector.sorted_items)})"
        ctx.ui.tables.show(items_table(selector, items, title))

    @app.command("pick")
    def pick_command(
        data: Path = typer.Argument(..., help="YAML or JSON file holding a list."),
        multi: bool = typer.Option(False, "--multi", "-m", help="Allow several items."),
        max_selections: Optional[int] = typer.Option(
            None, "--max", min=1, help="Upper bound for --multi."
        ),
        display_field: Optional[str] = typer.Option(
            None, "--display-field", help="Record field shown to the user."
        ),
        value_field: Optional[str] = typer.Option(
            None, "--value-field", help="Record field used as the value."
        ),
        sort: Optional[List[str]] = typer.Option(
            None, "--sort", help='Sort key, e.g. "name" or "age desc". Repeatable.'
        ),
        order: str = typer.Option("asc", "--order", help="asc or desc."),
        default: Optional[List[str]] = typer.Option(
            None, "--default", "-d", help="Preselected item (display text or value)."
        ),
        reset: bool = typer.Option(
            False, "--reset", help="Always show the default selection (controlled)."
        ),
        label: str = typer.Option("", "--label", "-l", help="Label for the selector."),
        action: Optional[List[str]] = typer.Option(
            None,
            "--action",
            "-a",
            help="Scripted action for headless runs, e.g. type:dri or toggle:Bob.",
        ),
    ) -> None:
        """Pick one item (or several with --multi) from the collection."""
        if action:
            ctx.headless = True
        ui = ctx.ui
        if action and isinstance(ui, HeadlessUI):
            ui.next_actions = list(action)
        try:
            options = _selector_options(data, display_field, value_field, sort, order)
            selector = create_selector(
                options,
                multiple=multi,
                maxSelections=max_selections,
                selReset=reset,
                label=label or data.stem,
            )
            if default:
                selector.update(defaultSelection=resolve_defaults(selector, default))
            result = run_selector(ui, selector, selector.placeholder)
        except DDError as exc:
            fail(ctx, exc)
        if result is None and not isinstance(ui, HeadlessUI):
            ui.present.warning("Selection cancelled.")
            raise typer.Exit(1)
        report_selection(ui, selector, result, "Selection")
        ui.present.info(f"Commits: {selector.commit_count}")
