"""Workflows that run selectors through a UI and report the result."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from structlog.contextvars import bound_contextvars

from dd_engine.api import MultiSelector, Selector, create_selector
from dd_ui.data import interests_catalog, load_sample
from dd_ui.tui.headless import find_item
from dd_ui.tui.models import TableModel
from dd_ui.tui.protocols import UI

logger = logging.getLogger(__name__)

DEMOS = ("interests", "drivers")


def items_table(selector: Selector, items: Sequence[Any], title: str) -> TableModel:
    """Tabulate items the way the selector displays them."""
    if selector.records:
        options = selector.options
        columns = [options.display_field, options.value_field]
        rows = [[selector.display_text(item), str(selector.value_of(item))] for item in items]
    else:
        columns = ["Item"]
        rows = [[selector.display_text(item)] for item in items]
    return TableModel(title=title, columns=columns, rows=rows)


def resolve_defaults(selector: Selector, names: Sequence[str]) -> Any:
    """Map display texts or values to collection items for default_selection."""
    found = []
    for name in names:
        item = find_item(selector, name)
        if item is None:
            logger.warning("Default %r not found in the collection", name)
            continue
        found.append(item)
    if isinstance(selector, MultiSelector):
        return found
    return found[0] if found else None


def run_selector(ui: UI, selector: Selector, title: str) -> Any:
    """Run one selector through the UI with its label bound to log records."""
    with bound_contextvars(selector=selector.label or title, multiple=selector.multiple):
        logger.debug("Running selector: %s", title)
        result = ui.selector.run(selector, title=title)
        logger.debug("Selector finished after %d commits", selector.commit_count)
    return result


def as_list(selection: Any) -> list[Any]:
    if selection is None:
        return []
    if isinstance(selection, list):
        return selection
    return [selection]


def report_selection(ui: UI, selector: Selector, selection: Any, title: str) -> None:
    chosen = as_list(selection)
    if not chosen:
        ui.present.warning(f"{title}: nothing selected.")
        return
    ui.tables.show(items_table(selector, chosen, title))
    ui.present.success(f"{title}: {len(chosen)} selected.")


def run_interests_demo(ui: UI) -> Optional[tuple[Any, list[Any]]]:
    """Single interest choice feeding a multi selection of its topics."""
    interests, topics = interests_catalog()
    topic_selector = create_selector(data=[], multiple=True, label="Topics")

    def _on_interest(choice: Any) -> None:
        topic_selector.update(data=topics.get(choice, []))

    interest_selector = create_selector(
        data=interests, label="Interests", onSelectionCommitted=_on_interest
    )
    interest = run_selector(ui, interest_selector, "Pick an interest")
    if interest is None:
        ui.present.warning("No interest selected.")
        return None
    chosen = run_selector(ui, topic_selector, f"Topics for {interest}")
    report_selection(ui, topic_selector, chosen, f"Topics for {interest}")
    return interest, as_list(chosen)


def run_drivers_demo(ui: UI) -> Optional[tuple[list[Any], list[Any]]]:
    """Licence codes (max 2) filtering a multi selection of drivers (max 5)."""
    drivers = load_sample("drivers")
    driver_selector = create_selector(
        data=[],
        multiple=True,
        label="Drivers",
        displayField="fullName",
        valueField="id",
        maxSelections=5,
    )

    def _on_codes(codes: list[Any]) -> None:
        wanted = {code["code"] for code in codes}
        driver_selector.update(
            data=[driver for driver in drivers if driver["licenceCode"] in wanted]
        )

    code_selector = create_selector(
        data=load_sample("licence_codes"),
        multiple=True,
        label="Licence Codes",
        displayField="description",
        valueField="code",
        sortFields=["code"],
        maxSelections=2,
        onSelectionCommitted=_on_codes,
    )
    codes = run_selector(ui, code_selector, "Pick up to 2 licence codes")
    if not codes:
        ui.present.warning("No licence codes selected.")
        return None
    report_selection(ui, code_selector, codes, "Licence Codes")
    chosen = run_selector(ui, driver_selector, "Pick up to 5 drivers")
    report_selection(ui, driver_selector, chosen, "Drivers")
    return as_list(codes), as_list(chosen)


def run_demo(ui: UI, name: str) -> Any:
    flows = {"interests": run_interests_demo, "drivers": run_drivers_demo}
    if name not in flows:
        raise ValueError(f"Unknown demo: {name}")
    flow = flows[name]
    ui.present.panel(flow.__doc__ or name, title=f"Demo: {name}")
    return flow(ui)
