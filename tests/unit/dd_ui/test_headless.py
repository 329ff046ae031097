"""Tests for scripted headless selector sessions."""

import pytest
from rich.console import Console

from dd_common.errors import ConfigurationError
from dd_engine.api import create_selector
from dd_ui.tui.headless import HeadlessSession, HeadlessUI, ScriptedAction, find_item
from dd_ui.tui.presenter import RichPresenter

pytestmark = pytest.mark.unit_ui

DRIVERS = [
    {"fullName": "Ann Lee", "id": "1"},
    {"fullName": "Bob Ray", "id": "2"},
]


def _drivers():
    return create_selector(
        data=DRIVERS, multiple=True, displayField="fullName", valueField="id"
    )


def test_parse_actions() -> None:
    assert ScriptedAction.parse("type:an") == ScriptedAction("type", "an")
    assert ScriptedAction.parse("DONE") == ScriptedAction("done")
    assert ScriptedAction.parse("click:a:b").argument == "a:b"
    with pytest.raises(ConfigurationError):
        ScriptedAction.parse("jump:1")


def test_find_item_by_display_then_value() -> None:
    selector = _drivers()
    assert find_item(selector, "Bob Ray") == DRIVERS[1]
    assert find_item(selector, "1") == DRIVERS[0]
    assert find_item(selector, "Nobody") is None


def test_session_replays_search_toggle_and_done() -> None:
    committed: list[list[dict]] = []
    selector = _drivers()
    selector.subscribe(committed.append)

    HeadlessSession(["type:bob", "toggle:Bob Ray", "done"]).apply(selector)

    assert selector.sorted_visible_items == [DRIVERS[1]]
    assert committed == [[DRIVERS[1]]]
    assert not selector.is_list_open


def test_session_remove_requires_multi() -> None:
    selector = create_selector(data=["a"])
    with pytest.raises(ConfigurationError):
        HeadlessSession(["remove:a"]).apply(selector)


def test_session_rejects_unknown_items() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        HeadlessSession(["click:zzz"]).apply(create_selector(data=["a"]))
    assert excinfo.value.context["argument"] == "zzz"


def test_headless_ui_consumes_actions_per_run() -> None:
    ui = HeadlessUI(next_actions=["click:b", "done", "toggle:x", "done", "toggle:y"])
    first = create_selector(data=["a", "b"])
    second = create_selector(data=["x", "y"], multiple=True)

    assert ui.selector.run(first, title="first") == "b"
    assert ui.selector.run(second, title="second") == ["x"]
    assert ui.next_actions == ["toggle:y"]


def test_headless_presenter_records_messages() -> None:
    ui = HeadlessUI()
    ui.present.error("bad")
    ui.present.panel("body", title="Title")
    assert ui.recorded_messages == ["ERROR: bad", "PANEL: Title - body"]


def test_rich_presenter_renders_success_and_panel() -> None:
    console = Console(record=True, width=60, color_system=None)
    presenter = RichPresenter(console)
    presenter.success("saved")
    presenter.panel("body", title="Title")
    output = console.export_text()
    assert "saved" in output
    assert "Title" in output
    assert "body" in output
