import io

import pytest
from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from dd_engine.api import create_selector
from dd_ui.tui.selector_screen import PromptToolkitRunner, SelectorScreen

pytestmark = pytest.mark.unit_ui


@pytest.fixture(autouse=True)
def app_session():
    with create_pipe_input() as pipe_input:
        with create_app_session(input=pipe_input, output=DummyOutput()):
            yield


def _screen(selector, monkeypatch):
    screen = SelectorScreen(selector, title="Test")
    exits: list[object] = []
    monkeypatch.setattr(screen, "_exit", exits.append)
    return screen, exits


def test_enter_opens_list_then_clicks(monkeypatch) -> None:
    selector = create_selector(data=["b", "a"])
    screen, exits = _screen(selector, monkeypatch)

    screen.activate()
    assert selector.is_list_open
    assert exits == []

    screen.activate()
    assert selector.effective_selection == "a"
    assert exits == ["a"]


def test_multi_enter_toggles_without_exiting(monkeypatch) -> None:
    selector = create_selector(data=["a", "b"], multiple=True)
    screen, exits = _screen(selector, monkeypatch)
    selector.open_list()

    screen.activate()
    screen.panel.move(1)
    screen.activate()

    assert selector.effective_selection == ["a", "b"]
    assert selector.commit_count == 0
    assert exits == []


def test_remove_current_falls_back_to_last_selected(monkeypatch) -> None:
    selector = create_selector(data=["a", "b"], multiple=True, defaultSelection=["a", "b"])
    screen, _ = _screen(selector, monkeypatch)

    screen.remove_current()

    assert selector.effective_selection == ["a"]
    assert selector.commit_count == 1


def test_runner_needs_a_terminal(monkeypatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO())
    assert PromptToolkitRunner().run(create_selector(data=["a"]), title="T") is None
