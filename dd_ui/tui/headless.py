from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from dd_common.errors import ConfigurationError
from dd_engine.selectors import MultiSelector, Selector
from dd_ui.tui.models import TableModel
from dd_ui.tui.presenter import PresenterBase
from dd_ui.tui.protocols import PresenterSink, SelectorRunner, TablePresenter, UI

ACTIONS = ("type", "click", "toggle", "remove", "open", "close", "done")


@dataclass(frozen=True)
class ScriptedAction:
    """One scripted user event, e.g. ``type:dri`` or ``click:Banana``."""

    name: str
    argument: str = ""

    @classmethod
    def parse(cls, raw: str) -> "ScriptedAction":
        name, _, argument = raw.partition(":")
        name = name.strip().lower()
        if name not in ACTIONS:
            raise ConfigurationError(
                f"Unknown action: {raw!r}",
                context={"action": raw, "allowed": list(ACTIONS)},
            )
        return cls(name=name, argument=argument)


def find_item(selector: Selector, text: str) -> Any | None:
    """Find an item by display text, falling back to its value."""
    for item in selector.sorted_items:
        if selector.display_text(item) == text:
            return item
    for item in selector.sorted_items:
        if str(selector.value_of(item)) == text:
            return item
    return None


class HeadlessSession:
    """Replays scripted actions against a selector, without a terminal."""

    def __init__(self, actions: Sequence[str | ScriptedAction]) -> None:
        self._actions = [
            a if isinstance(a, ScriptedAction) else ScriptedAction.parse(a)
            for a in actions
        ]

    def apply(self, selector: Selector) -> None:
        for action in self._actions:
            self._apply_one(selector, action)

    def _apply_one(self, selector: Selector, action: ScriptedAction) -> None:
        if action.name == "type":
            selector.type_search(action.argument)
            return
        if action.name == "open":
            selector.open_list()
            return
        if action.name in ("close", "done"):
            selector.close_list()
            return
        item = find_item(selector, action.argument)
        if item is None:
            raise ConfigurationError(
                f"No item matches {action.argument!r}",
                context={"action": action.name, "argument": action.argument},
            )
        if action.name == "remove":
            if not isinstance(selector, MultiSelector):
                raise ConfigurationError("remove applies to multi selectors only")
            selector.remove(item)
        else:
            selector.click(item)


@dataclass
class RecordedTable:
    model: TableModel


@dataclass
class HeadlessUI(UI):
    recorded_tables: list[RecordedTable] = field(default_factory=list)
    recorded_messages: list[str] = field(default_factory=list)
    next_actions: list[str] = field(default_factory=list)

    def __post_init__(self):
        self.selector = _HeadlessSelectorRunner(self)
        self.tables = _HeadlessTablePresenter(self)
        self.present = _HeadlessPresenter(self)

    def take_actions(self) -> list[str]:
        """Pop the queued actions up to and including the next ``done``."""
        taken: list[str] = []
        while self.next_actions:
            raw = self.next_actions.pop(0)
            taken.append(raw)
            if ScriptedAction.parse(raw).name == "done":
                break
        return taken


class _HeadlessSelectorRunner(SelectorRunner):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def run(self, selector: Selector, *, title: str) -> Any:
        HeadlessSession(self._ui.take_actions()).apply(selector)
        return selector.effective_selection


class _HeadlessTablePresenter(TablePresenter):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def show(self, table: TableModel) -> None:
        self._ui.recorded_tables.append(RecordedTable(table))


class _HeadlessPresenterSink(PresenterSink):
    def __init__(self, ui: HeadlessUI) -> None:
        self._ui = ui

    def emit(self, level: str, message: str) -> None:
        self._ui.recorded_messages.append(f"{level.upper()}: {message}")

    def emit_panel(
        self,
        message: str,
        title: str | None,
        border_style: str | None,
    ) -> None:
        self._ui.recorded_messages.append(f"PANEL: {title} - {message}")


class _HeadlessPresenter(PresenterBase):
    def __init__(self, ui: HeadlessUI) -> None:
        super().__init__(_HeadlessPresenterSink(ui))
