from __future__ import annotations

from typing import Any, Protocol

from dd_engine.selectors import Selector
from dd_ui.tui.models import TableModel


class TablePresenter(Protocol):
    def show(self, table: TableModel) -> None: ...


class SelectorRunner(Protocol):
    def run(self, selector: Selector, *, title: str) -> Any: ...


class PresenterSink(Protocol):
    def emit(self, level: str, message: str) -> None: ...

    def emit_panel(
        self, message: str, title: str | None, border_style: str | None
    ) -> None: ...


class Presenter(Protocol):
    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def panel(
        self,
        message: str,
        title: str | None = None,
        border_style: str | None = None,
    ) -> None: ...


class UI(Protocol):
    selector: SelectorRunner
    tables: TablePresenter
    present: Presenter
