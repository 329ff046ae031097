from rich.console import Console
from rich.panel import Panel

from dd_ui.tui import theme
from dd_ui.tui.protocols import Presenter, PresenterSink


class PresenterBase(Presenter):
    def __init__(self, sink: PresenterSink) -> None:
        self._sink = sink

    def info(self, message: str) -> None:
        self._sink.emit("info", message)

    def warning(self, message: str) -> None:
        self._sink.emit("warning", message)

    def error(self, message: str) -> None:
        self._sink.emit("error", message)

    def success(self, message: str) -> None:
        self._sink.emit("success", message)

    def panel(
        self,
        message: str,
        title: str | None = None,
        border_style: str | None = None,
    ) -> None:
        self._sink.emit_panel(message, title, border_style)


class _RichPresenterSink(PresenterSink):
    def __init__(self, console: Console) -> None:
        self._console = console

    def emit(self, level: str, message: str) -> None:
        self._console.print(theme.presenter_message(level, message))

    def emit_panel(
        self,
        message: str,
        title: str | None,
        border_style: str | None,
    ) -> None:
        self._console.print(
            Panel(
                message,
                title=theme.panel_title(title) if title else None,
                border_style=border_style or theme.RICH_BORDER_STYLE,
            )
        )


class RichPresenter(PresenterBase):
    def __init__(self, console: Console) -> None:
        super().__init__(_RichPresenterSink(console))
