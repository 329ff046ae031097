from rich.console import Console

from dd_ui.tui.presenter import RichPresenter
from dd_ui.tui.protocols import Presenter, SelectorRunner, TablePresenter, UI
from dd_ui.tui.selector_screen import PromptToolkitRunner
from dd_ui.tui.table import RichTablePresenter


class TUI(UI):
    def __init__(self, console: Console | None = None):
        self._console = console or Console()
        self.selector: SelectorRunner = PromptToolkitRunner()
        self.tables: TablePresenter = RichTablePresenter(self._console)
        self.present: Presenter = RichPresenter(self._console)
