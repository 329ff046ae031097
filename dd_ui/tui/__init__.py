"""
UI adapter package providing prompt_toolkit/Rich-based and headless renderers.
"""

from dd_ui.tui.facade import TUI
from dd_ui.tui.headless import HeadlessSession, HeadlessUI
from dd_ui.tui.protocols import Presenter, SelectorRunner, TablePresenter, UI
from dd_ui.tui.selector_panel import SelectorPanel
from dd_ui.tui.selector_screen import SelectorScreen

__all__ = [
    "UI",
    "TUI",
    "HeadlessSession",
    "HeadlessUI",
    "Presenter",
    "SelectorPanel",
    "SelectorRunner",
    "SelectorScreen",
    "TablePresenter",
]
