from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from dd_common.api import configure_logging, env_flag
from dd_ui.tui.facade import TUI
from dd_ui.tui.protocols import UI

__all__ = ["UIContext", "configure_logging", "load_headless_default"]


def load_headless_default() -> bool:
    """Return the DD_HEADLESS default for the --headless flag."""
    return env_flag("DD_HEADLESS")


@dataclass
class UIContext:
    """Container for the UI and its mode, initialized lazily."""

    headless: bool = False

    _ui: Optional[UI] = None

    @property
    def ui(self) -> UI:
        if self._ui is None:
            if self.headless:
                from dd_ui.tui.headless import HeadlessUI
                self._ui = HeadlessUI()
            else:
                self._ui = TUI()
        return self._ui

    @ui.setter
    def ui(self, value: UI):
        self._ui = value

    def reset(self) -> None:
        self._ui = None
