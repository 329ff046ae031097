from __future__ import annotations

import sys
from typing import Any

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame

from dd_engine.selectors import MultiSelector, Selector
from dd_ui.tui import theme
from dd_ui.tui.protocols import SelectorRunner
from dd_ui.tui.selector_panel import SelectorPanel, SelectorPanelConfig

_SINGLE_HINT = "Enter=select  F2=show/hide list  Esc=finish  Ctrl+C=cancel"
_MULTI_HINT = (
    "Enter=toggle  Ctrl+X=remove  Ctrl+D=done  F2=show/hide list  Ctrl+C=cancel"
)


class SelectorScreen:
    """Full-screen prompt_toolkit front end for one selector."""

    def __init__(
        self,
        selector: Selector,
        *,
        title: str,
        config: SelectorPanelConfig | None = None,
    ) -> None:
        self._selector = selector
        self._multi = isinstance(selector, MultiSelector)
        self._panel = SelectorPanel(selector, config=config)
        self.search = self._panel.search
        self._kb = self._bindings()

        hint = _MULTI_HINT if self._multi else _SINGLE_HINT
        inner_layout = HSplit(
            [
                Window(self._panel.header_control, height=1),
                self.search,
                (
                    Window(self._panel.chips_control, height=1)
                    if self._multi
                    else Window(height=0)
                ),
                Window(height=1, char="-", style="class:separator"),
                Window(self._panel.list_control),
                Window(FormattedTextControl([("class:hint", hint)]), height=1),
            ]
        )
        self._app: Application = Application(
            layout=Layout(Frame(inner_layout, title=title), focused_element=self.search),
            key_bindings=self._kb,
            style=Style.from_dict(dict(theme.prompt_toolkit_selector_style())),
            full_screen=True,
        )

    @property
    def panel(self) -> SelectorPanel:
        return self._panel

    def run(self) -> Any:
        return self._app.run()

    def _refresh(self) -> None:
        self._panel.sync_input()
        self._app.invalidate()

    def _bindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("down")
        def _(event: Any) -> None:
            self._panel.move(1)
            self._refresh()

        @kb.add("up")
        def _(event: Any) -> None:
            self._panel.move(-1)
            self._refresh()

        @kb.add("enter")
        def _(event: Any) -> None:
            self.activate()

        @kb.add("f2")
        def _(event: Any) -> None:
            self._selector.toggle_list()
            self._refresh()

        @kb.add("c-x")
        def _(event: Any) -> None:
            self.remove_current()

        @kb.add("c-d")
        def _(event: Any) -> None:
            self._selector.close_list()
            if self._multi:
                self._exit(self._selector.effective_selection)
            else:
                self._refresh()

        @kb.add("escape")
        def _(event: Any) -> None:
            if self._multi:
                self._selector.close_list()
            self._exit(self._selector.effective_selection)

        @kb.add("c-c")
        def _(event: Any) -> None:
            self._exit(None)

        return kb

    def activate(self) -> None:
        """Enter: open the list, or click the item under the cursor."""
        current = self._panel.current_item
        if current is None:
            self._selector.open_list()
            self._refresh()
            return
        committed = self._selector.commit_count
        self._selector.click(current)
        if not self._multi and self._selector.commit_count > committed:
            self._exit(self._selector.last_commit.payload)
            return
        self._refresh()

    def remove_current(self) -> None:
        if not self._multi:
            return
        current = self._panel.current_item
        if current is None:
            selection = self._selector.effective_selection
            current = selection[-1] if selection else None
        if current is not None:
            self._selector.remove(current)
        self._refresh()

    def _exit(self, result: Any) -> None:
        try:
            self._app.exit(result=result)
        except Exception as exc:  # pragma: no cover
            if "Return value already set" not in str(exc):
                raise


class PromptToolkitRunner(SelectorRunner):
    """Runs a SelectorScreen when attached to a terminal."""

    def run(self, selector: Selector, *, title: str) -> Any:
        if not sys.stdin.isatty() or not sys.stdout.isatty():
            return None
        return SelectorScreen(selector, title=title).run()
