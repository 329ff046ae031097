"""Reusable selector panel (search box + dropdown list + selected strip) for prompt_toolkit UIs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias

from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.widgets import TextArea

from dd_engine.selectors import MultiSelector, Selector
from dd_ui.tui import theme

RowFragment: TypeAlias = tuple[str, str]


@dataclass(frozen=True)
class SelectorPanelConfig:
    """Configuration for SelectorPanel behavior."""

    wrap_navigation: bool = False
    search_prompt: str = "Search: "
    empty_hint: str = "No matching items"


class SelectorPanel:
    """Draws a selector's outputs and forwards user input to it.

    The panel never sorts, filters or compares items itself: every row
    comes from ``selector.sorted_visible_items`` and every check mark from
    ``selector.is_item_selected``. It only owns the cursor position.
    """

    def __init__(
        self,
        selector: Selector,
        *,
        config: SelectorPanelConfig | None = None,
    ) -> None:
        self._selector = selector
        self._config = config or SelectorPanelConfig()
        self._cursor = 0
        self._syncing = False

        self.search = TextArea(
            height=1,
            prompt=self._config.search_prompt,
            style="class:search",
            multiline=False,
            read_only=selector.is_disabled,
        )
        self.header_control = FormattedTextControl(self.render_header)
        self.list_control = FormattedTextControl(self.render_list, focusable=True)
        self.chips_control = FormattedTextControl(self.render_chips)

        self.search.buffer.on_text_changed += lambda _: self._on_search_changed()
        self.sync_input()

    @property
    def selector(self) -> Selector:
        return self._selector

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current_item(self) -> Any | None:
        """Return the visible item under the cursor, if the list is open."""
        items = self._selector.sorted_visible_items
        if not self._selector.is_list_open or not items:
            return None
        return items[self._clamp(self._cursor, len(items))]

    def move(self, delta: int) -> None:
        count = len(self._selector.sorted_visible_items)
        if not count:
            return
        if self._config.wrap_navigation:
            self._cursor = (self._cursor + delta) % count
            return
        self._cursor = self._clamp(self._cursor + delta, count)

    def sync_input(self) -> None:
        """Show the selector's input text without treating it as typing."""
        text = self._selector.input_text
        if self.search.text == text:
            return
        self._syncing = True
        try:
            self.search.text = text
        finally:
            self._syncing = False

    def _on_search_changed(self) -> None:
        if self._syncing:
            return
        self._selector.type_search(self.search.text)
        self._cursor = 0

    @staticmethod
    def _clamp(value: int, count: int) -> int:
        if not count:
            return 0
        return max(0, min(value, count - 1))

    def render_header(self) -> list[RowFragment]:
        selector = self._selector
        arrow = theme.LIST_OPEN_ARROW if selector.is_list_open else theme.LIST_CLOSED_ARROW
        fragments: list[RowFragment] = [("class:title", f" {selector.label or 'Select'} ")]
        fragments.append(("", f"[{arrow}] "))
        if selector.is_disabled:
            fragments.append(("class:disabled", "(disabled) "))
        elif not selector.search_text:
            fragments.append(("class:hint", selector.placeholder))
        return fragments

    def render_row(self, item: Any, is_cursor: bool) -> RowFragment:
        selector = self._selector
        checked = selector.is_item_selected(item)
        marker = "▸" if is_cursor else " "
        if isinstance(selector, MultiSelector):
            box = "[x]" if checked else "[ ]"
            text = f" {marker} {box} {selector.display_text(item)}"
        else:
            text = f" {marker} {selector.display_text(item)}"
        style = ""
        if is_cursor:
            style = "class:cursor"
        elif checked:
            style = "class:checked"
        return style, text

    def render_list(self) -> list[RowFragment]:
        selector = self._selector
        if not selector.is_list_open:
            return []
        items = selector.sorted_visible_items
        if not items:
            return [("class:hint", f" {self._config.empty_hint}\n")]
        cursor = self._clamp(self._cursor, len(items))
        fragments: list[RowFragment] = []
        for idx, item in enumerate(items):
            style, text = self.render_row(item, idx == cursor)
            fragments.append((style, f"{text}\n"))
        return fragments

    def render_chips(self) -> list[RowFragment]:
        selector = self._selector
        if not isinstance(selector, MultiSelector):
            return []
        fragments: list[RowFragment] = []
        for item in selector.effective_selection:
            fragments.append(
                ("class:chip", f" {selector.display_text(item)} {theme.DISMISS_MARK} ")
            )
            fragments.append(("", " "))
        if selector.max_selections is not None:
            count = len(selector.effective_selection)
            fragments.append(("class:hint", f"({count}/{selector.max_selections})"))
        return fragments
