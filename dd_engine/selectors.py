"""Searchable selectors: single/multi selection over primitives or records.

Every selector owns the same derived state:

* ``sorted_items``: the collection ordered by the sort spec
* ``sorted_visible_items``: the sorted items matching the search text
* ``effective_selection``: the reconciled selection
* ``is_list_open``: whether the dropdown list is showing

The host pushes new options with ``update``; user events arrive through
``type_search``, ``click``, ``toggle``, ``remove``, ``open_list`` and
``close_list``. Every derived value is recomputed synchronously before the
event handler returns.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from dd_common.errors import ConfigurationError
from dd_engine.commit import CommitDispatcher
from dd_engine.comparator import build_sort_spec, sort_items
from dd_engine.equality import EqualityResolver
from dd_engine.filtering import should_open, visible
from dd_engine.models import CommitCallback, CommitEvent, CommitReason, ListState, SortSpec
from dd_engine.options import SelectorOptions, parse_options, validate_records
from dd_engine import reconciler

logger = logging.getLogger(__name__)


class _SelectorBase:
    multiple = False
    records = False

    def __init__(
        self, options: SelectorOptions | Mapping[str, Any] | None = None, **kwargs: Any
    ) -> None:
        self._options = parse_options(options, **kwargs)
        self._equality = EqualityResolver(
            identity_fields=self._options.identity_fields, key=self._options.key
        )
        self._commits = CommitDispatcher(self._options.on_selection_committed)
        self._search_text = ""
        self._typing = False
        self._list_state = ListState.CLOSED
        self._sort_spec = SortSpec()
        self._sorted: list[Any] = []
        self._visible: list[Any] = []
        self._init_selection_state()
        self._apply_options(self._check_options(self._options))

    # -- host inputs -----------------------------------------------------

    @property
    def options(self) -> SelectorOptions:
        return self._options

    def update(self, **changes: Any) -> None:
        """Push new host options (a re-render) and recompute derived state."""
        options = parse_options(self._options, **changes)
        if options.sel_reset != self._options.sel_reset:
            raise ConfigurationError(
                "sel_reset is fixed when the selector is created",
                context={"current": self._options.sel_reset},
            )
        sort_spec = self._check_options(options)
        if (options.identity_fields, options.key) != (
            self._options.identity_fields,
            self._options.key,
        ):
            self._equality = EqualityResolver(
                identity_fields=options.identity_fields, key=options.key
            )
        self._options = options
        self._apply_options(sort_spec)
        self._commits.set_host_callback(options.on_selection_committed)

    def _check_options(self, options: SelectorOptions) -> SortSpec:
        """Validate options and build their sort spec; state is left untouched."""
        if self.records:
            validate_records(options.data, options.display_field, options.value_field)
        return build_sort_spec(
            options.sort_fields,
            options.sort_order,
            options.display_field if self.records else None,
        )

    def _apply_options(self, sort_spec: SortSpec) -> None:
        options = self._options
        self._sort_spec = sort_spec
        self._equality.bind(options.data)
        self._sorted = sort_items(options.data, self._sort_spec)
        self._revalidate_selection()
        self._refresh_visible()
        if self._list_state is ListState.OPEN and not should_open(self._visible):
            self._list_state = ListState.CLOSED

    def _init_selection_state(self) -> None:
        """Set up the variant's selection memory."""

    def _revalidate_selection(self) -> None:
        """Re-apply prune/cap rules after the collection changed."""

    def _refresh_visible(self) -> None:
        self._visible = visible(self._sorted, self._search_text, self.display_text)

    # -- outputs ---------------------------------------------------------

    @property
    def label(self) -> str:
        return self._options.label

    @property
    def placeholder(self) -> str:
        if self._options.label:
            return f"Type to Search for {self._options.label}"
        return "Type to search"

    @property
    def is_disabled(self) -> bool:
        return self._options.is_disabled

    @property
    def sorted_items(self) -> list[Any]:
        return list(self._sorted)

    @property
    def sorted_visible_items(self) -> list[Any]:
        return list(self._visible)

    @property
    def search_text(self) -> str:
        return self._search_text

    @property
    def is_list_open(self) -> bool:
        return self._list_state is ListState.OPEN

    @property
    def list_state(self) -> ListState:
        return self._list_state

    @property
    def commit_count(self) -> int:
        return self._commits.count

    @property
    def last_commit(self) -> CommitEvent | None:
        return self._commits.last

    def subscribe(self, callback: CommitCallback):
        return self._commits.subscribe(callback)

    def display_text(self, item: Any) -> str:
        if self.records:
            return str(item[self._options.display_field])
        return str(item)

    def value_of(self, item: Any) -> Any:
        if self.records:
            return item[self._options.value_field]
        return item

    def is_item_selected(self, item: Any) -> bool:
        raise NotImplementedError

    @property
    def effective_selection(self) -> Any:
        raise NotImplementedError

    # -- user events -----------------------------------------------------

    def _accepts(self, action: str) -> bool:
        if self._options.is_disabled:
            logger.debug("Selector disabled; ignoring %s", action)
            return False
        return True

    def _entry_for(self, item: Any) -> Any | None:
        entry = self._equality.find(item, self._sorted)
        if entry is None:
            logger.debug("Ignoring %r: not in the collection", item)
        return entry

    def type_search(self, text: str) -> None:
        """Handle a change of the search box text.

        Matches open the list; no matches hide it. A multi selector commits
        on that auto-hide only when the list was showing, so repeated
        searches without matches do not re-commit an unchanged selection.
        """
        if not self._accepts("search"):
            return
        self._search_text = text
        self._typing = True
        self._refresh_visible()
        if should_open(self._visible):
            self._list_state = ListState.OPEN
        elif self._list_state is ListState.OPEN:
            self._hide_list(CommitReason.AUTO_HIDE)

    def open_list(self) -> bool:
        if not self._accepts("open"):
            return False
        if should_open(self._visible):
            self._list_state = ListState.OPEN
        return self.is_list_open

    def close_list(self) -> None:
        if not self._accepts("close"):
            return
        self._hide_list(CommitReason.CLOSE)

    def toggle_list(self) -> None:
        """The +/- arrow next to the search box."""
        if self.is_list_open:
            self.close_list()
        else:
            self.open_list()

    def _hide_list(self, reason: CommitReason) -> None:
        self._list_state = ListState.CLOSED

    def click(self, item: Any) -> None:
        raise NotImplementedError


class SingleSelector(_SelectorBase):
    """Single selection over primitive values.

    Each click commits the clicked item immediately.
    """

    def _init_selection_state(self) -> None:
        self._user_selection: Any | None = None

    def _revalidate_selection(self) -> None:
        if self._user_selection is None:
            return
        entry = self._equality.find(self._user_selection, self._sorted)
        if entry is None:
            logger.debug("Dropping stale user selection %r", self._user_selection)
        self._user_selection = entry

    @property
    def effective_selection(self) -> Any | None:
        return reconciler.resolve_single(
            self._user_selection,
            self._options.default_selection,
            self._sorted,
            self._equality,
        )

    @property
    def input_text(self) -> str:
        """Text for the search box: typed text while searching, else the selection."""
        if self._typing:
            return self._search_text
        selected = self.effective_selection
        return "" if selected is None else self.display_text(selected)

    def is_item_selected(self, item: Any) -> bool:
        selected = self.effective_selection
        return selected is not None and self._equality.same(selected, item)

    def click(self, item: Any) -> None:
        if not self._accepts("click"):
            return
        entry = self._entry_for(item)
        if entry is None:
            return
        self._user_selection = entry
        self._search_text = ""
        self._typing = False
        self._refresh_visible()
        self._list_state = ListState.CLOSED
        self._commits.commit(CommitReason.CLICK, entry)


class SingleRecordSelector(SingleSelector):
    """Single selection over records shown by ``display_field``."""

    records = True


class MultiSelector(_SelectorBase):
    """Multi selection over primitive values.

    Toggles are batched; the selection is committed when the list is
    closed ("Done") or an entry is removed from the selected strip.
    """

    multiple = True

    def _init_selection_state(self) -> None:
        self._mode: reconciler.SelectionMode = reconciler.selection_mode(
            self._options.sel_reset
        )

    @property
    def mode(self) -> reconciler.SelectionMode:
        return self._mode

    @property
    def is_controlled(self) -> bool:
        return isinstance(self.mode, reconciler.Controlled)

    @property
    def max_selections(self) -> int | None:
        return self._options.max_selections

    def _revalidate_selection(self) -> None:
        mode = self.mode
        if isinstance(mode, reconciler.Uncontrolled) and mode.edits is not None:
            mode.edits = reconciler.cap(
                reconciler.prune(mode.edits, self._sorted, self._equality),
                self._options.max_selections,
            )

    @property
    def effective_selection(self) -> list[Any]:
        source = reconciler.source_for(
            self.mode, reconciler.normalize_default(self._options.default_selection)
        )
        return reconciler.reconcile(
            source,
            self._sorted,
            self._equality,
            self._options.max_selections,
            self._sort_spec,
        )

    @property
    def selected_values(self) -> list[Any]:
        return [self.value_of(item) for item in self.effective_selection]

    @property
    def can_select_more(self) -> bool:
        limit = self._options.max_selections
        return limit is None or len(self.effective_selection) < limit

    @property
    def input_text(self) -> str:
        return self._search_text

    def is_item_selected(self, item: Any) -> bool:
        return self._equality.contains(item, self.effective_selection)

    def toggle(self, item: Any) -> bool:
        """Add or remove ``item``; returns True when the selection changed."""
        if not self._accepts("toggle"):
            return False
        mode = self.mode
        if isinstance(mode, reconciler.Controlled):
            logger.debug("Controlled selector; ignoring toggle of %r", item)
            return False
        entry = self._entry_for(item)
        if entry is None:
            return False
        edits = reconciler.toggle(
            entry,
            self.effective_selection,
            self._equality,
            self._options.max_selections,
        )
        if edits is None:
            return False
        mode.edits = edits
        return True

    def click(self, item: Any) -> None:
        self.toggle(item)

    def remove(self, item: Any) -> None:
        """Dismiss a selected entry and commit the result."""
        if not self._accepts("remove"):
            return
        if not self.is_item_selected(item):
            logger.debug("Ignoring removal of unselected %r", item)
            return
        mode = self.mode
        if isinstance(mode, reconciler.Uncontrolled):
            mode.edits = [
                entry
                for entry in self.effective_selection
                if not self._equality.same(entry, item)
            ]
        self._commits.commit(CommitReason.REMOVE, self.effective_selection)

    def _hide_list(self, reason: CommitReason) -> None:
        super()._hide_list(reason)
        self._commits.commit(reason, self.effective_selection)


class MultiRecordSelector(MultiSelector):
    """Multi selection over records shown by ``display_field``."""

    records = True


Selector = SingleSelector | MultiSelector


def selector_class(options: SelectorOptions) -> type[_SelectorBase]:
    if options.multiple:
        return MultiRecordSelector if options.has_records else MultiSelector
    return SingleRecordSelector if options.has_records else SingleSelector


def create_selector(
    options: SelectorOptions | Mapping[str, Any] | None = None, **kwargs: Any
) -> Selector:
    """Pick the selector variant from ``multiple`` and the shape of the data."""
    parsed = parse_options(options, **kwargs)
    return selector_class(parsed)(parsed)
