"""Public API surface for dd_engine."""

from dd_engine.commit import CommitDispatcher
from dd_engine.comparator import build_sort_spec, compare, sort_items
from dd_engine.equality import EqualityResolver, same_entry
from dd_engine.filtering import should_open, visible
from dd_engine.models import (
    CommitEvent,
    CommitReason,
    Direction,
    ListState,
    SortKey,
    SortSpec,
)
from dd_engine.options import SelectorOptions, parse_options
from dd_engine.reconciler import Controlled, Uncontrolled, reconcile
from dd_engine.selectors import (
    MultiRecordSelector,
    MultiSelector,
    Selector,
    SingleRecordSelector,
    SingleSelector,
    create_selector,
)

__all__ = [
    "build_sort_spec",
    "CommitDispatcher",
    "CommitEvent",
    "CommitReason",
    "compare",
    "Controlled",
    "create_selector",
    "Direction",
    "EqualityResolver",
    "ListState",
    "MultiRecordSelector",
    "MultiSelector",
    "parse_options",
    "reconcile",
    "same_entry",
    "Selector",
    "SelectorOptions",
    "should_open",
    "SingleRecordSelector",
    "SingleSelector",
    "sort_items",
    "SortKey",
    "SortSpec",
    "Uncontrolled",
    "visible",
]
