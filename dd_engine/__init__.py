"""Selection engine for searchable dropdowns."""

from dd_engine.api import (
    MultiRecordSelector,
    MultiSelector,
    SelectorOptions,
    SingleRecordSelector,
    SingleSelector,
    create_selector,
)

__all__ = [
    "create_selector",
    "MultiRecordSelector",
    "MultiSelector",
    "SelectorOptions",
    "SingleRecordSelector",
    "SingleSelector",
]
