"""Search filtering of a sorted collection."""

from __future__ import annotations

from typing import Any, Callable, Sequence

DisplayFn = Callable[[Any], str]


def matches(display_text: str, search_text: str) -> bool:
    return search_text.casefold() in display_text.casefold()


def visible(
    sorted_items: Sequence[Any],
    search_text: str,
    display: DisplayFn = str,
) -> list[Any]:
    """Return the items whose display text contains ``search_text``.

    An empty search returns the sorted input unchanged. Filtering keeps
    the incoming order and never re-sorts.
    """
    if not search_text:
        return list(sorted_items)
    return [item for item in sorted_items if matches(display(item), search_text)]


def should_open(visible_items: Sequence[Any]) -> bool:
    """The list shows only while there is something to show."""
    return len(visible_items) > 0
