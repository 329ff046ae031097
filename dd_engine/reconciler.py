"""Reconciliation of host default selection with user edits.

A multi selector runs in one of two modes, picked once when it is built:

* ``Controlled``: the selection is derived from the host's default
  selection on every recomputation and user toggles are ignored.
* ``Uncontrolled``: the default selection seeds the selection until the
  user makes a first edit; from then on the edits are authoritative.

Either way the effective selection is pruned against the current
collection, capped at ``max_selections`` and sorted for display.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Sequence, Union

from dd_engine.comparator import sort_items
from dd_engine.equality import EqualityResolver
from dd_engine.models import SortSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Controlled:
    """Host owns the selection; no edit memory."""


@dataclass
class Uncontrolled:
    """Selection evolves from user edits once there are any."""

    edits: list[Any] | None = None

    @property
    def touched(self) -> bool:
        return self.edits is not None


SelectionMode = Union[Controlled, Uncontrolled]


def selection_mode(sel_reset: bool) -> SelectionMode:
    return Controlled() if sel_reset else Uncontrolled()


def normalize_default(default: Any) -> list[Any]:
    """Coerce a host default selection into a list of items.

    Strings and records count as one item; any other iterable (list, set,
    generator) is a collection of items.
    """
    if default is None:
        return []
    if isinstance(default, (str, bytes, Mapping)):
        return [default]
    if isinstance(default, Iterable):
        return list(default)
    return [default]


def resolve_default(
    default: Any, collection: Sequence[Any], equality: EqualityResolver
) -> Any | None:
    """Return the collection entry equal to ``default``, or None."""
    if default is None:
        return None
    return equality.find(default, collection)


def prune(
    source: Sequence[Any], collection: Sequence[Any], equality: EqualityResolver
) -> list[Any]:
    """Drop entries that are no longer in the collection, and duplicates."""
    kept: list[Any] = []
    for item in source:
        entry = equality.find(item, collection)
        if entry is None:
            logger.debug("Pruned stale selection entry %r", item)
            continue
        if equality.contains(entry, kept):
            continue
        kept.append(entry)
    return kept


def cap(items: Sequence[Any], max_selections: int | None) -> list[Any]:
    """Keep the first ``max_selections`` items in their current order."""
    if max_selections is None or len(items) <= max_selections:
        return list(items)
    logger.debug(
        "Selection of %d entries capped to max_selections=%d",
        len(items),
        max_selections,
    )
    return list(items[:max_selections])


def source_for(mode: SelectionMode, default: Sequence[Any]) -> list[Any]:
    if isinstance(mode, Uncontrolled) and mode.edits is not None:
        return list(mode.edits)
    return list(default)


def reconcile(
    source: Sequence[Any],
    collection: Sequence[Any],
    equality: EqualityResolver,
    max_selections: int | None,
    spec: SortSpec,
) -> list[Any]:
    """Prune, cap, then sort."""
    return sort_items(cap(prune(source, collection, equality), max_selections), spec)


def toggle(
    item: Any,
    effective: Sequence[Any],
    equality: EqualityResolver,
    max_selections: int | None,
) -> list[Any] | None:
    """Return the edits produced by toggling ``item``.

    Returns None when the toggle is refused because the selection is full.
    """
    if equality.contains(item, effective):
        return [entry for entry in effective if not equality.same(entry, item)]
    if max_selections is not None and len(effective) >= max_selections:
        logger.debug("max_selections=%d reached; ignoring %r", max_selections, item)
        return None
    return [*effective, item]


def resolve_single(
    user_selection: Any | None,
    default: Any,
    collection: Sequence[Any],
    equality: EqualityResolver,
) -> Any | None:
    """Effective single selection: the user's pick if still present, else the default."""
    if user_selection is not None:
        entry = equality.find(user_selection, collection)
        if entry is not None:
            return entry
        logger.debug("Pruned stale single selection %r", user_selection)
    return resolve_default(default, collection, equality)
