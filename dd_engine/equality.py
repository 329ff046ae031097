"""Structural equality between selection entries."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Sequence

from dd_engine.models import KeyExtractor

logger = logging.getLogger(__name__)

_MISSING = object()


def same_entry(left: Any, right: Any, field_paths: Sequence[str] | None) -> bool:
    """Return True when two items denote the same selection entry.

    Primitives compare by value. Records compare on every field in
    ``field_paths``; when no field paths are known they compare as whole
    mappings.
    """
    if not isinstance(left, Mapping) or not isinstance(right, Mapping):
        return left == right
    if not field_paths:
        return dict(left) == dict(right)
    return all(
        left.get(path, _MISSING) == right.get(path, _MISSING) for path in field_paths
    )


class EqualityResolver:
    """Decides entry identity for one selector.

    Identity comes from, in order: a ``key`` extractor, declared
    ``identity_fields``, or the field names of the first collection
    element. The derived field list is cached until the collection
    changes.
    """

    def __init__(
        self,
        *,
        identity_fields: Sequence[str] | None = None,
        key: KeyExtractor | None = None,
    ) -> None:
        self._declared = tuple(identity_fields) if identity_fields else None
        self._key = key
        self._derived: tuple[str, ...] = ()

    @property
    def field_paths(self) -> tuple[str, ...]:
        return self._declared if self._declared is not None else self._derived

    def bind(self, collection: Sequence[Any]) -> None:
        """Re-derive field paths from a new collection when none are declared."""
        if self._declared is not None or self._key is not None:
            return
        if collection and isinstance(collection[0], Mapping):
            self._derived = tuple(str(name) for name in collection[0].keys())
            return
        if not collection:
            logger.debug("Empty collection; records will compare as whole mappings")
        self._derived = ()

    def same(self, left: Any, right: Any) -> bool:
        if self._key is not None:
            return self._key(left) == self._key(right)
        return same_entry(left, right, self.field_paths)

    def index_of(self, item: Any, items: Iterable[Any]) -> int:
        for idx, candidate in enumerate(items):
            if self.same(item, candidate):
                return idx
        return -1

    def contains(self, item: Any, items: Iterable[Any]) -> bool:
        return self.index_of(item, items) >= 0

    def find(self, item: Any, items: Iterable[Any]) -> Any | None:
        """Return the entry of ``items`` equal to ``item``, or None."""
        for candidate in items:
            if self.same(item, candidate):
                return candidate
        return None
