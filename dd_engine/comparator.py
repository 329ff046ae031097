"""Ordering of collection items from a declarative sort spec."""

from __future__ import annotations

from functools import cmp_to_key
from numbers import Number
from typing import Any, Iterable, Sequence

from dd_common.errors import ConfigurationError
from dd_engine.models import Direction, SortKey, SortSpec

SortFieldSpec = str | tuple[str, str | Direction] | SortKey

_MISSING = object()


def _type_rank(value: Any) -> int:
    if value is None or value is _MISSING:
        return 0
    if isinstance(value, bool):
        return 1
    if isinstance(value, Number):
        return 2
    if isinstance(value, str):
        return 3
    return 4


def compare_keys(left: Any, right: Any) -> int:
    """Three-way comparison of two sort keys.

    Numbers compare numerically and strings lexicographically. Keys of
    different kinds fall back to a fixed type rank so every pair of keys
    is ordered.
    """
    left_rank, right_rank = _type_rank(left), _type_rank(right)
    if left_rank != right_rank:
        return -1 if left_rank < right_rank else 1
    if left_rank == 0:
        return 0
    try:
        if left < right:
            return -1
        if left > right:
            return 1
        return 0
    except TypeError:
        left_text, right_text = str(left), str(right)
        return (left_text > right_text) - (left_text < right_text)


def read_key(item: Any, field: str | None) -> Any:
    if field is None:
        return item
    try:
        return item[field]
    except (KeyError, TypeError, IndexError):
        return _MISSING


def compare(left: Any, right: Any, spec: SortSpec) -> int:
    """Return -1, 0 or 1; the first sort key that differs decides."""
    for key in spec:
        result = compare_keys(read_key(left, key.field), read_key(right, key.field))
        if result:
            return result * key.direction.sign
    return 0


def sort_items(items: Iterable[Any], spec: SortSpec) -> list[Any]:
    """Return a new, stably sorted list; the input is never mutated."""
    return sorted(items, key=cmp_to_key(lambda a, b: compare(a, b, spec)))


def parse_direction(value: str | Direction | None) -> Direction:
    if value is None:
        return Direction.ASC
    if isinstance(value, Direction):
        return value
    if not isinstance(value, str):
        raise ConfigurationError(
            f"Unsupported sort direction: {value!r}",
            context={"direction": value, "allowed": [d.value for d in Direction]},
        )
    try:
        return Direction(value.strip().lower())
    except ValueError as exc:
        raise ConfigurationError(
            f"Unsupported sort direction: {value!r}",
            context={"direction": value, "allowed": [d.value for d in Direction]},
            cause=exc,
        ) from exc


def _parse_sort_field(entry: SortFieldSpec) -> SortKey:
    if isinstance(entry, SortKey):
        return entry
    if isinstance(entry, str):
        parts = entry.split()
        if not parts or len(parts) > 2:
            raise ConfigurationError(
                f"Invalid sort field: {entry!r}", context={"sort_field": entry}
            )
        direction = parse_direction(parts[1] if len(parts) == 2 else None)
        return SortKey(field=parts[0], direction=direction)
    if (
        isinstance(entry, (tuple, list))
        and len(entry) == 2
        and isinstance(entry[0], str)
    ):
        field, direction = entry
        return SortKey(field=field, direction=parse_direction(direction))
    raise ConfigurationError(
        f"Invalid sort field: {entry!r}", context={"sort_field": entry}
    )


def build_sort_spec(
    sort_fields: Sequence[SortFieldSpec] | None = None,
    sort_order: str | Direction | None = None,
    display_field: str | None = None,
) -> SortSpec:
    """Build a SortSpec from host options.

    Primitives use ``sort_order`` alone. Records use ``sort_fields`` when
    given (``"name"``, ``"name desc"`` or ``("name", "desc")``), otherwise
    they sort by ``display_field`` in ``sort_order``.
    """
    if sort_fields:
        return SortSpec(tuple(_parse_sort_field(entry) for entry in sort_fields))
    direction = parse_direction(sort_order)
    return SortSpec((SortKey(field=display_field, direction=direction),))
