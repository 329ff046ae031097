"""Core value types shared by the selection engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, TypeAlias

KeyExtractor: TypeAlias = Callable[[Any], Any]
CommitCallback: TypeAlias = Callable[[Any], None]


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @property
    def sign(self) -> int:
        return 1 if self is Direction.ASC else -1


@dataclass(frozen=True)
class SortKey:
    """One tie-break level of a sort spec; ``field=None`` compares the item itself."""

    field: str | None = None
    direction: Direction = Direction.ASC


@dataclass(frozen=True)
class SortSpec:
    keys: tuple[SortKey, ...] = field(default_factory=lambda: (SortKey(),))

    def __iter__(self):
        return iter(self.keys)

    def __len__(self) -> int:
        return len(self.keys)

    @property
    def fields(self) -> list[str]:
        return [key.field for key in self.keys if key.field is not None]


class ListState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


class CommitReason(str, Enum):
    CLICK = "click"
    CLOSE = "close"
    AUTO_HIDE = "auto_hide"
    REMOVE = "remove"


@dataclass(frozen=True)
class CommitEvent:
    """A selection reported to the host; ``payload`` is an item or a list snapshot."""

    sequence: int
    reason: CommitReason
    payload: Any
