"""Parsing of ``DD_*`` environment variables."""

from __future__ import annotations

import os

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def parse_bool_env(value: str | None) -> bool | None:
    """Parse a flag; ``1/true/yes/on`` in any case are true, unset is None."""
    if value is None:
        return None
    return value.strip().lower() in _TRUTHY


def parse_int_env(value: str | None) -> int | None:
    """Parse an integer, or None when unset or not a number."""
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean variable, falling back to ``default`` when unset."""
    parsed = parse_bool_env(os.environ.get(name))
    return default if parsed is None else parsed
