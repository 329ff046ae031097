import pytest

from dd_engine.filtering import matches, should_open, visible

pytestmark = pytest.mark.unit_engine


def test_empty_search_returns_sorted_copy() -> None:
    items = ["A", "B", "C"]
    shown = visible(items, "")
    assert shown == items
    assert shown is not items


def test_search_is_case_insensitive_substring() -> None:
    assert visible(["A", "B", "Bob", "C"], "b") == ["B", "Bob"]
    assert matches("Heavy Goods", "GOODS")


def test_filter_keeps_sorted_order_and_is_subset() -> None:
    items = ["alpha", "beta", "gamma", "delta"]
    shown = visible(items, "a")
    assert set(shown) <= set(items)
    assert shown == [item for item in items if item in shown]


def test_records_filter_on_display_text() -> None:
    records = [{"name": "Ann"}, {"name": "Bob"}]
    assert visible(records, "an", lambda r: r["name"]) == [{"name": "Ann"}]


def test_should_open_only_with_items() -> None:
    assert should_open(["a"])
    assert not should_open([])
