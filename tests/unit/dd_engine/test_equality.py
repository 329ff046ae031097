import pytest

from dd_engine.equality import EqualityResolver, same_entry

pytestmark = pytest.mark.unit_engine


def test_primitives_compare_by_value() -> None:
    assert same_entry("a", "a", None)
    assert not same_entry("a", "A", None)
    assert not same_entry({"a": 1}, "a", ("a",))


def test_distinct_record_instances_with_same_fields_are_equal() -> None:
    resolver = EqualityResolver()
    first = {"fullName": "Ann", "id": "1"}
    resolver.bind([first])
    assert resolver.same(first, dict(first))
    assert resolver.field_paths == ("fullName", "id")


def test_field_paths_come_from_first_element() -> None:
    resolver = EqualityResolver()
    resolver.bind([{"id": 1}, {"id": 2, "extra": "x"}])
    assert resolver.same({"id": 2, "extra": "x"}, {"id": 2, "extra": "y"})


def test_declared_identity_fields_win() -> None:
    resolver = EqualityResolver(identity_fields=["id"])
    resolver.bind([{"id": 1, "name": "a"}])
    assert resolver.same({"id": 1, "name": "a"}, {"id": 1, "name": "renamed"})
    assert not resolver.same({"id": 1}, {"id": 2})


def test_key_extractor_wins() -> None:
    resolver = EqualityResolver(identity_fields=["name"], key=lambda r: r["id"])
    resolver.bind([{"id": 1, "name": "a"}])
    assert resolver.same({"id": 1, "name": "a"}, {"id": 1, "name": "b"})


def test_empty_collection_compares_whole_records() -> None:
    resolver = EqualityResolver()
    resolver.bind([])
    assert resolver.field_paths == ()
    assert resolver.same({"id": 1}, {"id": 1})
    assert not resolver.same({"id": 1}, {"id": 2})


def test_rebinding_refreshes_field_paths() -> None:
    resolver = EqualityResolver()
    resolver.bind([{"a": 1}])
    resolver.bind([{"b": 1}])
    assert resolver.field_paths == ("b",)


def test_find_index_and_contains() -> None:
    resolver = EqualityResolver()
    items = [{"id": 1}, {"id": 2}]
    resolver.bind(items)
    assert resolver.index_of({"id": 2}, items) == 1
    assert resolver.find({"id": 2}, items) is items[1]
    assert resolver.contains({"id": 1}, items)
    assert resolver.find({"id": 3}, items) is None
