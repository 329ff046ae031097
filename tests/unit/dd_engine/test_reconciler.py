import pytest

from dd_engine import reconciler
from dd_engine.comparator import build_sort_spec
from dd_engine.equality import EqualityResolver

pytestmark = pytest.mark.unit_engine


@pytest.fixture
def equality() -> EqualityResolver:
    resolver = EqualityResolver()
    resolver.bind(["x"])
    return resolver


def test_selection_mode_from_sel_reset() -> None:
    assert isinstance(reconciler.selection_mode(True), reconciler.Controlled)
    mode = reconciler.selection_mode(False)
    assert isinstance(mode, reconciler.Uncontrolled)
    assert not mode.touched


def test_normalize_default() -> None:
    assert reconciler.normalize_default(None) == []
    assert reconciler.normalize_default("a") == ["a"]
    assert reconciler.normalize_default(("a", "b")) == ["a", "b"]


def test_normalize_default_accepts_any_collection() -> None:
    assert sorted(reconciler.normalize_default({"b", "a"})) == ["a", "b"]
    assert reconciler.normalize_default(frozenset(["a"])) == ["a"]
    assert reconciler.normalize_default(iter(["a", "b"])) == ["a", "b"]
    record = {"id": 1}
    assert reconciler.normalize_default(record) == [record]


def test_prune_drops_stale_and_duplicates(equality) -> None:
    kept = reconciler.prune(["x", "y", "x", "z"], ["x", "z"], equality)
    assert kept == ["x", "z"]


def test_prune_returns_collection_entries() -> None:
    resolver = EqualityResolver()
    collection = [{"id": 1}]
    resolver.bind(collection)
    kept = reconciler.prune([{"id": 1}], collection, resolver)
    assert kept[0] is collection[0]


def test_cap_keeps_first_entries(equality) -> None:
    assert reconciler.cap(["c", "a", "b"], 2) == ["c", "a"]
    assert reconciler.cap(["a"], None) == ["a"]


def test_reconcile_prunes_caps_then_sorts(equality) -> None:
    spec = build_sort_spec(sort_order="asc")
    result = reconciler.reconcile(["z", "y", "x"], ["x", "z"], equality, None, spec)
    assert result == ["x", "z"]
    capped = reconciler.reconcile(["z", "x", "y"], ["x", "y", "z"], equality, 2, spec)
    assert capped == ["x", "z"]


def test_source_for_modes() -> None:
    assert reconciler.source_for(reconciler.Controlled(), ["a"]) == ["a"]
    assert reconciler.source_for(reconciler.Uncontrolled(), ["a"]) == ["a"]
    assert reconciler.source_for(reconciler.Uncontrolled(edits=[]), ["a"]) == []


def test_toggle_adds_removes_and_refuses_when_full(equality) -> None:
    assert reconciler.toggle("a", [], equality, None) == ["a"]
    assert reconciler.toggle("a", ["a", "b"], equality, None) == ["b"]
    assert reconciler.toggle("c", ["a", "b"], equality, 2) is None
    assert reconciler.toggle("a", ["a", "b"], equality, 2) == ["b"]


def test_resolve_single_prefers_present_user_selection(equality) -> None:
    collection = ["a", "b"]
    assert reconciler.resolve_single("b", "a", collection, equality) == "b"
    assert reconciler.resolve_single("gone", "a", collection, equality) == "a"
    assert reconciler.resolve_single(None, "missing", collection, equality) is None
