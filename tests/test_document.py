"""Tests for DynamicDocument."""

import copy

from dynjson import DynamicDocument, Resolution


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def test_wraps_without_copying():
    data = {"a": 1}
    doc = DynamicDocument(data)
    assert doc.mapping is data


def test_default_is_empty_map():
    doc = DynamicDocument()
    assert doc.mapping == {}
    doc.x = 1
    assert doc.mapping == {"x": 1}


def test_defaults_are_not_shared():
    a, b = DynamicDocument(), DynamicDocument()
    a.x = 1
    assert b.mapping == {}


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------

def test_missing_member_is_none():
    doc = DynamicDocument({"a": 1})
    assert doc.nope is None
    assert doc["nope"] is None
    assert doc.resolve("nope") == Resolution(None, True)


def test_attribute_and_index_agree():
    doc = DynamicDocument({"name": "Joe", "age": 36})
    assert doc.name == doc["name"] == doc.get("name") == "Joe"
    assert doc.age == 36


def test_nested_chain():
    doc = DynamicDocument({"org": {"boss": {"name": "Joe"}}})
    assert doc.org.boss.name == "Joe"


def test_clashing_name_reachable_by_index():
    doc = DynamicDocument({"get": "g", "mapping": "m"})
    assert callable(doc.get)
    assert doc["get"] == "g"
    assert doc["mapping"] == "m"


def test_list_of_objects():
    doc = DynamicDocument({"items": [{"n": "x"}, {"n": "y"}]})
    items = doc.items
    assert len(items) == 2
    assert all(isinstance(i, DynamicDocument) for i in items)
    assert items[0].n == "x"
    assert items[1].n == "y"


def test_empty_list_not_wrapped():
    doc = DynamicDocument({"items": []})
    assert doc.items == []
    assert not isinstance(doc.items, DynamicDocument)


def test_dunder_lookup_not_treated_as_member():
    doc = DynamicDocument({})
    assert not hasattr(doc, "__missing_protocol__")


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------

def test_nested_write_mutates_backing_map():
    data = {"outer": {"inner": "v"}}
    doc = DynamicDocument(data)
    wrapper = doc.outer
    wrapper.k2 = "new"
    assert data["outer"]["k2"] == "new"


def test_two_wrappers_alias_same_map():
    data = {"o": {}}
    doc = DynamicDocument(data)
    first, second = doc.o, doc.o
    first.x = 1
    assert second.x == 1


def test_external_mutation_visible():
    data = {"a": 1}
    doc = DynamicDocument(data)
    data["a"] = 2
    assert doc.a == 2


def test_set_returns_true_and_index_set():
    doc = DynamicDocument()
    assert doc.set("a", 1) is True
    doc["b"] = 2
    assert doc.mapping == {"a": 1, "b": 2}


def test_set_stores_raw_document():
    doc = DynamicDocument()
    child = DynamicDocument({"k": "v"})
    doc.child = child
    assert doc.mapping["child"] is child
    assert doc.child is child


# ---------------------------------------------------------------------------
# Iteration
# ---------------------------------------------------------------------------

def test_iteration_follows_insertion_order():
    doc = DynamicDocument()
    doc.z = 1
    doc.a = 2
    doc.m = 3
    assert [k for k, _ in doc] == ["z", "a", "m"]


def test_iteration_yields_raw_values():
    inner = {"k": 1}
    items = [{"n": 1}]
    doc = DynamicDocument({"o": inner, "l": items})
    pairs = list(doc)
    assert pairs == [("o", inner), ("l", items)]
    assert pairs[0][1] is inner
    assert pairs[1][1] is items


def test_iteration_restarts():
    doc = DynamicDocument({"a": 1})
    assert list(doc) == list(doc) == [("a", 1)]
    doc.b = 2
    assert list(doc) == [("a", 1), ("b", 2)]


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def test_str_serializes():
    assert str(DynamicDocument({"a": "x"})) == '{"a":"x"}'


def test_repr():
    assert repr(DynamicDocument({"a": 1})) == "DynamicDocument({'a': 1})"


def test_shallow_copy_shares_map():
    data = {"a": 1}
    clone = copy.copy(DynamicDocument(data))
    assert clone.mapping is data
