"""Tests for the JSON file key-value store."""

from __future__ import annotations

import json

import pytest

from virtual_gallery.storage import KeyValueStore


def test_get_returns_default_when_file_missing(tmp_path):
    store = KeyValueStore(tmp_path / "store.json")

    assert store.get("@favorites") is None
    assert store.get("@favorites", {}) == {}


def test_set_then_get_survives_new_instance(tmp_path):
    path = tmp_path / "nested" / "store.json"
    KeyValueStore(path).set("@favorites", {"7": {"id": 7, "title": "Nighthawks"}})

    assert KeyValueStore(path).get("@favorites") == {"7": {"id": 7, "title": "Nighthawks"}}


def test_set_keeps_other_keys(tmp_path):
    store = KeyValueStore(tmp_path / "store.json")
    store.set("a", 1)
    store.set("b", [1, 2])
    store.set("a", 3)

    assert store.get("a") == 3
    assert store.get("b") == [1, 2]


def test_set_leaves_no_temporary_file(tmp_path):
    store = KeyValueStore(tmp_path / "store.json")
    store.set("a", 1)

    assert [p.name for p in tmp_path.iterdir()] == ["store.json"]


def test_get_raises_on_corrupt_file(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError):
        KeyValueStore(path).get("a")


def test_get_raises_when_file_is_not_an_object(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError):
        KeyValueStore(path).get("a")


def test_set_replaces_corrupt_file(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")
    KeyValueStore(path).set("a", 1)

    assert json.loads(path.read_text(encoding="utf-8")) == {"a": 1}


def test_set_rejects_unserializable_value_without_touching_file(tmp_path):
    path = tmp_path / "store.json"
    store = KeyValueStore(path)
    store.set("a", 1)

    with pytest.raises(TypeError):
        store.set("b", object())

    assert store.get("a") == 1
    assert store.get("b") is None
