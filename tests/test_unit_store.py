"""
Unit tests for the JSON document store: persistence, copy semantics and
recovery from unreadable files.
"""

import json
import logging

import pytest

from carhub.exceptions import StoreError
from carhub.models.store import Store


def test_put_persists_across_instances(tmp_path):
    path = tmp_path / "data.json"
    Store(path).put("bookings", [{"id": "b1", "totalAmount": 10}])
    assert Store(path).get("bookings") == [{"id": "b1", "totalAmount": 10}]


def test_get_returns_default_and_copies(store):
    assert store.get("adminCars", []) == []
    store.put("adminCars", [{"id": "v1"}])
    cars = store.get("adminCars")
    cars.append({"id": "v2"})
    assert store.get("adminCars") == [{"id": "v1"}]


def test_delete_and_clear(store):
    store.put("bookings", [])
    store.put("adminUsers", [])
    assert store.keys() == ["adminUsers", "bookings"]
    assert store.delete("bookings") is True
    assert store.delete("bookings") is False
    store.clear()
    assert store.keys() == []


def test_corrupt_file_is_backed_up_and_store_starts_empty(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{not json", encoding="utf-8")
    st = Store(path)
    assert st.keys() == []
    assert (tmp_path / "data.json.bak").exists()


def test_non_object_file_is_backed_up(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    st = Store(path)
    assert st.keys() == []
    assert not path.exists()


def test_unwritable_path_raises_store_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    st = Store(blocker / "data.json")
    with pytest.raises(StoreError):
        st.put("bookings", [])


def test_instance_is_a_singleton(store):
    assert Store.instance() is store


def test_instance_with_other_path_keeps_first_and_warns(store, tmp_path, caplog):
    other = tmp_path / "other.json"
    with caplog.at_level(logging.WARNING, logger="carhub.models.store"):
        assert Store.instance(other) is store
    assert store.path != str(other)
    assert "ignoring requested path" in caplog.text
