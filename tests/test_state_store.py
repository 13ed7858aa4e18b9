import json

import pytest

from daprsidecar.actor_types import Reminder
from daprsidecar.state_store import (
    DeleteRequest,
    MemoryStateStore,
    SetRequest,
    StateOperation,
    StateStore,
    TransactionalStateRequest,
)


@pytest.fixture
def store():
    return MemoryStateStore()


def test_set_then_get_returns_json_bytes(store):
    store.set(SetRequest(key="k", value="fakeData"))
    assert store.get("k") == b'"fakeData"'


def test_get_missing_returns_none(store):
    assert store.get("absent") is None


def test_none_value_is_stored_as_null(store):
    store.set(SetRequest(key="k", value=None))
    assert store.get("k") == b"null"


def test_encoding_is_compact(store):
    store.set(SetRequest(key="k", value={"a": [1, 2]}))
    assert b" " not in store.get("k")
    assert json.loads(store.get("k")) == {"a": [1, 2]}


def test_html_characters_are_escaped(store):
    store.set(SetRequest(key="k", value="<a&b>"))
    raw = store.get("k")
    assert b"<" not in raw and b">" not in raw and b"&" not in raw
    assert json.loads(raw) == "<a&b>"


def test_objects_with_to_dict_are_encoded(store):
    reminder = Reminder(actor_id="hobbit", actor_type="cat", name="r1", period="1s", due_time="1s")
    store.set(SetRequest(key="k", value=[reminder]))
    decoded = json.loads(store.get("k"))
    assert [Reminder.from_dict(item) for item in decoded] == [reminder]


def test_unserialisable_value_raises(store):
    with pytest.raises(TypeError):
        store.set(SetRequest(key="k", value=object()))
    assert store.get("k") is None


def test_delete_removes_key(store):
    store.set(SetRequest(key="k", value=1))
    store.delete(DeleteRequest(key="k"))
    assert store.get("k") is None
    assert "k" not in store


def test_delete_missing_key_is_harmless(store):
    store.set(SetRequest(key="other", value=1))
    store.delete(DeleteRequest(key="missing"))
    assert len(store) == 1


def test_multi_applies_operations_in_order(store):
    store.multi(
        [
            TransactionalStateRequest(StateOperation.UPSERT, SetRequest("key1", "fakeData")),
            TransactionalStateRequest(StateOperation.UPSERT, SetRequest("key2", 2)),
            TransactionalStateRequest(StateOperation.DELETE, DeleteRequest("key1")),
        ]
    )
    assert store.get("key1") is None
    assert json.loads(store.get("key2")) == 2


def test_multi_is_all_or_nothing(store):
    with pytest.raises(TypeError):
        store.multi(
            [
                TransactionalStateRequest(StateOperation.UPSERT, SetRequest("key1", 1)),
                TransactionalStateRequest(StateOperation.DELETE, SetRequest("key1", 1)),
            ]
        )
    assert store.get("key1") is None


def test_multi_rejects_unknown_operation(store):
    with pytest.raises(ValueError):
        store.multi([TransactionalStateRequest("Wrong", SetRequest("k", 1))])
    assert len(store) == 0


def test_memory_store_is_a_state_store(store):
    assert isinstance(store, StateStore)
    store.set(SetRequest(key="x", value=True))
    assert store.get("x") == b"true"