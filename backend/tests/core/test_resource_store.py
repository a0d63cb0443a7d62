"""Resource Store — tests for id allocation, merge-update and deletion.

Tests cover:
    - ids start at 1, increase per create, are never reused after delete
    - create then read returns payload plus id
    - read/update/delete report absence
    - update merges shallowly and never replaces the id
    - broken_record_deletion reports success but keeps the record
    - Returned records are deep copies; caller payloads are never aliased
    - Concurrent creates allocate distinct ids
"""

import threading

from faultapi.core.domain_types import RecordId
from faultapi.core.fault_injector import FaultInjector
from faultapi.core.resource_store import ResourceStore


PAYLOAD = {"amount": 10.5, "currency": "usd", "credit_card_id": 1}


def _store(*issues: str) -> ResourceStore:
    return ResourceStore(FaultInjector(issues), name="charge")


# ─── create / read ───────────────────────────────────────────────

def test_create_assigns_first_id():
    ok, record = _store().create(PAYLOAD)
    assert ok
    assert record == {**PAYLOAD, "id": 1}


def test_create_then_read_round_trip():
    store = _store()
    _, created = store.create(PAYLOAD)
    found, record = store.read(RecordId(created["id"]))
    assert found
    assert record == {**PAYLOAD, "id": created["id"]}


def test_ids_strictly_increase():
    store = _store()
    ids = [store.create(PAYLOAD)[1]["id"] for _ in range(5)]
    assert ids == [1, 2, 3, 4, 5]
    assert store.last_id == 5


def test_ids_never_reused_after_delete():
    store = _store()
    store.create(PAYLOAD)
    _, second = store.create(PAYLOAD)
    assert store.delete(RecordId(second["id"]))
    _, third = store.create(PAYLOAD)
    assert third["id"] == 3


def test_read_absent_id():
    assert _store().read(RecordId(1)) == (False, None)


def test_returned_records_are_copies():
    store = _store()
    _, record = store.create(PAYLOAD)
    record["currency"] = "eur"
    _, stored = store.read(RecordId(1))
    assert stored["currency"] == "usd"


def test_nested_values_are_not_shared():
    store = _store()
    payload = {**PAYLOAD, "metadata": {"tags": ["a"]}}
    _, created = store.create(payload)
    payload["metadata"]["tags"].append("from-caller")
    created["metadata"]["tags"].append("from-create")
    _, read = store.read(RecordId(1))
    read["metadata"]["tags"].append("from-read")
    assert store.read(RecordId(1))[1]["metadata"] == {"tags": ["a"]}


def test_update_does_not_keep_caller_values():
    store = _store()
    store.create(PAYLOAD)
    patch = {"metadata": {"tags": ["a"]}}
    store.update(RecordId(1), patch)
    patch["metadata"]["tags"].clear()
    assert store.read(RecordId(1))[1]["metadata"] == {"tags": ["a"]}


# ─── update ──────────────────────────────────────────────────────

def test_update_absent_id_fails():
    assert not _store().update(RecordId(7), {"currency": "eur"})


def test_update_merges_fields():
    store = _store()
    store.create(PAYLOAD)
    assert store.update(RecordId(1), {"currency": "eur"})
    _, record = store.read(RecordId(1))
    assert record == {**PAYLOAD, "currency": "eur", "id": 1}


def test_update_never_replaces_id():
    store = _store()
    store.create(PAYLOAD)
    store.update(RecordId(1), {"id": 99})
    _, record = store.read(RecordId(1))
    assert record["id"] == 1


# ─── delete ──────────────────────────────────────────────────────

def test_delete_removes_record():
    store = _store()
    store.create(PAYLOAD)
    assert store.delete(RecordId(1))
    assert store.read(RecordId(1)) == (False, None)
    assert len(store) == 0


def test_delete_absent_id_fails():
    store = _store()
    store.create(PAYLOAD)
    assert not store.delete(RecordId(2))


def test_broken_deletion_keeps_record():
    store = _store("broken_record_deletion")
    store.create(PAYLOAD)
    assert store.delete(RecordId(1))
    found, record = store.read(RecordId(1))
    assert found
    assert record["id"] == 1


def test_broken_deletion_still_fails_for_absent_id():
    assert not _store("broken_record_deletion").delete(RecordId(1))


# ─── concurrency ─────────────────────────────────────────────────

def test_concurrent_creates_get_distinct_ids():
    store = _store()
    ids: list[int] = []
    lock = threading.Lock()

    def worker():
        for _ in range(50):
            _, record = store.create(PAYLOAD)
            with lock:
                ids.append(record["id"])

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(ids) == list(range(1, 401))
    assert len(store) == 400
