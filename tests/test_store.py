from solarman.api.v1.schemas.order import OrderRecord
from solarman.db.store import InMemoryOrderStore


def test_get_missing_returns_none():
    assert InMemoryOrderStore().get("ORDER-1") is None


def test_upsert_replaces_whole_record():
    store = InMemoryOrderStore()
    store.upsert(OrderRecord(id="ORDER-1", status="APPROVED", payer={"name": "A"}))
    store.upsert(OrderRecord(id="ORDER-1", status="COMPLETED"))

    record = store.get("ORDER-1")
    assert record.status == "COMPLETED"
    assert record.payer is None
    assert store.count() == 1


def test_list_contains_all_records():
    store = InMemoryOrderStore()
    for order_id in ("A", "B", "C"):
        store.upsert(OrderRecord(id=order_id, status="PENDING"))

    assert sorted(r.id for r in store.list()) == ["A", "B", "C"]
