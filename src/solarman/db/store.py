from __future__ import annotations

from typing import Protocol

from solarman.api.v1.schemas.order import OrderRecord


class OrderStore(Protocol):
    """Key-value store of order records, keyed by resolved id."""

    def get(self, order_id: str) -> OrderRecord | None: ...

    def upsert(self, record: OrderRecord) -> None: ...

    def list(self) -> list[OrderRecord]: ...

    def count(self) -> int: ...


class InMemoryOrderStore:
    """
    Process-local store. Last write wins, nothing is ever deleted,
    everything is lost on restart.
    """

    def __init__(self) -> None:
        self._orders: dict[str, OrderRecord] = {}

    def get(self, order_id: str) -> OrderRecord | None:
        return self._orders.get(order_id)

    def upsert(self, record: OrderRecord) -> None:
        self._orders[record.id] = record

    def list(self) -> list[OrderRecord]:
        return list(self._orders.values())

    def count(self) -> int:
        return len(self._orders)
