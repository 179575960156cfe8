from __future__ import annotations

from typing import TYPE_CHECKING

from orders_core.application.ports import StoreRepository

if TYPE_CHECKING:
    from orders_core.domain.entities import Store


class InMemoryStoreRepository(StoreRepository):
    """Store lookup backed by a dict. Stores are immutable, so no copies are made."""

    def __init__(self) -> None:
        self._stores: dict[str, Store] = {}

    def save(self, store: Store) -> None:
        self._stores[store.id] = store

    def get_by_id(self, store_id: str) -> Store | None:
        return self._stores.get(store_id)
