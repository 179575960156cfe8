from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from orders_core.domain.entities import Store


class StoreRepository(ABC):
    """Port for store lookup (payment method configuration and settings)."""

    @abstractmethod
    def get_by_id(self, store_id: str) -> Store | None:
        """Return the store, or None if it does not exist."""
