from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from orders_core.domain.entities import Identity, Permission


class SecurityService(ABC):
    """Port for caller identity and permission lookup."""

    @abstractmethod
    def find_by_name(self, user_name: str) -> Identity | None:
        """Return the caller identity, or None if unknown."""

    @abstractmethod
    def get_permissions(self, user_name: str) -> tuple[Permission, ...]:
        """Return the caller's permissions with their assigned scopes.

        Unknown callers have no permissions (empty tuple).
        """
