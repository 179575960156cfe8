from __future__ import annotations

from typing import TYPE_CHECKING

from orders_core.application.ports import SecurityService

if TYPE_CHECKING:
    from collections.abc import Iterable

    from orders_core.domain.entities import Identity, Permission


class InMemorySecurityService(SecurityService):
    """Security service backed by a dict of registered users."""

    def __init__(self) -> None:
        self._users: dict[str, tuple[Identity, tuple[Permission, ...]]] = {}

    def add_user(self, identity: Identity, permissions: Iterable[Permission] = ()) -> None:
        self._users[identity.user_name] = (identity, tuple(permissions))

    def find_by_name(self, user_name: str) -> Identity | None:
        entry = self._users.get(user_name)
        return entry[0] if entry else None

    def get_permissions(self, user_name: str) -> tuple[Permission, ...]:
        entry = self._users.get(user_name)
        return entry[1] if entry else ()
