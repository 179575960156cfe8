from __future__ import annotations

from dataclasses import dataclass

from orders_core.domain.value_objects.scope import PermissionScope


@dataclass(frozen=True, slots=True)
class Identity:
    """A caller known to the security service."""

    user_name: str
    is_administrator: bool = False


@dataclass(frozen=True, slots=True)
class Permission:
    """A granted permission and the scopes restricting it.

    A permission without scopes applies globally.
    """

    id: str
    assigned_scopes: tuple[PermissionScope, ...] = ()

    @property
    def is_global(self) -> bool:
        return not self.assigned_scopes
