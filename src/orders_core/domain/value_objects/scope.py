from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ScopeKind(Enum):
    """Kinds of restriction that can be attached to an order permission."""

    STORE = "store"
    RESPONSIBLE = "responsible"


@dataclass(frozen=True, slots=True)
class PermissionScope:
    """A typed scope token assigned to a permission.

    - STORE scopes carry a store id; an empty value restricts nothing.
    - RESPONSIBLE scopes carry no value; they restrict the caller to
      orders where the caller is the responsible employee.
    """

    kind: ScopeKind
    value: str = ""

    @classmethod
    def store(cls, store_id: str) -> PermissionScope:
        return cls(kind=ScopeKind.STORE, value=store_id)

    @classmethod
    def responsible(cls) -> PermissionScope:
        return cls(kind=ScopeKind.RESPONSIBLE)

    def qualified(self, caller_name: str) -> str:
        """Return the scope string this token grants to the given caller.

        Comparable with the scope strings derived from an order
        (see scope_string()).
        """
        value = caller_name if self.kind is ScopeKind.RESPONSIBLE else self.value
        return scope_string(self.kind, value)


def scope_string(kind: ScopeKind, value: str) -> str:
    return f"{kind.value}:{value}"
