"""Value objects - Immutable objects defined by their attributes."""

from orders_core.domain.value_objects.response_group import ResponseGroup
from orders_core.domain.value_objects.scope import PermissionScope, ScopeKind, scope_string
from orders_core.domain.value_objects.search_criteria import OrderSearchCriteria

__all__ = [
    "OrderSearchCriteria",
    "PermissionScope",
    "ResponseGroup",
    "ScopeKind",
    "scope_string",
]
