"""Scope-bound access control for customer orders.

Two modes:
- narrow(): before a search, rewrite the criteria so the search can only
  return orders from the stores (or of the employee) the caller may read.
- authorize(): after an order was loaded by id or number, check that the
  caller holds a read permission scope matching that order.

Both apply the price visibility rule to the response group first.
authorize_create() guards order placement, which has no order to scope yet.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

import structlog

from orders_core.config import OrderModuleSettings
from orders_core.domain.exceptions import AccessDeniedError
from orders_core.domain.value_objects import ResponseGroup, ScopeKind, scope_string

if TYPE_CHECKING:
    from orders_core.application.ports import SecurityService
    from orders_core.domain.entities import CustomerOrder, Identity, Permission
    from orders_core.domain.value_objects import OrderSearchCriteria, PermissionScope

logger = structlog.get_logger(__name__)


class OrderScopeFilter:
    def __init__(
        self,
        security_service: SecurityService,
        settings: OrderModuleSettings | None = None,
    ) -> None:
        self._security = security_service
        self._settings = settings or OrderModuleSettings()

    def narrow(self, caller_name: str, criteria: OrderSearchCriteria) -> OrderSearchCriteria:
        """Return criteria limited to what the caller may read.

        Store ids supplied by the caller are replaced by the caller's store
        scopes; they can never widen access.

        Raises:
            AccessDeniedError: The caller is unknown.
        """
        caller, permissions = self._load(caller_name)
        criteria = replace(
            criteria,
            response_group=self._restrict(caller, permissions, criteria.response_group),
        )

        if self._has_global_read(caller, permissions):
            return criteria

        scopes = self._read_scopes(permissions)
        store_ids = tuple(
            dict.fromkeys(s.value for s in scopes if s.kind is ScopeKind.STORE and s.value)
        )
        is_responsible = any(s.kind is ScopeKind.RESPONSIBLE for s in scopes)

        if store_ids:
            criteria = replace(criteria, store_ids=store_ids)
        elif not is_responsible:
            # No usable scope at all: the search must match nothing.
            criteria = replace(criteria, store_ids=())

        if is_responsible:
            criteria = replace(criteria, employee_id=caller.user_name)

        return criteria

    def restrict_response_group(
        self, caller_name: str, requested: ResponseGroup | None = None
    ) -> ResponseGroup:
        """Strip price fields from the response group unless the caller may see prices."""
        caller, permissions = self._load(caller_name)
        return self._restrict(caller, permissions, requested)

    def authorize(self, caller_name: str, order: CustomerOrder) -> tuple[str, ...]:
        """Check the caller may read this specific order.

        Returns:
            The scope strings of the order, for the caller's UI.

        Raises:
            AccessDeniedError: The caller is unknown or no read scope matches.
        """
        scopes = self.object_scope_strings(order)
        caller, permissions = self._load(caller_name)

        if self._has_global_read(caller, permissions):
            return scopes

        granted = {s.qualified(caller.user_name) for s in self._read_scopes(permissions)}
        if granted.intersection(scopes):
            return scopes

        logger.warning(
            "order_access_denied",
            caller=caller_name,
            order_id=order.id,
            store_id=order.store_id,
        )
        raise AccessDeniedError(f"User {caller_name} may not read order {order.id}")

    def authorize_create(self, caller_name: str) -> None:
        """Check the caller may place new orders.

        Raises:
            AccessDeniedError: The caller is unknown or lacks the create permission.
        """
        caller, permissions = self._load(caller_name)
        if caller.is_administrator:
            return
        if any(p.id == self._settings.create_permission for p in permissions):
            return

        logger.warning("order_create_denied", caller=caller_name)
        raise AccessDeniedError(f"User {caller_name} may not create orders")

    @staticmethod
    def object_scope_strings(order: CustomerOrder) -> tuple[str, ...]:
        scopes = []
        if order.store_id:
            scopes.append(scope_string(ScopeKind.STORE, order.store_id))
        if order.employee_id:
            scopes.append(scope_string(ScopeKind.RESPONSIBLE, order.employee_id))
        return tuple(scopes)

    def _load(self, caller_name: str) -> tuple[Identity, tuple[Permission, ...]]:
        caller = self._security.find_by_name(caller_name)
        if caller is None:
            logger.warning("unknown_caller", caller=caller_name)
            raise AccessDeniedError(f"Unknown user: {caller_name}")
        return caller, self._security.get_permissions(caller_name)

    def _has_global_read(self, caller: Identity, permissions: tuple[Permission, ...]) -> bool:
        if caller.is_administrator:
            return True
        return any(p.id == self._settings.read_permission and p.is_global for p in permissions)

    def _read_scopes(self, permissions: tuple[Permission, ...]) -> list[PermissionScope]:
        return [
            scope
            for permission in permissions
            if permission.id.startswith(self._settings.read_permission)
            for scope in permission.assigned_scopes
        ]

    def _restrict(
        self,
        caller: Identity,
        permissions: tuple[Permission, ...],
        requested: ResponseGroup | None,
    ) -> ResponseGroup:
        group = ResponseGroup.FULL if requested is None else requested
        if caller.is_administrator:
            return group
        if any(p.id == self._settings.read_prices_permission for p in permissions):
            return group
        return group.without_prices()
