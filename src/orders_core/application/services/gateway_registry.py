from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from orders_core.application.ports import PaymentGateway
    from orders_core.domain.entities import Store


class PaymentGatewayRegistry:
    """Maps payment method codes to gateway implementations.

    The set of gateways is fixed at construction. A gateway is only
    usable for a store that configures an active payment method with the
    same code. Codes are compared case-insensitively.
    """

    def __init__(self, gateways: Iterable[PaymentGateway]) -> None:
        self._gateways: dict[str, PaymentGateway] = {}
        for gateway in gateways:
            key = gateway.code.lower()
            if key in self._gateways:
                raise ValueError(f"Duplicate payment gateway code: {gateway.code}")
            self._gateways[key] = gateway

    def resolve(self, store: Store, code: str | None) -> PaymentGateway | None:
        """Return the gateway for code if the store has it active, else None."""
        if not code:
            return None
        key = code.lower()
        for method in store.active_payment_methods():
            if method.code.lower() == key:
                return self._gateways.get(key)
        return None

    def candidates(
        self,
        store: Store,
        codes: Iterable[str],
        explicit_code: str | None = None,
    ) -> list[PaymentGateway]:
        """Gateways that may own a callback, in store payment method order.

        Args:
            store: The order's store.
            codes: Gateway codes used by the order's payments.
            explicit_code: Narrow to this single code when given.
        """
        wanted = {code.lower() for code in codes if code}
        if explicit_code:
            wanted &= {explicit_code.lower()}

        result: list[PaymentGateway] = []
        for method in store.active_payment_methods():
            gateway = self._gateways.get(method.code.lower())
            if method.code.lower() in wanted and gateway is not None and gateway not in result:
                result.append(gateway)
        return result
