from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class StorePaymentMethod:
    """Store-level configuration of one payment gateway."""

    code: str
    is_active: bool = True


@dataclass(frozen=True, slots=True)
class Store:
    id: str
    name: str = ""
    payment_methods: tuple[StorePaymentMethod, ...] = ()
    settings: dict[str, str] = field(default_factory=dict)

    def active_payment_methods(self) -> list[StorePaymentMethod]:
        return [m for m in self.payment_methods if m.is_active]

    def get_setting(self, name: str, default: str) -> str:
        return self.settings.get(name) or default
