"""Configuration for the order module.

Settings are immutable once loaded. Environment variables override the
defaults: every field maps to ORDERS_<FIELD_NAME_UPPERCASE>, e.g.
ORDERS_STATISTICS_CACHE_TTL_SECONDS=60.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from collections.abc import Mapping

SHIPMENT_NUMBER_TEMPLATE_SETTING = "Order.ShipmentNewNumberTemplate"
PAYMENT_NUMBER_TEMPLATE_SETTING = "Order.PaymentInNewNumberTemplate"


class OrderModuleSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    read_permission: str = "order:read"
    read_prices_permission: str = "order:read_prices"
    create_permission: str = "order:create"

    # Fallbacks when the store does not override them in its settings.
    shipment_number_template: str = "SH{0:%y%m%d}-{1:05d}"
    payment_number_template: str = "PI{0:%y%m%d}-{1:05d}"

    statistics_window_days: int = Field(default=365, gt=0)
    statistics_end_padding_days: int = Field(default=2, ge=0)
    statistics_cache_ttl_seconds: int = Field(default=300, ge=0)

    log_level: str = "INFO"
    log_json: bool = True

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        prefix: str = "ORDERS_",
    ) -> OrderModuleSettings:
        """Load settings, letting prefixed environment variables override defaults."""
        environ = os.environ if environ is None else environ
        overrides = {
            name: environ[prefix + name.upper()]
            for name in cls.model_fields
            if prefix + name.upper() in environ
        }
        return cls.model_validate(overrides)
