from __future__ import annotations

from enum import Flag

from orders_core.domain.exceptions import InvalidResponseGroupError


class ResponseGroup(Flag):
    """Which parts of a customer order a read operation returns.

    String form is a comma separated list of PascalCase flag names,
    e.g. "WithItems, WithInPayments". An empty string means Full.
    """

    DEFAULT = 0
    WITH_ITEMS = 1
    WITH_IN_PAYMENTS = 2
    WITH_SHIPMENTS = 4
    WITH_ADDRESSES = 8
    WITH_DISCOUNTS = 16
    WITH_PRICES = 32
    WITH_DYNAMIC_PROPERTIES = 64
    FULL = 127

    @classmethod
    def parse(cls, value: str | None) -> ResponseGroup:
        """Parse a response group string.

        Args:
            value: Comma separated flag names (case-insensitive), or None.

        Returns:
            The combined ResponseGroup. None or blank input yields FULL.

        Raises:
            InvalidResponseGroupError: If any name is unknown.
        """
        if value is None or not value.strip():
            return cls.FULL

        result = cls.DEFAULT
        for token in value.split(","):
            name = token.strip()
            if not name:
                continue
            member = _MEMBERS_BY_KEY.get(name.replace("_", "").lower())
            if member is None:
                raise InvalidResponseGroupError(f"Unknown response group: {name}")
            result |= member
        return result

    def without_prices(self) -> ResponseGroup:
        return self & ~ResponseGroup.WITH_PRICES

    def to_string(self) -> str:
        if self == ResponseGroup.FULL:
            return "Full"
        if self == ResponseGroup.DEFAULT:
            return "Default"
        return ",".join(_pascal_case(member.name) for member in self if member.name)


def _pascal_case(name: str) -> str:
    return "".join(part.capitalize() for part in name.split("_"))


_MEMBERS_BY_KEY: dict[str, ResponseGroup] = {
    name.replace("_", "").lower(): member for name, member in ResponseGroup.__members__.items()
}
