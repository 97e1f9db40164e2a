"""Currency symbol table for the amount field."""

from __future__ import annotations

from enum import Enum


class Currency(Enum):
    """Supported currencies and the symbol rendered as the field suffix."""

    USD = "$"
    RUR = "₽"
    EUR = "€"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> Currency:
        """Resolve a currency by its code, case-insensitively."""

        try:
            return cls[code.strip().upper()]
        except KeyError:
            msg = f"Unknown currency code: {code!r}"
            raise ValueError(msg) from None


def resolve_symbol(currency: Currency | str) -> str:
    """Return the suffix symbol for a currency member or a raw symbol string."""

    if isinstance(currency, Currency):
        return currency.symbol
    return currency


def coerce_currency_code(value: object) -> object:
    """Map currency codes such as ``"eur"`` to members, passing others through."""

    if isinstance(value, str) and value.strip().upper() in Currency.__members__:
        return Currency.from_code(value)
    return value
