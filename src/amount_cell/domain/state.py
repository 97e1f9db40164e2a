"""Authoritative state of one amount input field."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from amount_cell.domain.currency import Currency, resolve_symbol
from amount_cell.domain.errors import InvalidConfigurationError, compose_error_message
from amount_cell.domain.money import DECIMAL_SEPARATOR, MIN_AMOUNT

MIN_AMOUNT_CURSOR_INDEX = 1


@dataclass(slots=True)
class AmountEditState:
    """Current amount, the text shown for it and where the caret sits."""

    currency_symbol: str
    value: Decimal = MIN_AMOUNT
    display_text: str = ""
    has_fractional_part: bool = False
    cursor_index: int = 0

    def __post_init__(self) -> None:
        self.configure_currency(self.currency_symbol)
        if not self.display_text:
            self.display_text = self.min_formatted_amount
            self.cursor_index = MIN_AMOUNT_CURSOR_INDEX

    @property
    def min_formatted_amount(self) -> str:
        return f"{MIN_AMOUNT} {self.currency_symbol}"

    def configure_currency(self, currency: Currency | str) -> None:
        """Replace the currency symbol without reformatting the current text."""

        symbol = resolve_symbol(currency)
        if not symbol:
            raise InvalidConfigurationError(
                message=compose_error_message(
                    cause="Currency symbol is empty.",
                    action="Configure the field with a non-empty currency symbol.",
                )
            )
        self.currency_symbol = symbol

    def set_default_amount(self, amount: int | float | Decimal | str) -> None:
        """Seed the field with ``"<amount> <symbol>"`` exactly as given."""

        try:
            value = Decimal(str(amount))
        except InvalidOperation as exc:
            raise InvalidConfigurationError(
                message=compose_error_message(
                    cause=f"Default amount {amount!r} is not a number.",
                    action="Use a plain decimal amount such as 50000 or 99.90.",
                ),
                details={"amount": str(amount)},
            ) from exc
        if not value.is_finite() or value < MIN_AMOUNT:
            raise InvalidConfigurationError(
                message=compose_error_message(
                    cause=(
                        f"Default amount {amount} is not a finite amount "
                        f"of at least {MIN_AMOUNT}."
                    ),
                    action="Use a default amount of zero or more.",
                ),
                details={"amount": str(amount)},
            )
        self.value = value
        self.display_text = f"{amount} {self.currency_symbol}"
        self.has_fractional_part = DECIMAL_SEPARATOR in str(amount)
        self.cursor_index = len(self.display_text) - 1

    def reset_to_minimum(self) -> None:
        """Show the minimum amount with the caret right after its digit."""

        self.value = MIN_AMOUNT
        self.display_text = self.min_formatted_amount
        self.has_fractional_part = False
        self.cursor_index = MIN_AMOUNT_CURSOR_INDEX

    def current_value(self) -> Decimal:
        return self.value
