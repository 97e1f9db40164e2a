"""Money helpers for live amount text using Decimal with truncation rules."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_DOWN, Decimal, localcontext

from amount_cell.domain.errors import RejectionReason

GROUPING_SEPARATOR = " "
DECIMAL_SEPARATOR = "."
MAX_FRACTION_DIGITS = 2
MIN_AMOUNT = Decimal(0)


@dataclass(frozen=True, slots=True)
class ParsedAmount:
    """Raw amount accepted by the parser."""

    value: Decimal
    fraction_digits: int

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class RejectedAmount:
    """Raw amount the parser refused, with the reason it was refused."""

    raw: str
    reason: RejectionReason

    @property
    def ok(self) -> bool:
        return False


ParseResult = ParsedAmount | RejectedAmount


def strip_money_text(
    text: str,
    currency_symbol: str,
    grouping_separator: str = GROUPING_SEPARATOR,
) -> str:
    """Remove grouping separators and currency symbols from displayed text."""

    return text.replace(grouping_separator, "").replace(currency_symbol, "")


def count_fraction_digits(raw: str, decimal_separator: str = DECIMAL_SEPARATOR) -> int:
    """Return how many characters follow the first decimal separator."""

    if decimal_separator not in raw:
        return 0
    return len(raw) - raw.index(decimal_separator) - 1


def truncate_money(value: Decimal, fraction_digits: int) -> Decimal:
    """Drop fraction digits beyond the given count without rounding."""

    digits = max(0, min(fraction_digits, MAX_FRACTION_DIGITS))
    with localcontext() as context:
        context.prec = max(context.prec, value.adjusted() + digits + 2)
        return value.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_DOWN)


def parse_amount(raw: str, decimal_separator: str = DECIMAL_SEPARATOR) -> ParseResult:
    """Parse stripped amount text into a truncated Decimal.

    Only ASCII digits and at most one decimal separator are accepted. The
    number of fraction digits is clamped to ``MAX_FRACTION_DIGITS`` and the
    value is truncated to match, so ``"123.456"`` parses to ``123.45``.
    """

    if not raw:
        return RejectedAmount(raw=raw, reason=RejectionReason.EMPTY)

    separator = re.escape(decimal_separator)
    if re.fullmatch(rf"[0-9]*(?:{separator}[0-9]*)?", raw) is None or not any(
        char.isdigit() for char in raw
    ):
        return RejectedAmount(raw=raw, reason=RejectionReason.MALFORMED)

    fraction_digits = min(
        count_fraction_digits(raw, decimal_separator), MAX_FRACTION_DIGITS
    )
    value = Decimal(raw.replace(decimal_separator, "."))
    return ParsedAmount(
        value=truncate_money(value, fraction_digits),
        fraction_digits=fraction_digits,
    )


def format_amount(
    value: Decimal,
    fraction_digits: int | None,
    *,
    decimal_separator: str = DECIMAL_SEPARATOR,
    grouping_separator: str = GROUPING_SEPARATOR,
) -> str:
    """Render an amount grouped by thousands.

    ``fraction_digits=None`` selects the whole-number pattern. Any integer
    selects the fractional pattern: the separator is always shown and exactly
    ``min(fraction_digits, MAX_FRACTION_DIGITS)`` digits follow it.
    """

    truncated = truncate_money(value, fraction_digits or 0)
    integer_part, _, fraction_part = f"{truncated:,f}".partition(".")
    grouped = integer_part.replace(",", grouping_separator)
    if fraction_digits is None:
        return grouped
    return f"{grouped}{decimal_separator}{fraction_part}"


def format_display_text(
    value: Decimal,
    fraction_digits: int | None,
    currency_symbol: str,
    *,
    decimal_separator: str = DECIMAL_SEPARATOR,
) -> str:
    """Render the full field text: formatted amount, space, currency symbol."""

    amount = format_amount(value, fraction_digits, decimal_separator=decimal_separator)
    return f"{amount} {currency_symbol}"


def format_plain_amount(value: Decimal) -> str:
    """Render an amount as plain text without grouping or currency."""

    return f"{value:f}"
