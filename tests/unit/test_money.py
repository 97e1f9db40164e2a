from decimal import Decimal

import pytest

from amount_cell.domain.errors import RejectionReason
from amount_cell.domain.money import (
    ParsedAmount,
    RejectedAmount,
    count_fraction_digits,
    format_amount,
    format_display_text,
    format_plain_amount,
    parse_amount,
    strip_money_text,
    truncate_money,
)


def test_strip_money_text_removes_grouping_and_currency() -> None:
    assert strip_money_text("1 234.56 €", "€") == "1234.56"
    assert strip_money_text("1 234 567 ₽", "₽") == "1234567"


def test_count_fraction_digits() -> None:
    assert count_fraction_digits("12.345") == 3
    assert count_fraction_digits("12.") == 0
    assert count_fraction_digits("12") == 0


def test_parse_amount_accepts_whole_numbers() -> None:
    assert parse_amount("1234567") == ParsedAmount(
        value=Decimal("1234567"), fraction_digits=0
    )


def test_parse_amount_truncates_excess_fraction_digits() -> None:
    result = parse_amount("123.456")

    assert isinstance(result, ParsedAmount)
    assert result.value == Decimal("123.45")
    assert result.fraction_digits == 2


def test_parse_amount_accepts_bare_separator_positions() -> None:
    assert parse_amount("5.").value == Decimal("5")
    assert parse_amount(".5").value == Decimal("0.5")


@pytest.mark.parametrize(
    ("raw", "reason"),
    [
        ("", RejectionReason.EMPTY),
        ("1.2.3", RejectionReason.MALFORMED),
        (".", RejectionReason.MALFORMED),
        ("-5", RejectionReason.MALFORMED),
        ("12a", RejectionReason.MALFORMED),
    ],
)
def test_parse_amount_rejects_malformed_text(
    raw: str, reason: RejectionReason
) -> None:
    result = parse_amount(raw)

    assert result == RejectedAmount(raw=raw, reason=reason)
    assert not result.ok


def test_parse_amount_supports_comma_separator() -> None:
    assert parse_amount("12,5", decimal_separator=",") == ParsedAmount(
        value=Decimal("12.5"), fraction_digits=1
    )


def test_truncate_money_rounds_down_and_handles_long_amounts() -> None:
    assert truncate_money(Decimal("9.999"), 2) == Decimal("9.99")
    long_amount = Decimal("9" * 40)

    assert truncate_money(long_amount, 2) == long_amount


def test_format_amount_groups_whole_numbers_with_spaces() -> None:
    assert format_amount(Decimal("1234567"), None) == "1 234 567"
    assert format_amount(Decimal("999"), None) == "999"


def test_format_amount_pads_and_truncates_fraction() -> None:
    assert format_amount(Decimal("1234.5"), 2) == "1 234.50"
    assert format_amount(Decimal("9.999"), 2) == "9.99"
    assert format_amount(Decimal("9.999"), 5) == "9.99"


def test_format_amount_keeps_separator_without_fraction_digits() -> None:
    assert format_amount(Decimal("1234"), 0) == "1 234."


def test_format_amount_uses_configured_decimal_separator() -> None:
    assert format_amount(Decimal("1234.5"), 1, decimal_separator=",") == "1 234,5"


def test_format_display_text_appends_currency_suffix() -> None:
    assert format_display_text(Decimal("1234567"), None, "₽") == "1 234 567 ₽"


def test_format_plain_amount_has_no_grouping() -> None:
    assert format_plain_amount(Decimal("1234567.45")) == "1234567.45"


@pytest.mark.parametrize(
    ("value", "fraction_digits"),
    [
        (Decimal("0"), None),
        (Decimal("1234567"), None),
        (Decimal("1234.5"), 1),
        (Decimal("1000000.05"), 2),
        (Decimal("42"), 0),
    ],
)
def test_parsing_formatted_text_returns_the_same_value(
    value: Decimal, fraction_digits: int | None
) -> None:
    display = format_display_text(value, fraction_digits, "€")

    assert parse_amount(strip_money_text(display, "€")).value == value
