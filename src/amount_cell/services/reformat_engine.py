"""Reformatting state machine behind a live amount input field."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from decimal import Decimal

from amount_cell.core.settings import Settings, get_settings
from amount_cell.domain.currency import Currency, resolve_symbol
from amount_cell.domain.money import (
    DECIMAL_SEPARATOR,
    RejectedAmount,
    format_display_text,
    format_plain_amount,
    parse_amount,
    strip_money_text,
)
from amount_cell.domain.state import AmountEditState
from amount_cell.services.value_stream import LatestValueStream

logger = logging.getLogger(__name__)

SUFFIX_CURSOR_OFFSET = 2


@dataclass(frozen=True, slots=True)
class RenderInstruction:
    """Text and caret position the host must apply to the visible field."""

    text: str
    cursor_index: int


class ReformatEngine:
    """Turns raw field edits into formatted amount text and caret positions.

    Example::

        engine = ReformatEngine(Currency.EUR)
        engine.set_default_amount(50000)
        render = engine.on_text_changed("500001 €", selection_start=6)
        render.text          # "500 001 €"
        render.cursor_index  # 7
    """

    def __init__(
        self,
        currency: Currency | str,
        *,
        decimal_separator: str = DECIMAL_SEPARATOR,
    ) -> None:
        self._state = AmountEditState(currency_symbol=resolve_symbol(currency))
        self._decimal_separator = decimal_separator
        self._observer_attached = True
        self._last_rejection: RejectedAmount | None = None
        self.amount_stream: LatestValueStream[Decimal] = LatestValueStream(
            self._state.value
        )
        self.amount_text_stream: LatestValueStream[str] = LatestValueStream(
            format_plain_amount(self._state.value)
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ReformatEngine:
        """Build an engine configured from environment settings."""

        settings = settings or get_settings()
        engine = cls(settings.currency, decimal_separator=settings.decimal_separator)
        if settings.default_amount is not None:
            engine.set_default_amount(settings.default_amount)
        return engine

    @property
    def value(self) -> Decimal:
        return self._state.current_value()

    @property
    def display_text(self) -> str:
        return self._state.display_text

    @property
    def cursor_index(self) -> int:
        return self._state.cursor_index

    @property
    def currency_symbol(self) -> str:
        return self._state.currency_symbol

    @property
    def has_fractional_part(self) -> bool:
        return self._state.has_fractional_part

    @property
    def is_observing(self) -> bool:
        return self._observer_attached

    @property
    def last_rejection(self) -> RejectedAmount | None:
        """Most recent rejected edit, cleared by the next accepted one."""
        return self._last_rejection

    def render(self) -> RenderInstruction:
        return RenderInstruction(
            text=self._state.display_text,
            cursor_index=self._state.cursor_index,
        )

    def configure_currency(self, currency: Currency | str) -> None:
        self._state.configure_currency(currency)

    def set_default_amount(
        self, amount: int | float | Decimal | str
    ) -> RenderInstruction:
        self._state.set_default_amount(amount)
        self._publish()
        return self.render()

    def on_focus_changed(self, focused: bool) -> RenderInstruction:
        if not focused:
            self._observer_attached = False
            return self.render()

        self._observer_attached = True
        text = self._state.display_text
        if not text or text == self._state.currency_symbol:
            self._reset_to_minimum(text)
        return self.render()

    def on_selection_requested(self, start: int, end: int | None = None) -> int:
        """Return the caret position to apply, keeping it out of the suffix."""

        text = self._state.display_text
        selection_end = start if end is None else end
        if text and selection_end in (len(text), len(text) - 1):
            start = max(0, len(text) - SUFFIX_CURSOR_OFFSET)
        self._state.cursor_index = start
        return start

    def on_text_changed(
        self, text: str, selection_start: int | None = None
    ) -> RenderInstruction:
        """Reformat the field after the host reports new content.

        ``selection_start`` is the caret index inside ``text`` as the host saw
        it before reformatting. When omitted, the caret is assumed to sit just
        before the currency suffix.
        """

        if not self._observer_attached:
            self._state.display_text = text
            if selection_start is not None:
                self._state.cursor_index = selection_start
            return self.render()

        symbol = self._state.currency_symbol
        if text in (symbol, f" {symbol}"):
            self._reset_to_minimum(text)
            return self.render()

        with self._echo_suppressed():
            try:
                self._reformat(text, selection_start)
            except ArithmeticError:
                logger.exception("amount_reformat_failed", extra={"raw_text": text})
        return self.render()

    @contextmanager
    def _echo_suppressed(self) -> Iterator[None]:
        self._observer_attached = False
        try:
            yield
        finally:
            self._observer_attached = True

    def _reformat(self, text: str, selection_start: int | None) -> None:
        symbol = self._state.currency_symbol
        has_fractional_part = self._decimal_separator in text
        result = parse_amount(strip_money_text(text, symbol), self._decimal_separator)
        if isinstance(result, RejectedAmount):
            self._last_rejection = result
            logger.warning(
                "amount_rejected",
                extra={"raw_text": text, "reason": result.reason.value},
            )
            return

        formatted = format_display_text(
            result.value,
            result.fraction_digits if has_fractional_part else None,
            symbol,
            decimal_separator=self._decimal_separator,
        )
        if selection_start is None:
            selection_start = self._caret_before_suffix(text)
        cursor_index = selection_start + (len(formatted) - len(text))
        if cursor_index <= 0 or cursor_index > len(formatted):
            cursor_index = len(formatted) - SUFFIX_CURSOR_OFFSET

        self._state.value = result.value
        self._state.display_text = formatted
        self._state.has_fractional_part = has_fractional_part
        self._state.cursor_index = cursor_index
        self._last_rejection = None
        self._publish()
        logger.debug(
            "amount_reformatted",
            extra={
                "raw_text": text,
                "display_text": formatted,
                "cursor_index": cursor_index,
            },
        )

    def _reset_to_minimum(self, text: str) -> None:
        self._state.reset_to_minimum()
        self._last_rejection = None
        self._publish()
        logger.info("amount_reset_to_minimum", extra={"raw_text": text})

    def _caret_before_suffix(self, text: str) -> int:
        symbol = self._state.currency_symbol
        if text.endswith(f" {symbol}"):
            return len(text) - len(symbol) - 1
        if text.endswith(symbol):
            return len(text) - len(symbol)
        return len(text)

    def _publish(self) -> None:
        value = self._state.current_value()
        self.amount_stream.publish(value)
        self.amount_text_stream.publish(format_plain_amount(value))
