"""Live currency amount formatting for text input fields."""

from amount_cell.domain.currency import Currency
from amount_cell.domain.errors import DomainError, InvalidConfigurationError
from amount_cell.domain.money import (
    ParsedAmount,
    RejectedAmount,
    format_amount,
    format_display_text,
    parse_amount,
)
from amount_cell.domain.state import AmountEditState
from amount_cell.services.reformat_engine import ReformatEngine, RenderInstruction
from amount_cell.services.value_stream import LatestValueStream

__all__ = [
    "AmountEditState",
    "Currency",
    "DomainError",
    "InvalidConfigurationError",
    "LatestValueStream",
    "ParsedAmount",
    "ReformatEngine",
    "RejectedAmount",
    "RenderInstruction",
    "format_amount",
    "format_display_text",
    "parse_amount",
]
