"""Schemas for scripted edit sessions replayed against an amount field."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator

from amount_cell.domain.currency import Currency, coerce_currency_code


class FocusEvent(BaseModel):
    """Field gained or lost focus."""

    kind: Literal["focus"]
    focused: bool


class SelectEvent(BaseModel):
    """Host asked to move the caret."""

    kind: Literal["select"]
    start: int = Field(ge=0)
    end: int | None = Field(default=None, ge=0)


class TextEvent(BaseModel):
    """Host reported new raw field content."""

    kind: Literal["text"]
    text: str
    selection_start: int | None = Field(default=None, ge=0)


EditEvent = Annotated[FocusEvent | SelectEvent | TextEvent, Field(discriminator="kind")]


class EditScript(BaseModel):
    """Field configuration plus the ordered events to feed it."""

    currency: Currency
    default_amount: Decimal | None = Field(default=None, ge=0)
    events: list[EditEvent] = Field(min_length=1)

    @field_validator("currency", mode="before")
    @classmethod
    def _resolve_currency_code(cls, value: object) -> object:
        return coerce_currency_code(value)


class ReplayStep(BaseModel):
    """Field state the host would show after one event."""

    kind: str
    text: str
    cursor_index: int
    value: Decimal


class ReplayReport(BaseModel):
    """Outcome of a replayed edit session."""

    currency_symbol: str
    steps: list[ReplayStep] = Field(default_factory=list)
    final_text: str
    final_value: Decimal
    final_value_text: str
