"""Use case for replaying a scripted edit session through the engine."""

from __future__ import annotations

from collections.abc import Callable

from amount_cell.application.schemas.edit_script import (
    EditEvent,
    EditScript,
    FocusEvent,
    ReplayReport,
    ReplayStep,
    SelectEvent,
)
from amount_cell.core.settings import get_settings
from amount_cell.domain.currency import Currency
from amount_cell.services.reformat_engine import ReformatEngine, RenderInstruction


def engine_from_settings(currency: Currency) -> ReformatEngine:
    """Build an engine for the currency using the configured decimal separator."""

    return ReformatEngine(
        currency, decimal_separator=get_settings().decimal_separator
    )


class ReplayEditsUseCase:
    """Feed every scripted event to a fresh engine and record what it shows."""

    def __init__(
        self,
        engine_factory: Callable[[Currency], ReformatEngine] | None = None,
    ) -> None:
        self._engine_factory = engine_factory or engine_from_settings

    def execute(self, script: EditScript) -> ReplayReport:
        engine = self._engine_factory(script.currency)
        if script.default_amount is not None:
            engine.set_default_amount(script.default_amount)

        steps = [self._apply(engine, event) for event in script.events]
        return ReplayReport(
            currency_symbol=engine.currency_symbol,
            steps=steps,
            final_text=engine.display_text,
            final_value=engine.value,
            final_value_text=engine.amount_text_stream.value,
        )

    @staticmethod
    def _apply(engine: ReformatEngine, event: EditEvent) -> ReplayStep:
        if isinstance(event, FocusEvent):
            render = engine.on_focus_changed(event.focused)
        elif isinstance(event, SelectEvent):
            cursor_index = engine.on_selection_requested(event.start, event.end)
            render = RenderInstruction(
                text=engine.display_text, cursor_index=cursor_index
            )
        else:
            render = engine.on_text_changed(event.text, event.selection_start)
        return ReplayStep(
            kind=event.kind,
            text=render.text,
            cursor_index=render.cursor_index,
            value=engine.value,
        )
