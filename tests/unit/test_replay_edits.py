"""Unit tests for scripted edit replay."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from amount_cell.application.schemas.edit_script import EditScript, TextEvent
from amount_cell.application.use_cases.replay_edits import ReplayEditsUseCase
from amount_cell.domain.currency import Currency
from amount_cell.services.reformat_engine import ReformatEngine


def _typing_session() -> dict[str, object]:
    return {
        "currency": "eur",
        "default_amount": "50000",
        "events": [
            {"kind": "focus", "focused": True},
            {"kind": "select", "start": 6},
            {"kind": "text", "text": "500001 €", "selection_start": 6},
            {"kind": "text", "text": "500 001. €", "selection_start": 8},
            {"kind": "text", "text": "500 001.5 €", "selection_start": 9},
        ],
    }


def test_edit_script_parses_events_by_kind() -> None:
    script = EditScript.model_validate(_typing_session())

    assert script.currency is Currency.EUR
    assert script.default_amount == Decimal("50000")
    assert isinstance(script.events[2], TextEvent)


@pytest.mark.parametrize(
    "payload",
    [
        {"currency": "EUR", "events": []},
        {"currency": "EUR", "events": [{"kind": "scroll"}]},
        {"currency": "EUR", "events": [{"kind": "select", "start": -1}]},
        {
            "currency": "EUR",
            "default_amount": "-5",
            "events": [{"kind": "focus", "focused": True}],
        },
    ],
)
def test_edit_script_rejects_invalid_payloads(payload: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        EditScript.model_validate(payload)


def test_replay_records_each_render() -> None:
    report = ReplayEditsUseCase().execute(EditScript.model_validate(_typing_session()))

    assert [(step.kind, step.text, step.cursor_index) for step in report.steps] == [
        ("focus", "50000 €", 6),
        ("select", "50000 €", 5),
        ("text", "500 001 €", 7),
        ("text", "500 001. €", 8),
        ("text", "500 001.5 €", 9),
    ]
    assert report.currency_symbol == "€"
    assert report.final_text == "500 001.5 €"
    assert report.final_value == Decimal("500001.5")
    assert report.final_value_text == "500001.5"


def test_replay_uses_injected_engine_factory() -> None:
    created: list[ReformatEngine] = []

    def factory(currency: Currency) -> ReformatEngine:
        engine = ReformatEngine(currency, decimal_separator=",")
        created.append(engine)
        return engine

    script = EditScript.model_validate(
        {"currency": "RUR", "events": [{"kind": "text", "text": "1234,5 ₽"}]}
    )

    report = ReplayEditsUseCase(factory).execute(script)

    assert len(created) == 1
    assert report.final_text == "1 234,5 ₽"


def test_default_engine_follows_configured_decimal_separator(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("AMOUNT_CELL_DECIMAL_SEPARATOR", ",")
    script = EditScript.model_validate(
        {"currency": "RUR", "events": [{"kind": "text", "text": "1234,5 ₽"}]}
    )

    report = ReplayEditsUseCase().execute(script)

    assert report.final_text == "1 234,5 ₽"
    assert report.final_value == Decimal("1234.5")
