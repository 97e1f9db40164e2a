"""CLI bootstrap for amount-cell."""

import json
import logging
from pathlib import Path

import typer
from pydantic import ValidationError

from amount_cell.application.schemas.edit_script import EditScript
from amount_cell.application.use_cases.replay_edits import ReplayEditsUseCase
from amount_cell.core.settings import get_settings
from amount_cell.domain.currency import Currency
from amount_cell.domain.money import (
    RejectedAmount,
    format_display_text,
    parse_amount,
    strip_money_text,
)
from amount_cell.services.reformat_engine import ReformatEngine

app = typer.Typer(help="CLI for live currency amount formatting.")
SCRIPT_FILE_ARGUMENT = typer.Argument(..., exists=True, dir_okay=False)
CURRENCY_OPTION = typer.Option(None, "--currency", "-c", help="Currency code.")
LOG_LEVEL_OPTION = typer.Option(None, "--log-level", help="Logging level.")
JSON_OPTION = typer.Option(False, "--json", help="Print the full report as JSON.")
FRACTIONAL_OPTION = typer.Option(
    None,
    "--fractional/--integer",
    help="Force the fractional or whole-number pattern.",
)


@app.callback()
def configure(log_level: str | None = LOG_LEVEL_OPTION) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=(log_level or get_settings().log_level).upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@app.command("currencies")
def currencies() -> None:
    """List the currency symbols the field can display."""
    for currency in Currency:
        typer.echo(f"{currency.name} {currency.symbol}")


@app.command("format")
def format_amount(
    amount: str,
    currency: str | None = CURRENCY_OPTION,
    fractional: bool | None = FRACTIONAL_OPTION,
) -> None:
    """Render a raw amount exactly as the field would display it."""
    settings = get_settings()
    try:
        resolved = Currency.from_code(currency) if currency else settings.currency
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--currency") from exc

    if fractional is not None:
        _echo_with_pattern(amount, resolved.symbol, fractional=fractional)
        return

    engine = ReformatEngine(resolved, decimal_separator=settings.decimal_separator)
    render = engine.on_text_changed(amount)
    if engine.last_rejection is not None:
        typer.echo(f"Rejected: {engine.last_rejection.reason}", err=True)
        raise typer.Exit(code=1)
    typer.echo(render.text)


def _echo_with_pattern(amount: str, symbol: str, *, fractional: bool) -> None:
    separator = get_settings().decimal_separator
    result = parse_amount(strip_money_text(amount, symbol), separator)
    if isinstance(result, RejectedAmount):
        typer.echo(f"Rejected: {result.reason}", err=True)
        raise typer.Exit(code=1)
    fraction_digits = result.fraction_digits if fractional else None
    typer.echo(
        format_display_text(
            result.value, fraction_digits, symbol, decimal_separator=separator
        )
    )


@app.command("replay")
def replay(script: Path = SCRIPT_FILE_ARGUMENT, as_json: bool = JSON_OPTION) -> None:
    """Replay a JSON edit script and print what the field shows after each event."""
    payload = json.loads(script.read_text(encoding="utf-8"))
    try:
        request = EditScript.model_validate(payload)
    except ValidationError as exc:
        typer.echo(f"Invalid edit script:\n{exc}", err=True)
        raise typer.Exit(code=2) from exc

    report = ReplayEditsUseCase().execute(request)
    if as_json:
        typer.echo(report.model_dump_json(indent=2))
        return

    for index, step in enumerate(report.steps, start=1):
        typer.echo(
            f"{index:>3} {step.kind:<6} | {step.text} | "
            f"cursor={step.cursor_index} | value={step.value}"
        )
    typer.echo(f"Final: {report.final_text} ({report.final_value_text})")


def main() -> None:
    """Run the amount-cell CLI application."""
    app()


if __name__ == "__main__":
    main()
