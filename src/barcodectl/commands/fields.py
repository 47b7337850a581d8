"""Commands: encode, decode, and list the codes of a single field."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from barcodectl.commands._base import FIELD_CHOICE, BarcodeCommand

if TYPE_CHECKING:
    from barcodectl.commands._context import AppContext


@click.command(
    cls=BarcodeCommand,
    examples="""\
  barcodectl encode capacity 64GB
  barcodectl encode year 2025
  barcodectl encode lot 27
  barcodectl -q encode series 17576""",
)
@click.argument("field", type=FIELD_CHOICE)
@click.argument("value")
@click.pass_obj
def encode(app: AppContext, field: str, value: str) -> None:
    """Encode VALUE as the letter code of FIELD."""
    app.emit(app.service.encode(field.lower(), value))


@click.command(
    cls=BarcodeCommand,
    examples="""\
  barcodectl decode year R
  barcodectl decode lot BA
  barcodectl --json decode capacity K""",
)
@click.argument("field", type=FIELD_CHOICE)
@click.argument("code")
@click.pass_obj
def decode(app: AppContext, field: str, code: str) -> None:
    """Decode CODE of FIELD into its value."""
    app.emit(app.service.decode(field.lower(), code))


@click.command(
    cls=BarcodeCommand,
    examples="""\
  barcodectl options capacity
  barcodectl options year
  barcodectl options series --limit 30
  barcodectl options lot --all""",
)
@click.argument("field", type=FIELD_CHOICE)
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Maximum codes to list.")
@click.option("--all", "show_all", is_flag=True, help="List every code (ignores --limit).")
@click.pass_obj
def options(app: AppContext, field: str, limit: int | None, show_all: bool) -> None:
    """List the selectable codes of FIELD in order."""
    if show_all:
        limit = None
    elif limit is None:
        limit = app.settings.output.options_limit
    app.emit(app.service.options(field.lower(), limit=limit))
