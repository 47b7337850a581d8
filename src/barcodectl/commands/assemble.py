"""Command: assemble a barcode from four field codes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from barcodectl.commands._base import BarcodeCommand

if TYPE_CHECKING:
    from barcodectl.commands._context import AppContext


@click.command(
    cls=BarcodeCommand,
    examples="""\
  barcodectl assemble A A AA AAA
  barcodectl -q assemble G R BA ABC""",
)
@click.argument("capacity")
@click.argument("year")
@click.argument("lot")
@click.argument("series")
@click.pass_obj
def assemble(app: AppContext, capacity: str, year: str, lot: str, series: str) -> None:
    """Join CAPACITY YEAR LOT SERIES codes and append the check digit."""
    app.emit(app.service.assemble(capacity, year, lot, series))
