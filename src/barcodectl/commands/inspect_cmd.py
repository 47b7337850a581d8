"""Command: split and decode a barcode."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from barcodectl.commands._base import BarcodeCommand

if TYPE_CHECKING:
    from barcodectl.commands._context import AppContext


@click.command(
    "inspect",
    cls=BarcodeCommand,
    examples="""\
  barcodectl inspect AAAAAAA5
  barcodectl --json inspect GRBAABC2""",
)
@click.argument("barcode")
@click.pass_obj
def inspect_cmd(app: AppContext, barcode: str) -> None:
    """Show the fields and decoded values of BARCODE."""
    app.emit(app.service.inspect(barcode))
