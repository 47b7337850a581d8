"""Command: check a barcode's structure and check digit."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from barcodectl.commands._base import BarcodeCommand

if TYPE_CHECKING:
    from barcodectl.commands._context import AppContext


@click.command(
    cls=BarcodeCommand,
    examples="""\
  barcodectl validate AAAAAAA5
  barcodectl -q validate AAAAAAA4 || echo rejected""",
)
@click.argument("barcode")
@click.pass_obj
def validate(app: AppContext, barcode: str) -> None:
    """Validate BARCODE. Exits 1 when it is not valid."""
    result = app.service.validate(barcode)
    app.emit(result, exit_code=0 if result.data.get("valid") else 1)
