"""Command: describe the barcode layout."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from barcodectl.commands._base import BarcodeCommand

if TYPE_CHECKING:
    from barcodectl.commands._context import AppContext


@click.command(
    cls=BarcodeCommand,
    examples="""\
  barcodectl scheme
  barcodectl --json scheme""",
)
@click.pass_obj
def scheme(app: AppContext) -> None:
    """Describe the fields, positions, and check digit of the barcode."""
    app.emit(app.service.scheme())
