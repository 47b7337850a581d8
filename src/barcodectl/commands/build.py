"""Command: build a barcode from domain values."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from barcodectl.commands._base import BarcodeCommand

if TYPE_CHECKING:
    from barcodectl.commands._context import AppContext


@click.command(
    cls=BarcodeCommand,
    examples="""\
  barcodectl build
  barcodectl build --capacity 64GB --year 2025
  barcodectl build --capacity 1TB --year 2024 --lot 27 --series 703
  barcodectl --json build --lot 676""",
)
@click.option("--capacity", default=None, help="Storage capacity, e.g. 64GB (default: smallest).")
@click.option("--year", type=int, default=None, help="Manufacture year (default: first year).")
@click.option("--lot", type=int, default=None, help="Lot number 1-676 (default: 1).")
@click.option("--series", type=int, default=None, help="Product series 1-17576 (default: 1).")
@click.pass_obj
def build(
    app: AppContext,
    capacity: str | None,
    year: int | None,
    lot: int | None,
    series: int | None,
) -> None:
    """Build a barcode; the check digit is computed automatically."""
    app.emit(app.service.build(capacity=capacity, year=year, lot=lot, series=series))
