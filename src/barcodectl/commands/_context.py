"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the configured BarcodeService and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from barcodectl.config.logging import configure_logging
from barcodectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from barcodectl.config.settings import BarcodeSettings
    from barcodectl.services.barcode import BarcodeService
    from barcodectl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The service is built
    lazily so ``--help`` and ``--examples`` never construct a scheme.
    """

    def __init__(self, settings: BarcodeSettings) -> None:
        self.settings = settings
        self._service: BarcodeService | None = None
        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @property
    def service(self) -> BarcodeService:
        """The barcode service for the configured scheme."""
        if self._service is None:
            from barcodectl.services.barcode import BarcodeService

            self._service = BarcodeService(self.settings.scheme)
        return self._service

    def emit(self, result: ServiceResult, *, exit_code: int | None = None) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, then exits with
          *exit_code* when one is given (``validate`` uses 1 for invalid).
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            show_legend=self.settings.output.show_legend,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output and not settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
            if exit_code:
                raise SystemExit(exit_code)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
