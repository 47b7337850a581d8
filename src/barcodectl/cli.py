"""Root CLI group for barcodectl with global flags and command registration."""

from __future__ import annotations

import click

from barcodectl import __version__
from barcodectl.commands import register_commands
from barcodectl.commands._base import BarcodeGroup
from barcodectl.commands._context import AppContext
from barcodectl.config.settings import BarcodeSettings


@click.group(
    cls=BarcodeGroup,
    invoke_without_command=True,
    examples="""\
  barcodectl build --capacity 64GB --year 2025 --lot 3 --series 12
  barcodectl inspect AAAAAAA5
  barcodectl validate AAAAAAA5""",
)
@click.version_option(version=__version__, prog_name="barcodectl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """barcodectl — build, decode, and validate product barcodes."""
    settings = BarcodeSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
