"""Subcommand modules for barcodectl.

Provides register_commands() which uses deferred imports to keep
``barcodectl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from barcodectl.commands.assemble import assemble
    from barcodectl.commands.build import build
    from barcodectl.commands.fields import decode, encode, options
    from barcodectl.commands.inspect_cmd import inspect_cmd
    from barcodectl.commands.scheme import scheme
    from barcodectl.commands.validate import validate

    cli.add_command(build)
    cli.add_command(assemble)
    cli.add_command(inspect_cmd)
    cli.add_command(validate)
    cli.add_command(encode)
    cli.add_command(decode)
    cli.add_command(options)
    cli.add_command(scheme)
