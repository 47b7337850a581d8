"""Custom Click base classes with --examples support.

Provides BarcodeCommand and BarcodeGroup that accept an ``examples``
parameter. When ``--examples`` is passed, the command prints usage
examples and exits, keeping ``--help`` concise.
"""

from __future__ import annotations

from typing import Any

import click

from barcodectl.domain.fields import FieldName


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class BarcodeCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class BarcodeGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = BarcodeCommand`` so all subcommands accept
    the ``examples`` parameter without an explicit ``cls=``.
    """

    command_class = BarcodeCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


FIELD_CHOICE = click.Choice([str(name) for name in FieldName], case_sensitive=False)
