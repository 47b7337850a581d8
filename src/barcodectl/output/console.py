"""Rich Console factory and theme for barcodectl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BARCODE_THEME = Theme(
    {
        "bc.ok": "bold green",
        "bc.error": "bold red",
        "bc.op": "bold cyan",
        "bc.key": "dim",
        "bc.code": "bold",
        "bc.valid": "bold green",
        "bc.invalid": "bold red",
        "bc.field.capacity": "bold white on blue",
        "bc.field.year": "bold white on dark_violet",
        "bc.field.lot": "bold white on green4",
        "bc.field.series": "bold white on purple4",
        "bc.field.check": "bold white on red3",
    }
)

_FIELD_STYLES: dict[str, str] = {
    "capacity": "bc.field.capacity",
    "year": "bc.field.year",
    "lot": "bc.field.lot",
    "series": "bc.field.series",
    "check": "bc.field.check",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=BARCODE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_field(field: str) -> str:
    """Return the Rich style name for a barcode field (or ``"check"``)."""
    return _FIELD_STYLES.get(field, "")
