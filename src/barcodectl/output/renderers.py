"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from barcodectl.output.console import create_console, get_output, style_for_field

if TYPE_CHECKING:
    from rich.console import Console

    from barcodectl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    show_legend: bool = True,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, show_legend=show_legend)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Barcode ops print the bare barcode, field ops the bare code or value,
    so the output can be piped into other tools.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op == "validate_barcode":
        return "valid" if data.get("valid") else "invalid"
    if result.op == "encode_field":
        return str(data["code"])
    if result.op == "decode_field":
        return str(data["label"])
    if "barcode" in data:
        return str(data["barcode"])
    items = data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item["code"]) for item in items)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="bc.ok")
    op = Text(f"  {result.op}", style="bc.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="bc.key")
    v = Text(str(value), style="bc.code" if key in ("code", "barcode") else "")
    console.print(k, v, sep="")


def _barcode_strip(segments: list[dict[str, Any]], check_digit: str) -> Text:
    """Build the barcode as one Text with each field in its own color."""
    strip = Text("  ")
    for segment in segments:
        style = style_for_field(str(segment["field"]))
        for char in str(segment["code"]):
            strip.append(f" {char} ", style=style)
            strip.append(" ")
    strip.append(f" {check_digit} ", style=style_for_field("check"))
    return strip


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="bc.error")
    op = Text(f"  {result.op}", style="bc.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if err and verbose:
        console.print(Text(f"  kind: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Barcode renderers ─────────────────────────────────────────────────


def _render_barcode(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_legend: bool = True,
) -> None:
    """Render build/assemble/inspect results: colored strip plus decoded values."""
    d = result.data
    _status_line(console, result)
    _field(console, "barcode", d["barcode"])
    console.print()
    console.print(_barcode_strip(d["segments"], d["check_digit"]))
    console.print()

    if show_legend:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Pos", justify="right", style="dim")
        table.add_column("Field")
        table.add_column("Code", style="bc.code")
        table.add_column("Value")
        for segment in d["segments"]:
            first, last = segment["positions"]
            pos = str(first) if first == last else f"{first}-{last}"
            field = Text(str(segment["title"]), style=style_for_field(str(segment["field"])))
            table.add_row(pos, field, str(segment["code"]), str(segment["label"]))
        check = Text("Check Character", style=style_for_field("check"))
        table.add_row("8", check, d["check_digit"], _validity(d["valid"]))
        console.print(table)

    if not d["valid"]:
        _field(console, "expected_check_digit", d["expected_check_digit"])


def _validity(valid: bool) -> Text:
    return Text("valid", style="bc.valid") if valid else Text("invalid", style="bc.invalid")


def _render_validation(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_legend: bool = True,
) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "barcode", d["barcode"])
    console.print(Text("  result: ", style="bc.key"), _validity(d["valid"]), sep="")
    if d.get("reason"):
        _field(console, "reason", d["reason"])
    if verbose and d.get("expected_check_digit") is not None:
        _field(console, "expected_check_digit", d["expected_check_digit"])


def _render_field_code(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_legend: bool = True,
) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "field", d["field"])
    _field(console, "code", d["code"])
    _field(console, "value", d["label"])
    if verbose:
        _field(console, "ordinal", d["ordinal"])


def _render_options(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_legend: bool = True,
) -> None:
    d = result.data
    style = style_for_field(str(d["field"]))
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Code", style=style, no_wrap=True)
    table.add_column("Value")
    for item in d["items"]:
        table.add_row(str(item["ordinal"]), str(item["code"]), str(item["label"]))
    console.print(table)
    console.print(f"\n{d['count']} of {d['total']:,} {d['field']} codes")


def _render_scheme(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_legend: bool = True,
) -> None:
    d = result.data
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Pos", justify="right", style="dim")
    table.add_column("Field")
    table.add_column("Width", justify="right")
    table.add_column("Range")
    table.add_column("Description", style="dim")
    for f in d["fields"]:
        first, last = f["positions"]
        pos = str(first) if first == last else f"{first}-{last}"
        span = f"{f['first_code']}={f['first_label']} .. {f['last_code']}={f['last_label']}"
        title = Text(str(f["title"]), style=style_for_field(str(f["name"])))
        table.add_row(pos, title, str(f["width"]), span, str(f["description"]))
    check = Text("Check Character", style=style_for_field("check"))
    table.add_row(str(d["length"]), check, "1", "0 .. 9", str(d["check_digit"]))
    console.print(table)


def _render_generic(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_legend: bool = True,
) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_Renderer = Callable[..., None]

_OP_RENDERERS: dict[str, _Renderer] = {
    "build_barcode": _render_barcode,
    "assemble_barcode": _render_barcode,
    "inspect_barcode": _render_barcode,
    "validate_barcode": _render_validation,
    "encode_field": _render_field_code,
    "decode_field": _render_field_code,
    "list_options": _render_options,
    "describe_scheme": _render_scheme,
}
