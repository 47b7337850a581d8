"""Typed payload contracts for service and adapter boundaries.

These models validate operation payload shapes before they leave the
service layer so renderer/JSON regressions (for example ``segments`` vs
``fields``) fail fast in tests.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class FieldCodeData(BaseModel):
    """Payload contract for ``encode_field`` and ``decode_field``."""

    field: str
    code: str
    ordinal: int
    value: Any
    label: str


class Segment(BaseModel):
    """One field of a barcode with its decoded value."""

    field: str
    title: str
    code: str
    value: Any
    label: str
    positions: tuple[int, int]


class BarcodeData(BaseModel):
    """Payload contract for ``build_barcode``, ``assemble_barcode``, ``inspect_barcode``."""

    barcode: str
    check_digit: str
    valid: bool
    expected_check_digit: str
    segments: list[Segment]


class ValidationData(BaseModel):
    """Payload contract for ``validate_barcode``."""

    barcode: str
    valid: bool
    expected_check_digit: str | None = None
    reason: str | None = None


class OptionItem(BaseModel):
    """One selectable code of a field."""

    model_config = ConfigDict(extra="forbid")

    ordinal: int
    code: str
    value: Any
    label: str


class OptionsData(BaseModel):
    """Payload contract for ``list_options``."""

    field: str
    count: int
    total: int
    items: list[OptionItem]


class FieldSummary(BaseModel):
    """One row of the scheme description."""

    name: str
    title: str
    description: str
    width: int
    positions: tuple[int, int]
    first_code: str
    last_code: str
    first_label: str
    last_label: str


class SchemeData(BaseModel):
    """Payload contract for ``describe_scheme``."""

    length: int
    check_digit: str
    base_year: int
    last_year: int
    fields: list[FieldSummary]
