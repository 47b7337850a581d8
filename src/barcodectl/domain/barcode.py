"""Barcode assembly, splitting, and validation.

Layout (8 characters, fixed offsets)::

    position  1         2     3-4   5-7     8
    field     capacity  year  lot   series  check digit

INVARIANT: a Barcode value always carries the check digit of its own
seven field letters. Changing a field produces a new Barcode; the check
digit is recomputed, never set by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationInfo, computed_field, field_validator

from barcodectl.domain.checksum import compute_check_digit
from barcodectl.domain.errors import BarcodeError, ChecksumMismatch, MalformedBarcode
from barcodectl.domain.fields import DEFAULT_SCHEME, FieldName, Scheme

BARCODE_LENGTH = 8

_SLICES: dict[FieldName, slice] = {
    FieldName.CAPACITY: slice(0, 1),
    FieldName.YEAR: slice(1, 2),
    FieldName.LOT: slice(2, 4),
    FieldName.SERIES: slice(4, 7),
}


@dataclass(frozen=True)
class BarcodeParts:
    """Raw segments of an 8-character barcode, not yet validated."""

    capacity_code: str
    year_code: str
    lot_code: str
    series_code: str
    check_digit: str

    @property
    def prefix(self) -> str:
        """The seven field letters the check digit is computed over."""
        return self.capacity_code + self.year_code + self.lot_code + self.series_code

    def codes(self) -> dict[str, str]:
        """Field name to code, in layout order."""
        return {
            str(FieldName.CAPACITY): self.capacity_code,
            str(FieldName.YEAR): self.year_code,
            str(FieldName.LOT): self.lot_code,
            str(FieldName.SERIES): self.series_code,
        }


def split_barcode(full_code: str) -> BarcodeParts:
    """Slice *full_code* into its segments by fixed offsets.

    Raises:
        MalformedBarcode: If *full_code* is not exactly 8 characters.
    """
    if not isinstance(full_code, str) or len(full_code) != BARCODE_LENGTH:
        length = len(full_code) if isinstance(full_code, str) else None
        msg = f"Barcode must be exactly {BARCODE_LENGTH} characters, got {full_code!r}"
        raise MalformedBarcode(msg, barcode=full_code, length=length)
    return BarcodeParts(
        capacity_code=full_code[_SLICES[FieldName.CAPACITY]],
        year_code=full_code[_SLICES[FieldName.YEAR]],
        lot_code=full_code[_SLICES[FieldName.LOT]],
        series_code=full_code[_SLICES[FieldName.SERIES]],
        check_digit=full_code[BARCODE_LENGTH - 1],
    )


def _checked_prefix(capacity: str, year: str, lot: str, series: str) -> str:
    scheme = DEFAULT_SCHEME
    scheme.capacity.validate_code(capacity)
    scheme.year.validate_code(year)
    scheme.lot.validate_code(lot)
    scheme.series.validate_code(series)
    return capacity + year + lot + series


def assemble_barcode(capacity: str, year: str, lot: str, series: str) -> str:
    """Concatenate the four field codes and append the check digit.

    Raises:
        MalformedCode: If any code has the wrong width or letters.
    """
    prefix = _checked_prefix(capacity, year, lot, series)
    return prefix + compute_check_digit(prefix)


def validate_barcode(full_code: str) -> bool:
    """Return True iff *full_code* is well-formed and its check digit matches."""
    try:
        parts = split_barcode(full_code)
        prefix = _checked_prefix(
            parts.capacity_code, parts.year_code, parts.lot_code, parts.series_code
        )
    except BarcodeError:
        return False
    return compute_check_digit(prefix) == parts.check_digit


class Barcode(BaseModel):
    """Immutable barcode value built from four field codes.

    Construct via :meth:`default`, :meth:`from_codes`, :meth:`from_values`
    or :meth:`parse`; these raise domain errors (``MalformedCode`` etc.)
    rather than pydantic ``ValidationError``.
    """

    model_config = {"frozen": True}

    capacity_code: str
    year_code: str
    lot_code: str
    series_code: str

    @field_validator("capacity_code", "year_code", "lot_code", "series_code")
    @classmethod
    def _well_formed(cls, value: str, info: ValidationInfo) -> str:
        name = info.field_name.removesuffix("_code")
        return DEFAULT_SCHEME.field(name).validate_code(value)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def check_digit(self) -> str:
        return compute_check_digit(self.prefix)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def code(self) -> str:
        return self.prefix + self.check_digit

    @property
    def prefix(self) -> str:
        return self.capacity_code + self.year_code + self.lot_code + self.series_code

    def __str__(self) -> str:
        return self.code

    # --- Construction ---

    @classmethod
    def from_codes(cls, capacity: str, year: str, lot: str, series: str) -> Barcode:
        _checked_prefix(capacity, year, lot, series)
        return cls(capacity_code=capacity, year_code=year, lot_code=lot, series_code=series)

    @classmethod
    def default(cls) -> Barcode:
        """Smallest capacity, earliest year, first lot, first series."""
        return cls.from_codes("A", "A", "AA", "AAA")

    @classmethod
    def from_values(
        cls,
        capacity: Any,
        year: Any,
        lot: Any,
        series: Any,
        scheme: Scheme | None = None,
    ) -> Barcode:
        """Encode one domain value per field.

        Raises:
            DomainOutOfRange: If a value has no code in *scheme*.
        """
        scheme = scheme or DEFAULT_SCHEME
        return cls.from_codes(
            scheme.capacity.encode(capacity),
            scheme.year.encode(year),
            scheme.lot.encode(lot),
            scheme.series.encode(series),
        )

    @classmethod
    def parse(cls, full_code: str) -> Barcode:
        """Parse and verify an 8-character barcode.

        Raises:
            MalformedBarcode: Wrong length.
            MalformedCode: A segment is not valid for its field.
            ChecksumMismatch: The check digit does not match.
        """
        parts = split_barcode(full_code)
        barcode = cls.from_codes(
            parts.capacity_code, parts.year_code, parts.lot_code, parts.series_code
        )
        if barcode.check_digit != parts.check_digit:
            msg = (
                f"Check digit of {full_code!r} is {parts.check_digit!r}, "
                f"expected {barcode.check_digit!r}"
            )
            raise ChecksumMismatch(
                msg,
                barcode=full_code,
                check_digit=parts.check_digit,
                expected=barcode.check_digit,
            )
        return barcode

    # --- Updates (return new values) ---

    def code_for(self, field: str) -> str:
        """Return the code of one field."""
        return getattr(self, f"{DEFAULT_SCHEME.field(field).name}_code")

    def codes(self) -> dict[str, str]:
        return {str(name): self.code_for(name) for name in FieldName}

    def with_field(self, field: str, code: str) -> Barcode:
        """Return a copy with *field* set to *code* and the check digit recomputed."""
        codes = self.codes()
        codes[str(DEFAULT_SCHEME.field(field).name)] = code
        return self.from_codes(**codes)

    def with_value(self, field: str, value: Any, scheme: Scheme | None = None) -> Barcode:
        """Return a copy with *field* encoded from a domain *value*."""
        codec = (scheme or DEFAULT_SCHEME).field(field)
        return self.with_field(str(codec.name), codec.encode(value))

    def decode(self, scheme: Scheme | None = None) -> dict[str, Any]:
        """Decode every field into its domain value."""
        scheme = scheme or DEFAULT_SCHEME
        return {str(codec.name): codec.decode(self.code_for(codec.name)) for codec in scheme.fields}
