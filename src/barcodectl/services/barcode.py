"""BarcodeService — encode, decode, build, inspect, and validate barcodes.

Thin orchestration over :mod:`barcodectl.domain`: every method maps
domain values through the configured scheme, shapes the payload via
:mod:`barcodectl.services.contracts`, and converts ``BarcodeError`` into
a failed :class:`ServiceResult`.
"""

from __future__ import annotations

from itertools import islice
from typing import Any

import structlog

from barcodectl.domain.barcode import BARCODE_LENGTH, Barcode, split_barcode
from barcodectl.domain.checksum import CHECK_MODULUS, compute_check_digit
from barcodectl.domain.counter import ordinal_from_code
from barcodectl.domain.errors import BarcodeError
from barcodectl.domain.fields import FieldCodec, FieldName
from barcodectl.services.base import BaseService
from barcodectl.services.contracts import (
    BarcodeData,
    FieldCodeData,
    OptionsData,
    SchemeData,
    ValidationData,
    dump_validated,
)
from barcodectl.services.result import ServiceResult

log = structlog.get_logger(__name__)


class BarcodeService(BaseService):
    """Barcode operations over one scheme."""

    # --- Single fields ---

    def encode(self, field: str, value: Any) -> ServiceResult:
        """Encode a domain value as the code of *field*."""
        op = "encode_field"
        warnings: list[str] = []
        try:
            codec = self._scheme.field(field)
            code = codec.encode(value)
        except BarcodeError as exc:
            if exc.detail.get("field") == str(FieldName.YEAR):
                self._year_window_warnings(warnings)
                return ServiceResult.failure(op, exc).model_copy(update={"warnings": warnings})
            return self._fail(op, exc)

        if codec.name is FieldName.YEAR:
            self._year_window_warnings(warnings)
        log.debug("field_encoded", field=str(codec.name), value=value, code=code)
        return ServiceResult(
            ok=True,
            op=op,
            data=self._field_payload(codec, code),
            warnings=warnings,
        )

    def decode(self, field: str, code: str) -> ServiceResult:
        """Decode the code of *field* into its domain value."""
        op = "decode_field"
        try:
            codec = self._scheme.field(field)
            codec.decode(code)
        except BarcodeError as exc:
            return self._fail(op, exc)
        log.debug("field_decoded", field=str(codec.name), code=code)
        return ServiceResult(ok=True, op=op, data=self._field_payload(codec, code))

    # --- Whole barcodes ---

    def build(
        self,
        *,
        capacity: Any = None,
        year: Any = None,
        lot: Any = None,
        series: Any = None,
    ) -> ServiceResult:
        """Build a barcode from domain values, defaulting each missing field.

        Defaults are the first entry of each field: smallest capacity,
        base year, lot 1, series 1.
        """
        op = "build_barcode"
        warnings: list[str] = []
        self._year_window_warnings(warnings)
        values = {"capacity": capacity, "year": year, "lot": lot, "series": series}
        try:
            barcode = Barcode.default()
            for name, value in values.items():
                if value is not None:
                    barcode = barcode.with_value(name, value, self._scheme)
        except BarcodeError as exc:
            return ServiceResult.failure(op, exc).model_copy(update={"warnings": warnings})

        log.debug("barcode_built", barcode=barcode.code)
        return ServiceResult(
            ok=True,
            op=op,
            data=self._barcode_payload(barcode, barcode.check_digit),
            warnings=warnings,
        )

    def assemble(self, capacity: str, year: str, lot: str, series: str) -> ServiceResult:
        """Assemble a barcode from four field codes."""
        op = "assemble_barcode"
        try:
            barcode = Barcode.from_codes(capacity, year, lot, series)
        except BarcodeError as exc:
            return self._fail(op, exc)
        log.debug("barcode_assembled", barcode=barcode.code)
        return ServiceResult(
            ok=True,
            op=op,
            data=self._barcode_payload(barcode, barcode.check_digit),
        )

    def inspect(self, full_code: str) -> ServiceResult:
        """Split and decode a barcode, reporting whether its check digit matches.

        A well-formed barcode with a wrong check digit still succeeds,
        with ``valid`` False; malformed input fails.
        """
        op = "inspect_barcode"
        try:
            parts = split_barcode(full_code)
            barcode = Barcode.from_codes(**parts.codes())
        except BarcodeError as exc:
            return self._fail(op, exc)

        data = self._barcode_payload(barcode, parts.check_digit)
        warnings: list[str] = []
        if not data["valid"]:
            warnings.append(
                f"Check digit {parts.check_digit!r} does not match "
                f"expected {barcode.check_digit!r}"
            )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def validate(self, full_code: str) -> ServiceResult:
        """Check a barcode; an invalid barcode is a successful result with ``valid`` False."""
        op = "validate_barcode"
        expected: str | None = None
        reason: str | None = None
        try:
            parts = split_barcode(full_code)
            for name, code in parts.codes().items():
                self._scheme.field(name).validate_code(code)
            expected = compute_check_digit(parts.prefix)
            valid = expected == parts.check_digit
            if not valid:
                reason = "CHECKSUM_MISMATCH"
        except BarcodeError as exc:
            valid = False
            reason = exc.code

        log.debug("barcode_validated", barcode=full_code, valid=valid, reason=reason)
        data = {
            "barcode": full_code,
            "valid": valid,
            "expected_check_digit": expected,
            "reason": reason,
        }
        return ServiceResult(ok=True, op=op, data=dump_validated(ValidationData, data))

    # --- Enumeration ---

    def options(self, field: str, *, limit: int | None = None) -> ServiceResult:
        """List the selectable codes of *field* in ordinal order."""
        op = "list_options"
        try:
            codec = self._scheme.field(field)
        except BarcodeError as exc:
            return self._fail(op, exc)

        options = codec.options()
        if limit is not None:
            options = islice(options, limit)
        items = [
            {"ordinal": o.ordinal, "code": o.code, "value": o.value, "label": o.label}
            for o in options
        ]
        data = {"field": str(codec.name), "count": len(items), "total": codec.span, "items": items}
        return ServiceResult(ok=True, op=op, data=dump_validated(OptionsData, data))

    def scheme(self) -> ServiceResult:
        """Describe the barcode layout and the configured tables."""
        op = "describe_scheme"
        warnings: list[str] = []
        self._year_window_warnings(warnings)
        fields = []
        for codec in self._scheme.fields:
            first = codec.from_ordinal(1)
            last = codec.from_ordinal(codec.span)
            fields.append(
                {
                    "name": str(codec.name),
                    "title": codec.title,
                    "description": codec.description,
                    "width": codec.width,
                    "positions": codec.positions,
                    "first_code": "A" * codec.width,
                    "last_code": "Z" * codec.width,
                    "first_label": codec.label(first),
                    "last_label": codec.label(last),
                }
            )
        data = {
            "length": BARCODE_LENGTH,
            "check_digit": f"sum of character codes of positions 1-7, modulo {CHECK_MODULUS}",
            "base_year": self._scheme.year.base_year,
            "last_year": self._scheme.year.last_year,
            "fields": fields,
        }
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(SchemeData, data),
            warnings=warnings,
        )

    # --- Payload helpers ---

    def _field_payload(self, codec: FieldCodec, code: str) -> dict[str, Any]:
        value = codec.decode(code)
        data = {
            "field": str(codec.name),
            "code": code,
            "ordinal": ordinal_from_code(code, codec.width),
            "value": value,
            "label": codec.label(value),
        }
        return dump_validated(FieldCodeData, data)

    def _barcode_payload(self, barcode: Barcode, check_digit: str) -> dict[str, Any]:
        segments = []
        for codec in self._scheme.fields:
            code = barcode.code_for(codec.name)
            value = codec.decode(code)
            segments.append(
                {
                    "field": str(codec.name),
                    "title": codec.title,
                    "code": code,
                    "value": value,
                    "label": codec.label(value),
                    "positions": codec.positions,
                }
            )
        data = {
            "barcode": barcode.prefix + check_digit,
            "check_digit": check_digit,
            "valid": check_digit == barcode.check_digit,
            "expected_check_digit": barcode.check_digit,
            "segments": segments,
        }
        return dump_validated(BarcodeData, data)
