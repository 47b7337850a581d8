"""Barcode error kinds.

Every error carries a stable ``code`` (surfaced as ``ServiceError.code``)
and a ``detail`` dict describing the offending input. All errors are
reported to the immediate caller; nothing here is retryable.
"""

from __future__ import annotations

from typing import Any, ClassVar


class BarcodeError(ValueError):
    """Base class for all barcode encoding and decoding failures."""

    code: ClassVar[str] = "BARCODE_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail


class DomainOutOfRange(BarcodeError):
    """A domain value has no representable code (e.g. year beyond the window)."""

    code = "DOMAIN_OUT_OF_RANGE"


class MalformedCode(BarcodeError):
    """A code string has the wrong length or non-alphabet characters."""

    code = "MALFORMED_CODE"


class OrdinalOutOfRange(BarcodeError):
    """An ordinal falls outside the span of its field."""

    code = "ORDINAL_OUT_OF_RANGE"


class MalformedBarcode(BarcodeError):
    """A full barcode is not exactly 8 characters."""

    code = "MALFORMED_BARCODE"


class UnknownField(BarcodeError):
    """A field name is not one of capacity, year, lot, series."""

    code = "UNKNOWN_FIELD"


class ChecksumMismatch(BarcodeError):
    """The check digit of a parsed barcode does not match its prefix."""

    code = "CHECKSUM_MISMATCH"
