"""Domain layer — field codecs, checksum, and the barcode value type.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
Every function here is pure: no I/O, no shared mutable state.
"""

from barcodectl.domain.barcode import (
    Barcode,
    BarcodeParts,
    assemble_barcode,
    split_barcode,
    validate_barcode,
)
from barcodectl.domain.checksum import compute_check_digit
from barcodectl.domain.errors import (
    BarcodeError,
    ChecksumMismatch,
    DomainOutOfRange,
    MalformedBarcode,
    MalformedCode,
    OrdinalOutOfRange,
    UnknownField,
)
from barcodectl.domain.fields import (
    DEFAULT_SCHEME,
    FieldName,
    Scheme,
    decode_field,
    encode_field,
)

__all__ = [
    "DEFAULT_SCHEME",
    "Barcode",
    "BarcodeError",
    "BarcodeParts",
    "ChecksumMismatch",
    "DomainOutOfRange",
    "FieldName",
    "MalformedBarcode",
    "MalformedCode",
    "OrdinalOutOfRange",
    "Scheme",
    "UnknownField",
    "assemble_barcode",
    "compute_check_digit",
    "decode_field",
    "encode_field",
    "split_barcode",
    "validate_barcode",
]
