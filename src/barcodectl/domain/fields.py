"""Field codecs — the four semantic segments of a barcode.

Each field maps a domain value to a 1-based ordinal and hands the
ordinal to the alphabetic counter for the letter code:

- capacity (1 letter): fixed lookup table of storage sizes, ascending.
- year (1 letter): ``base_year + ordinal - 1``.
- lot (2 letters): the ordinal itself, 1..676.
- series (3 letters): the ordinal itself, 1..17576.

Field widths and offsets are fixed by the barcode layout. The capacity
table and base year are scheme parameters: they have never been
confirmed against an external barcode standard, so they are supplied
by configuration and the defaults below are only the builder's guess.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from barcodectl.domain.counter import (
    code_from_ordinal,
    iter_codes,
    ordinal_from_code,
    span as code_span,
)
from barcodectl.domain.errors import (
    DomainOutOfRange,
    OrdinalOutOfRange,
    UnknownField,
)


class FieldName(StrEnum):
    """Barcode fields in layout order."""

    CAPACITY = "capacity"
    YEAR = "year"
    LOT = "lot"
    SERIES = "series"


DEFAULT_BASE_YEAR = 2008

DEFAULT_CAPACITIES: tuple[str, ...] = (
    "1GB", "2GB", "4GB", "8GB", "16GB", "32GB", "64GB", "128GB", "256GB",
    "512GB", "1TB", "2TB", "4TB", "8TB", "16TB", "32TB", "64TB", "128TB",
    "256TB", "512TB", "1PB", "2PB", "4PB", "8PB", "16PB", "32PB",
)  # fmt: skip

# --- Capacity labels ---

CAPACITY_UNITS: dict[str, int] = {
    "B": 1,
    "KB": 1024,
    "MB": 1024**2,
    "GB": 1024**3,
    "TB": 1024**4,
    "PB": 1024**5,
}

_CAPACITY_RE = re.compile(r"^\s*(\d+)\s*([KMGTP]?B)\s*$", re.IGNORECASE)


def parse_capacity(label: str) -> int:
    """Parse a label such as ``"512GB"`` into a byte count (binary units).

    Raises:
        ValueError: If the label is not ``<integer><unit>``.
    """
    match = _CAPACITY_RE.match(label)
    if match is None:
        msg = f"Unrecognized capacity {label!r}; expected e.g. '64GB'"
        raise ValueError(msg)
    amount, unit = match.groups()
    return int(amount) * CAPACITY_UNITS[unit.upper()]


def format_capacity(size: int) -> str:
    """Render a byte count with the largest unit that divides it exactly."""
    for unit, factor in reversed(CAPACITY_UNITS.items()):
        if size >= factor and size % factor == 0:
            return f"{size // factor}{unit}"
    return f"{size}B"


# --- Codecs ---


@dataclass(frozen=True)
class FieldOption:
    """One selectable entry of a field (code, domain value, display label)."""

    ordinal: int
    code: str
    value: Any
    label: str


class FieldCodec(ABC):
    """Translate between one field's letter codes and its domain values.

    Subclasses define the ordinal mapping; width checks, alphabet
    checks and letter arithmetic are shared.
    """

    name: FieldName
    width: int
    offset: int
    title: str
    description: str

    @abstractmethod
    def to_ordinal(self, value: Any) -> int:
        """Map a domain value to its ordinal, or raise DomainOutOfRange."""
        ...

    @abstractmethod
    def from_ordinal(self, ordinal: int) -> Any:
        """Map an ordinal to its domain value, or raise OrdinalOutOfRange."""
        ...

    def label(self, value: Any) -> str:
        """Human-readable rendering of a domain value."""
        return str(value)

    @property
    def span(self) -> int:
        return code_span(self.width)

    @property
    def positions(self) -> tuple[int, int]:
        """1-based first and last barcode positions of this field."""
        return self.offset + 1, self.offset + self.width

    def validate_code(self, code: str) -> str:
        """Return *code* unchanged if well-formed for this field."""
        ordinal_from_code(code, self.width)
        return code

    def encode(self, value: Any) -> str:
        return code_from_ordinal(self.to_ordinal(value), self.width)

    def decode(self, code: str) -> Any:
        return self.from_ordinal(ordinal_from_code(code, self.width))

    def options(self) -> Iterator[FieldOption]:
        """Yield every code of the field in ordinal order."""
        for ordinal, code in enumerate(iter_codes(self.width), start=1):
            value = self.from_ordinal(ordinal)
            yield FieldOption(ordinal=ordinal, code=code, value=value, label=self.label(value))

    def _check_ordinal(self, ordinal: int) -> int:
        if not 1 <= ordinal <= self.span:
            msg = f"Ordinal {ordinal} is outside 1..{self.span} for {self.name}"
            raise OrdinalOutOfRange(msg, field=str(self.name), ordinal=ordinal)
        return ordinal

    def _as_int(self, value: Any) -> int:
        if isinstance(value, str):
            digits = value.strip().removeprefix("-")
            if digits.isascii() and digits.isdigit():
                return int(value.strip())
        elif isinstance(value, int) and not isinstance(value, bool):
            return value
        msg = f"{self.title} must be an integer, got {value!r}"
        raise DomainOutOfRange(msg, field=str(self.name), value=value)


class CapacityCodec(FieldCodec):
    """Storage capacity from a fixed, ascending 26-entry table."""

    name = FieldName.CAPACITY
    width = 1
    offset = 0
    title = "Memory Capacity"
    description = "Single letter code representing storage capacity"

    def __init__(self, capacities: Sequence[str] = DEFAULT_CAPACITIES) -> None:
        sizes = tuple(parse_capacity(label) for label in capacities)
        if len(sizes) != self.span:
            msg = f"Capacity table needs exactly {self.span} entries, got {len(sizes)}"
            raise ValueError(msg)
        if any(a >= b for a, b in zip(sizes, sizes[1:], strict=False)):
            msg = "Capacity table must be strictly ascending"
            raise ValueError(msg)
        self.sizes = sizes
        self._ordinals = {size: i for i, size in enumerate(sizes, start=1)}
        self._labels = {size: label.strip() for size, label in zip(sizes, capacities, strict=True)}

    def to_ordinal(self, value: Any) -> int:
        if isinstance(value, str):
            try:
                size = parse_capacity(value)
            except ValueError as exc:
                raise DomainOutOfRange(str(exc), field=str(self.name), value=value) from exc
        elif isinstance(value, int) and not isinstance(value, bool):
            size = value
        else:
            msg = f"{self.title} must be a label such as '64GB' or a byte count, got {value!r}"
            raise DomainOutOfRange(msg, field=str(self.name), value=value)
        ordinal = self._ordinals.get(size)
        if ordinal is None:
            msg = f"Capacity {value!r} is not in the capacity table"
            raise DomainOutOfRange(msg, field=str(self.name), value=value)
        return ordinal

    def from_ordinal(self, ordinal: int) -> int:
        return self.sizes[self._check_ordinal(ordinal) - 1]

    def label(self, value: Any) -> str:
        """The configured label for a table size, else the canonical rendering."""
        return self._labels.get(value) or format_capacity(value)


class YearCodec(FieldCodec):
    """Calendar year of manufacture within a 26-year window."""

    name = FieldName.YEAR
    width = 1
    offset = 1
    title = "Calendar Year"
    description = "Year of manufacture"

    def __init__(self, base_year: int = DEFAULT_BASE_YEAR) -> None:
        self.base_year = base_year

    @property
    def last_year(self) -> int:
        return self.base_year + self.span - 1

    def to_ordinal(self, value: Any) -> int:
        year = self._as_int(value)
        if not self.base_year <= year <= self.last_year:
            msg = f"Year {year} is outside the window {self.base_year}..{self.last_year}"
            raise DomainOutOfRange(
                msg,
                field=str(self.name),
                value=year,
                first_year=self.base_year,
                last_year=self.last_year,
            )
        return year - self.base_year + 1

    def from_ordinal(self, ordinal: int) -> int:
        return self.base_year + self._check_ordinal(ordinal) - 1


class SequenceCodec(FieldCodec):
    """Field whose domain value is the ordinal itself (lot, series)."""

    def __init__(
        self,
        name: FieldName,
        *,
        width: int,
        offset: int,
        title: str,
        description: str,
        label_prefix: str,
    ) -> None:
        self.name = name
        self.width = width
        self.offset = offset
        self.title = title
        self.description = description
        self.label_prefix = label_prefix

    def to_ordinal(self, value: Any) -> int:
        number = self._as_int(value)
        if not 1 <= number <= self.span:
            msg = f"{self.title} {number} is outside 1..{self.span}"
            raise DomainOutOfRange(msg, field=str(self.name), value=number)
        return number

    def from_ordinal(self, ordinal: int) -> int:
        return self._check_ordinal(ordinal)

    def label(self, value: Any) -> str:
        return f"{self.label_prefix} #{value:,}"


# --- Scheme ---


@dataclass(frozen=True)
class Scheme:
    """The four field codecs making up one barcode layout."""

    capacity: CapacityCodec
    year: YearCodec
    lot: SequenceCodec
    series: SequenceCodec

    @classmethod
    def create(
        cls,
        *,
        base_year: int = DEFAULT_BASE_YEAR,
        capacities: Sequence[str] = DEFAULT_CAPACITIES,
    ) -> Scheme:
        """Build a scheme from its configurable parameters."""
        return cls(
            capacity=CapacityCodec(capacities),
            year=YearCodec(base_year),
            lot=SequenceCodec(
                FieldName.LOT,
                width=2,
                offset=2,
                title="Lot Number",
                description="Two-letter lot identification",
                label_prefix="Lot",
            ),
            series=SequenceCodec(
                FieldName.SERIES,
                width=3,
                offset=4,
                title="Product Series",
                description="Three-letter series code",
                label_prefix="Series",
            ),
        )

    @property
    def fields(self) -> tuple[FieldCodec, ...]:
        """Codecs in layout order."""
        return (self.capacity, self.year, self.lot, self.series)

    def field(self, name: str) -> FieldCodec:
        """Look up a codec by field name.

        Raises:
            UnknownField: If *name* is not a barcode field.
        """
        try:
            key = FieldName(name)
        except ValueError:
            known = ", ".join(str(f) for f in FieldName)
            msg = f"Unknown field {name!r}; expected one of: {known}"
            raise UnknownField(msg, field=name) from None
        return getattr(self, str(key))


DEFAULT_SCHEME = Scheme.create()


def encode_field(field: str, value: Any, scheme: Scheme | None = None) -> str:
    """Encode a domain *value* as the letter code of *field*."""
    return (scheme or DEFAULT_SCHEME).field(field).encode(value)


def decode_field(field: str, code: str, scheme: Scheme | None = None) -> Any:
    """Decode the letter *code* of *field* into its domain value."""
    return (scheme or DEFAULT_SCHEME).field(field).decode(code)


def field_options(field: str, scheme: Scheme | None = None) -> Iterator[FieldOption]:
    """Enumerate every selectable option of *field*."""
    return (scheme or DEFAULT_SCHEME).field(field).options()
