"""Tests for the four field codecs and the scheme."""

import pytest

from barcodectl.domain.errors import (
    DomainOutOfRange,
    MalformedCode,
    OrdinalOutOfRange,
    UnknownField,
)
from barcodectl.domain.fields import (
    DEFAULT_CAPACITIES,
    DEFAULT_SCHEME,
    CapacityCodec,
    FieldName,
    Scheme,
    decode_field,
    encode_field,
    field_options,
    format_capacity,
    parse_capacity,
)

GB = 1024**3
TB = 1024**4
PB = 1024**5


class TestCapacityLabels:
    @pytest.mark.parametrize(
        "label,size",
        [("1GB", GB), ("512GB", 512 * GB), ("1TB", TB), ("32PB", 32 * PB), (" 64 gb ", 64 * GB)],
    )
    def test_parse(self, label: str, size: int) -> None:
        assert parse_capacity(label) == size

    @pytest.mark.parametrize("label", ["", "GB", "1.5GB", "12XB", "64"])
    def test_parse_rejects(self, label: str) -> None:
        with pytest.raises(ValueError):
            parse_capacity(label)

    @pytest.mark.parametrize(
        "size,label",
        [
            (GB, "1GB"),
            (512 * GB, "512GB"),
            (1024 * GB, "1TB"),
            (PB, "1PB"),
            (3072, "3KB"),
            (1536, "1536B"),
            (7, "7B"),
        ],
    )
    def test_format(self, size: int, label: str) -> None:
        assert format_capacity(size) == label


class TestCapacityField:
    def test_smallest_is_a(self) -> None:
        assert decode_field("capacity", "A") == GB
        assert encode_field("capacity", "1GB") == "A"

    def test_original_ten_entries(self) -> None:
        labels = [
            DEFAULT_SCHEME.capacity.label(decode_field("capacity", code)) for code in "ABCDEFGHIJ"
        ]
        assert labels == [
            "1GB", "2GB", "4GB", "8GB", "16GB", "32GB", "64GB", "128GB", "256GB", "512GB",
        ]  # fmt: skip

    def test_table_is_total(self) -> None:
        assert len(DEFAULT_CAPACITIES) == 26
        assert decode_field("capacity", "K") == TB
        assert decode_field("capacity", "Z") == 32 * PB

    def test_encode_accepts_bytes(self) -> None:
        assert encode_field("capacity", 64 * GB) == "G"

    @pytest.mark.parametrize(
        "value", ["3GB", 3 * GB, "lots", True, 0, [1], {"size": GB}, float(GB), None]
    )
    def test_not_in_table(self, value: object) -> None:
        with pytest.raises(DomainOutOfRange):
            encode_field("capacity", value)

    def test_custom_table_keeps_its_labels(self) -> None:
        labels = ["1024MB", *DEFAULT_CAPACITIES[1:]]
        codec = CapacityCodec(labels)
        assert codec.label(GB) == "1024MB"
        assert codec.label(2 * GB) == "2GB"
        assert [o.label for o in codec.options()][:2] == ["1024MB", "2GB"]

    def test_custom_table_must_have_26_entries(self) -> None:
        with pytest.raises(ValueError, match="exactly 26"):
            CapacityCodec(["1GB", "2GB"])

    def test_custom_table_must_ascend(self) -> None:
        labels = list(DEFAULT_CAPACITIES)
        labels[0], labels[1] = labels[1], labels[0]
        with pytest.raises(ValueError, match="ascending"):
            CapacityCodec(labels)


class TestYearField:
    def test_window_bounds(self) -> None:
        assert decode_field("year", "A") == 2008
        assert decode_field("year", "Z") == 2033
        assert encode_field("year", 2008) == "A"
        assert encode_field("year", 2025) == "R"
        assert encode_field("year", 2033) == "Z"

    @pytest.mark.parametrize("year", [2007, 2034, 1999])
    def test_outside_window(self, year: int) -> None:
        with pytest.raises(DomainOutOfRange) as excinfo:
            encode_field("year", year)
        assert excinfo.value.detail["first_year"] == 2008
        assert excinfo.value.detail["last_year"] == 2033

    def test_accepts_numeric_string(self) -> None:
        assert encode_field("year", "2009") == "B"

    def test_negative_string_is_out_of_window(self) -> None:
        with pytest.raises(DomainOutOfRange):
            encode_field("year", "-2009")

    @pytest.mark.parametrize(
        "value",
        ["twenty", 2025.0, None, False, "2_009", "\u0662\u0660\u0660\u0669", "", "-"],
    )
    def test_rejects_non_integer(self, value: object) -> None:
        with pytest.raises(DomainOutOfRange):
            encode_field("year", value)

    def test_custom_base_year(self) -> None:
        scheme = Scheme.create(base_year=2030)
        assert decode_field("year", "A", scheme) == 2030
        assert scheme.year.last_year == 2055
        assert encode_field("year", 2055, scheme) == "Z"


class TestLotAndSeriesFields:
    def test_lot_bounds(self) -> None:
        assert decode_field("lot", "AA") == 1
        assert decode_field("lot", "BA") == 27
        assert decode_field("lot", "ZZ") == 676
        assert encode_field("lot", 676) == "ZZ"

    def test_series_bounds(self) -> None:
        assert decode_field("series", "AAA") == 1
        assert decode_field("series", "ZZZ") == 17576
        assert encode_field("series", 29) == "ABC"

    @pytest.mark.parametrize("field,value", [("lot", 0), ("lot", 677), ("series", 17577)])
    def test_outside_span(self, field: str, value: int) -> None:
        with pytest.raises(DomainOutOfRange):
            encode_field(field, value)

    @pytest.mark.parametrize("value", ["1_000", "\u0663", "1e3", " 12 3 "])
    def test_rejects_non_ascii_decimal_strings(self, value: str) -> None:
        with pytest.raises(DomainOutOfRange):
            encode_field("series", value)

    def test_accepts_padded_string(self) -> None:
        assert encode_field("series", " 29 ") == "ABC"

    def test_labels(self) -> None:
        assert DEFAULT_SCHEME.lot.label(27) == "Lot #27"
        assert DEFAULT_SCHEME.series.label(17576) == "Series #17,576"


class TestDecodeErrors:
    def test_wrong_width(self) -> None:
        with pytest.raises(MalformedCode):
            decode_field("lot", "A")

    def test_lowercase(self) -> None:
        with pytest.raises(MalformedCode):
            decode_field("series", "abc")

    def test_unknown_field(self) -> None:
        with pytest.raises(UnknownField) as excinfo:
            decode_field("colour", "A")
        assert excinfo.value.code == "UNKNOWN_FIELD"

    def test_ordinal_out_of_range(self) -> None:
        with pytest.raises(OrdinalOutOfRange):
            DEFAULT_SCHEME.year.from_ordinal(27)


class TestRoundTrip:
    @pytest.mark.parametrize("field", list(FieldName))
    def test_every_option_round_trips(self, field: FieldName) -> None:
        for option in field_options(field):
            assert decode_field(field, option.code) == option.value
            assert encode_field(field, option.value) == option.code


class TestScheme:
    def test_fields_in_layout_order(self) -> None:
        names = [codec.name for codec in DEFAULT_SCHEME.fields]
        assert names == [FieldName.CAPACITY, FieldName.YEAR, FieldName.LOT, FieldName.SERIES]

    def test_positions(self) -> None:
        positions = [codec.positions for codec in DEFAULT_SCHEME.fields]
        assert positions == [(1, 1), (2, 2), (3, 4), (5, 7)]

    def test_option_counts(self) -> None:
        assert len(list(field_options("capacity"))) == 26
        assert len(list(field_options("year"))) == 26
        assert len(list(field_options("lot"))) == 676
        assert len(list(field_options("series"))) == 17576

    def test_first_options(self) -> None:
        first = next(field_options("year"))
        assert (first.ordinal, first.code, first.value, first.label) == (1, "A", 2008, "2008")
