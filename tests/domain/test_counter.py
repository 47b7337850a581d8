"""Tests for the alphabetic counter (letter codes <-> 1-based ordinals)."""

import pytest

from barcodectl.domain.counter import (
    code_from_ordinal,
    iter_codes,
    ordinal_from_code,
    span,
)
from barcodectl.domain.errors import MalformedCode, OrdinalOutOfRange


class TestCodeFromOrdinal:
    @pytest.mark.parametrize(
        "ordinal,width,code",
        [
            (1, 1, "A"),
            (26, 1, "Z"),
            (1, 2, "AA"),
            (2, 2, "AB"),
            (26, 2, "AZ"),
            (27, 2, "BA"),
            (676, 2, "ZZ"),
            (1, 3, "AAA"),
            (29, 3, "ABC"),
            (703, 3, "BBA"),
            (17576, 3, "ZZZ"),
        ],
    )
    def test_known_codes(self, ordinal: int, width: int, code: str) -> None:
        assert code_from_ordinal(ordinal, width) == code

    def test_always_full_width(self) -> None:
        """Small ordinals are padded with A, never shortened."""
        assert code_from_ordinal(1, 3) == "AAA"
        assert len(code_from_ordinal(2, 3)) == 3

    @pytest.mark.parametrize("ordinal,width", [(0, 1), (27, 1), (677, 2), (17577, 3), (-1, 2)])
    def test_out_of_range(self, ordinal: int, width: int) -> None:
        with pytest.raises(OrdinalOutOfRange) as excinfo:
            code_from_ordinal(ordinal, width)
        assert excinfo.value.detail == {"ordinal": ordinal, "width": width}

    def test_zero_width_is_programming_error(self) -> None:
        with pytest.raises(ValueError, match="at least 1"):
            code_from_ordinal(1, 0)


class TestOrdinalFromCode:
    @pytest.mark.parametrize(
        "code,ordinal",
        [("A", 1), ("Z", 26), ("AA", 1), ("BA", 27), ("ZZ", 676), ("ABC", 29), ("ZZZ", 17576)],
    )
    def test_known_ordinals(self, code: str, ordinal: int) -> None:
        assert ordinal_from_code(code) == ordinal

    def test_width_checked_when_given(self) -> None:
        assert ordinal_from_code("AB", 2) == 2
        with pytest.raises(MalformedCode):
            ordinal_from_code("AB", 3)

    @pytest.mark.parametrize("code", ["", "a", "A1", "Ä", "A B", "-"])
    def test_rejects_non_alphabet(self, code: str) -> None:
        with pytest.raises(MalformedCode):
            ordinal_from_code(code)

    def test_rejects_non_string(self) -> None:
        with pytest.raises(MalformedCode):
            ordinal_from_code(None)  # type: ignore[arg-type]

    def test_malformed_code_is_value_error(self) -> None:
        """Callers that only know ValueError still catch domain errors."""
        with pytest.raises(ValueError):
            ordinal_from_code("a1")


class TestRoundTrip:
    @pytest.mark.parametrize("width", [1, 2, 3])
    def test_every_ordinal_round_trips(self, width: int) -> None:
        for ordinal in range(1, span(width) + 1):
            code = code_from_ordinal(ordinal, width)
            assert ordinal_from_code(code, width) == ordinal

    @pytest.mark.parametrize("width", [1, 2, 3])
    def test_iter_codes_matches_ordinals(self, width: int) -> None:
        codes = list(iter_codes(width))
        assert len(codes) == span(width)
        assert len(set(codes)) == len(codes)
        for ordinal, code in enumerate(codes, start=1):
            assert ordinal_from_code(code) == ordinal


class TestSpan:
    def test_spans(self) -> None:
        assert span(1) == 26
        assert span(2) == 676
        assert span(3) == 17576
