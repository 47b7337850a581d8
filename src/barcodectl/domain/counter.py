"""Alphabetic counter — fixed-width letter codes to 1-based ordinals.

A code is a base-26 number with digits A=0 .. Z=25, most significant
letter first. The all-``A`` code is ordinal 1, so for width 2 the codes
run ``AA`` (1) .. ``ZZ`` (676) and for width 3 ``AAA`` (1) .. ``ZZZ`` (17576).

INVARIANT: code_from_ordinal and ordinal_from_code are mutually inverse
over ``[1, 26**width]``.
"""

from __future__ import annotations

import string
from collections.abc import Iterator
from itertools import product

from barcodectl.domain.errors import MalformedCode, OrdinalOutOfRange

ALPHABET = string.ascii_uppercase
RADIX = len(ALPHABET)

_DIGITS: dict[str, int] = {letter: i for i, letter in enumerate(ALPHABET)}


def _check_width(width: int) -> None:
    if width < 1:
        msg = f"Code width must be at least 1, got {width}"
        raise ValueError(msg)


def span(width: int) -> int:
    """Number of distinct codes of *width* letters."""
    _check_width(width)
    return RADIX**width


def code_from_ordinal(ordinal: int, width: int) -> str:
    """Return the *width*-letter code for a 1-based *ordinal*.

    Raises:
        OrdinalOutOfRange: If *ordinal* is outside ``[1, 26**width]``.
    """
    limit = span(width)
    if not 1 <= ordinal <= limit:
        msg = f"Ordinal {ordinal} is outside 1..{limit} for width {width}"
        raise OrdinalOutOfRange(msg, ordinal=ordinal, width=width)

    value = ordinal - 1
    letters: list[str] = []
    for _ in range(width):
        value, digit = divmod(value, RADIX)
        letters.append(ALPHABET[digit])
    return "".join(reversed(letters))


def ordinal_from_code(code: str, width: int | None = None) -> int:
    """Return the 1-based ordinal of *code*.

    When *width* is given the code must have exactly that many letters.

    Raises:
        MalformedCode: If the code is empty, has the wrong length, or
            contains characters outside ``A..Z``.
    """
    if not isinstance(code, str) or not code:
        msg = f"Code must be a non-empty string, got {code!r}"
        raise MalformedCode(msg, code=code, width=width)
    if width is not None:
        _check_width(width)
        if len(code) != width:
            msg = f"Code {code!r} must be exactly {width} letter(s)"
            raise MalformedCode(msg, code=code, width=width)

    value = 0
    for letter in code:
        digit = _DIGITS.get(letter)
        if digit is None:
            msg = f"Code {code!r} contains {letter!r}; only A-Z are allowed"
            raise MalformedCode(msg, code=code, width=width)
        value = value * RADIX + digit
    return value + 1


def iter_codes(width: int) -> Iterator[str]:
    """Yield every *width*-letter code in ordinal order."""
    _check_width(width)
    for letters in product(ALPHABET, repeat=width):
        yield "".join(letters)
