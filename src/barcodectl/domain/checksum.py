"""Check digit for the barcode prefix.

The digit is the sum of the character code points of the seven field
letters, modulo 10. It is a detection digit only: it catches any single
substitution that changes the sum modulo 10, but not substitutions that
shift a code point by a multiple of 10, nor transpositions.
"""

from __future__ import annotations

CHECK_MODULUS = 10


def compute_check_digit(prefix: str) -> str:
    """Return the check digit (``"0"`` .. ``"9"``) for *prefix*.

    *prefix* is ``capacity + year + lot + series`` with no check digit.
    """
    total = sum(ord(char) for char in prefix)
    return str(total % CHECK_MODULUS)
