"""
EAN-13 / EAN-5 Symbology Encoder

Turns digit strings into module sequences (1 = bar, 0 = space):
- EAN-13 (ISBN-13): start guard, six left digits in L/G parity selected by
  the leading digit, center guard, six right digits in R, end guard.
  Always 95 modules.
- EAN-5 add-on: start marker, five digits in L/G parity selected by the
  add-on check digit, "01" separators between digits. Always 47 modules.

Based on GS1 General Specifications, EAN/UPC symbology section.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ..validators.validators import ADDON_LENGTH, ISBN_LENGTH, NUMERIC


ModuleSequence = Tuple[int, ...]

# Number set A (odd parity)
L_CODES = (
    "0001101", "0011001", "0010011", "0111101", "0100011",
    "0110001", "0101111", "0111011", "0110111", "0001011",
)

# Number set B (even parity)
G_CODES = (
    "0100111", "0110011", "0011011", "0100001", "0011101",
    "0111001", "0000101", "0010001", "0001001", "0010111",
)

# Number set C (right half)
R_CODES = (
    "1110010", "1100110", "1101100", "1000010", "1011100",
    "1001110", "1010000", "1000100", "1001000", "1110100",
)

CODE_TABLES: Dict[str, Tuple[str, ...]] = {
    "L": L_CODES,
    "G": G_CODES,
    "R": R_CODES,
}

# L/G choice for digits 2-7, indexed by the leading digit
FIRST_DIGIT_PATTERNS = (
    "LLLLLL", "LLGLGG", "LLGGLG", "LLGGGL", "LGLLGG",
    "LGGLLG", "LGGGLL", "LGLGLG", "LGLGGL", "LGGLGL",
)

# L/G choice for the five add-on digits, indexed by the add-on check digit
EAN5_PATTERNS = (
    "GGLLL", "GLGLL", "GLLGL", "GLLLG", "LGGLL",
    "LLGGL", "LLLGG", "LGLGL", "LGLLG", "LLGLG",
)

EAN13_START_GUARD = "101"
EAN13_CENTER_GUARD = "01010"
EAN13_END_GUARD = "101"

EAN5_START = "1011"
EAN5_SEPARATOR = "01"

EAN5_WEIGHTS = (3, 9, 3, 9, 3)

EAN13_MODULE_COUNT = 95
EAN5_MODULE_COUNT = 47


def _digits(value: str, length: int) -> Optional[List[int]]:
    if not isinstance(value, str) or len(value) != length:
        return None
    if not all(c in NUMERIC for c in value):
        return None
    return [int(c) for c in value]


def _to_modules(bits: str) -> ModuleSequence:
    return tuple(1 if b == "1" else 0 for b in bits)


def ean13_parity(leading_digit: int) -> str:
    """L/G pattern for EAN-13 digits 2-7."""
    return FIRST_DIGIT_PATTERNS[leading_digit]


def ean5_check_digit(digits5: str) -> int:
    """
    EAN-5 check digit: (3*d0 + 9*d1 + 3*d2 + 9*d3 + 3*d4) mod 10.

    The check digit only selects the parity pattern; it is never printed.
    """
    digits = _digits(digits5, ADDON_LENGTH)
    if digits is None:
        raise ValueError("EAN-5 add-on must be exactly 5 digits")
    return sum(d * w for d, w in zip(digits, EAN5_WEIGHTS)) % 10


def ean5_parity(check_digit: int) -> str:
    """L/G pattern for the five add-on digits."""
    return EAN5_PATTERNS[check_digit]


def encode_ean13(digits13: str) -> Optional[ModuleSequence]:
    """
    Encode a 13-digit identifier as an EAN-13 module sequence.

    Only the format is checked (13 decimal digits); the check digit is the
    caller's concern, see ``validate_isbn13``.

    Args:
        digits13: 13-character digit string

    Returns:
        95-module tuple, or None if the input shape is wrong
    """
    digits = _digits(digits13, ISBN_LENGTH)
    if digits is None:
        return None

    pattern = ean13_parity(digits[0])
    parts = [EAN13_START_GUARD]

    for table, digit in zip(pattern, digits[1:7]):
        parts.append(CODE_TABLES[table][digit])

    parts.append(EAN13_CENTER_GUARD)

    for digit in digits[7:13]:
        parts.append(R_CODES[digit])

    parts.append(EAN13_END_GUARD)

    return _to_modules("".join(parts))


def encode_ean5(digits5: str) -> Optional[ModuleSequence]:
    """
    Encode a 5-digit add-on as an EAN-5 module sequence.

    Args:
        digits5: 5-character digit string

    Returns:
        47-module tuple, or None if the input shape is wrong
    """
    digits = _digits(digits5, ADDON_LENGTH)
    if digits is None:
        return None

    pattern = ean5_parity(ean5_check_digit(digits5))
    parts = [EAN5_START]

    for i, (table, digit) in enumerate(zip(pattern, digits)):
        if i > 0:
            parts.append(EAN5_SEPARATOR)
        parts.append(CODE_TABLES[table][digit])

    return _to_modules("".join(parts))
