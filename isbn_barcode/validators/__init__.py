"""
Validation modules for the ISBN barcode maker.
"""

from .validators import (
    validate_isbn13,
    validate_isbn,
    validate_addon,
    validate_check_digit,
    validate_numeric,
    calculate_check_digit_mod10,
    weighted_sum,
    ValidationResult,
    ISBN_LENGTH,
    ADDON_LENGTH,
    NUMERIC,
)

__all__ = [
    "validate_isbn13",
    "validate_isbn",
    "validate_addon",
    "validate_check_digit",
    "validate_numeric",
    "calculate_check_digit_mod10",
    "weighted_sum",
    "ValidationResult",
    "ISBN_LENGTH",
    "ADDON_LENGTH",
    "NUMERIC",
]
