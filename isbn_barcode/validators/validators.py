"""
ISBN / EAN Validation Functions

Implements validation for the inputs of the barcode maker:
- Weighted Mod10 check digit for 13-digit identifiers (ISBN-13 / EAN-13)
- Numeric format validation with fixed lengths
- EAN-5 add-on format validation (empty or exactly 5 digits)

Based on GS1 General Specifications (Mod10 check digit calculation).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any


ISBN_LENGTH = 13
ADDON_LENGTH = 5

# Weights applied left to right, starting at index 0
ISBN_WEIGHTS = (1, 3)

NUMERIC = frozenset('0123456789')


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)
    code: Optional[str] = None


def _is_digits(value: str) -> bool:
    # str.isdigit() accepts non-ASCII digits such as '٣'
    return bool(value) and all(c in NUMERIC for c in value)


def calculate_check_digit_mod10(digits: str) -> int:
    """
    Calculate GS1 Mod10 check digit.

    Algorithm (GS1 General Specifications):
    1. From right to left, alternate multipliers 3 and 1
    2. Sum all products
    3. Check digit = (10 - (sum mod 10)) mod 10

    For a 12-digit ISBN payload this is the same as weighting the full
    13 digits 1, 3, 1, 3, ... from the left.

    Args:
        digits: Numeric string without check digit

    Returns:
        Calculated check digit (0-9)
    """
    if not _is_digits(digits):
        raise ValueError("Input must be a non-empty numeric string")

    total = 0
    for i, digit in enumerate(reversed(digits)):
        multiplier = 3 if i % 2 == 0 else 1
        total += int(digit) * multiplier

    return (10 - (total % 10)) % 10


def weighted_sum(value: str) -> int:
    """Sum of digits weighted 1, 3, 1, 3, ... from index 0."""
    return sum(
        int(c) * ISBN_WEIGHTS[i % 2]
        for i, c in enumerate(value)
    )


def validate_isbn13(value: str) -> bool:
    """
    Check a 13-digit identifier.

    True iff the value has exactly 13 characters, all decimal digits, and
    the 1-3 weighted sum is divisible by 10. Never raises.
    """
    if not isinstance(value, str):
        return False
    if len(value) != ISBN_LENGTH or not _is_digits(value):
        return False
    return weighted_sum(value) % 10 == 0


def validate_numeric(
    value: str,
    min_length: int = 0,
    max_length: int = 0,
    fixed_length: Optional[int] = None
) -> ValidationResult:
    """
    Validate numeric field.

    Args:
        value: Value to validate
        min_length: Minimum length
        max_length: Maximum length
        fixed_length: If set, exact length required

    Returns:
        ValidationResult
    """
    result = ValidationResult(valid=True)

    if not value:
        if min_length > 0 or fixed_length:
            result.valid = False
            result.errors.append("Value is empty but a length is required")
        return result

    if not all(c in NUMERIC for c in value):
        result.valid = False
        result.errors.append("Value contains non-numeric characters")
        return result

    if fixed_length is not None:
        if len(value) != fixed_length:
            result.valid = False
            result.errors.append(f"Length must be exactly {fixed_length}, got {len(value)}")
    else:
        if min_length and len(value) < min_length:
            result.valid = False
            result.errors.append(f"Length {len(value)} below minimum {min_length}")
        if max_length and len(value) > max_length:
            result.valid = False
            result.errors.append(f"Length {len(value)} exceeds maximum {max_length}")

    return result


def validate_check_digit(value: str) -> ValidationResult:
    """
    Validate the trailing Mod10 check digit of a numeric identifier.

    Args:
        value: The complete value including check digit

    Returns:
        ValidationResult with check digit status in meta
    """
    result = ValidationResult(valid=True)

    if not _is_digits(value):
        result.valid = False
        result.errors.append("Value must be numeric for check digit validation")
        return result

    if len(value) < 2:
        result.valid = False
        result.errors.append("Value too short for check digit validation")
        return result

    provided_check = int(value[-1])
    calculated_check = calculate_check_digit_mod10(value[:-1])

    result.meta['calculated_check_digit'] = calculated_check
    result.meta['provided_check_digit'] = provided_check
    result.meta['check_digit_valid'] = (provided_check == calculated_check)

    if provided_check != calculated_check:
        result.valid = False
        result.errors.append(
            f"Check digit mismatch: expected {calculated_check}, got {provided_check}"
        )

    return result


def validate_isbn(value: str) -> ValidationResult:
    """
    Validate an ISBN-13 in two stages: format, then check digit.

    The failing stage is reported in ``result.code``
    (``INVALID_FORMAT`` or ``INVALID_CHECK_DIGIT``).
    """
    result = validate_numeric(value or "", fixed_length=ISBN_LENGTH)
    if not result.valid:
        result.code = "INVALID_FORMAT"
        return result

    check_result = validate_check_digit(value)
    result.valid = check_result.valid
    result.errors.extend(check_result.errors)
    result.meta.update(check_result.meta)
    if not result.valid:
        result.code = "INVALID_CHECK_DIGIT"

    return result


def validate_addon(value: str) -> ValidationResult:
    """
    Validate an EAN-5 add-on.

    An empty add-on is valid (no supplementary symbol); anything else must
    be exactly five decimal digits.
    """
    if not value:
        return ValidationResult(valid=True, meta={'present': False})

    result = validate_numeric(value, fixed_length=ADDON_LENGTH)
    result.meta['present'] = True
    if not result.valid:
        result.code = "INVALID_ADDON"
    return result
