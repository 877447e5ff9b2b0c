"""
Tests for ISBN / add-on validation.
"""

import random

import pytest
from isbn_barcode.validators import (
    calculate_check_digit_mod10,
    validate_addon,
    validate_check_digit,
    validate_isbn,
    validate_isbn13,
    validate_numeric,
)


class TestValidateIsbn13:
    """Tests for the boolean checksum validator."""

    def test_valid(self):
        assert validate_isbn13("9780306406157")
        assert validate_isbn13("9788969930460")
        assert validate_isbn13("0000000000000")

    def test_invalid_check_digit(self):
        assert not validate_isbn13("9780306406158")

    @pytest.mark.parametrize("value", [
        "978030640615",
        "97803064061570",
        "978030640615X",
        "978 030640615",
        "",
        None,
    ])
    def test_format_violations_return_false(self, value):
        assert validate_isbn13(value) is False

    def test_matches_weighted_sum(self):
        """True iff sum(digit * [1,3,1,3,...]) is divisible by 10."""
        rng = random.Random(7)
        for _ in range(500):
            digits = "".join(rng.choice("0123456789") for _ in range(13))
            total = sum(int(d) * (1 if i % 2 == 0 else 3) for i, d in enumerate(digits))
            assert validate_isbn13(digits) == (total % 10 == 0)


class TestCheckDigit:
    """Tests for Mod10 check digit calculation and validation."""

    def test_mod10_isbn(self):
        assert calculate_check_digit_mod10("978030640615") == 7
        assert calculate_check_digit_mod10("978896993046") == 0

    def test_mod10_rejects_non_numeric(self):
        with pytest.raises(ValueError):
            calculate_check_digit_mod10("97803064061X")

    def test_validate_check_digit_meta(self):
        result = validate_check_digit("9780306406158")
        assert not result.valid
        assert result.meta['calculated_check_digit'] == 7
        assert result.meta['provided_check_digit'] == 8
        assert 'check digit mismatch' in result.errors[0].lower()


class TestValidateIsbn:
    """Two-stage validation with error codes."""

    def test_valid(self):
        result = validate_isbn("9780306406157")
        assert result.valid
        assert result.code is None
        assert result.meta['check_digit_valid']

    def test_format_error(self):
        result = validate_isbn("978030640615")
        assert not result.valid
        assert result.code == "INVALID_FORMAT"

    def test_format_error_wins_over_checksum(self):
        """A non-digit is a format error even if the rest would check out."""
        result = validate_isbn("978030640615A")
        assert result.code == "INVALID_FORMAT"

    def test_checksum_error(self):
        result = validate_isbn("9780306406158")
        assert not result.valid
        assert result.code == "INVALID_CHECK_DIGIT"


class TestValidateAddon:

    def test_empty_is_valid(self):
        result = validate_addon("")
        assert result.valid
        assert result.meta['present'] is False

    def test_five_digits(self):
        assert validate_addon("13590").valid

    @pytest.mark.parametrize("value", ["1359", "135900", "1359O"])
    def test_invalid(self, value):
        result = validate_addon(value)
        assert not result.valid
        assert result.code == "INVALID_ADDON"


class TestValidateNumeric:

    def test_fixed_length(self):
        assert validate_numeric("12345", fixed_length=5).valid
        result = validate_numeric("1234", fixed_length=5)
        assert not result.valid
        assert "exactly 5" in result.errors[0]

    def test_empty_with_required_length(self):
        assert not validate_numeric("", fixed_length=13).valid
        assert validate_numeric("").valid

    def test_non_numeric(self):
        result = validate_numeric("12a")
        assert not result.valid
        assert "non-numeric" in result.errors[0]
