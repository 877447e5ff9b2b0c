"""
Tests for UI input helpers.
"""

import math

import pytest

from modules.utils import (
    addon_hint,
    clamp_addon_offset,
    clamp_bar_height,
    clean_addon,
    clean_isbn,
    isbn_hint,
    offset_steps,
)


class TestCleaning:

    def test_strips_non_digits(self):
        assert clean_isbn("978-0-306-40615-7") == "9780306406157"

    def test_truncates(self):
        assert clean_isbn("97803064061579999") == "9780306406157"
        assert clean_addon("1234567") == "12345"

    def test_drops_non_ascii_digits(self):
        assert clean_addon("12٣45") == "1245"

    def test_empty(self):
        assert clean_isbn("") == ""
        assert clean_addon(None) == ""


class TestHints:

    def test_isbn_hints(self):
        assert isbn_hint("") is None
        assert isbn_hint("978") == "Enter 13 digits"
        assert isbn_hint("9780306406158") == "Check digit is invalid"
        assert isbn_hint("9780306406157") is None
        assert isbn_hint("97803a") == "Digits only"

    def test_addon_hints(self):
        assert addon_hint("") is None
        assert addon_hint("123") == "Enter 5 digits"
        assert addon_hint("12345") is None


class TestClamps:

    @pytest.mark.parametrize("value,expected", [
        (15.0, 15.0),
        (4.9, 5.0),
        (60, 50.0),
        (None, 5.0),
        ("abc", 5.0),
        (math.nan, 5.0),
        ("22.5", 22.5),
    ])
    def test_bar_height(self, value, expected):
        assert clamp_bar_height(value) == expected

    def test_offset_steps(self):
        assert offset_steps(0.3) == 3
        assert offset_steps(-0.25) in (-2, -3)
        assert offset_steps(5.0) == 10
        assert offset_steps(-5.0) == -10
        assert offset_steps(math.nan) == 0
        assert offset_steps(math.inf) == 0

    def test_clamp_addon_offset(self):
        assert clamp_addon_offset(0.34) == 0.3
        assert clamp_addon_offset(1.7) == 1.0
        assert clamp_addon_offset(-1.7) == -1.0
