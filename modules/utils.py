"""
Input helpers for the barcode maker UI.
"""

from __future__ import annotations

import math
import re
from typing import Optional

from isbn_barcode.validators import ADDON_LENGTH, ISBN_LENGTH, weighted_sum


DPI_CHOICES = [300, 600, 1200]

BAR_HEIGHT_MIN_MM = 5.0
BAR_HEIGHT_MAX_MM = 50.0

# Add-on offset moves in 0.1 mm steps, at most 10 steps either way
OFFSET_STEP_MM = 0.1
OFFSET_MAX_STEPS = 10

_NON_DIGIT = re.compile(r"\D")


def clean_digits(value: str, max_length: int) -> str:
    """Drop everything but ASCII digits and truncate."""
    if not value:
        return ""
    return _NON_DIGIT.sub("", value.encode("ascii", "ignore").decode())[:max_length]


def clean_isbn(value: str) -> str:
    return clean_digits(value, ISBN_LENGTH)


def clean_addon(value: str) -> str:
    return clean_digits(value, ADDON_LENGTH)


def isbn_hint(value: str) -> Optional[str]:
    """Inline validation message for a partially typed ISBN, None if fine."""
    if not value:
        return None
    if not value.isdigit():
        return "Digits only"
    if len(value) != ISBN_LENGTH:
        return f"Enter {ISBN_LENGTH} digits"
    if weighted_sum(value) % 10 != 0:
        return "Check digit is invalid"
    return None


def addon_hint(value: str) -> Optional[str]:
    if not value:
        return None
    if not value.isdigit():
        return "Digits only"
    if len(value) != ADDON_LENGTH:
        return f"Enter {ADDON_LENGTH} digits"
    return None


def clamp_bar_height(value: Optional[float]) -> float:
    """Bar height limited to 5-50 mm; unparsable input falls back to the minimum."""
    if value is None:
        return BAR_HEIGHT_MIN_MM
    try:
        height = float(value)
    except (TypeError, ValueError):
        return BAR_HEIGHT_MIN_MM
    if height != height or height < BAR_HEIGHT_MIN_MM:
        return BAR_HEIGHT_MIN_MM
    return min(height, BAR_HEIGHT_MAX_MM)


def offset_steps(offset_mm: float) -> int:
    """Nearest whole number of 0.1 mm steps, clamped to +/-10."""
    if not math.isfinite(offset_mm):
        return 0
    steps = int(round(offset_mm / OFFSET_STEP_MM))
    return max(-OFFSET_MAX_STEPS, min(OFFSET_MAX_STEPS, steps))


def clamp_addon_offset(offset_mm: float) -> float:
    return round(offset_steps(offset_mm) * OFFSET_STEP_MM, 1)
