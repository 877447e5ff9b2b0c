"""
Barcode Geometry Composer

Maps EAN-13 / EAN-5 module sequences and the human-readable digits onto
absolute drawing primitives in millimeters, and computes the document
bounding box in points.

All offsets below are fixed print-layout constants. They are
not derived from one another and must stay literal.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union


MODULE_WIDTH_MM = 0.33
MM_TO_PT = 2.83464567
FONT_SIZE_MM = 3.175

TEXT_BASELINE_MM = 0.0847
GUARD_BOTTOM_MM = 1.093
DATA_BAR_BOTTOM_MM = 2.743

QUIET_ZONE_LEFT_MM = 3.63
QUIET_ZONE_RIGHT_MM = 2.31

ADDON_GAP_MODULES = 7
ADDON_TEXT_BASELINE_GAP_MM = 0.4147
ADDON_TRAILING_MM = 2.0

TOP_MARGIN_MM = 0.5

# Leading digit sits left of the start guard; others are shifted left of
# their block center by a fraction of the font size
LEADING_DIGIT_SHIFT = 0.9
DIGIT_CENTER_SHIFT = 0.3

LEFT_GROUP_START = 3
RIGHT_GROUP_START = 50
DIGIT_MODULES = 7

ADDON_DIGIT_START = 4
ADDON_DIGIT_STRIDE = 9


@dataclass(frozen=True)
class Bar:
    """Filled rectangle from ``bottom`` to ``top`` (mm)."""
    x: float
    width: float
    bottom: float
    top: float


@dataclass(frozen=True)
class TextPlacement:
    """Text shown with its baseline origin at (x, y) (mm)."""
    x: float
    y: float
    text: str


Primitive = Union[Bar, TextPlacement]


@dataclass
class Layout:
    """
    Complete geometry of one barcode document.

    Attributes:
        primitives: Drawing primitives in emission order
        width_mm: Total document width
        height_mm: Total document height
        bar_top_mm: Top of every EAN-13 bar
        bounding_box: Integer bounding box (pt), rounded up
        hires_bounding_box: Unrounded bounding box (pt)
        addon_width_mm: Width of the add-on section (0 without add-on)
    """
    primitives: List[Primitive] = field(default_factory=list)
    width_mm: float = 0.0
    height_mm: float = 0.0
    bar_top_mm: float = 0.0
    bounding_box: Tuple[int, int] = (0, 0)
    hires_bounding_box: Tuple[float, float] = (0.0, 0.0)
    addon_width_mm: float = 0.0

    @property
    def bars(self) -> List[Bar]:
        return [p for p in self.primitives if isinstance(p, Bar)]

    @property
    def texts(self) -> List[TextPlacement]:
        return [p for p in self.primitives if isinstance(p, TextPlacement)]


def is_guard_module(index: int, module_count: int) -> bool:
    """Start, center (45-49) and end guard modules of an EAN-13 symbol."""
    return (
        index < 3
        or 45 <= index <= 49
        or index >= module_count - 3
    )


def addon_section_width(addon_module_count: int) -> float:
    if not addon_module_count:
        return 0.0
    return (
        ADDON_GAP_MODULES * MODULE_WIDTH_MM
        + addon_module_count * MODULE_WIDTH_MM
        + ADDON_TRAILING_MM
    )


def _digit_x(block_left: float, module_start: float) -> float:
    center = block_left + (module_start + 3.5) * MODULE_WIDTH_MM
    return center - FONT_SIZE_MM * DIGIT_CENTER_SHIFT


def compose_layout(
    isbn: str,
    ean13_modules: Sequence[int],
    bar_height_mm: float,
    addon: str = "",
    ean5_modules: Optional[Sequence[int]] = None,
    addon_offset_mm: float = 0.0,
) -> Layout:
    """
    Compute all drawing primitives and the bounding box.

    Inputs are assumed valid: ``isbn`` is 13 digits with a matching
    95-module sequence, and ``addon`` (if ``ean5_modules`` is given) is 5
    digits with its 47-module sequence.

    Args:
        isbn: 13-digit identifier (human-readable digits)
        ean13_modules: EAN-13 module sequence
        bar_height_mm: Full guard-bar height
        addon: 5-digit add-on text
        ean5_modules: EAN-5 module sequence, or None for no add-on
        addon_offset_mm: Vertical shift of the add-on block

    Returns:
        Layout with primitives in emission order
    """
    bar_top = GUARD_BOTTOM_MM + bar_height_mm

    addon_text_y = bar_top - FONT_SIZE_MM + addon_offset_mm
    addon_bar_top = addon_text_y - ADDON_TEXT_BASELINE_GAP_MM
    addon_bar_bottom = GUARD_BOTTOM_MM

    module_count = len(ean13_modules)
    ean13_width = module_count * MODULE_WIDTH_MM
    addon_width = addon_section_width(len(ean5_modules) if ean5_modules else 0)

    total_width = QUIET_ZONE_LEFT_MM + ean13_width + QUIET_ZONE_RIGHT_MM + addon_width
    total_height = bar_top + TOP_MARGIN_MM

    hires = (total_width * MM_TO_PT, total_height * MM_TO_PT)
    layout = Layout(
        width_mm=total_width,
        height_mm=total_height,
        bar_top_mm=bar_top,
        bounding_box=(math.ceil(hires[0]), math.ceil(hires[1])),
        hires_bounding_box=hires,
        addon_width_mm=addon_width,
    )
    out = layout.primitives

    # Leading digit, left of the start guard
    out.append(TextPlacement(
        x=QUIET_ZONE_LEFT_MM - FONT_SIZE_MM * LEADING_DIGIT_SHIFT,
        y=TEXT_BASELINE_MM,
        text=isbn[0],
    ))

    x = QUIET_ZONE_LEFT_MM
    for i, module in enumerate(ean13_modules):
        if module == 1:
            bottom = GUARD_BOTTOM_MM if is_guard_module(i, module_count) else DATA_BAR_BOTTOM_MM
            out.append(Bar(x=x, width=MODULE_WIDTH_MM, bottom=bottom, top=bar_top))
        x += MODULE_WIDTH_MM

    for group_start, digits in (
        (LEFT_GROUP_START, isbn[1:7]),
        (RIGHT_GROUP_START, isbn[7:13]),
    ):
        for i, digit in enumerate(digits):
            out.append(TextPlacement(
                x=_digit_x(QUIET_ZONE_LEFT_MM, group_start + i * DIGIT_MODULES),
                y=TEXT_BASELINE_MM,
                text=digit,
            ))

    if ean5_modules:
        addon_x_start = QUIET_ZONE_LEFT_MM + ean13_width + ADDON_GAP_MODULES * MODULE_WIDTH_MM

        ax = addon_x_start
        for module in ean5_modules:
            if module == 1:
                out.append(Bar(x=ax, width=MODULE_WIDTH_MM, bottom=addon_bar_bottom, top=addon_bar_top))
            ax += MODULE_WIDTH_MM

        for i, digit in enumerate(addon):
            out.append(TextPlacement(
                x=_digit_x(addon_x_start, ADDON_DIGIT_START + i * ADDON_DIGIT_STRIDE),
                y=addon_text_y,
                text=digit,
            ))

    return layout
