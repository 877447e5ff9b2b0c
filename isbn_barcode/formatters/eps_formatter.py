"""
EPS Formatter for ISBN Barcodes

Serializes a computed Layout into an Encapsulated PostScript document:
- Header with integer and high-resolution bounding boxes
- %SETTINGS comment block read by prepress tooling
- Short operator abbreviations
- mm -> pt scale, CMYK black, ArialMT font
- One filled path per bar, one show per digit

Every number is written at a fixed precision so output is byte-for-byte
reproducible.
"""

from __future__ import annotations

from typing import List

from ..core.geometry import (
    Bar,
    FONT_SIZE_MM,
    Layout,
    MM_TO_PT,
    MODULE_WIDTH_MM,
    TextPlacement,
)


CREATOR = "ISBN Barcode Maker"
SYMBOLOGY_NAME = "ISBN"
FONT_NAME = "Arial"
POSTSCRIPT_FONT = "ArialMT"

CMYK_BACKGROUND = "0.000 0.000 0.000 0.000"
CMYK_FOREGROUND = "0.000 0.000 0.000 1.000"

ABBREVIATIONS = (
    "/bd {bind def} bind def",
    "/c {closepath} bd",
    "/f {fill} bd",
    "/l {lineto} bd",
    "/m {moveto} bd",
    "/n {newpath} bd",
    "/r {rotate} bd",
    "/sc {scale} bd",
    "/s {show} bd",
    "/t {translate} bd",
)


def format_bar(bar: Bar) -> str:
    """Closed rectangle path: bottom-left, top-left, top-right, bottom-right."""
    x2 = bar.x + bar.width
    return (
        f"n {bar.x:.4f} {bar.bottom:.4f} m "
        f"{bar.x:.4f} {bar.top:.4f} l "
        f"{x2:.4f} {bar.top:.4f} l "
        f"{x2:.4f} {bar.bottom:.4f} l f c"
    )


def format_text(text: TextPlacement) -> str:
    return f"n {text.x:.4f} {text.y:.4f} m ({text.text}) s c"


def format_header(layout: Layout) -> List[str]:
    width, height = layout.bounding_box
    hi_width, hi_height = layout.hires_bounding_box
    return [
        "%!PS-Adobe-2.0 EPSF-1.2",
        f"%%BoundingBox: 0 0 {width} {height}",
        f"%%HiResBoundingBox: 0 0 {hi_width:.5f} {hi_height:.5f}",
        f"%%Creator: {CREATOR}",
        "%%EndComments",
        "",
    ]


def format_settings(
    isbn: str,
    addon: str,
    bar_height_mm: float,
    dpi: int,
    addon_offset_mm: float,
) -> List[str]:
    lines = [
        "%SETTINGS",
        "% Color: CMYK",
        f"% Background: {CMYK_BACKGROUND}",
        f"% Foreground: {CMYK_FOREGROUND}",
        "% Human Readable: Yes",
        f"% Text Font: {FONT_NAME}",
        f"% Output DPI: {dpi}",
        f"% Symbology: {SYMBOLOGY_NAME}",
        f"% Value: {isbn}",
    ]
    if addon:
        lines.append(f"% Add-On: {addon}")
    lines.extend([
        f"% X-Dimension: {MODULE_WIDTH_MM:.8f} mm",
        f"% Bar Height: {bar_height_mm:.8f} mm",
        f"% Add-On Offset: {addon_offset_mm:.4f} mm",
        "",
    ])
    return lines


def format_eps(
    layout: Layout,
    isbn: str,
    addon: str = "",
    bar_height_mm: float = 15.0,
    dpi: int = 600,
    addon_offset_mm: float = 0.0,
) -> str:
    """
    Render a Layout as EPS text.

    Args:
        layout: Geometry from compose_layout()
        isbn: Encoded value, recorded in the settings block
        addon: Add-on value ("" when absent)
        bar_height_mm: Requested bar height, recorded in the settings block
        dpi: Output resolution, recorded in the settings block only
        addon_offset_mm: Add-on offset, recorded in the settings block

    Returns:
        Complete EPS document (newline-terminated)
    """
    lines = format_header(layout)
    lines.extend(format_settings(isbn, addon, bar_height_mm, int(dpi), addon_offset_mm))
    lines.extend(ABBREVIATIONS)
    lines.append("")

    lines.append(f"{MM_TO_PT:.8f} {MM_TO_PT:.8f} sc")
    lines.append(f"{CMYK_FOREGROUND} setcmykcolor")
    lines.append(f"/{POSTSCRIPT_FONT} findfont {FONT_SIZE_MM:.7f} scalefont setfont")

    for primitive in layout.primitives:
        if isinstance(primitive, Bar):
            lines.append(format_bar(primitive))
        else:
            lines.append(format_text(primitive))

    lines.append("showpage")
    return "\n".join(lines) + "\n"
