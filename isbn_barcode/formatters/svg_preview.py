"""
SVG preview of a barcode EPS.

Draws the bars and digits recovered by eps_reader onto an SVG canvas so
the front-end can show the artwork without a PostScript interpreter.
EPS has its origin bottom-left; SVG top-left, so y is flipped.
"""

from __future__ import annotations

from html import escape
from typing import List

from .eps_reader import EpsDocument, read_document


# Digits render slightly smaller than the nominal em size in browsers
FONT_FILL_RATIO = 0.85


def render_svg(document: EpsDocument, display_scale: float = 3.0) -> str:
    """
    Render an EpsDocument as a standalone SVG string.

    Args:
        document: Parsed EPS content
        display_scale: Canvas pixels per point

    Returns:
        SVG markup, or an empty string if the document has no bounding box
    """
    if not document.hires_bounding_box:
        return ""

    eps_width, eps_height = document.hires_bounding_box
    canvas_w = eps_width * display_scale
    canvas_h = eps_height * display_scale
    s = document.scale * display_scale
    font_px = document.font_size * s * FONT_FILL_RATIO

    parts: List[str] = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{canvas_w:.2f}" height="{canvas_h:.2f}" '
        f'viewBox="0 0 {canvas_w:.2f} {canvas_h:.2f}">',
        f'<rect x="0" y="0" width="{canvas_w:.2f}" height="{canvas_h:.2f}" fill="#ffffff"/>',
    ]

    for bar in document.bars:
        x = bar.x * s
        y = canvas_h - bar.top * s
        w = bar.width * s
        h = (bar.top - bar.bottom) * s
        parts.append(f'<rect x="{x:.2f}" y="{y:.2f}" width="{w:.2f}" height="{h:.2f}" fill="#000000"/>')

    for text in document.texts:
        x = text.x * s
        y = canvas_h - text.y * s
        parts.append(
            f'<text x="{x:.2f}" y="{y:.2f}" font-family="Arial, Helvetica, sans-serif" '
            f'font-size="{font_px:.2f}" fill="#000000">{escape(text.text)}</text>'
        )

    parts.append('</svg>')
    return "".join(parts)


def eps_to_svg(eps_content: str, display_scale: float = 3.0) -> str:
    """Parse EPS text and render its preview."""
    return render_svg(read_document(eps_content), display_scale=display_scale)
