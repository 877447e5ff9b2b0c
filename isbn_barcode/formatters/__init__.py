"""
Output formatters for the ISBN barcode maker.
"""

from .eps_formatter import format_eps
from .eps_reader import EpsDocument, read_document, read_settings
from .svg_preview import eps_to_svg, render_svg

__all__ = [
    "format_eps",
    "EpsDocument",
    "read_document",
    "read_settings",
    "eps_to_svg",
    "render_svg",
]
