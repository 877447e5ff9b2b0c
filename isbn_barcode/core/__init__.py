"""
Core encoding and geometry modules for the ISBN barcode maker.
"""

from .symbology import (
    encode_ean13,
    encode_ean5,
    ean5_check_digit,
    ean13_parity,
    ean5_parity,
    ModuleSequence,
)
from .geometry import compose_layout, Layout, Bar, TextPlacement

__all__ = [
    "encode_ean13",
    "encode_ean5",
    "ean5_check_digit",
    "ean13_parity",
    "ean5_parity",
    "ModuleSequence",
    "compose_layout",
    "Layout",
    "Bar",
    "TextPlacement",
]
