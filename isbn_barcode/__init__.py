"""
ISBN Barcode Maker

Generates print-ready EPS artwork for ISBN-13 / EAN-13 barcodes with an
optional EAN-5 add-on (price / classification code).

Based on GS1 General Specifications, EAN/UPC symbology section.
"""

from .validators.validators import (
    validate_isbn13,
    validate_isbn,
    validate_addon,
    calculate_check_digit_mod10,
    ValidationResult,
)
from .core.symbology import encode_ean13, encode_ean5, ean5_check_digit
from .core.geometry import compose_layout, Layout, Bar, TextPlacement
from .formatters.eps_formatter import format_eps
from .formatters.eps_reader import read_document, read_settings, EpsDocument
from .formatters.svg_preview import eps_to_svg
from .generator import (
    generate_eps,
    generate_barcode,
    save_eps,
    default_filename,
    BarcodeRequest,
    BarcodeResult,
    ErrorCode,
)

__version__ = "1.0.0"
__all__ = [
    "validate_isbn13",
    "validate_isbn",
    "validate_addon",
    "calculate_check_digit_mod10",
    "ValidationResult",
    "encode_ean13",
    "encode_ean5",
    "ean5_check_digit",
    "compose_layout",
    "Layout",
    "Bar",
    "TextPlacement",
    "format_eps",
    "read_document",
    "read_settings",
    "EpsDocument",
    "eps_to_svg",
    "generate_eps",
    "generate_barcode",
    "save_eps",
    "default_filename",
    "BarcodeRequest",
    "BarcodeResult",
    "ErrorCode",
]
