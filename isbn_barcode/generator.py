"""
Barcode generation commands.

The request/response surface of the barcode maker: validate a request,
run encode -> compose -> emit, and report the outcome as a BarcodeResult.
Also writes finished documents to disk.

Failures never escape as exceptions; they come back as
BarcodeResult(success=False) with a user-facing message.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .core.geometry import compose_layout
from .core.symbology import encode_ean13, encode_ean5
from .formatters.eps_formatter import format_eps
from .validators.validators import validate_addon, validate_isbn

logger = logging.getLogger(__name__)


DEFAULT_BAR_HEIGHT_MM = 15.0
DEFAULT_DPI = 600
DEFAULT_ADDON_OFFSET_MM = 0.0


class ErrorCode(str, Enum):
    """Failure codes carried by BarcodeResult."""
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_CHECK_DIGIT = "INVALID_CHECK_DIGIT"
    INVALID_ADDON = "INVALID_ADDON"
    INVALID_SETTING = "INVALID_SETTING"
    ENCODING_FAILED = "ENCODING_FAILED"
    SAVE_FAILED = "SAVE_FAILED"


MESSAGES = {
    ErrorCode.INVALID_FORMAT: "ISBN must be exactly 13 digits.",
    ErrorCode.INVALID_CHECK_DIGIT: "ISBN check digit is invalid.",
    ErrorCode.INVALID_ADDON: "Add-on code must be exactly 5 digits.",
    ErrorCode.INVALID_SETTING: "Bar height and add-on offset must be finite numbers.",
    ErrorCode.ENCODING_FAILED: "Barcode generation failed.",
}

SUCCESS_MESSAGE = "Barcode generated."


@dataclass
class BarcodeRequest:
    """
    Input of one generation call.

    Attributes:
        isbn: 13-digit identifier
        addon: "" or a 5-digit supplementary code
        bar_height_mm: Full guard-bar height
        dpi: Output resolution, recorded in the document metadata only
        addon_offset_mm: Vertical shift of the add-on block
    """
    isbn: str
    addon: str = ""
    bar_height_mm: float = DEFAULT_BAR_HEIGHT_MM
    dpi: int = DEFAULT_DPI
    addon_offset_mm: float = DEFAULT_ADDON_OFFSET_MM


@dataclass
class BarcodeResult:
    """Outcome of a generation or save call."""
    success: bool
    message: str
    eps_content: Optional[str] = None
    file_path: Optional[str] = None
    error_code: Optional[ErrorCode] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'success': self.success,
            'message': self.message,
            'eps_content': self.eps_content,
            'file_path': self.file_path,
            'error_code': self.error_code.value if self.error_code else None,
        }


def _failure(code: ErrorCode, message: Optional[str] = None) -> BarcodeResult:
    return BarcodeResult(success=False, message=message or MESSAGES[code], error_code=code)


def settings_are_finite(*values: Any) -> bool:
    """True if every value is a real, finite number (no NaN or infinity)."""
    try:
        return all(math.isfinite(value) for value in values)
    except TypeError:
        return False


def generate_eps(
    isbn: str,
    addon: str = "",
    bar_height_mm: float = DEFAULT_BAR_HEIGHT_MM,
    dpi: int = DEFAULT_DPI,
    addon_offset_mm: float = DEFAULT_ADDON_OFFSET_MM,
) -> Optional[str]:
    """
    Encode, lay out and serialize one barcode.

    No check digit validation happens here; see generate_barcode().

    Returns:
        EPS text, or None if the ISBN (or a non-empty add-on) cannot be
        encoded
    """
    ean13_modules = encode_ean13(isbn)
    if ean13_modules is None:
        return None

    ean5_modules = None
    if addon:
        ean5_modules = encode_ean5(addon)
        if ean5_modules is None:
            return None

    layout = compose_layout(
        isbn,
        ean13_modules,
        bar_height_mm,
        addon=addon,
        ean5_modules=ean5_modules,
        addon_offset_mm=addon_offset_mm,
    )
    return format_eps(
        layout,
        isbn,
        addon=addon,
        bar_height_mm=bar_height_mm,
        dpi=dpi,
        addon_offset_mm=addon_offset_mm,
    )


def generate_barcode(request: BarcodeRequest) -> BarcodeResult:
    """
    Validate a request and generate its EPS document.

    Checks run in order: ISBN format, ISBN check digit, add-on format,
    numeric settings. The first failure is returned; no document is
    produced.
    """
    isbn_check = validate_isbn(request.isbn)
    if not isbn_check.valid:
        code = ErrorCode(isbn_check.code)
        logger.warning("Rejected ISBN %r: %s", request.isbn, "; ".join(isbn_check.errors))
        return _failure(code)

    addon_check = validate_addon(request.addon)
    if not addon_check.valid:
        logger.warning("Rejected add-on %r: %s", request.addon, "; ".join(addon_check.errors))
        return _failure(ErrorCode.INVALID_ADDON)

    if not settings_are_finite(request.bar_height_mm, request.addon_offset_mm):
        logger.warning(
            "Rejected settings bar_height=%r addon_offset=%r",
            request.bar_height_mm,
            request.addon_offset_mm,
        )
        return _failure(ErrorCode.INVALID_SETTING)

    content = generate_eps(
        request.isbn,
        request.addon,
        request.bar_height_mm,
        request.dpi,
        request.addon_offset_mm,
    )
    if content is None:
        logger.error("Encoder rejected validated input isbn=%s addon=%s", request.isbn, request.addon)
        return _failure(ErrorCode.ENCODING_FAILED)

    logger.debug(
        "Generated barcode isbn=%s addon=%s bar_height=%.4f dpi=%s",
        request.isbn,
        request.addon,
        request.bar_height_mm,
        request.dpi,
    )
    return BarcodeResult(success=True, message=SUCCESS_MESSAGE, eps_content=content)


def save_eps(content: str, file_path: Union[str, Path]) -> BarcodeResult:
    """
    Write an EPS document to disk.

    Parent directories are created as needed.
    """
    path = Path(file_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        logger.warning("Failed to save %s: %s", path, exc)
        return _failure(ErrorCode.SAVE_FAILED, f"Save failed: {exc}")

    logger.debug("Saved %s (%d bytes)", path, len(content))
    return BarcodeResult(success=True, message=f"Saved: {path}", file_path=str(path))


def default_filename(isbn: str, addon: str = "") -> str:
    """Suggested file name: isbn_<isbn>.eps or isbn_<isbn>_<addon>.eps"""
    if addon:
        return f"isbn_{isbn}_{addon}.eps"
    return f"isbn_{isbn}.eps"
