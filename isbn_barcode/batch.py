"""
Batch barcode generation from CSV.

Input CSV columns:
    isbn             required
    addon            optional, "" for none
    bar_height_mm    optional, defaults to BarcodeRequest default
    dpi              optional
    addon_offset_mm  optional

Each row is generated and written to the output directory independently;
a bad row is reported in the summary and does not stop the run.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Dict, IO, List, Optional, Union

import pandas as pd

from .generator import (
    BarcodeRequest,
    DEFAULT_ADDON_OFFSET_MM,
    DEFAULT_BAR_HEIGHT_MM,
    DEFAULT_DPI,
    ErrorCode,
    default_filename,
    generate_barcode,
    save_eps,
)

logger = logging.getLogger(__name__)


INPUT_COLUMNS = ["isbn", "addon", "bar_height_mm", "dpi", "addon_offset_mm"]
SUMMARY_COLUMNS = ["isbn", "addon", "success", "error_code", "message", "file_path"]

DEFAULTS: Dict[str, Any] = {
    "bar_height_mm": DEFAULT_BAR_HEIGHT_MM,
    "dpi": DEFAULT_DPI,
    "addon_offset_mm": DEFAULT_ADDON_OFFSET_MM,
}


def load_batch_csv(source: Union[str, Path, IO]) -> pd.DataFrame:
    """
    Read a batch CSV. All values are kept as strings so ISBNs keep their
    leading zeros; missing optional columns are added empty.
    """
    df = pd.read_csv(source, dtype=str, keep_default_na=False)
    df.columns = [str(c).strip().lower() for c in df.columns]
    if "isbn" not in df.columns:
        raise ValueError("Batch CSV must have an 'isbn' column")
    for column in INPUT_COLUMNS:
        if column not in df.columns:
            df[column] = ""
    return df[INPUT_COLUMNS]


def _number(value: Any, default: Any, cast: type) -> Any:
    text = str(value).strip() if value is not None else ""
    if not text:
        return default
    number = float(text)
    if not math.isfinite(number):
        raise ValueError(f"{text!r} is not a finite number")
    return cast(number)


def row_to_request(row: Dict[str, Any], defaults: Optional[Dict[str, Any]] = None) -> BarcodeRequest:
    """Build a request from one CSV row; blank numeric cells take defaults."""
    merged = {**DEFAULTS, **(defaults or {})}
    return BarcodeRequest(
        isbn=str(row.get("isbn", "")).strip(),
        addon=str(row.get("addon", "") or "").strip(),
        bar_height_mm=_number(row.get("bar_height_mm"), merged["bar_height_mm"], float),
        dpi=_number(row.get("dpi"), merged["dpi"], int),
        addon_offset_mm=_number(row.get("addon_offset_mm"), merged["addon_offset_mm"], float),
    )


def run_batch(
    df: pd.DataFrame,
    output_dir: Union[str, Path],
    defaults: Optional[Dict[str, Any]] = None,
) -> pd.DataFrame:
    """
    Generate one EPS per row and return a summary DataFrame.

    Args:
        df: Rows from load_batch_csv()
        output_dir: Directory receiving isbn_<isbn>[_<addon>].eps files
        defaults: Overrides for blank bar_height_mm / dpi / addon_offset_mm

    Returns:
        DataFrame with SUMMARY_COLUMNS, one row per input row
    """
    out_dir = Path(output_dir)
    rows: List[Dict[str, Any]] = []

    for record in df.to_dict(orient="records"):
        try:
            request = row_to_request(record, defaults)
        except (ValueError, OverflowError) as exc:
            rows.append({
                "isbn": str(record.get("isbn", "")),
                "addon": str(record.get("addon", "")),
                "success": False,
                "error_code": ErrorCode.INVALID_SETTING.value,
                "message": f"Invalid numeric setting: {exc}",
                "file_path": "",
            })
            continue

        result = generate_barcode(request)
        if result.success:
            target = out_dir / default_filename(request.isbn, request.addon)
            result = save_eps(result.eps_content, target)

        rows.append({
            "isbn": request.isbn,
            "addon": request.addon,
            "success": result.success,
            "error_code": result.error_code.value if result.error_code else "",
            "message": result.message,
            "file_path": result.file_path or "",
        })

    summary = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    logger.info(
        "Batch finished: %d rows, %d generated",
        len(summary),
        int(summary["success"].sum()) if not summary.empty else 0,
    )
    return summary
