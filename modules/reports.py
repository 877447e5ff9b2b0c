"""
Batch report exports (CSV/Excel/PDF).
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.units import inch
from reportlab.pdfgen import canvas


EXPORTS_DIR = Path(__file__).resolve().parent.parent / "exports"

SUMMARY_WEIGHTS = {"isbn": 1.3, "addon": 0.7, "success": 0.6, "error_code": 1.2, "message": 1.6, "file_path": 2.4}
SUMMARY_TRUNC = {"message": 40, "file_path": 60}


def _target(filename: str, exports_dir: Optional[Path]) -> Path:
    directory = Path(exports_dir) if exports_dir else EXPORTS_DIR
    directory.mkdir(parents=True, exist_ok=True)
    return directory / filename


def batch_metadata(summary: pd.DataFrame) -> Dict[str, str]:
    total = len(summary)
    generated = int(summary["success"].sum()) if total else 0
    return {
        "Generated At": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "Rows": str(total),
        "Generated": str(generated),
        "Failed": str(total - generated),
    }


def export_csv(df: pd.DataFrame, filename: str, exports_dir: Optional[Path] = None) -> Path:
    path = _target(filename, exports_dir)
    df.to_csv(path, index=False)
    return path


def export_excel(
    summary: pd.DataFrame,
    filename: str,
    exports_dir: Optional[Path] = None,
) -> Path:
    """Workbook with Metadata, Summary and (when any) Failures sheets."""
    path = _target(filename, exports_dir)
    meta_df = pd.DataFrame(list(batch_metadata(summary).items()), columns=["Field", "Value"])
    failures = summary[~summary["success"].astype(bool)] if not summary.empty else summary
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        meta_df.to_excel(writer, sheet_name="Metadata", index=False)
        summary.to_excel(writer, sheet_name="Summary", index=False)
        if not failures.empty:
            failures.to_excel(writer, sheet_name="Failures", index=False)
    return path


def _compute_col_widths(df: pd.DataFrame, width: float, weights: Optional[Dict[str, float]] = None) -> List[float]:
    col_names = list(df.columns)
    if not col_names:
        return []
    lengths = []
    sample = df.head(50)
    for col in col_names:
        longest = max([len(str(col))] + [len(str(v)) for v in sample[col].tolist() if v is not None])
        lengths.append(longest * max(0.2, (weights or {}).get(col, 1.0)))
    total = sum(lengths) or 1
    clamped = [min(max(width * l / total, width * 0.05), width * 0.4) for l in lengths]
    scale = width / sum(clamped)
    return [w * scale for w in clamped]


def _draw_footer(c: canvas.Canvas, page_width: float, footer_left: str) -> None:
    y = 0.35 * inch
    c.setFont("Helvetica-Oblique", 8)
    c.drawString(0.5 * inch, y, footer_left)
    c.drawRightString(page_width - 0.5 * inch, y, f"Page {c.getPageNumber()}")


def _draw_table(
    c: canvas.Canvas,
    df: pd.DataFrame,
    x: float,
    y: float,
    width: float,
    page_size: tuple,
    footer_text: str,
) -> float:
    page_width, page_height = page_size
    if df.empty:
        c.setFont("Helvetica-Oblique", 9)
        c.drawString(x, y, "No rows.")
        return y - 0.25 * inch

    col_names = list(df.columns)
    col_widths = _compute_col_widths(df, width, SUMMARY_WEIGHTS)
    row_height = 0.22 * inch

    def draw_row(values, y_pos, font="Helvetica"):
        c.setFont(font, 8.5)
        x_pos = x
        for col_name, value, col_width in zip(col_names, values, col_widths):
            text = "" if value is None else str(value)
            limit = SUMMARY_TRUNC.get(col_name, 30)
            if len(text) > limit:
                text = text[: limit - 3] + "..."
            c.drawString(x_pos + 2, y_pos, text)
            x_pos += col_width

    def draw_header(y_pos):
        c.setFillGray(0.9)
        c.rect(x, y_pos - 0.05 * inch, width, row_height, fill=1, stroke=0)
        c.setFillGray(0)
        draw_row(col_names, y_pos, font="Helvetica-Bold")

    draw_header(y)
    y -= row_height

    for index, row in enumerate(df.itertuples(index=False)):
        if not row.success:
            c.setFillColorRGB(1.0, 0.92, 0.92)
            c.rect(x, y - 0.05 * inch, width, row_height, fill=1, stroke=0)
            c.setFillGray(0)
        elif index % 2 == 1:
            c.setFillGray(0.97)
            c.rect(x, y - 0.05 * inch, width, row_height, fill=1, stroke=0)
            c.setFillGray(0)
        draw_row(list(row), y)
        y -= row_height
        if y < 0.6 * inch:
            _draw_footer(c, page_width, footer_text)
            c.showPage()
            y = page_height - 0.5 * inch
            draw_header(y)
            y -= row_height
    return y


def export_pdf(
    report_title: str,
    summary: pd.DataFrame,
    filename: str,
    exports_dir: Optional[Path] = None,
) -> Path:
    """Landscape A4 table of a batch summary; failed rows are shaded red."""
    path = _target(filename, exports_dir)
    page_size = landscape(A4)
    width, height = page_size
    c = canvas.Canvas(str(path), pagesize=page_size)
    x = 0.5 * inch
    y = height - 0.5 * inch

    c.setFont("Helvetica-Bold", 16)
    c.drawString(x, y, report_title)
    y -= 0.35 * inch

    c.setFont("Helvetica", 9.5)
    for key, value in batch_metadata(summary).items():
        c.drawString(x, y, f"{key}: {value}")
        y -= 0.2 * inch
    y -= 0.15 * inch

    footer = f"{report_title} | Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}"
    columns = [col for col in summary.columns if col in SUMMARY_WEIGHTS]
    _draw_table(c, summary[columns], x, y, width - inch, page_size, footer)
    _draw_footer(c, width, footer)
    c.save()
    return path
