from datetime import datetime
from pathlib import Path

import pandas as pd
import streamlit as st
import streamlit.components.v1 as components

from isbn_barcode.batch import load_batch_csv, run_batch
from isbn_barcode.formatters.svg_preview import eps_to_svg
from isbn_barcode.generator import BarcodeRequest, default_filename, generate_barcode
from modules.reports import export_csv, export_excel, export_pdf
from modules.settings import load_settings, save_settings
from modules.storage import clear_history, init_db, list_history, save_document, storage_backend
from modules.utils import (
    BAR_HEIGHT_MAX_MM,
    BAR_HEIGHT_MIN_MM,
    DPI_CHOICES,
    OFFSET_MAX_STEPS,
    OFFSET_STEP_MM,
    addon_hint,
    clamp_addon_offset,
    clamp_bar_height,
    clean_addon,
    clean_isbn,
    isbn_hint,
    offset_steps,
)


st.set_page_config(page_title="ISBN Barcode Maker", layout="centered")

init_db()


def _now_stamp() -> str:
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def _ensure_session_state(settings: dict):
    if "eps_content" not in st.session_state:
        st.session_state.eps_content = None
    if "batch_summary" not in st.session_state:
        st.session_state.batch_summary = None
    if "offset_steps" not in st.session_state:
        st.session_state.offset_steps = offset_steps(float(settings["default_addon_offset_mm"]))


def _shift_offset(delta: int):
    steps = st.session_state.offset_steps + delta
    st.session_state.offset_steps = max(-OFFSET_MAX_STEPS, min(OFFSET_MAX_STEPS, steps))


def _render_preview(eps_content: str):
    svg = eps_to_svg(eps_content)
    if not svg:
        st.warning("Preview unavailable.")
        return
    components.html(
        f'<div style="background:#fff;padding:12px;text-align:center;">{svg}</div>',
        height=320,
        scrolling=True,
    )


def _generate_page(settings: dict):
    st.header("Barcode")

    col1, col2 = st.columns([2, 1])
    raw_isbn = col1.text_input("ISBN (13 digits)", placeholder="9788969930460", key="isbn")
    raw_addon = col2.text_input("Add-on (5 digits)", placeholder="13590", key="addon")

    isbn = clean_isbn(raw_isbn)
    addon = clean_addon(raw_addon)

    isbn_error = isbn_hint(isbn)
    addon_error = addon_hint(addon)
    if isbn_error:
        col1.error(isbn_error)
    if addon_error:
        col2.error(addon_error)

    st.subheader("Settings")
    col3, col4 = st.columns(2)
    default_dpi = int(settings["default_dpi"])
    dpi = col3.selectbox(
        "DPI",
        DPI_CHOICES,
        index=DPI_CHOICES.index(default_dpi) if default_dpi in DPI_CHOICES else 1,
        format_func=lambda v: f"{v} DPI",
    )
    bar_height = clamp_bar_height(
        col4.number_input(
            "Bar height (mm)",
            min_value=BAR_HEIGHT_MIN_MM,
            max_value=BAR_HEIGHT_MAX_MM,
            value=clamp_bar_height(settings["default_bar_height_mm"]),
            step=0.5,
            help="5-50 mm (default 15 mm)",
        )
    )

    addon_ready = len(addon) == 5 and not addon_error
    addon_offset = 0.0
    if addon_ready:
        st.subheader("Add-on position")
        minus, plus, reset = st.columns(3)
        minus.button("-0.1 mm", on_click=_shift_offset, args=(-1,))
        plus.button("+0.1 mm", on_click=_shift_offset, args=(1,))
        if st.session_state.offset_steps != 0:
            reset.button("Reset", on_click=_shift_offset, args=(-st.session_state.offset_steps,))
        addon_offset = clamp_addon_offset(st.session_state.offset_steps * OFFSET_STEP_MM)
        st.caption(f"Add-on offset: {addon_offset:.1f} mm (moves add-on text and bars, +/-1.0 mm)")

    can_generate = len(isbn) == 13 and not isbn_error and (not addon or addon_ready)
    if not can_generate:
        st.session_state.eps_content = None
        st.info("Enter an ISBN to see the barcode.")
        return

    request = BarcodeRequest(
        isbn=isbn,
        addon=addon,
        bar_height_mm=bar_height,
        dpi=dpi,
        addon_offset_mm=addon_offset,
    )
    result = generate_barcode(request)
    if not result.success:
        st.session_state.eps_content = None
        st.error(result.message)
        return

    st.session_state.eps_content = result.eps_content
    st.subheader("Preview")
    _render_preview(result.eps_content)

    filename = default_filename(isbn, addon)
    dl_col, save_col = st.columns(2)
    dl_col.download_button(
        "Download EPS",
        data=result.eps_content,
        file_name=filename,
        mime="application/postscript",
    )
    if save_col.button("Save to output folder"):
        saved = save_document(
            result.eps_content,
            Path(settings["output_dir"]) / filename,
            isbn=isbn,
            addon=addon,
            settings={
                "bar_height_mm": bar_height,
                "dpi": dpi,
                "addon_offset_mm": addon_offset,
            },
        )
        if saved.success:
            st.success(saved.message)
        else:
            st.error(saved.message)


def _batch_page(settings: dict):
    st.header("Batch")
    st.caption("CSV columns: isbn, addon, bar_height_mm, dpi, addon_offset_mm (only isbn is required)")
    uploaded = st.file_uploader("Batch CSV", type=["csv"])
    if uploaded is not None and st.button("Generate all"):
        try:
            df = load_batch_csv(uploaded)
        except (ValueError, pd.errors.ParserError) as exc:
            st.error(f"Could not read CSV: {exc}")
            return
        output_dir = Path(settings["output_dir"]) / f"batch_{_now_stamp()}"
        st.session_state.batch_summary = run_batch(
            df,
            output_dir,
            defaults={
                "bar_height_mm": settings["default_bar_height_mm"],
                "dpi": settings["default_dpi"],
                "addon_offset_mm": settings["default_addon_offset_mm"],
            },
        )

    summary = st.session_state.batch_summary
    if summary is None:
        return

    generated = int(summary["success"].sum()) if not summary.empty else 0
    cols = st.columns(2)
    cols[0].metric("Generated", generated)
    cols[1].metric("Failed", len(summary) - generated)
    st.dataframe(summary, use_container_width=True)

    st.subheader("Exports")
    stamp = _now_stamp()
    if st.button("Export CSV"):
        path = export_csv(summary, f"batch_{stamp}.csv")
        st.success(f"Saved: {path}")
    if st.button("Export Excel"):
        path = export_excel(summary, f"batch_{stamp}.xlsx")
        st.success(f"Saved: {path}")
    if st.button("Export PDF"):
        path = export_pdf("ISBN Barcode Batch Report", summary, f"batch_{stamp}.pdf")
        st.success(f"Saved: {path}")


def _history_page(settings: dict):
    st.header("History")
    records = list_history(int(settings.get("history_limit") or 0) or None)
    if not records:
        st.info("No saved barcodes yet.")
        return
    st.dataframe(pd.DataFrame(records), use_container_width=True)
    if st.button("Clear history"):
        clear_history()
        st.rerun()


def _settings_page(settings: dict):
    st.header("Settings")
    with st.form("settings_form"):
        default_dpi = st.selectbox(
            "Default DPI",
            DPI_CHOICES,
            index=DPI_CHOICES.index(int(settings["default_dpi"])) if int(settings["default_dpi"]) in DPI_CHOICES else 1,
        )
        default_height = st.number_input(
            "Default bar height (mm)",
            min_value=BAR_HEIGHT_MIN_MM,
            max_value=BAR_HEIGHT_MAX_MM,
            value=clamp_bar_height(settings["default_bar_height_mm"]),
            step=0.5,
        )
        default_offset = st.number_input(
            "Default add-on offset (mm)",
            min_value=-1.0,
            max_value=1.0,
            value=clamp_addon_offset(float(settings["default_addon_offset_mm"])),
            step=OFFSET_STEP_MM,
        )
        output_dir = st.text_input("Output folder", value=str(settings["output_dir"]))
        history_limit = st.number_input("History rows shown (0 = all)", min_value=0, step=10, value=int(settings["history_limit"]))
        saved = st.form_submit_button("Save Settings")

    if saved:
        save_settings(
            {
                "default_dpi": default_dpi,
                "default_bar_height_mm": clamp_bar_height(default_height),
                "default_addon_offset_mm": clamp_addon_offset(default_offset),
                "output_dir": output_dir,
                "history_limit": history_limit,
            }
        )
        st.success("Settings saved.")
    st.caption(f"Storage backend: {storage_backend()}")


def main():
    settings = load_settings()
    _ensure_session_state(settings)

    st.sidebar.title("ISBN Barcode Maker")
    page = st.sidebar.radio("Go to", ["Generate", "Batch", "History", "Settings"])

    if page == "Generate":
        _generate_page(settings)
    elif page == "Batch":
        _batch_page(settings)
    elif page == "History":
        _history_page(settings)
    elif page == "Settings":
        _settings_page(settings)


if __name__ == "__main__":
    main()
