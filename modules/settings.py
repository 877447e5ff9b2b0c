"""
Application settings persistence.
"""

from __future__ import annotations

from typing import Any, Dict

import streamlit as st

from isbn_barcode.generator import (
    DEFAULT_BAR_HEIGHT_MM,
    DEFAULT_DPI,
)

from .storage import BASE_DIR, get_setting, set_setting


DEFAULT_SETTINGS: Dict[str, Any] = {
    "default_dpi": DEFAULT_DPI,
    "default_bar_height_mm": DEFAULT_BAR_HEIGHT_MM,
    "default_addon_offset_mm": 0.8,  # 8 steps of 0.1 mm
    "output_dir": str(BASE_DIR / "exports"),
    "history_limit": 50,  # 0 = show all
}


@st.cache_data(ttl=300)
def load_settings() -> Dict[str, Any]:
    settings = {}
    for key, default in DEFAULT_SETTINGS.items():
        settings[key] = get_setting(key, default)
    return settings


def save_settings(updates: Dict[str, Any]) -> None:
    for key, value in updates.items():
        set_setting(key, value)
    load_settings.clear()
