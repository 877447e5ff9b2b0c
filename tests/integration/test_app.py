"""
Tests for the Streamlit front-end.
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest


APP_PATH = str(Path(__file__).resolve().parents[2] / "app.py")


@pytest.fixture
def app(monkeypatch, tmp_path):
    monkeypatch.setenv("PERSISTENCE_BACKEND", "json")
    monkeypatch.setenv("ISBN_BARCODE_DATA_DIR", str(tmp_path / "data"))
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    return at


def _values(elements):
    return [e.value for e in elements]


class TestGeneratePage:

    def test_initial_render(self, app):
        assert not app.exception
        assert "Barcode" in _values(app.header)
        assert "Enter an ISBN to see the barcode." in _values(app.info)

    def test_invalid_check_digit(self, app):
        app.text_input(key="isbn").input("9780306406158").run()
        assert not app.exception
        assert "Check digit is invalid" in _values(app.error)
        assert "Preview" not in _values(app.subheader)

    def test_valid_isbn_shows_preview(self, app):
        app.text_input(key="isbn").input("9780306406157").run()
        assert not app.exception
        assert "Preview" in _values(app.subheader)
        assert "Add-on position" not in _values(app.subheader)

    def test_addon_shows_offset_controls(self, app):
        app.text_input(key="isbn").input("9788969930460")
        app.text_input(key="addon").input("13590").run()
        assert not app.exception
        assert "Add-on position" in _values(app.subheader)
        assert app.session_state.offset_steps == 8
        assert any(c.startswith("Add-on offset: 0.8 mm") for c in _values(app.caption))

        app.button[1].click().run()
        assert app.session_state.offset_steps == 9

    def test_partial_addon(self, app):
        app.text_input(key="isbn").input("9780306406157")
        app.text_input(key="addon").input("123").run()
        assert "Enter 5 digits" in _values(app.error)
        assert "Preview" not in _values(app.subheader)


class TestOtherPages:

    @pytest.mark.parametrize("page,header", [
        ("Batch", "Batch"),
        ("History", "History"),
        ("Settings", "Settings"),
    ])
    def test_page_renders(self, app, page, header):
        app.sidebar.radio[0].set_value(page).run()
        assert not app.exception
        assert header in _values(app.header)

    def test_settings_shows_backend(self, app):
        app.sidebar.radio[0].set_value("Settings").run()
        assert "Storage backend: JSON" in _values(app.caption)
