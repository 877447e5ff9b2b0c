"""
Tests for the JSON storage backend and history.
"""

import json

import pytest

from isbn_barcode import generate_eps
from modules import storage


@pytest.fixture(autouse=True)
def json_backend(monkeypatch, tmp_path):
    monkeypatch.setenv("PERSISTENCE_BACKEND", "json")
    monkeypatch.setenv("ISBN_BARCODE_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("MONGODB_URI", raising=False)


class TestBackend:

    def test_json_selected(self):
        assert storage.storage_backend() == "JSON"
        assert storage.check_connection()

    def test_json_when_no_uri(self, monkeypatch):
        monkeypatch.delenv("PERSISTENCE_BACKEND")
        assert storage.storage_backend() == "JSON"

    def test_mongodb_when_uri_set(self, monkeypatch):
        monkeypatch.delenv("PERSISTENCE_BACKEND")
        monkeypatch.setenv("MONGODB_URI", "mongodb://localhost:27017")
        assert storage.storage_backend() == "MongoDB"

    def test_init_creates_file(self, tmp_path):
        storage.init_db()
        payload = json.loads(storage.json_path().read_text(encoding="utf-8"))
        assert payload == {"history": [], "settings": {}}


class TestSettings:

    def test_roundtrip(self):
        storage.set_setting("default_dpi", 1200)
        assert storage.get_setting("default_dpi") == 1200

    def test_default(self):
        assert storage.get_setting("missing", "fallback") == "fallback"


class TestHistory:

    def test_newest_first(self):
        storage.create_history({"isbn": "9780306406157", "saved_at": "2024-01-01T00:00:00Z"})
        storage.create_history({"isbn": "9788969930460", "saved_at": "2024-06-01T00:00:00Z"})
        records = storage.list_history()
        assert [r["isbn"] for r in records] == ["9788969930460", "9780306406157"]

    def test_limit(self):
        for day in range(1, 4):
            storage.create_history({"isbn": "9780306406157", "saved_at": f"2024-01-0{day}T00:00:00Z"})
        assert len(storage.list_history(2)) == 2

    def test_clear(self):
        storage.create_history({"isbn": "9780306406157"})
        storage.clear_history()
        assert storage.list_history() == []


class TestSaveDocument:

    def test_saves_and_records(self, tmp_path):
        content = generate_eps("9780306406157", addon="12345")
        target = tmp_path / "exports" / "isbn_9780306406157_12345.eps"
        result = storage.save_document(
            content,
            target,
            isbn="9780306406157",
            addon="12345",
            settings={"bar_height_mm": 15.0, "dpi": 600, "addon_offset_mm": 0.0},
        )
        assert result.success
        assert target.read_text(encoding="utf-8") == content
        record = storage.list_history()[0]
        assert record["isbn"] == "9780306406157"
        assert record["addon"] == "12345"
        assert record["dpi"] == 600
        assert record["file_path"] == str(target)

    def test_failed_save_not_recorded(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        result = storage.save_document("%!PS", blocker / "out.eps", isbn="9780306406157")
        assert not result.success
        assert storage.list_history() == []

    def test_history_failure_keeps_file(self, monkeypatch, tmp_path):
        def broken(_data):
            raise OSError("disk full")

        monkeypatch.setattr(storage, "create_history", broken)
        target = tmp_path / "out.eps"
        result = storage.save_document("%!PS", target, isbn="9780306406157")
        assert result.success
        assert target.exists()
