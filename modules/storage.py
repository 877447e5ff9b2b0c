"""
Persistence layer for generated barcodes.

Documents are written to disk; a history record per saved document and the
app settings go to MongoDB, or to a local JSON file when no MongoDB URI is
configured.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from uuid import uuid4

from pymongo import DESCENDING, MongoClient
from pymongo.errors import PyMongoError

from isbn_barcode.generator import BarcodeResult, save_eps

logger = logging.getLogger(__name__)


BASE_DIR = Path(__file__).resolve().parent.parent

_client: Optional[MongoClient] = None
_client_uri: Optional[str] = None


def _utc_now() -> str:
    return datetime.utcnow().isoformat(timespec="seconds") + "Z"


def data_dir() -> Path:
    return Path(os.getenv("ISBN_BARCODE_DATA_DIR", str(BASE_DIR / "data")))


def json_path() -> Path:
    return data_dir() / "app.json"


def _mongodb_uri() -> str:
    return os.getenv("MONGODB_URI", "")


def _mongodb_db() -> str:
    return os.getenv("MONGODB_DB", "IsbnBarcodes")


def _get_client() -> MongoClient:
    global _client, _client_uri
    uri = _mongodb_uri()
    if _client is None or _client_uri != uri:
        if not uri:
            raise ValueError("MONGODB_URI is required for MongoDB backend.")
        _client = MongoClient(uri)
        _client_uri = uri
    return _client


def get_db():
    return _get_client()[_mongodb_db()]


def _backend() -> str:
    backend = os.getenv("PERSISTENCE_BACKEND", "")
    if backend:
        return backend.strip().lower()
    if not _mongodb_uri():
        return "json"
    return "mongodb"


def storage_backend() -> str:
    return "MongoDB" if _backend() == "mongodb" else "JSON"


def _json_load() -> Dict[str, Any]:
    path = json_path()
    if not path.exists():
        return {"history": [], "settings": {}}
    with path.open("r", encoding="utf-8") as f:
        payload = json.load(f)
    payload.setdefault("history", [])
    payload.setdefault("settings", {})
    return payload


def _json_save(payload: Dict[str, Any]) -> None:
    path = json_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=True, indent=2)


def init_db() -> None:
    if _backend() == "json":
        _json_save(_json_load())
        return
    db = get_db()
    db.history.create_index("saved_at")
    db.history.create_index("isbn")
    db.settings.create_index("key", unique=True)


def check_connection() -> bool:
    if _backend() == "json":
        return True
    try:
        _get_client().admin.command("ping")
        return True
    except PyMongoError:
        return False


def set_setting(key: str, value: Any) -> None:
    if _backend() == "json":
        payload = _json_load()
        payload["settings"][key] = value
        _json_save(payload)
        return
    db = get_db()
    db.settings.update_one(
        {"_id": key},
        {"$set": {"key": key, "value": value}},
        upsert=True,
    )


def get_setting(key: str, default: Any = None) -> Any:
    if _backend() == "json":
        payload = _json_load()
        return payload.get("settings", {}).get(key, default)
    db = get_db()
    doc = db.settings.find_one({"_id": key})
    if not doc:
        return default
    return doc.get("value", default)


def create_history(data: Dict[str, Any]) -> str:
    history_id = data.get("history_id") or str(uuid4())
    doc = {
        "_id": history_id,
        "history_id": history_id,
        "saved_at": data.get("saved_at") or _utc_now(),
        "isbn": data.get("isbn") or "",
        "addon": data.get("addon") or "",
        "bar_height_mm": data.get("bar_height_mm"),
        "dpi": data.get("dpi"),
        "addon_offset_mm": data.get("addon_offset_mm"),
        "file_path": data.get("file_path") or "",
    }
    if _backend() == "json":
        payload = _json_load()
        payload["history"].append(doc.copy())
        _json_save(payload)
    else:
        db = get_db()
        db.history.insert_one(doc)
    return history_id


def list_history(limit: Optional[int] = None) -> List[Dict[str, Any]]:
    if _backend() == "json":
        payload = _json_load()
        records = sorted(
            payload.get("history", []),
            key=lambda r: r.get("saved_at", ""),
            reverse=True,
        )
        if limit:
            records = records[:limit]
        return [dict(r) for r in records]
    db = get_db()
    cursor = db.history.find().sort("saved_at", DESCENDING)
    if limit:
        cursor = cursor.limit(limit)
    docs = []
    for doc in cursor:
        doc.pop("_id", None)
        docs.append(doc)
    return docs


def clear_history() -> None:
    if _backend() == "json":
        payload = _json_load()
        payload["history"] = []
        _json_save(payload)
        return
    get_db().history.delete_many({})


def save_document(
    content: str,
    file_path: Union[str, Path],
    *,
    isbn: str,
    addon: str = "",
    settings: Optional[Dict[str, Any]] = None,
) -> BarcodeResult:
    """
    Write an EPS document and record it in the history.

    A failed history write is logged but does not turn a successful file
    save into a failure.
    """
    result = save_eps(content, file_path)
    if not result.success:
        return result

    record = {"isbn": isbn, "addon": addon, "file_path": result.file_path}
    record.update(settings or {})
    try:
        create_history(record)
    except (OSError, PyMongoError, ValueError) as exc:
        logger.warning("History not recorded for %s: %s", result.file_path, exc)
    return result
