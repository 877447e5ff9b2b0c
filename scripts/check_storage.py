from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from modules.storage import check_connection, json_path, storage_backend  # noqa: E402


def main() -> None:
    backend = storage_backend()
    ok = check_connection()
    status = "OK" if ok else "FAILED"
    target = json_path() if backend == "JSON" else "MONGODB_URI"
    print(f"{backend} storage {status} ({target})")
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
