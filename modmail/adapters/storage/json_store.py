"""JSON file-based storage adapter — implements StoragePort."""

import json
import sys
import tempfile
from pathlib import Path
from typing import Any


def _log(msg: str):
    print(msg, file=sys.stderr)


class JsonStorage:
    """One JSON document per key under ``storage_dir``, written atomically."""

    def __init__(self, storage_dir: str = "memory"):
        self._storage_dir = Path(storage_dir)

    def _path(self, key: str) -> Path:
        return self._storage_dir / f"{key}.json"

    def load(self, key: str, default: Any = None) -> Any:
        path = self._path(key)
        if not path.exists():
            return default
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            _log(f"[storage] unreadable {path.name}, using default: {e}")
            return default

    def save(self, key: str, data: Any) -> None:
        """Write via a sibling temp file and rename, so readers never see half a document."""
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=path.parent, prefix=f".{key}.", suffix=".tmp", delete=False,
        ) as tmp:
            tmp_path = Path(tmp.name)
            try:
                json.dump(data, tmp, ensure_ascii=False, indent=2)
            except BaseException:
                tmp.close()
                tmp_path.unlink(missing_ok=True)
                raise
        tmp_path.replace(path)
