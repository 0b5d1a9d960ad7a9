from __future__ import annotations

import json
import logging
import os
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Any, Callable, Optional, Protocol
from urllib.parse import quote

logger = logging.getLogger(__name__)

# callback(error, data): exactly one of the two is meaningful
Callback = Callable[[Optional[BaseException], Any], None]


class NotesTable(Protocol):
    """Callback-style document store.

    Each operation returns immediately and later calls `callback(error, data)`,
    possibly from another thread.
    """

    def put(self, params: dict[str, Any], callback: Callback) -> None: ...

    def get(self, params: dict[str, Any], callback: Callback) -> None: ...

    def query(self, params: dict[str, Any], callback: Callback) -> None: ...

    def close(self) -> None: ...


def _dir_name(user_id: Any) -> str:
    # user ids are opaque; percent-encode so any id maps to one directory level
    if not isinstance(user_id, str) or not user_id:
        raise ValueError("Invalid userId")
    return quote(user_id, safe="").replace(".", "%2E")


def _safe_segment(value: Any, what: str) -> str:
    # keys end up in file paths; reject anything that could escape the table dir
    if not isinstance(value, str) or not value or any(ch in value for ch in "/\\") or ".." in value:
        raise ValueError(f"Invalid {what}")
    return value


def _user_dir(base_dir: Path, table_name: str, user_id: Any) -> Path:
    table = _safe_segment(table_name, "TableName")
    return base_dir / table / "users" / _dir_name(user_id) / "notes"


def _note_path(base_dir: Path, table_name: str, user_id: Any, note_id: Any) -> Path:
    return _user_dir(base_dir, table_name, user_id) / f"{_safe_segment(note_id, 'noteId')}.json"


def _atomic_write_json(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


class FileNotesTable:
    """JSON file per note under `<base_dir>/<TableName>/users/<quoted userId>/notes/`."""

    def __init__(self, base_dir: Path, max_workers: int = 4):
        self.base_dir = base_dir
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="notes-table")

    def put(self, params: dict[str, Any], callback: Callback) -> None:
        self._submit(self._put, params, callback)

    def get(self, params: dict[str, Any], callback: Callback) -> None:
        self._submit(self._get, params, callback)

    def query(self, params: dict[str, Any], callback: Callback) -> None:
        self._submit(self._query, params, callback)

    def close(self) -> None:
        self._executor.shutdown(wait=True)

    def _submit(self, fn: Callable[[dict[str, Any]], Any], params: dict[str, Any], callback: Callback) -> None:
        future = self._executor.submit(fn, params)

        def _done(f: Future) -> None:
            error = f.exception()
            callback(error, None if error is not None else f.result())

        future.add_done_callback(_done)

    def _put(self, params: dict[str, Any]) -> dict[str, Any]:
        item = params["Item"]
        path = _note_path(self.base_dir, params["TableName"], item.get("userId"), item.get("noteId"))
        _atomic_write_json(path, item)
        logger.debug("Wrote %s", path)
        return {}

    def _get(self, params: dict[str, Any]) -> dict[str, Any]:
        key = params["Key"]
        path = _note_path(self.base_dir, params["TableName"], key.get("userId"), key.get("noteId"))
        if not path.exists():
            return {"Item": None}
        return {"Item": json.loads(path.read_text(encoding="utf-8"))}

    def _query(self, params: dict[str, Any]) -> dict[str, Any]:
        notes_dir = _user_dir(self.base_dir, params["TableName"], params["Key"].get("userId"))
        if not notes_dir.exists():
            return {"Items": []}
        items = [json.loads(p.read_text(encoding="utf-8")) for p in sorted(notes_dir.glob("*.json"))]
        return {"Items": items}
