from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# Base data dir: repository_root/data (we are in backend/notes_api/)
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[2] / "data"

STORAGE_KINDS = ("file", "memory")


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    table_name: str
    storage: str
    storage_max_workers: int
    log_level: str
    host: str = "127.0.0.1"
    port: int = 8000


def load_settings() -> Settings:
    storage = os.getenv("NOTES_STORAGE", "file").lower()
    if storage not in STORAGE_KINDS:
        raise ValueError(f"Unknown NOTES_STORAGE: {storage}")

    return Settings(
        data_dir=Path(os.getenv("APP_DATA_DIR", str(DEFAULT_DATA_DIR))),
        table_name=os.getenv("NOTES_TABLE_NAME", "notes"),
        storage=storage,
        storage_max_workers=max(1, _int_env("STORAGE_MAX_WORKERS", 4)),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int_env("PORT", 8000),
    )
