from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_SEED_FILE = PACKAGE_DIR / "storage" / "seed_notes.json"
DEFAULT_STATIC_DIR = PACKAGE_DIR / "static"


def _port() -> int:
    try:
        return int(os.getenv("PORT", "8080"))
    except ValueError:
        return 8080


def _seed_file() -> Optional[Path]:
    raw = os.getenv("NOTES_SEED_FILE")
    if raw is None:
        return DEFAULT_SEED_FILE
    # empty value means: start with an empty store
    return Path(raw) if raw else None


@dataclass(frozen=True)
class Settings:
    seed_file: Optional[Path]
    static_dir: Path
    event_log_path: Optional[Path]
    log_level: str
    host: str
    port: int


def load_settings() -> Settings:
    event_log = os.getenv("NOTES_EVENT_LOG", "")
    return Settings(
        seed_file=_seed_file(),
        static_dir=Path(os.getenv("NOTES_STATIC_DIR", str(DEFAULT_STATIC_DIR))),
        event_log_path=Path(event_log) if event_log else None,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_port(),
    )
