import json
import logging
import os
import threading
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

NOTE_CREATED = "NOTE_CREATED"
NOTE_UPDATED = "NOTE_UPDATED"
NOTE_DELETED = "NOTE_DELETED"


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class Event:
    event_type: str
    note_id: Optional[int] = None
    meta: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_id": str(uuid.uuid4()),
            "event_type": self.event_type,
            "ts": _utc_now_iso(),
            "note_id": self.note_id,
            "meta": self.meta or {},
        }


class EventLog:
    """Audit trail of note mutations.

    Events always go to the logger; with a ``path`` they are also appended
    to that file as JSON lines.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = path
        self._lock = threading.Lock()

    def emit(self, event: Event) -> dict[str, Any]:
        record = event.to_dict()
        logger.info("%s note_id=%s", event.event_type, event.note_id)

        if self.path is None:
            return record

        line = json.dumps(record, ensure_ascii=False)
        # best effort: the note is already stored by the time we get here
        try:
            with self._lock:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                # append-only, durable write
                with self.path.open("a", encoding="utf-8") as f:
                    f.write(line + "\n")
                    f.flush()
                    os.fsync(f.fileno())
        except OSError:
            logger.exception("Could not append %s to event log %s", event.event_type, self.path)
        return record

    def read_events(self) -> list[dict[str, Any]]:
        if self.path is None or not self.path.exists():
            return []
        with self._lock:
            lines = self.path.read_text(encoding="utf-8").splitlines()
        return [json.loads(line) for line in lines if line.strip()]
