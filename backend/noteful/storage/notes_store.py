import json
import logging
import re
import threading
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Iterable, Optional

logger = logging.getLogger(__name__)

# plain ASCII decimal, no sign tricks, separators or leading zeros
_NOTE_ID_RE = re.compile(r"-?(0|[1-9][0-9]*)")


def parse_note_id(raw: Any) -> Optional[int]:
    """Return ``raw`` as an integer note id, or None if it cannot be one."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if raw is None or not _NOTE_ID_RE.fullmatch(str(raw)):
        return None
    return int(str(raw))


def load_seed(path: Path) -> list[dict[str, Any]]:
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError(f"Seed file {path} must hold a JSON array of notes")
    return raw


@dataclass
class Note:
    id: int
    title: str
    content: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
        }


class NotesStore:
    """Ordered in-memory collection of notes.

    Ids are handed out above the highest id the store has ever held, so a
    deleted note's id is never reused. Every method holds the store lock for
    its whole read or mutation, and callers only ever get copies of notes.
    """

    def __init__(self, seed: Iterable[dict[str, Any]] = ()):
        self._lock = threading.Lock()
        self._notes: list[Note] = []
        self._next_id = 1000

        for raw in seed:
            note_id = parse_note_id(raw.get("id"))
            if note_id is None:
                raise ValueError(f"Seed note without a valid id: {raw!r}")
            if self._find(note_id) is not None:
                raise ValueError(f"Duplicate note id in seed: {note_id}")
            self._notes.append(Note(id=note_id, title=raw["title"], content=raw.get("content", "")))
            self._next_id = max(self._next_id, note_id + 1)

    @classmethod
    def from_file(cls, path: Optional[Path]) -> "NotesStore":
        if path is None:
            return cls()
        store = cls(load_seed(path))
        logger.info("Seeded %d notes from %s", len(store), path)
        return store

    def __len__(self) -> int:
        with self._lock:
            return len(self._notes)

    def _find(self, note_id: int) -> Optional[Note]:
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    def list_notes(self, search_term: Optional[str] = None) -> list[Note]:
        with self._lock:
            if not search_term:
                return [replace(n) for n in self._notes]
            term = search_term.lower()
            return [replace(n) for n in self._notes if term in n.title.lower()]

    def get_note(self, note_id: Any) -> Optional[Note]:
        nid = parse_note_id(note_id)
        if nid is None:
            return None
        with self._lock:
            note = self._find(nid)
            return replace(note) if note is not None else None

    def create_note(self, title: str, content: str = "") -> Note:
        with self._lock:
            note = Note(id=self._next_id, title=title, content=content)
            self._next_id += 1
            self._notes.append(note)
            return replace(note)

    def update_note(self, note_id: Any, title: str, content: Optional[str] = None) -> Optional[Note]:
        nid = parse_note_id(note_id)
        if nid is None:
            return None
        with self._lock:
            note = self._find(nid)
            if note is None:
                return None
            note.title = title
            if content is not None:
                note.content = content
            return replace(note)

    def delete_note(self, note_id: Any) -> bool:
        nid = parse_note_id(note_id)
        if nid is None:
            return False
        with self._lock:
            note = self._find(nid)
            if note is None:
                return False
            self._notes.remove(note)
            return True
