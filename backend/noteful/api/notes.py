from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from noteful.models.notes import NoteIn, NoteOut
from noteful.storage.event_log import NOTE_CREATED, NOTE_DELETED, NOTE_UPDATED, Event, EventLog
from noteful.storage.notes_store import NotesStore, parse_note_id
from noteful.utils.errors import MISSING_TITLE, NotFoundError, ValidationError

router = APIRouter(prefix="/notes", tags=["notes"])


def get_store(request: Request) -> NotesStore:
    return request.app.state.store


def get_event_log(request: Request) -> EventLog:
    return request.app.state.event_log


def _require_title(payload: NoteIn) -> str:
    if not payload.title:
        raise ValidationError(MISSING_TITLE)
    return payload.title


@router.get("", response_model=list[NoteOut])
def list_notes(
    search_term: Optional[str] = Query(default=None, alias="searchTerm"),
    store: NotesStore = Depends(get_store),
) -> list[NoteOut]:
    notes = store.list_notes(search_term=search_term)
    return [NoteOut(**n.to_dict()) for n in notes]


# ids stay plain strings here: a non-numeric id is a 404, not a 422
@router.get("/{note_id}", response_model=NoteOut)
def get_note(note_id: str, store: NotesStore = Depends(get_store)) -> NoteOut:
    note = store.get_note(note_id)
    if note is None:
        raise NotFoundError()
    return NoteOut(**note.to_dict())


@router.post("", response_model=NoteOut, status_code=status.HTTP_201_CREATED)
def create_note(
    payload: NoteIn,
    response: Response,
    store: NotesStore = Depends(get_store),
    event_log: EventLog = Depends(get_event_log),
) -> NoteOut:
    title = _require_title(payload)
    note = store.create_note(title=title, content=payload.content or "")

    event_log.emit(Event(event_type=NOTE_CREATED, note_id=note.id))

    response.headers["Location"] = f"/api/notes/{note.id}"
    return NoteOut(**note.to_dict())


@router.put("/{note_id}", response_model=NoteOut)
def update_note(
    note_id: str,
    payload: NoteIn,
    store: NotesStore = Depends(get_store),
    event_log: EventLog = Depends(get_event_log),
) -> NoteOut:
    title = _require_title(payload)

    updated = store.update_note(note_id, title=title, content=payload.content)
    if updated is None:
        raise NotFoundError()

    event_log.emit(Event(
        event_type=NOTE_UPDATED,
        note_id=updated.id,
        meta={"fields": sorted(payload.model_dump(exclude_none=True))},
    ))

    return NoteOut(**updated.to_dict())


# idempotent: deleting an unknown id is still a 204
@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_note(
    note_id: str,
    store: NotesStore = Depends(get_store),
    event_log: EventLog = Depends(get_event_log),
) -> Response:
    if store.delete_note(note_id):
        event_log.emit(Event(event_type=NOTE_DELETED, note_id=parse_note_id(note_id)))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
