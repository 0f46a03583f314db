"""Noteful API application.

- Notes CRUD under /api/notes (in-memory store)
- Static index page and assets served at /
- Uniform ``{"message": ...}`` error bodies, 404 for anything unmatched

Each app built by ``create_app`` owns its own store and event log.
"""
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from noteful.api.notes import router as notes_router
from noteful.config import Settings, load_settings
from noteful.storage.event_log import EventLog
from noteful.storage.notes_store import NotesStore
from noteful.utils.errors import register_exception_handlers
from noteful.utils.request_log import RequestLoggingMiddleware


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(title="Noteful API")
    app.state.settings = settings
    app.state.store = NotesStore.from_file(settings.seed_file)
    app.state.event_log = EventLog(settings.event_log_path)

    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)

    app.include_router(notes_router, prefix="/api")

    @app.get("/health", include_in_schema=False)
    def health():
        return {"ok": True}

    # mounted last so every API route wins over the static tree
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    return app


app = create_app()
