from fastapi import FastAPI
from fastapi.testclient import TestClient

from noteful.utils.errors import (
    MISSING_TITLE,
    NotFoundError,
    ValidationError,
    register_exception_handlers,
    validation_message,
)


def _app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/invalid")
    def invalid():
        raise ValidationError("bad input")

    @app.get("/missing")
    def missing():
        raise NotFoundError()

    @app.get("/boom")
    def boom():
        raise RuntimeError("secret internals")

    return app


def test_domain_errors_render_message_body():
    client = TestClient(_app())

    r = client.get("/invalid")
    assert r.status_code == 400
    assert r.json() == {"message": "bad input"}

    r = client.get("/missing")
    assert r.status_code == 404
    assert r.json() == {"message": "Not Found"}


def test_unhandled_error_does_not_leak_details():
    client = TestClient(_app(), raise_server_exceptions=False)

    r = client.get("/boom")
    assert r.status_code == 500
    assert r.json() == {"message": "Internal Server Error"}
    assert "secret" not in r.text


def test_validation_message_picks_title_first():
    errors = [
        {"loc": ("body", "content"), "type": "string_type"},
        {"loc": ("body", "title"), "type": "string_type"},
    ]
    assert validation_message(errors) == MISSING_TITLE


def test_validation_message_for_missing_body():
    assert validation_message([{"loc": ("body",), "type": "missing"}]) == MISSING_TITLE


def test_validation_message_for_other_fields():
    errors = [{"loc": ("body", "content"), "type": "string_type"}]
    assert validation_message(errors) == "Invalid `content` in request body"
    assert validation_message([{"loc": ("query", "x"), "type": "int_parsing"}]) == "Invalid request body"
