"""Error types and the FastAPI handlers that render them.

Every error reaching a client is a JSON object with a single ``message``
field. Unknown routes and unsupported methods both answer 404.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

NOT_FOUND = "Not Found"
MISSING_TITLE = "Missing `title` in request body"


class NotefulError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(NotefulError):
    status_code = 400


class NotFoundError(NotefulError):
    status_code = 404

    def __init__(self, message: str = NOT_FOUND):
        super().__init__(message)


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def validation_message(errors: list[dict]) -> str:
    """Pick the client-facing message for a list of pydantic errors."""
    if any(err.get("type") == "json_invalid" for err in errors):
        return "Malformed JSON in request body"
    for err in errors:
        loc = tuple(err.get("loc", ()))
        # no body at all, or no usable title in it
        if loc == ("body",) or loc[:2] == ("body", "title"):
            return MISSING_TITLE
    for err in errors:
        loc = tuple(err.get("loc", ()))
        if len(loc) >= 2 and loc[0] == "body":
            return f"Invalid `{loc[1]}` in request body"
    return "Invalid request body"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotefulError)
    async def noteful_error_handler(request: Request, exc: NotefulError) -> JSONResponse:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
        return _message(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code in (404, 405):
            return _message(404, NOT_FOUND)
        return _message(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _message(400, validation_message(list(exc.errors())))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _message(500, "Internal Server Error")
