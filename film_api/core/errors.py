"""
Exception handlers producing the uniform {"error": ...} body.

Validation failures are reported as 400 (not FastAPI's default 422) and
anything unhandled becomes an opaque 500 whose details are only logged.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from film_api.schemas.health import ErrorResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "internal server error"
MALFORMED_JSON_MESSAGE = "Malformed JSON body"
ROUTE_NOT_FOUND_MESSAGE = "route not found"


def _field_name(loc: tuple) -> str:
    # loc looks like ("body", "title") or ("path", "movie_id"); ints are list or JSON offsets
    parts = [str(p) for p in loc if p not in ("body", "path", "query") and not isinstance(p, int)]
    return ".".join(parts) or "body"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=MALFORMED_JSON_MESSAGE).model_dump(exclude_none=True),
        )
    fields = sorted({_field_name(tuple(err.get("loc", ()))) for err in errors})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(
            error="Missing or invalid fields: " + ", ".join(fields),
            fields=fields,
        ).model_dump(),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=INTERNAL_ERROR_MESSAGE).model_dump(exclude_none=True),
    )


async def route_not_found(request: Request) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=ErrorResponse(error=ROUTE_NOT_FOUND_MESSAGE).model_dump(exclude_none=True),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install handlers and the catch-all route; call after all routers are included."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    app.add_api_route(
        "/{unmatched_path:path}",
        route_not_found,
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"],
        include_in_schema=False,
    )
