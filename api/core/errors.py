"""
Error-to-status translation for every route.

Handlers raise `ApiError` subclasses for failures the client caused; the
exception handlers below render them. Anything else escaping a handler is an
unexpected error: it is logged server-side with its traceback and the client
gets an opaque 500.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"
# DELETE has always answered with this casing; clients match on it.
INTERNAL_ERROR_MESSAGE_DELETE = "Internal server error"


class ApiError(HTTPException):
    """
    HTTPException whose body is `{"detail": message}`, or empty when no message is given.
    """

    default_status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str | None = None) -> None:
        super().__init__(status_code=self.default_status_code, detail=message)
        self.message = message


class BadRequestError(ApiError):
    default_status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    default_status_code = status.HTTP_404_NOT_FOUND


def internal_error_message(method: str) -> str:
    if method.upper() == "DELETE":
        return INTERNAL_ERROR_MESSAGE_DELETE
    return INTERNAL_ERROR_MESSAGE


async def api_error_handler(request: Request, exc: ApiError) -> Response:
    if exc.message is None:
        return Response(status_code=exc.status_code)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> Response:
    logger.error(
        "request_invalid method=%s path=%s errors=%s",
        request.method,
        request.url.path,
        len(exc.errors()),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def unhandled_error_middleware(request: Request, call_next) -> Response:
    try:
        return await call_next(request)
    except Exception:
        # logger.exception carries the traceback and any chained cause.
        logger.exception("request_failed method=%s path=%s", request.method, request.url.path)
        return PlainTextResponse(
            internal_error_message(request.method),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def install(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.middleware("http")(unhandled_error_middleware)
