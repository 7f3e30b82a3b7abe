"""
Error types and their translation into HTTP responses.

Every error leaving the API has the body ``{"error": <message>}``.
Store failures are logged in full server-side and reported to the client
with a short correlation id instead of driver details.
"""

import logging
import uuid
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class BlogError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "internal error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class BlogValidationError(BlogError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "invalid blog"


class MalformattedIdError(BlogError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "malformatted id"


class BlogNotFoundError(BlogError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "blog not found"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def failure_response(status_code: int, error: Exception, context: str) -> JSONResponse:
    # the client only gets an id to quote; the details stay in the log
    error_id = uuid.uuid4().hex[:8]
    logger.error(f"{context} failed [{error_id}]", exc_info=error)
    return error_response(status_code, f"{context} failed. Please try again later. (Error ID: {error_id})")


async def blog_error_handler(request: Request, exc: BlogError):
    logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "invalid request") if errors else "invalid request"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        return error_response(exc.status_code, "unknown endpoint")
    return error_response(exc.status_code, str(exc.detail))


async def store_error_handler(request: Request, exc: PyMongoError):
    return failure_response(status.HTTP_503_SERVICE_UNAVAILABLE, exc, "Blog store operation")


async def unhandled_error_handler(request: Request, exc: Exception):
    return failure_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc, f"{request.method} {request.url.path}")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BlogError, blog_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(PyMongoError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
