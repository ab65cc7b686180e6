"""
Application error taxonomy and its translation to HTTP responses.

Validators, services and repositories raise `ApiError` subclasses; the
handlers installed by `install_error_handlers` turn them into `{"msg": ...}`
bodies. Anything else becomes a bare 500.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND_MSG = "Invalid URL - incorrect path provided"
INTERNAL_ERROR_MSG = "Internal Server Error"


class ApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    msg: str = INTERNAL_ERROR_MSG

    def __init__(self, msg: str | None = None) -> None:
        if msg is not None:
            self.msg = msg
        super().__init__(self.msg)


class InvalidDataType(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    msg = "Invalid Data Type - provided input is not an authorised data type"


class BadSort(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    msg = "Bad Request - sort_by statement is provided incorrectly"


class BadOrder(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    msg = "Bad Request - order statement is provided incorrectly"


class MissingField(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    msg = "Bad Request - required field has not been provided"

    def __init__(self, field: str | None = None) -> None:
        super().__init__(f"Bad Request - {field} has not been provided" if field else None)


class BadRequest(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    msg = "Bad Request"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    msg = "Not Found"

    def __init__(self, key: str | None = None) -> None:
        super().__init__(f"Not Found - {key} provided is non-existent" if key else None)


class UserNotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    msg = "Not Found - username provided in post request is non-existent"


class CategoryNotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    msg = "Not Found - category provided is non-existent"


class RouteNotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    msg = ROUTE_NOT_FOUND_MSG


def error_response(exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"msg": exc.msg})


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.info(
        "api_error method=%s path=%s status=%s kind=%s",
        request.method,
        request.url.path,
        exc.status_code,
        type(exc).__name__,
    )
    return error_response(exc)


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return error_response(RouteNotFound())
    return JSONResponse(
        status_code=exc.status_code,
        content={"msg": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Only reachable for bodies that are not a JSON object; field-level
    # checks are done by the services.
    return error_response(BadRequest())


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"msg": INTERNAL_ERROR_MSG},
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
