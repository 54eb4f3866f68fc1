# blog_api/api/v1/error_handlers.py
"""
FastAPI exception handlers that render errors into the response envelope:

    {"status_code": <int>, "data": {"message": <str>}}

How it fits together:
    - Routes translate ServiceError / EmptyValueError into ApiError (see errors.py)
      and raise it; `api_error_handler` renders it.
    - `service_error_handler` and `empty_value_handler` cover anything raised outside
      that explicit translation with the same mapping.
    - `request_validation_handler` replaces FastAPI's default 422 body (malformed JSON,
      missing fields, non-UUID path ids) with the envelope.

Register them from the app factory:

    from blog_api.api.v1.error_handlers import register_exception_handlers
    register_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blog_api.domain import EmptyValueError
from blog_api.exceptions import ServiceError
from .errors import ApiError, UnprocessableEntity, map_service_error, map_validation_error
from .schemas import Envelope, MessageResponse

logger = logging.getLogger(__name__)


def error_response(error: ApiError) -> JSONResponse:
    body = Envelope[MessageResponse](status_code=error.status_code, data=MessageResponse(message=error.message))
    return JSONResponse(status_code=error.status_code, content=body.model_dump())


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    # 5xx causes were already logged with traceback by map_service_error
    if exc.status_code < 500:
        logger.info(
            "api.%s",
            type(exc).__name__,
            extra={"method": request.method, "path": request.url.path, "status": exc.status_code},
        )
    return error_response(exc)


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return await api_error_handler(request, map_service_error(exc, logger))


async def empty_value_handler(request: Request, exc: EmptyValueError) -> JSONResponse:
    return await api_error_handler(request, map_validation_error(exc))


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"Invalid request: {location}: {first.get('msg', 'invalid value')}"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return await api_error_handler(request, UnprocessableEntity(_describe_validation_error(exc)))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(EmptyValueError, empty_value_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
