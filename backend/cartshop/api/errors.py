"""
Exception to HTTP response mapping.

- ValueError (every BusinessRuleError included) -> 400, plain-text message
- RequestValidationError -> 400, JSON object of field -> message
- anything else -> 500, plain-text message
"""

from collections.abc import Iterable
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse, PlainTextResponse
from loguru import logger


def field_errors(errors: Iterable[dict[str, Any]]) -> dict[str, str]:
    """
    Collapse validation errors into one message per field.

    The field name is the last element of the error location. When a field
    fails several rules the last message wins.
    """
    messages: dict[str, str] = {}
    for error in errors:
        loc = error.get("loc") or ("body",)
        messages[str(loc[-1])] = error.get("msg", "")
    return messages


async def handle_value_error(request: Request, exc: ValueError) -> PlainTextResponse:
    logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return PlainTextResponse(str(exc), status_code=400)


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> ORJSONResponse:
    messages = field_errors(exc.errors())
    logger.warning(f"{request.method} {request.url.path} invalid: {messages}")
    return ORJSONResponse(messages, status_code=400)


async def handle_unexpected_error(request: Request, exc: Exception) -> PlainTextResponse:
    logger.opt(exception=exc).error(
        f"{request.method} {request.url.path} failed: {type(exc).__name__}"
    )
    return PlainTextResponse(str(exc), status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValueError, handle_value_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
