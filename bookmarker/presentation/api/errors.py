"""Exception handlers rendering failures as ``{statusCode, error, message}``."""

from http import HTTPStatus
from typing import Any, List, Union

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ...domain.errors import ServiceError

_LOCATION_PREFIXES = {"body", "query", "path", "header"}


def error_body(status_code: int, message: Union[str, List[str]]) -> dict:
    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        phrase = "Error"
    return {"statusCode": status_code, "error": phrase, "message": message}


def _validation_messages(exc: RequestValidationError) -> List[str]:
    messages: List[str] = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part not in _LOCATION_PREFIXES)
        text = error.get("msg", "Invalid value")
        messages.append(f"{field}: {text}" if field else text)
    return messages


async def _service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.status_code, exc.message))


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    code = status.HTTP_400_BAD_REQUEST
    return JSONResponse(status_code=code, content=error_body(code, _validation_messages(exc)))


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail: Any = exc.detail
    message = detail if isinstance(detail, (str, list)) else str(detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, message),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, _service_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
