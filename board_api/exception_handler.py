import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from board_api.exceptions.base import BaseAPIException
from board_api.exceptions.client_error import ClientErrorException
from board_api.exceptions.server_error import (
    InternalServerErrorException,
    ServerErrorException,
)

logger = logging.getLogger(__name__)


def _to_response(exc: BaseAPIException, headers: dict | None = None) -> JSONResponse:
    if exc.is_server_error():
        logger.error("%s (%s)", exc.message, exc.error_code)
    return JSONResponse(
        status_code=exc.status_code, content=exc.to_dict(), headers=headers
    )


def custom_exception_handler(_request: Request, exc: StarletteHTTPException):
    """
    모든 HTTPException을 {message, errorCode, statusCode, timestamp} 형태로 응답
    """
    headers = getattr(exc, "headers", None)
    if isinstance(exc, BaseAPIException):
        return _to_response(exc, headers)

    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    if exc.status_code >= 500:
        wrapped = ServerErrorException(message, exc.status_code)
    else:
        wrapped = ClientErrorException(message, exc.status_code)
    return _to_response(wrapped, headers)


def validation_exception_handler(_request: Request, exc: RequestValidationError):
    messages = [
        "{loc}: {msg}".format(
            loc=".".join(str(part) for part in error["loc"]), msg=error["msg"]
        )
        for error in exc.errors()
    ]
    return _to_response(
        ClientErrorException("; ".join(messages), 422, "VALIDATION_ERROR")
    )


def database_exception_handler(_request: Request, exc: SQLAlchemyError):
    logger.exception("DB 처리 중 오류가 발생했습니다.", exc_info=exc)
    return _to_response(InternalServerErrorException(error_code="DATABASE_ERROR"))
