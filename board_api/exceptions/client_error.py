from http import HTTPStatus
from typing import Optional

from board_api.exceptions.base import BaseAPIException


class ClientErrorException(BaseAPIException):
    """클라이언트의 잘못된 요청으로 인한 에러 (4xx)"""

    def __init__(
        self,
        message: str,
        status_code: int = HTTPStatus.BAD_REQUEST,
        error_code: Optional[str] = None,
    ):
        super().__init__(message, int(status_code), error_code)


class BadRequestException(ClientErrorException):
    def __init__(
        self, message: str = "잘못된 요청입니다", error_code: Optional[str] = None
    ):
        super().__init__(message, HTTPStatus.BAD_REQUEST, error_code)


class UnauthorizedException(ClientErrorException):
    def __init__(
        self, message: str = "인증이 필요합니다", error_code: Optional[str] = None
    ):
        super().__init__(message, HTTPStatus.UNAUTHORIZED, error_code)


class ForbiddenException(ClientErrorException):
    def __init__(
        self, message: str = "접근 권한이 없습니다", error_code: Optional[str] = None
    ):
        super().__init__(message, HTTPStatus.FORBIDDEN, error_code)


class NotFoundException(ClientErrorException):
    def __init__(
        self,
        message: str = "리소스를 찾을 수 없습니다",
        error_code: Optional[str] = None,
    ):
        super().__init__(message, HTTPStatus.NOT_FOUND, error_code)


class ConflictException(ClientErrorException):
    def __init__(
        self,
        message: str = "리소스 충돌이 발생했습니다",
        error_code: Optional[str] = None,
    ):
        super().__init__(message, HTTPStatus.CONFLICT, error_code)
