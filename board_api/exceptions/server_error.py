from http import HTTPStatus
from typing import Optional

from board_api.exceptions.base import BaseAPIException


class ServerErrorException(BaseAPIException):
    """서버 내부의 문제로 인한 에러 (5xx)"""

    def __init__(
        self,
        message: str,
        status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR,
        error_code: Optional[str] = None,
    ):
        super().__init__(message, int(status_code), error_code)


class InternalServerErrorException(ServerErrorException):
    def __init__(
        self,
        message: str = "서버 내부 오류가 발생했습니다",
        error_code: Optional[str] = None,
    ):
        super().__init__(message, HTTPStatus.INTERNAL_SERVER_ERROR, error_code)


class NotImplementedException(ServerErrorException):
    def __init__(
        self,
        message: str = "구현되지 않은 기능입니다",
        error_code: Optional[str] = None,
    ):
        super().__init__(message, HTTPStatus.NOT_IMPLEMENTED, error_code)


class ServiceUnavailableException(ServerErrorException):
    def __init__(
        self,
        message: str = "서비스를 사용할 수 없습니다",
        error_code: Optional[str] = None,
    ):
        super().__init__(message, HTTPStatus.SERVICE_UNAVAILABLE, error_code)


class GatewayTimeoutException(ServerErrorException):
    def __init__(
        self,
        message: str = "게이트웨이 타임아웃이 발생했습니다",
        error_code: Optional[str] = None,
    ):
        super().__init__(message, HTTPStatus.GATEWAY_TIMEOUT, error_code)
