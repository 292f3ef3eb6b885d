from datetime import datetime, timezone
from typing import Optional

from fastapi import HTTPException


class BaseAPIException(HTTPException):
    """
    커스텀 예외의 기본 클래스

    4xx(클라이언트 에러)와 5xx(서버 에러)를 구분하여 처리합니다.
    exception_handler에서 `to_dict()` 결과를 그대로 응답 본문으로 사용합니다.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        error_code: Optional[str] = None,
    ):
        super().__init__(status_code=status_code, detail=message)
        self.message = message
        self.error_code = error_code
        self.timestamp = datetime.now(timezone.utc)

    def is_client_error(self) -> bool:
        """4xx 에러인지 확인"""
        return 400 <= self.status_code < 500

    def is_server_error(self) -> bool:
        """5xx 에러인지 확인"""
        return 500 <= self.status_code < 600

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "errorCode": self.error_code,
            "statusCode": self.status_code,
            "timestamp": self.timestamp.isoformat(),
        }
