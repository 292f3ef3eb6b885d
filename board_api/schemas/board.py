from datetime import datetime
from typing import Optional

from pydantic import Field

from board_api.schemas.base import CamelModel


class BoardCreate(CamelModel):
    title: str = Field(min_length=1, max_length=100)
    description: str


class BoardUpdate(CamelModel):
    """
    부분 수정용 입력. 값이 없거나 null인 필드는 변경하지 않습니다.
    """

    title: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = None


class BoardResponse(CamelModel):
    id: int
    title: str
    description: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None
