from datetime import datetime
from typing import Optional

from pydantic import Field

from board_api.schemas.base import CamelModel


class PostCreate(CamelModel):
    board_id: int
    title: str = Field(min_length=1, max_length=200)
    content: str


class PostUpdate(CamelModel):
    """
    부분 수정용 입력. 값이 없거나 null인 필드는 변경하지 않습니다.
    """

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = None


class PostResponse(CamelModel):
    id: int
    board_id: int
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None
