from sqlalchemy import Column, String, Text

from board_api.dependencies.mysql import Base
from board_api.models.mixin import BaseMixin


class Board(Base, BaseMixin):
    __tablename__ = "board"

    title = Column(String(100), nullable=False, comment="게시판 제목")
    description = Column(Text, nullable=False, comment="게시판 설명")

    def __repr__(self) -> str:
        return f"<Board id={self.id} title={self.title!r}>"
