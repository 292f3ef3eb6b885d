from sqlalchemy import Column, Integer, String
from sqlalchemy.dialects.mysql import LONGTEXT

from board_api.dependencies.mysql import Base
from board_api.models.mixin import BaseMixin


class Post(Base, BaseMixin):
    __tablename__ = "post"

    # 생성 시점에만 검증하므로 FK 제약은 두지 않음
    board_id = Column(Integer, nullable=False, comment="게시판 board.id", index=True)
    title = Column(String(200), nullable=False, comment="게시글 제목")
    content = Column(
        LONGTEXT, nullable=False, comment="게시글 내용. 최대 4GB까지 저장 가능"
    )

    def __repr__(self) -> str:
        return f"<Post id={self.id} board_id={self.board_id} title={self.title!r}>"
