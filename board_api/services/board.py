import logging
from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from board_api.exceptions.client_error import NotFoundException
from board_api.models.board import Board
from board_api.models.mixin import utcnow
from board_api.schemas.board import BoardCreate, BoardUpdate
from board_api.services.memory import RecordSet

logger = logging.getLogger(__name__)


def board_not_found(board_id: int) -> NotFoundException:
    return NotFoundException(f"Board with ID {board_id} not found", "BOARD_NOT_FOUND")


class BoardService(ABC):
    """
    게시판 비즈니스 로직

    삭제는 항상 soft delete이며, 삭제된 게시판은 조회 결과에서 제외됩니다.
    """

    @abstractmethod
    async def create(self, data: BoardCreate) -> Board: ...

    @abstractmethod
    async def find_all(self) -> list[Board]:
        """삭제되지 않은 게시판을 생성 순서대로 반환"""

    @abstractmethod
    async def get(self, board_id: int) -> Optional[Board]:
        """활성 게시판 또는 None. 예외를 던지지 않는 조회"""

    async def find_one(self, board_id: int) -> Board:
        board = await self.get(board_id)
        if board is None:
            logger.debug("게시판 조회 실패: id=%s", board_id)
            raise board_not_found(board_id)
        return board

    @abstractmethod
    async def update(self, board_id: int, changes: BoardUpdate) -> Board: ...

    @abstractmethod
    async def remove(self, board_id: int) -> None: ...


class InMemoryBoardService(BoardService):
    def __init__(self) -> None:
        self._boards: RecordSet[Board] = RecordSet()

    async def create(self, data: BoardCreate) -> Board:
        now = utcnow()
        board = self._boards.append(
            Board(
                id=self._boards.next_id(),
                title=data.title,
                description=data.description,
                created_at=now,
                updated_at=now,
                deleted_at=None,
            )
        )
        logger.info("게시판 생성: id=%s", board.id)
        return board

    async def find_all(self) -> list[Board]:
        return self._boards.active()

    async def get(self, board_id: int) -> Optional[Board]:
        return self._boards.get(board_id)

    async def update(self, board_id: int, changes: BoardUpdate) -> Board:
        board = await self.find_one(board_id)
        board.update_fields(**changes.model_dump(exclude_none=True))
        return board

    async def remove(self, board_id: int) -> None:
        board = await self.find_one(board_id)
        board.soft_delete()
        logger.info("게시판 삭제: id=%s", board_id)


class SQLBoardService(BoardService):
    """
    MySQL 저장소. 연산마다 세션 하나, 트랜잭션 하나를 사용합니다.
    """

    def __init__(self, sessionmaker: async_sessionmaker[AsyncSession]) -> None:
        self._sessionmaker = sessionmaker

    async def create(self, data: BoardCreate) -> Board:
        now = utcnow()
        board = Board(
            title=data.title,
            description=data.description,
            created_at=now,
            updated_at=now,
            deleted_at=None,
        )
        async with self._sessionmaker() as session, session.begin():
            session.add(board)
        logger.info("게시판 생성: id=%s", board.id)
        return board

    async def find_all(self) -> list[Board]:
        async with self._sessionmaker() as session:
            result = await session.scalars(
                select(Board).where(Board.deleted_at.is_(None)).order_by(Board.id)
            )
            return list(result.all())

    async def get(self, board_id: int) -> Optional[Board]:
        async with self._sessionmaker() as session:
            return await session.scalar(
                select(Board).where(Board.id == board_id, Board.deleted_at.is_(None))
            )

    async def _lock(self, session: AsyncSession, board_id: int) -> Board:
        board = await session.scalar(
            select(Board)
            .where(Board.id == board_id, Board.deleted_at.is_(None))
            .with_for_update()
        )
        if board is None:
            raise board_not_found(board_id)
        return board

    async def update(self, board_id: int, changes: BoardUpdate) -> Board:
        async with self._sessionmaker() as session, session.begin():
            board = await self._lock(session, board_id)
            board.update_fields(**changes.model_dump(exclude_none=True))
        return board

    async def remove(self, board_id: int) -> None:
        async with self._sessionmaker() as session, session.begin():
            board = await self._lock(session, board_id)
            board.soft_delete()
        logger.info("게시판 삭제: id=%s", board_id)
