import logging
from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from board_api.exceptions.client_error import BadRequestException, NotFoundException
from board_api.models.mixin import utcnow
from board_api.models.post import Post
from board_api.schemas.post import PostCreate, PostUpdate
from board_api.services.board import BoardService
from board_api.services.memory import RecordSet

logger = logging.getLogger(__name__)


def post_not_found(post_id: int) -> NotFoundException:
    return NotFoundException(f"Post with ID {post_id} not found", "POST_NOT_FOUND")


class PostService(ABC):
    """
    게시글 비즈니스 로직

    게시판 존재 여부는 게시글 생성 시점에만 확인합니다. 이후 게시판이 삭제되어도
    기존 게시글은 그대로 조회됩니다.
    """

    def __init__(self, board_service: BoardService) -> None:
        self._board_service = board_service

    async def create(self, data: PostCreate) -> Post:
        board = await self._board_service.get(data.board_id)
        if board is None:
            # 없는 게시글이 아니라 잘못된 board_id를 보낸 요청이므로 400
            logger.info("게시글 생성 거부: 유효하지 않은 board_id=%s", data.board_id)
            raise BadRequestException(
                f"Board with ID {data.board_id} not found", "INVALID_BOARD_ID"
            )

        post = await self._insert(data)
        logger.info("게시글 생성: id=%s, board_id=%s", post.id, post.board_id)
        return post

    @abstractmethod
    async def _insert(self, data: PostCreate) -> Post: ...

    @abstractmethod
    async def find_all(self, board_id: Optional[int] = None) -> list[Post]:
        """
        삭제되지 않은 게시글을 생성 순서대로 반환. board_id가 주어지면 해당 게시판의 글만
        """

    @abstractmethod
    async def get(self, post_id: int) -> Optional[Post]: ...

    async def find_one(self, post_id: int) -> Post:
        post = await self.get(post_id)
        if post is None:
            logger.debug("게시글 조회 실패: id=%s", post_id)
            raise post_not_found(post_id)
        return post

    @abstractmethod
    async def update(self, post_id: int, changes: PostUpdate) -> Post: ...

    @abstractmethod
    async def remove(self, post_id: int) -> None: ...


class InMemoryPostService(PostService):
    def __init__(self, board_service: BoardService) -> None:
        super().__init__(board_service)
        self._posts: RecordSet[Post] = RecordSet()

    async def _insert(self, data: PostCreate) -> Post:
        now = utcnow()
        return self._posts.append(
            Post(
                id=self._posts.next_id(),
                board_id=data.board_id,
                title=data.title,
                content=data.content,
                created_at=now,
                updated_at=now,
                deleted_at=None,
            )
        )

    async def find_all(self, board_id: Optional[int] = None) -> list[Post]:
        if board_id is None:
            return self._posts.active()
        return self._posts.active(lambda post: post.board_id == board_id)

    async def get(self, post_id: int) -> Optional[Post]:
        return self._posts.get(post_id)

    async def update(self, post_id: int, changes: PostUpdate) -> Post:
        post = await self.find_one(post_id)
        post.update_fields(**changes.model_dump(exclude_none=True))
        return post

    async def remove(self, post_id: int) -> None:
        post = await self.find_one(post_id)
        post.soft_delete()
        logger.info("게시글 삭제: id=%s", post_id)


class SQLPostService(PostService):
    def __init__(
        self,
        sessionmaker: async_sessionmaker[AsyncSession],
        board_service: BoardService,
    ) -> None:
        super().__init__(board_service)
        self._sessionmaker = sessionmaker

    async def _insert(self, data: PostCreate) -> Post:
        now = utcnow()
        post = Post(
            board_id=data.board_id,
            title=data.title,
            content=data.content,
            created_at=now,
            updated_at=now,
            deleted_at=None,
        )
        async with self._sessionmaker() as session, session.begin():
            session.add(post)
        return post

    async def find_all(self, board_id: Optional[int] = None) -> list[Post]:
        stmt = select(Post).where(Post.deleted_at.is_(None))
        if board_id is not None:
            stmt = stmt.where(Post.board_id == board_id)

        async with self._sessionmaker() as session:
            result = await session.scalars(stmt.order_by(Post.id))
            return list(result.all())

    async def get(self, post_id: int) -> Optional[Post]:
        async with self._sessionmaker() as session:
            return await session.scalar(
                select(Post).where(Post.id == post_id, Post.deleted_at.is_(None))
            )

    async def _lock(self, session: AsyncSession, post_id: int) -> Post:
        post = await session.scalar(
            select(Post)
            .where(Post.id == post_id, Post.deleted_at.is_(None))
            .with_for_update()
        )
        if post is None:
            raise post_not_found(post_id)
        return post

    async def update(self, post_id: int, changes: PostUpdate) -> Post:
        async with self._sessionmaker() as session, session.begin():
            post = await self._lock(session, post_id)
            post.update_fields(**changes.model_dump(exclude_none=True))
        return post

    async def remove(self, post_id: int) -> None:
        async with self._sessionmaker() as session, session.begin():
            post = await self._lock(session, post_id)
            post.soft_delete()
        logger.info("게시글 삭제: id=%s", post_id)
