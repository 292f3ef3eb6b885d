import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine

from board_api.config.config import Settings, StorageBackend
from board_api.dependencies import mysql
from board_api.services.board import (
    BoardService,
    InMemoryBoardService,
    SQLBoardService,
)
from board_api.services.post import InMemoryPostService, PostService, SQLPostService
from board_api.services.query import BoardPostQuery

logger = logging.getLogger(__name__)


@dataclass
class Services:
    """앱 인스턴스가 소유하는 서비스 묶음. lifespan 동안만 유효"""

    boards: BoardService
    posts: PostService
    board_posts: BoardPostQuery
    engine: Optional[AsyncEngine] = None


async def startup(settings: Settings) -> Services:
    """
    설정된 저장소에 맞는 서비스 객체를 생성합니다.
    """
    if settings.storage == StorageBackend.mysql:
        if settings.mysql is None:
            raise RuntimeError("STORAGE=mysql 이지만 MYSQL 설정이 없습니다.")

        engine = mysql.create_engine(settings.mysql)
        await mysql.startup(engine, settings.mysql)
        sessionmaker = mysql.create_sessionmaker(engine)
        boards: BoardService = SQLBoardService(sessionmaker)
        posts: PostService = SQLPostService(sessionmaker, boards)
    else:
        engine = None
        boards = InMemoryBoardService()
        posts = InMemoryPostService(boards)

    logger.info("저장소 초기화 완료: %s", settings.storage)
    return Services(
        boards=boards,
        posts=posts,
        board_posts=BoardPostQuery(posts),
        engine=engine,
    )


async def shutdown(services: Services) -> None:
    if services.engine is not None:
        await mysql.shutdown(services.engine)


def get_services(request: Request) -> Services:
    return request.app.state.services


def get_board_service(request: Request) -> BoardService:
    """`boards: BoardService = Depends(get_board_service)`로 사용"""
    return get_services(request).boards


def get_post_service(request: Request) -> PostService:
    return get_services(request).posts


def get_board_post_query(request: Request) -> BoardPostQuery:
    return get_services(request).board_posts
