from typing import AsyncGenerator

import httpx
import pytest
from asgi_lifespan import LifespanManager

from board_api.main import app
from board_api.schemas.board import BoardCreate
from board_api.services.board import InMemoryBoardService
from board_api.services.post import InMemoryPostService


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]):
    """
    `mysql` 마커가 붙은 테스트는 MySQL 설정(MYSQL__HOST 등)이 있을 때만 실행합니다.
    """
    from board_api.config.config import settings

    if settings.mysql is not None:
        return

    skip_mysql = pytest.mark.skip(reason="MySQL 설정이 없어 건너뜁니다.")
    for item in items:
        if "mysql" in item.keywords:
            item.add_marker(skip_mysql)


@pytest.fixture
async def api_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    lifespan을 매 테스트마다 실행하므로 메모리 저장소가 비어 있는 상태로 시작합니다.
    """
    async with (
        LifespanManager(app),
        httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app),
            base_url="http://test",
        ) as client,
    ):
        yield client


@pytest.fixture
def board_service() -> InMemoryBoardService:
    return InMemoryBoardService()


@pytest.fixture
def post_service(board_service: InMemoryBoardService) -> InMemoryPostService:
    return InMemoryPostService(board_service)


@pytest.fixture
async def board_id(board_service: InMemoryBoardService) -> int:
    """테스트용 게시판을 서비스에 직접 생성합니다."""
    board = await board_service.create(
        BoardCreate(title="테스트 게시판", description="테스트 게시판 설명")
    )
    return board.id


@pytest.fixture
async def api_board_id(api_client: httpx.AsyncClient) -> int:
    """테스트용 게시판을 API로 생성합니다."""
    response = await api_client.post(
        "/boards",
        json={"title": "테스트 게시판", "description": "테스트 게시판 설명"},
    )
    assert response.status_code == 201
    return response.json()["id"]
