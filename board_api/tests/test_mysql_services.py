import pytest

from board_api.exceptions.client_error import BadRequestException, NotFoundException
from board_api.schemas.board import BoardCreate, BoardUpdate
from board_api.schemas.post import PostCreate, PostUpdate

pytestmark = pytest.mark.mysql


@pytest.fixture
async def sessionmaker():
    """
    테스트마다 테이블을 DROP + CREATE 합니다.
    실제 MySQL이 실행 중이어야 합니다 (MYSQL__HOST 등 설정 필요).
    """
    from board_api.config.config import settings
    from board_api.dependencies import mysql

    import board_api.models.board  # noqa: F401
    import board_api.models.post  # noqa: F401

    engine = mysql.create_engine(settings.mysql)
    async with engine.begin() as conn:
        await conn.run_sync(mysql.Base.metadata.drop_all)
        await conn.run_sync(mysql.Base.metadata.create_all)

    yield mysql.create_sessionmaker(engine)

    await mysql.shutdown(engine)


@pytest.fixture
def sql_board_service(sessionmaker):
    from board_api.services.board import SQLBoardService

    return SQLBoardService(sessionmaker)


@pytest.fixture
def sql_post_service(sessionmaker, sql_board_service):
    from board_api.services.post import SQLPostService

    return SQLPostService(sessionmaker, sql_board_service)


class TestSQLBoardService:
    async def test_crud_flow(self, sql_board_service):
        first = await sql_board_service.create(
            BoardCreate(title="첫번째", description="설명")
        )
        second = await sql_board_service.create(
            BoardCreate(title="두번째", description="설명")
        )
        assert (first.id, second.id) == (1, 2)

        updated = await sql_board_service.update(first.id, BoardUpdate(title="수정"))
        assert updated.title == "수정"
        assert updated.description == "설명"

        await sql_board_service.remove(second.id)
        assert [board.id for board in await sql_board_service.find_all()] == [1]
        with pytest.raises(NotFoundException):
            await sql_board_service.find_one(second.id)


class TestSQLPostService:
    async def test_referential_check_and_filter(
        self, sql_board_service, sql_post_service
    ):
        board = await sql_board_service.create(BoardCreate(title="B", description=""))
        other = await sql_board_service.create(BoardCreate(title="O", description=""))

        post = await sql_post_service.create(
            PostCreate(board_id=board.id, title="t", content="c")
        )
        await sql_post_service.create(
            PostCreate(board_id=other.id, title="o", content="c")
        )
        assert [p.id for p in await sql_post_service.find_all(board.id)] == [post.id]

        with pytest.raises(BadRequestException):
            await sql_post_service.create(
                PostCreate(board_id=99999, title="t", content="c")
            )

        await sql_board_service.remove(board.id)
        found = await sql_post_service.find_one(post.id)
        assert found.title == "t"

        updated = await sql_post_service.update(post.id, PostUpdate(content="수정"))
        assert updated.title == "t"
        assert updated.content == "수정"

        await sql_post_service.remove(post.id)
        with pytest.raises(NotFoundException):
            await sql_post_service.find_one(post.id)
