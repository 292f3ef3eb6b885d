import logging

from fastapi import APIRouter, Depends

from board_api.dependencies.services import get_board_post_query, get_board_service
from board_api.models.board import Board
from board_api.models.post import Post
from board_api.schemas.board import BoardCreate, BoardResponse, BoardUpdate
from board_api.schemas.post import PostResponse
from board_api.services.board import BoardService
from board_api.services.query import BoardPostQuery

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/boards", tags=["Boards"])


@router.post("", response_model=BoardResponse, status_code=201)
async def create_board(
    body: BoardCreate,
    boards: BoardService = Depends(get_board_service),
) -> Board:
    return await boards.create(body)


@router.get("", response_model=list[BoardResponse])
async def get_boards(boards: BoardService = Depends(get_board_service)) -> list[Board]:
    return await boards.find_all()


@router.get("/{board_id}", response_model=BoardResponse)
async def get_board(
    board_id: int,
    boards: BoardService = Depends(get_board_service),
) -> Board:
    return await boards.find_one(board_id)


@router.put("/{board_id}", response_model=BoardResponse)
async def edit_board(
    board_id: int,
    body: BoardUpdate,
    boards: BoardService = Depends(get_board_service),
) -> Board:
    return await boards.update(board_id, body)


@router.delete("/{board_id}", status_code=204)
async def delete_board(
    board_id: int,
    boards: BoardService = Depends(get_board_service),
) -> None:
    await boards.remove(board_id)


@router.get(
    "/{board_id}/posts",
    response_model=list[PostResponse],
    summary="게시판에 속한 게시글 목록",
)
async def get_board_posts(
    board_id: int,
    query: BoardPostQuery = Depends(get_board_post_query),
) -> list[Post]:
    return await query.posts_of_board(board_id)
