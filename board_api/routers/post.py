import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from board_api.dependencies.services import get_post_service
from board_api.models.post import Post
from board_api.schemas.post import PostCreate, PostResponse, PostUpdate
from board_api.services.post import PostService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["Posts"])


@router.post("", response_model=PostResponse, status_code=201)
async def write_post(
    body: PostCreate,
    posts: PostService = Depends(get_post_service),
) -> Post:
    return await posts.create(body)


@router.get("", response_model=list[PostResponse])
async def get_posts(
    board_id: Optional[int] = Query(default=None, alias="boardId"),
    posts: PostService = Depends(get_post_service),
) -> list[Post]:
    return await posts.find_all(board_id)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: int,
    posts: PostService = Depends(get_post_service),
) -> Post:
    return await posts.find_one(post_id)


@router.put("/{post_id}", response_model=PostResponse)
async def edit_post(
    post_id: int,
    body: PostUpdate,
    posts: PostService = Depends(get_post_service),
) -> Post:
    return await posts.update(post_id, body)


@router.delete("/{post_id}", status_code=204)
async def delete_post(
    post_id: int,
    posts: PostService = Depends(get_post_service),
) -> None:
    await posts.remove(post_id)
