from board_api.models.post import Post
from board_api.services.post import PostService


class BoardPostQuery:
    """
    게시판별 게시글 조회 (읽기 전용)

    게시판 자체의 존재/삭제 여부는 확인하지 않고 board_id가 일치하는 활성 게시글을 반환합니다.
    """

    def __init__(self, post_service: PostService) -> None:
        self._post_service = post_service

    async def posts_of_board(self, board_id: int) -> list[Post]:
        return await self._post_service.find_all(board_id=board_id)
