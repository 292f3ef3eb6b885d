from datetime import datetime

import httpx


class TestCreateBoard:
    async def test_success(self, api_client: httpx.AsyncClient):
        response = await api_client.post(
            "/boards", json={"title": "자유게시판", "description": "아무 이야기"}
        )
        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 1
        assert data["title"] == "자유게시판"
        assert data["description"] == "아무 이야기"
        assert data["createdAt"] == data["updatedAt"]
        assert data["deletedAt"] is None
        datetime.fromisoformat(data["createdAt"])

    async def test_sequential_ids(self, api_client: httpx.AsyncClient):
        ids = []
        for i in range(3):
            response = await api_client.post(
                "/boards", json={"title": f"게시판{i}", "description": ""}
            )
            ids.append(response.json()["id"])
        assert ids == [1, 2, 3]

    async def test_missing_title(self, api_client: httpx.AsyncClient):
        response = await api_client.post("/boards", json={"description": "설명"})
        assert response.status_code == 422
        data = response.json()
        assert data["statusCode"] == 422
        assert data["errorCode"] == "VALIDATION_ERROR"
        assert "title" in data["message"]

    async def test_empty_title(self, api_client: httpx.AsyncClient):
        response = await api_client.post(
            "/boards", json={"title": "", "description": "설명"}
        )
        assert response.status_code == 422


class TestGetBoards:
    async def test_empty(self, api_client: httpx.AsyncClient):
        response = await api_client.get("/boards")
        assert response.status_code == 200
        assert response.json() == []

    async def test_excludes_deleted(
        self, api_client: httpx.AsyncClient, api_board_id: int
    ):
        other = await api_client.post(
            "/boards", json={"title": "남는 게시판", "description": ""}
        )
        await api_client.delete(f"/boards/{api_board_id}")

        response = await api_client.get("/boards")
        assert response.status_code == 200
        assert [board["id"] for board in response.json()] == [other.json()["id"]]


class TestGetBoard:
    async def test_success(self, api_client: httpx.AsyncClient, api_board_id: int):
        response = await api_client.get(f"/boards/{api_board_id}")
        assert response.status_code == 200
        assert response.json()["title"] == "테스트 게시판"

    async def test_not_found(self, api_client: httpx.AsyncClient):
        response = await api_client.get("/boards/99999")
        assert response.status_code == 404
        data = response.json()
        assert data["message"] == "Board with ID 99999 not found"
        assert data["errorCode"] == "BOARD_NOT_FOUND"
        assert data["statusCode"] == 404
        datetime.fromisoformat(data["timestamp"])


class TestEditBoard:
    async def test_partial_update(
        self, api_client: httpx.AsyncClient, api_board_id: int
    ):
        before = (await api_client.get(f"/boards/{api_board_id}")).json()

        response = await api_client.put(
            f"/boards/{api_board_id}", json={"title": "수정된 제목"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "수정된 제목"
        assert data["description"] == before["description"]
        assert data["createdAt"] == before["createdAt"]
        assert datetime.fromisoformat(data["updatedAt"]) >= datetime.fromisoformat(
            before["updatedAt"]
        )

    async def test_null_is_no_change(
        self, api_client: httpx.AsyncClient, api_board_id: int
    ):
        response = await api_client.put(
            f"/boards/{api_board_id}", json={"title": None, "description": "새 설명"}
        )
        assert response.status_code == 200
        assert response.json()["title"] == "테스트 게시판"
        assert response.json()["description"] == "새 설명"

    async def test_not_found(self, api_client: httpx.AsyncClient):
        response = await api_client.put("/boards/99999", json={"title": "제목"})
        assert response.status_code == 404


class TestDeleteBoard:
    async def test_success(self, api_client: httpx.AsyncClient, api_board_id: int):
        response = await api_client.delete(f"/boards/{api_board_id}")
        assert response.status_code == 204
        assert response.content == b""

        response = await api_client.get(f"/boards/{api_board_id}")
        assert response.status_code == 404

    async def test_not_found(self, api_client: httpx.AsyncClient):
        response = await api_client.delete("/boards/99999")
        assert response.status_code == 404
        assert response.json()["errorCode"] == "BOARD_NOT_FOUND"


class TestGetBoardPosts:
    async def test_returns_posts_of_board(
        self, api_client: httpx.AsyncClient, api_board_id: int
    ):
        other = await api_client.post(
            "/boards", json={"title": "다른 게시판", "description": ""}
        )
        await api_client.post(
            "/posts",
            json={"boardId": api_board_id, "title": "내 글", "content": "내용"},
        )
        await api_client.post(
            "/posts",
            json={"boardId": other.json()["id"], "title": "남의 글", "content": "내용"},
        )

        response = await api_client.get(f"/boards/{api_board_id}/posts")
        assert response.status_code == 200
        posts = response.json()
        assert [post["title"] for post in posts] == ["내 글"]
        assert posts[0]["boardId"] == api_board_id

    async def test_unknown_board_is_empty(self, api_client: httpx.AsyncClient):
        response = await api_client.get("/boards/99999/posts")
        assert response.status_code == 200
        assert response.json() == []


class TestErrorResponse:
    async def test_unknown_route(self, api_client: httpx.AsyncClient):
        response = await api_client.get("/unknown")
        assert response.status_code == 404
        data = response.json()
        assert data["statusCode"] == 404
        assert data["errorCode"] is None
        assert "timestamp" in data

    async def test_method_not_allowed(self, api_client: httpx.AsyncClient):
        response = await api_client.patch("/boards")
        assert response.status_code == 405
        assert response.json()["statusCode"] == 405
