"""작가 API 테스트.

Creator API tests — Create, Read, Update, Delete and search endpoints.
"""

from httpx import AsyncClient

URL = "/api/v1/creators"


class TestCreatorCreate:
    """작가 등록 테스트."""

    async def test_register_creator(self, client: AsyncClient):
        """작가 등록 성공."""
        res = await client.post(URL, json={
            "name": "Gabriel García Márquez",
            "bio": "Colombian novelist known for magical realism.",
        })
        assert res.status_code == 201
        data = res.json()
        assert isinstance(data["id"], int)
        assert data["name"] == "Gabriel García Márquez"
        assert data["bio"] == "Colombian novelist known for magical realism."

    async def test_register_blank_name(self, client: AsyncClient):
        """빈 이름으로 등록 시 400."""
        res = await client.post(URL, json={"name": "   "})
        assert res.status_code == 400
        assert res.json()["detail"] == "Creator name cannot be empty"

        res2 = await client.get(URL)
        assert res2.json() == []

    async def test_register_bio_too_long(self, client: AsyncClient):
        """소개글 길이 초과 시 422."""
        res = await client.post(URL, json={"name": "Verbose", "bio": "x" * 2001})
        assert res.status_code == 422

    async def test_register_name_too_long(self, client: AsyncClient):
        """이름 길이 초과 시 422, 저장되지 않음."""
        res = await client.post(URL, json={"name": "n" * 256})
        assert res.status_code == 422
        assert (await client.get(URL)).json() == []

    async def test_register_name_at_limit(self, client: AsyncClient):
        res = await client.post(URL, json={"name": "n" * 255})
        assert res.status_code == 201


class TestCreatorRead:
    """작가 조회 테스트."""

    async def test_list_creators(self, client: AsyncClient, creator):
        res = await client.get(URL)
        assert res.status_code == 200
        assert [c["name"] for c in res.json()] == ["Haruki Murakami"]

    async def test_get_creator(self, client: AsyncClient, creator):
        res = await client.get(f"{URL}/{creator.id}")
        assert res.status_code == 200
        assert res.json()["name"] == "Haruki Murakami"

    async def test_get_nonexistent_creator(self, client: AsyncClient):
        """존재하지 않는 작가 조회 시 404."""
        res = await client.get(f"{URL}/987654")
        assert res.status_code == 404

    async def test_creator_works(self, client: AsyncClient, creator, work):
        res = await client.get(f"{URL}/{creator.id}/works")
        assert res.status_code == 200
        assert [w["title"] for w in res.json()] == ["Kafka on the Shore"]

    async def test_creator_works_unknown_creator(self, client: AsyncClient):
        res = await client.get(f"{URL}/987654/works")
        assert res.status_code == 404

    async def test_search_creators(self, client: AsyncClient, creator, other_creator):
        res = await client.get(f"{URL}/search", params={"query": "MORRISON"})
        assert res.status_code == 200
        assert [c["name"] for c in res.json()] == ["Toni Morrison"]

    async def test_search_creators_by_bio(self, client: AsyncClient, creator, other_creator):
        res = await client.get(f"{URL}/search/bio", params={"query": "realism"})
        assert res.status_code == 200
        assert [c["id"] for c in res.json()] == [creator.id]

    async def test_prolific_creators(self, client: AsyncClient, creator, work):
        """기준보다 많은 작품 수 — strictly more than the threshold."""
        res = await client.get(f"{URL}/stats/prolific", params={"more_than": 0})
        assert res.status_code == 200
        assert res.json() == {"more_than": 0, "count": 1}

        res2 = await client.get(f"{URL}/stats/prolific", params={"more_than": 1})
        assert res2.json() == {"more_than": 1, "count": 0}


class TestCreatorUpdate:
    """작가 수정 테스트."""

    async def test_update_creator(self, client: AsyncClient, creator):
        res = await client.put(f"{URL}/{creator.id}", json={"name": "H. Murakami"})
        assert res.status_code == 200
        data = res.json()
        assert data["name"] == "H. Murakami"
        # 전체 덮어쓰기 — omitted bio is cleared
        assert data["bio"] is None

    async def test_update_nonexistent_creator(self, client: AsyncClient):
        """존재하지 않는 작가 수정 시 400."""
        res = await client.put(f"{URL}/987654", json={"name": "Ghost"})
        assert res.status_code == 400


class TestCreatorDelete:
    """작가 삭제 테스트."""

    async def test_delete_creator_cascades(self, client: AsyncClient, creator, work):
        res = await client.delete(f"{URL}/{creator.id}")
        assert res.status_code == 204

        res2 = await client.get(f"{URL}/{creator.id}")
        assert res2.status_code == 404
        res3 = await client.get(f"/api/v1/works/{work.id}")
        assert res3.status_code == 404

    async def test_delete_nonexistent_creator(self, client: AsyncClient):
        """존재하지 않는 작가 삭제도 204."""
        res = await client.delete(f"{URL}/987654")
        assert res.status_code == 204
