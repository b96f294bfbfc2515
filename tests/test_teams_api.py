"""팀 API 테스트.

Team API tests — Create, Read, Update, Delete team endpoints.
"""

from httpx import AsyncClient

URL = "/api/v1/teams/"
MEMBER_URL = "/api/v1/members/"


class TestTeamApi:
    """팀 CRUD 테스트."""

    async def test_create_and_list(self, client: AsyncClient):
        """팀 생성 후 목록 조회."""
        res = await client.post(URL, json={"name": "teamA"})
        assert res.status_code == 201
        assert res.json()["name"] == "teamA"
        await client.post(URL, json={"name": "teamB"})

        res = await client.get(URL)
        assert [t["name"] for t in res.json()] == ["teamA", "teamB"]

        res = await client.get(URL, params={"name": "teamB"})
        assert [t["name"] for t in res.json()] == ["teamB"]

    async def test_create_team_invalid(self, client: AsyncClient):
        """빈 이름은 422."""
        res = await client.post(URL, json={"name": ""})
        assert res.status_code == 422

    async def test_get_team_with_members(self, client: AsyncClient):
        """팀 상세 — 소속 회원 포함."""
        team_id = (await client.post(URL, json={"name": "teamA"})).json()["id"]
        await client.post(MEMBER_URL, json={"username": "member1", "age": 10, "team_id": team_id})
        await client.post(MEMBER_URL, json={"username": "member2", "age": 20, "team_id": team_id})

        res = await client.get(f"{URL}{team_id}")
        assert res.status_code == 200
        data = res.json()
        assert data["name"] == "teamA"
        assert sorted(m["username"] for m in data["members"]) == ["member1", "member2"]
        assert all(m["team_name"] == "teamA" for m in data["members"])

    async def test_get_nonexistent_team(self, client: AsyncClient):
        """존재하지 않는 팀 조회 시 404."""
        res = await client.get(f"{URL}999999")
        assert res.status_code == 404

    async def test_update_team(self, client: AsyncClient):
        """팀 이름 수정."""
        team_id = (await client.post(URL, json={"name": "teamA"})).json()["id"]
        res = await client.put(f"{URL}{team_id}", json={"name": "renamed"})
        assert res.status_code == 200
        assert res.json()["name"] == "renamed"

        res = await client.put(f"{URL}999999", json={"name": "x"})
        assert res.status_code == 404

    async def test_delete_team(self, client: AsyncClient):
        """팀 삭제 — 회원은 팀 없음으로 남는다."""
        team_id = (await client.post(URL, json={"name": "teamA"})).json()["id"]
        member = (await client.post(
            MEMBER_URL, json={"username": "member1", "age": 10, "team_id": team_id}
        )).json()

        res = await client.delete(f"{URL}{team_id}")
        assert res.status_code == 204

        assert (await client.get(f"{URL}{team_id}")).status_code == 404
        res = await client.get(f"{MEMBER_URL}{member['id']}")
        assert res.status_code == 200
        assert res.json()["team_id"] is None
