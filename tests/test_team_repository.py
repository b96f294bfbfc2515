"""팀 레포지토리 테스트.

Team repository tests — CRUD, name lookup, member collection and deletion.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import Member
from app.models.team import Team
from app.repositories.member_repository import member_repository
from app.repositories.team_repository import team_repository
from app.utils.pagination import Direction, Sort


class TestTeamRepository:
    """팀 레포지토리 테스트."""

    async def test_create_and_find(self, db: AsyncSession):
        """dict로 생성 후 ID 조회."""
        team = await team_repository.create(db, {"name": "teamA"})

        assert team.id is not None
        assert await team_repository.get_by_id(db, team.id) is team
        assert await team_repository.count(db) == 1

    async def test_find_by_name(self, db: AsyncSession, team_a: Team, team_b: Team):
        """이름으로 조회."""
        assert await team_repository.find_by_name(db, "teamB") == [team_b]
        assert await team_repository.find_by_name(db, "teamC") == []

    async def test_find_all_sorted(self, db: AsyncSession, team_a: Team, team_b: Team):
        """정렬 조회."""
        teams = await team_repository.find_all(db, Sort.by(Direction.DESC, "name"))

        assert [t.name for t in teams] == ["teamB", "teamA"]

    async def test_update(self, db: AsyncSession, team_a: Team):
        """부분 수정 — 없는 ID는 None."""
        updated = await team_repository.update(db, team_a.id, {"name": "renamed"})

        assert updated.name == "renamed"
        assert await team_repository.update(db, 999_999, {"name": "x"}) is None

    async def test_get_detail_loads_members(self, db: AsyncSession, members: list[Member], team_a: Team):
        """팀 상세 — 소속 회원 포함."""
        team_id = team_a.id
        db.expunge_all()

        team = await team_repository.get_detail(db, team_id)

        assert sorted(m.username for m in team.members) == ["member1", "member2"]

    async def test_delete_team_keeps_members(self, db: AsyncSession, members: list[Member], team_a: Team):
        """팀 삭제 시 회원은 남고 팀만 해제된다."""
        team_id = team_a.id
        member_id = members[0].id
        db.expunge_all()

        assert await team_repository.delete_by_id(db, team_id) is True
        db.expunge_all()

        member = await member_repository.get_detail(db, member_id)
        assert member is not None
        assert member.team_id is None
        assert member.team is None
        assert await member_repository.count(db) == 4
