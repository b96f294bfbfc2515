"""팀 레포지토리 — 팀 CRUD 쿼리.

Team Repository — CRUD queries for teams.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.team import Team
from app.repositories.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    """팀 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the teams table.
    """

    def __init__(self) -> None:
        super().__init__(Team)

    async def find_by_name(self, db: AsyncSession, name: str) -> list[Team]:
        """이름으로 팀 목록을 조회합니다.

        Retrieve teams with exactly this name.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            name: 팀 이름 (Team name)

        Returns:
            list[Team]: 팀 목록 (List of teams)
        """
        query: Select = select(Team).where(Team.name == name).order_by(Team.id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_detail(self, db: AsyncSession, team_id: int) -> Team | None:
        """팀 상세 정보를 소속 회원과 함께 조회합니다.

        Retrieve a team with its members eagerly loaded.
        """
        query: Select = (
            select(Team)
            .options(selectinload(Team.members))
            .where(Team.id == team_id)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
team_repository: TeamRepository = TeamRepository()
