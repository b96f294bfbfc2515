"""팀 서비스 — 팀 CRUD 비즈니스 로직.

Team Service — Business logic for team CRUD operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.team import Team
from app.repositories.team_repository import team_repository
from app.schemas.member import MemberResponse
from app.schemas.team import TeamCreate, TeamDetailResponse, TeamResponse, TeamUpdate
from app.utils.exceptions import NotFoundError
from app.utils.pagination import Sort


class TeamService:
    """팀 관련 비즈니스 로직을 처리하는 서비스.

    Service handling team business logic.
    """

    def _to_response(self, team: Team) -> TeamResponse:
        """팀 모델을 응답 스키마로 변환합니다.

        Convert a Team model instance to a TeamResponse schema.
        """
        return TeamResponse(id=team.id, name=team.name)

    async def list_teams(
        self,
        db: AsyncSession,
        name: str | None = None,
    ) -> list[TeamResponse]:
        """팀 목록을 조회합니다.

        List all teams, or only teams with the given name.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            name: 팀 이름 필터 (Optional exact-name filter)

        Returns:
            list[TeamResponse]: 팀 목록 (List of team responses)
        """
        if name is not None:
            teams = await team_repository.find_by_name(db, name)
        else:
            teams = await team_repository.find_all(db, Sort.by_properties("id"))
        return [self._to_response(t) for t in teams]

    async def get_team(
        self,
        db: AsyncSession,
        team_id: int,
    ) -> TeamDetailResponse:
        """팀 상세 정보를 소속 회원과 함께 조회합니다.

        Retrieve team detail with its members.

        Raises:
            NotFoundError: 팀을 찾을 수 없을 때 (Team not found)
        """
        team: Team | None = await team_repository.get_detail(db, team_id)
        if team is None:
            raise NotFoundError("Team not found")

        return TeamDetailResponse(
            id=team.id,
            name=team.name,
            members=[
                MemberResponse(
                    id=m.id,
                    username=m.username,
                    age=m.age,
                    team_id=team.id,
                    team_name=team.name,
                )
                for m in team.members
            ],
        )

    async def create_team(
        self,
        db: AsyncSession,
        data: TeamCreate,
    ) -> TeamResponse:
        """새 팀을 생성합니다 (Create a new team)."""
        team: Team = await team_repository.create(db, {"name": data.name})
        return self._to_response(team)

    async def update_team(
        self,
        db: AsyncSession,
        team_id: int,
        data: TeamUpdate,
    ) -> TeamResponse:
        """팀 정보를 수정합니다.

        Update an existing team with the fields that were sent.

        Raises:
            NotFoundError: 팀을 찾을 수 없을 때 (Team not found)
        """
        update_data: dict = data.model_dump(exclude_unset=True, exclude_none=True)
        team: Team | None = await team_repository.update(db, team_id, update_data)
        if team is None:
            raise NotFoundError("Team not found")
        return self._to_response(team)

    async def delete_team(
        self,
        db: AsyncSession,
        team_id: int,
    ) -> None:
        """팀을 삭제합니다. 소속 회원의 팀은 해제됩니다.

        Delete a team; its members are left without a team.

        Raises:
            NotFoundError: 팀을 찾을 수 없을 때 (Team not found)
        """
        deleted: bool = await team_repository.delete_by_id(db, team_id)
        if not deleted:
            raise NotFoundError("Team not found")


# 싱글턴 인스턴스 — Singleton instance
team_service: TeamService = TeamService()
