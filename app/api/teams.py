"""팀 라우터 — 팀 CRUD 엔드포인트.

Team Router — CRUD endpoints for team management.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.team import TeamCreate, TeamDetailResponse, TeamResponse, TeamUpdate
from app.services.team_service import team_service

router: APIRouter = APIRouter()


@router.get("/", response_model=list[TeamResponse])
async def list_teams(
    db: Annotated[AsyncSession, Depends(get_db)],
    name: Annotated[str | None, Query(description="팀 이름 필터")] = None,
) -> list[TeamResponse]:
    """팀 목록을 조회합니다.

    List all teams, optionally filtered by exact name.
    """
    return await team_service.list_teams(db, name)


@router.get("/{team_id}", response_model=TeamDetailResponse)
async def get_team(
    team_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TeamDetailResponse:
    """팀 상세 정보를 조회합니다 (소속 회원 포함).

    Retrieve team detail with its members.
    """
    return await team_service.get_team(db, team_id)


@router.post("/", response_model=TeamResponse, status_code=201)
async def create_team(
    data: TeamCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TeamResponse:
    """새 팀을 생성합니다 (Create a new team)."""
    result: TeamResponse = await team_service.create_team(db, data)
    await db.commit()
    return result


@router.put("/{team_id}", response_model=TeamResponse)
async def update_team(
    team_id: int,
    data: TeamUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TeamResponse:
    """팀 정보를 수정합니다 (Update an existing team)."""
    result: TeamResponse = await team_service.update_team(db, team_id, data)
    await db.commit()
    return result


@router.delete("/{team_id}", status_code=204)
async def delete_team(
    team_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """팀을 삭제합니다. 소속 회원은 팀 없음으로 남습니다.

    Delete a team; its members remain without a team.
    """
    await team_service.delete_team(db, team_id)
    await db.commit()
