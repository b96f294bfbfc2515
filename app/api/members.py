"""회원 라우터 — 회원 CRUD 및 조회 엔드포인트.

Member Router — CRUD, search, projection, paging and bulk update endpoints.
Fixed paths are declared before ``/{member_id}`` so they are matched first.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.schemas.common import CountResponse, PageResponse, SliceResponse
from app.schemas.member import (
    BulkAgePlusRequest,
    BulkAgePlusResponse,
    MemberCreate,
    MemberDto,
    MemberResponse,
    MemberUpdate,
)
from app.services.member_service import member_service

router: APIRouter = APIRouter()


@router.get("/", response_model=list[MemberResponse])
async def list_members(
    db: Annotated[AsyncSession, Depends(get_db)],
    username: Annotated[str | None, Query(description="회원 이름 필터")] = None,
) -> list[MemberResponse]:
    """회원 목록을 팀 정보와 함께 조회합니다.

    List members with their team, optionally filtered by username.
    """
    return await member_service.list_members(db, username)


@router.get("/count", response_model=CountResponse)
async def count_members(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CountResponse:
    """전체 회원 수를 조회합니다 (Total number of members)."""
    return CountResponse(count=await member_service.count_members(db))


@router.get("/search", response_model=list[MemberResponse])
async def search_members(
    db: Annotated[AsyncSession, Depends(get_db)],
    username: Annotated[str, Query(description="회원 이름")],
    age_gt: Annotated[int, Query(description="나이 하한 (미포함)")],
) -> list[MemberResponse]:
    """이름이 같고 나이가 기준보다 많은 회원을 조회합니다.

    Members with this username and an age strictly greater than ``age_gt``.
    """
    return await member_service.search_members(db, username, age_gt)


@router.get("/dto", response_model=list[MemberDto])
async def list_member_dtos(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[MemberDto]:
    """회원-팀 조인 프로젝션 목록 (Member/team projections)."""
    return await member_service.list_member_dtos(db)


@router.get("/page", response_model=PageResponse)
async def page_members_by_age(
    db: Annotated[AsyncSession, Depends(get_db)],
    age: Annotated[int, Query(description="나이")],
    page: Annotated[int, Query(ge=0, description="페이지 번호 (0부터)")] = 0,
    size: Annotated[int, Query(ge=1, description="페이지 크기")] = settings.DEFAULT_PAGE_SIZE,
    sort: Annotated[list[str] | None, Query(description="정렬: property[,asc|desc]")] = None,
) -> PageResponse:
    """나이로 회원을 페이지 조회합니다.

    Page of members with the given age, with total-count metadata.
    """
    return await member_service.page_by_age(db, age, page, size, sort)


@router.get("/slice", response_model=SliceResponse)
async def slice_members_by_age(
    db: Annotated[AsyncSession, Depends(get_db)],
    age: Annotated[int, Query(description="나이")],
    page: Annotated[int, Query(ge=0, description="페이지 번호 (0부터)")] = 0,
    size: Annotated[int, Query(ge=1, description="페이지 크기")] = settings.DEFAULT_PAGE_SIZE,
    sort: Annotated[list[str] | None, Query(description="정렬: property[,asc|desc]")] = None,
) -> SliceResponse:
    """나이로 회원을 카운트 없이 조회합니다 (Slice without total count)."""
    return await member_service.slice_by_age(db, age, page, size, sort)


@router.get("/by-username/{username}", response_model=MemberResponse)
async def get_member_by_username(
    username: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MemberResponse:
    """이름으로 단일 회원을 조회합니다.

    Retrieve the single member with this username (404 when absent, 409 when
    several members share it).
    """
    return await member_service.get_member_by_username(db, username)


@router.post("/bulk-age-plus", response_model=BulkAgePlusResponse)
async def bulk_age_plus(
    data: BulkAgePlusRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> BulkAgePlusResponse:
    """기준 나이 이상인 회원의 나이를 1 증가시킵니다.

    Increment the age of every member at or above the threshold.
    """
    updated: int = await member_service.bulk_age_plus(db, data.age)
    await db.commit()
    return BulkAgePlusResponse(updated=updated)


@router.get("/{member_id}", response_model=MemberResponse)
async def get_member(
    member_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MemberResponse:
    """회원 상세 정보를 조회합니다 (Member detail with team)."""
    return await member_service.get_member(db, member_id)


@router.post("/", response_model=MemberResponse, status_code=201)
async def create_member(
    data: MemberCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MemberResponse:
    """새 회원을 생성합니다.

    Create a new member, optionally in an existing team.
    """
    result: MemberResponse = await member_service.create_member(db, data)
    await db.commit()
    return result


@router.put("/{member_id}", response_model=MemberResponse)
async def update_member(
    member_id: int,
    data: MemberUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MemberResponse:
    """회원 정보를 수정합니다.

    Update an existing member.
    """
    result: MemberResponse = await member_service.update_member(db, member_id, data)
    await db.commit()
    return result


@router.delete("/{member_id}", status_code=204)
async def delete_member(
    member_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """회원을 삭제합니다.

    Delete a member by its ID.
    """
    await member_service.delete_member(db, member_id)
    await db.commit()
