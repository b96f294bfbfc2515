"""회원 서비스 — 회원 CRUD 및 조회 비즈니스 로직.

Member Service — Business logic for member CRUD, searches, paging and
the bulk age update. Converts ORM models into response schemas and maps
invalid input to HTTP errors.
"""

from sqlalchemy import inspect
from sqlalchemy.exc import MultipleResultsFound
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.member import Member
from app.models.team import Team
from app.repositories.member_repository import member_repository
from app.repositories.team_repository import team_repository
from app.schemas.common import PageResponse, SliceResponse
from app.schemas.member import MemberCreate, MemberDto, MemberResponse, MemberUpdate
from app.utils.exceptions import BadRequestError, ConflictError, NotFoundError
from app.utils.pagination import Page, PageRequest, Slice, Sort


class MemberService:
    """회원 관련 비즈니스 로직을 처리하는 서비스.

    Service handling member business logic.
    """

    def _to_response(self, member: Member) -> MemberResponse:
        """회원 모델을 응답 스키마로 변환합니다.

        Convert a Member to a MemberResponse. The team name is included only
        when the relationship is already loaded, so no extra query is issued.
        """
        team_name: str | None = None
        if "team" not in inspect(member).unloaded and member.team is not None:
            team_name = member.team.name
        return MemberResponse(
            id=member.id,
            username=member.username,
            age=member.age,
            team_id=member.team_id,
            team_name=team_name,
        )

    def _page_request(self, page: int, size: int, sort: list[str] | None) -> PageRequest:
        """쿼리 파라미터로부터 PageRequest를 만듭니다.

        Build a PageRequest from query parameters.

        Raises:
            BadRequestError: 잘못된 페이지/크기/정렬 (Invalid page, size or sort)
        """
        if size > settings.MAX_PAGE_SIZE:
            raise BadRequestError(f"Page size must not exceed {settings.MAX_PAGE_SIZE}")
        try:
            return PageRequest.of(page, size, Sort.parse(sort))
        except ValueError as exc:
            raise BadRequestError(str(exc)) from exc

    async def _get_team(self, db: AsyncSession, team_id: int) -> Team:
        team: Team | None = await team_repository.get_by_id(db, team_id)
        if team is None:
            raise BadRequestError(f"Team {team_id} does not exist")
        return team

    async def list_members(
        self,
        db: AsyncSession,
        username: str | None = None,
    ) -> list[MemberResponse]:
        """회원 목록을 팀과 함께 조회합니다.

        List members with their team eagerly loaded, optionally filtered by username.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            username: 이름 필터 (Optional exact username)

        Returns:
            list[MemberResponse]: 회원 목록 (List of member responses)
        """
        if username is not None:
            members = await member_repository.find_entity_graph_by_username(db, username)
        else:
            members = await member_repository.find_all(db, Sort.by_properties("id"))
        return [self._to_response(m) for m in members]

    async def count_members(self, db: AsyncSession) -> int:
        """전체 회원 수 (Total number of members)."""
        return await member_repository.count(db)

    async def get_member(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> MemberResponse:
        """회원 상세 정보를 조회합니다.

        Retrieve a single member with its team.

        Raises:
            NotFoundError: 회원을 찾을 수 없을 때 (Member not found)
        """
        member: Member | None = await member_repository.get_detail(db, member_id)
        if member is None:
            raise NotFoundError("Member not found")
        return self._to_response(member)

    async def get_member_by_username(
        self,
        db: AsyncSession,
        username: str,
    ) -> MemberResponse:
        """이름으로 단일 회원을 조회합니다.

        Retrieve the single member with this username.

        Raises:
            NotFoundError: 일치하는 회원이 없을 때 (No member with this username)
            ConflictError: 같은 이름의 회원이 여럿일 때 (Username shared by several members)
        """
        try:
            result = await member_repository.find_optional_by_username(db, username)
        except MultipleResultsFound:
            raise ConflictError(f"More than one member named {username!r}") from None
        member: Member = result.or_else_raise(NotFoundError("Member not found"))
        return self._to_response(member)

    async def search_members(
        self,
        db: AsyncSession,
        username: str,
        age_gt: int,
    ) -> list[MemberResponse]:
        """이름이 같고 나이가 기준보다 많은 회원을 조회합니다.

        Members with this username and an age strictly greater than ``age_gt``.
        """
        members = await member_repository.find_by_username_and_age_greater_than(db, username, age_gt)
        return [self._to_response(m) for m in members]

    async def list_member_dtos(self, db: AsyncSession) -> list[MemberDto]:
        """팀에 소속된 회원의 DTO 목록 (Projections of members that have a team)."""
        return await member_repository.find_member_dto(db)

    async def page_by_age(
        self,
        db: AsyncSession,
        age: int,
        page: int = 0,
        size: int = settings.DEFAULT_PAGE_SIZE,
        sort: list[str] | None = None,
    ) -> PageResponse:
        """나이로 회원을 페이지 조회합니다.

        Page of members with the given age.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            age: 나이 (Exact age)
            page: 페이지 번호, 0부터 시작 (Zero-based page index)
            size: 페이지 크기 (Page size)
            sort: 정렬 조건 ``property[,asc|desc]`` (Sort expressions)

        Returns:
            PageResponse: 페이지 응답 (Page of member responses)

        Raises:
            BadRequestError: 잘못된 페이지 요청 (Invalid paging or sort input)
        """
        page_request: PageRequest = self._page_request(page, size, sort)
        try:
            result: Page = await member_repository.find_by_age(db, age, page_request)
        except ValueError as exc:
            raise BadRequestError(str(exc)) from exc

        mapped: Page = result.map(self._to_response)
        return PageResponse(
            content=mapped.content,
            total_elements=mapped.total_elements,
            total_pages=mapped.total_pages,
            number=mapped.number,
            size=mapped.size,
            first=mapped.is_first,
            last=mapped.is_last,
            has_next=mapped.has_next,
        )

    async def slice_by_age(
        self,
        db: AsyncSession,
        age: int,
        page: int = 0,
        size: int = settings.DEFAULT_PAGE_SIZE,
        sort: list[str] | None = None,
    ) -> SliceResponse:
        """나이로 회원을 카운트 없이 조회합니다 (Slice of members with the given age)."""
        page_request: PageRequest = self._page_request(page, size, sort)
        try:
            result: Slice = await member_repository.find_slice_by_age(db, age, page_request)
        except ValueError as exc:
            raise BadRequestError(str(exc)) from exc

        mapped: Slice = result.map(self._to_response)
        return SliceResponse(
            content=mapped.content,
            number=mapped.number,
            size=mapped.size,
            first=mapped.is_first,
            last=mapped.is_last,
            has_next=mapped.has_next,
        )

    async def create_member(
        self,
        db: AsyncSession,
        data: MemberCreate,
    ) -> MemberResponse:
        """새 회원을 생성합니다.

        Create a new member, optionally assigned to an existing team.

        Raises:
            BadRequestError: 존재하지 않는 팀 (Referenced team does not exist)
        """
        team: Team | None = None
        if data.team_id is not None:
            team = await self._get_team(db, data.team_id)

        member: Member = await member_repository.save(
            db, Member(username=data.username, age=data.age, team=team)
        )
        return self._to_response(member)

    async def update_member(
        self,
        db: AsyncSession,
        member_id: int,
        data: MemberUpdate,
    ) -> MemberResponse:
        """회원 정보를 수정합니다.

        Update a member. Only fields that were sent are changed; the write
        happens through the session's dirty checking on flush.

        Raises:
            NotFoundError: 회원을 찾을 수 없을 때 (Member not found)
            BadRequestError: 존재하지 않는 팀 (Referenced team does not exist)
        """
        member: Member | None = await member_repository.get_detail(db, member_id)
        if member is None:
            raise NotFoundError("Member not found")

        update_data: dict = data.model_dump(exclude_unset=True)
        if update_data.get("username") is not None:
            member.username = update_data["username"]
        if update_data.get("age") is not None:
            member.age = update_data["age"]
        if "team_id" in update_data:
            team_id: int | None = update_data["team_id"]
            member.change_team(await self._get_team(db, team_id) if team_id is not None else None)

        await db.flush()
        return self._to_response(member)

    async def delete_member(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> None:
        """회원을 삭제합니다.

        Raises:
            NotFoundError: 회원을 찾을 수 없을 때 (Member not found)
        """
        deleted: bool = await member_repository.delete_by_id(db, member_id)
        if not deleted:
            raise NotFoundError("Member not found")

    async def bulk_age_plus(self, db: AsyncSession, age: int) -> int:
        """기준 나이 이상인 회원의 나이를 1 증가시킵니다 (Returns updated row count)."""
        return await member_repository.bulk_age_plus(db, age)


# 싱글턴 인스턴스 — Singleton instance
member_service: MemberService = MemberService()
