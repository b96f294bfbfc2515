"""회원 레포지토리 — 회원 조회/수정 쿼리.

Member Repository — Query methods for members.
Extends BaseRepository with filtered lookups, hand-written queries,
DTO projections, paging, eager loading of the team, read-only snapshots,
pessimistic locking and a bulk age update.
"""

from typing import Sequence

from sqlalchemy import Select, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload
from sqlalchemy.orm.attributes import set_committed_value

from app.models.member import Member
from app.models.team import Team
from app.repositories.base import BaseRepository
from app.schemas.member import MemberDto
from app.utils.optional import OptionalResult
from app.utils.pagination import Page, PageRequest, Slice, Sort


class MemberRepository(BaseRepository[Member]):
    """회원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the members table.
    """

    def __init__(self) -> None:
        """MemberRepository를 초기화합니다.

        Initialize the MemberRepository with the Member model.
        """
        super().__init__(Member)

    async def find_by_username_and_age_greater_than(
        self,
        db: AsyncSession,
        username: str,
        age: int,
    ) -> list[Member]:
        """이름이 같고 나이가 기준보다 많은 회원을 조회합니다.

        Members with exactly this username and an age strictly greater than ``age``.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            username: 회원 이름 (Exact username)
            age: 나이 하한, 미포함 (Exclusive lower bound on age)

        Returns:
            list[Member]: 회원 목록, 없으면 빈 목록 (Matches, or an empty list)
        """
        query: Select = select(Member).where(Member.username == username, Member.age > age)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_user(
        self,
        db: AsyncSession,
        username: str,
        age: int,
    ) -> list[Member]:
        """이름과 나이가 모두 일치하는 회원을 조회합니다.

        Hand-written query with named bind parameters; exact match on both fields.
        """
        query: Select = (
            select(Member)
            .where(Member.username == username)
            .where(Member.age == age)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_member_dto(self, db: AsyncSession) -> list[MemberDto]:
        """회원-팀 조인 결과를 DTO로 조회합니다.

        Inner join Member -> Team and project each row into a MemberDto.
        Members without a team are not included.

        Returns:
            list[MemberDto]: (id, username, team_name) 프로젝션 목록
                             (One projection per joined row)
        """
        query: Select = (
            select(Member.id, Member.username, Team.name.label("team_name"))
            .join(Member.team)
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return [
            MemberDto(id=row.id, username=row.username, team_name=row.team_name)
            for row in result.all()
        ]

    async def find_list_by_username(self, db: AsyncSession, username: str) -> list[Member]:
        """이름으로 회원 목록을 조회합니다. 결과가 없으면 빈 목록 (never None)."""
        result = await db.execute(select(Member).where(Member.username == username))
        return list(result.scalars().all())

    async def find_member_by_username(self, db: AsyncSession, username: str) -> Member | None:
        """이름으로 단건 조회합니다.

        Single-result lookup. Returns None when nothing matches; raises
        ``sqlalchemy.exc.MultipleResultsFound`` when more than one row matches.
        """
        result = await db.execute(select(Member).where(Member.username == username))
        return result.scalar_one_or_none()

    async def find_optional_by_username(
        self,
        db: AsyncSession,
        username: str,
    ) -> OptionalResult[Member]:
        """이름으로 단건 조회하여 OptionalResult로 감싸 반환합니다.

        Same as find_member_by_username, wrapped in an explicit container.
        """
        return OptionalResult.of(await self.find_member_by_username(db, username))

    async def find_by_age(
        self,
        db: AsyncSession,
        age: int,
        page_request: PageRequest,
    ) -> Page:
        """나이로 회원을 페이지 단위로 조회합니다.

        Page of members with the given age. The content query left-joins the
        team; the count query skips the join since an outer many-to-one join
        cannot change the row count.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            age: 나이 (Exact age)
            page_request: 페이지 요청 (Page index, size and sort)

        Returns:
            Page: 회원 페이지 (Page of Member)
        """
        query: Select = select(Member).outerjoin(Member.team).where(Member.age == age)
        count_query: Select = select(func.count(Member.id)).where(Member.age == age)
        return await self.find_page(db, query, page_request, count_query)

    async def find_slice_by_age(
        self,
        db: AsyncSession,
        age: int,
        page_request: PageRequest,
    ) -> Slice:
        """나이로 회원을 카운트 없이 조회합니다 (Slice, no count query)."""
        query: Select = select(Member).where(Member.age == age)
        return await self.find_slice(db, query, page_request)

    async def bulk_age_plus(self, db: AsyncSession, age: int) -> int:
        """기준 나이 이상인 회원의 나이를 한 번에 1 증가시킵니다.

        Increment the age of every member with ``age >= age`` in a single
        UPDATE statement. Pending changes are flushed first; afterwards the
        session is cleared so later reads load the updated rows instead of
        stale in-memory instances.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            age: 나이 기준, 포함 (Inclusive age threshold)

        Returns:
            int: 변경된 행 수 (Number of updated rows)
        """
        await db.flush()
        result = await db.execute(
            update(Member)
            .where(Member.age >= age)
            .values(age=Member.age + 1)
            .execution_options(synchronize_session=False)
        )
        # 벌크 연산은 영속성 컨텍스트를 거치지 않음 — bulk UPDATE bypasses the identity map
        db.expunge_all()
        return result.rowcount

    async def find_member_fetch_join(self, db: AsyncSession) -> list[Member]:
        """팀을 페치 조인으로 함께 조회합니다.

        Load all members with their team in the same statement (LEFT OUTER JOIN).
        """
        query: Select = select(Member).options(joinedload(Member.team)).order_by(Member.id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_all(
        self,
        db: AsyncSession,
        sort: Sort | None = None,
    ) -> Sequence[Member]:
        """모든 회원을 팀과 함께 조회합니다 (All members, team eagerly loaded)."""
        query: Select = self.apply_sort(select(Member).options(joinedload(Member.team)), sort)
        result = await db.execute(query)
        return result.scalars().all()

    async def find_entity_graph_by_username(self, db: AsyncSession, username: str) -> list[Member]:
        """이름으로 회원을 조회하면서 팀을 즉시 로딩합니다.

        Members with this username, team eagerly loaded.
        """
        query: Select = (
            select(Member)
            .options(joinedload(Member.team))
            .where(Member.username == username)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_detail(self, db: AsyncSession, member_id: int) -> Member | None:
        """회원 상세 정보를 팀과 함께 조회합니다 (Single member with team loaded)."""
        query: Select = select(Member).options(joinedload(Member.team)).where(Member.id == member_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def find_read_only_by_id(self, db: AsyncSession, member_id: int) -> Member | None:
        """변경 감지 대상이 아닌 스냅샷으로 회원을 조회합니다.

        Load a member (with its team) and return a session-free copy of it.
        Mutating the copy or its team is never flushed. The instance the
        session tracks, if any, stays tracked.

        Returns:
            Member | None: 세션에 속하지 않은 회원 사본 또는 None (Untracked copy, or None)
        """
        member: Member | None = await self.get_detail(db, member_id)
        if member is None:
            return None

        snapshot = Member(member.username, member.age)
        snapshot.id = member.id
        snapshot.team_id = member.team_id
        team: Team | None = None
        if member.team is not None:
            team = Team(name=member.team.name)
            team.id = member.team.id
        # 이벤트 없이 설정 — no backref into the tracked Team.members
        set_committed_value(snapshot, "team", team)
        return snapshot

    async def find_lock_by_username(self, db: AsyncSession, username: str) -> list[Member]:
        """이름으로 회원을 조회하면서 비관적 쓰기 락을 획득합니다.

        SELECT ... FOR UPDATE: matching rows stay locked against concurrent
        writers until the enclosing transaction ends.
        """
        query: Select = select(Member).where(Member.username == username).with_for_update()
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
member_repository: MemberRepository = MemberRepository()
