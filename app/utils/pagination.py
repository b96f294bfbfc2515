"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
Provides the paging request (PageRequest + Sort), result containers
(Page with total count, Slice without it) and the functions that execute
a Select statement into either of them.

Page numbers are zero-based.
"""

import math
from enum import Enum
from typing import Any, Callable, Sequence

from pydantic import BaseModel, Field
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession


class Direction(str, Enum):
    """정렬 방향 (Sort direction)."""

    ASC = "asc"
    DESC = "desc"


class Order(BaseModel):
    """단일 정렬 조건 — 속성 이름과 방향.

    Single ordering clause: a mapped property name and its direction.
    """

    property: str
    direction: Direction = Direction.ASC


class Sort(BaseModel):
    """정렬 조건 목록.

    Ordered list of sort clauses. An empty Sort means "unsorted".

    Usage:
        Sort.by(Direction.DESC, "username")
        Sort.parse(["username,desc", "age"])
    """

    orders: list[Order] = Field(default_factory=list)

    @classmethod
    def by(cls, direction: Direction, *properties: str) -> "Sort":
        """같은 방향으로 여러 속성을 정렬합니다 (Sort several properties in one direction)."""
        return cls(orders=[Order(property=p, direction=direction) for p in properties])

    @classmethod
    def by_properties(cls, *properties: str) -> "Sort":
        """오름차순 정렬 (Ascending sort on the given properties)."""
        return cls.by(Direction.ASC, *properties)

    @classmethod
    def unsorted(cls) -> "Sort":
        return cls()

    @classmethod
    def parse(cls, values: str | Sequence[str] | None) -> "Sort":
        """HTTP 쿼리 문자열 형식의 정렬 조건을 파싱합니다.

        Parse ``property[,asc|desc]`` strings (one per ``sort`` query param).
        A single string is treated as one expression.

        Raises:
            ValueError: 빈 속성 또는 알 수 없는 방향 (Empty property or unknown direction)
        """
        orders: list[Order] = []
        if isinstance(values, str):
            values = [values]
        for value in values or []:
            prop, _, direction = value.partition(",")
            prop = prop.strip()
            if not prop:
                raise ValueError(f"Invalid sort expression: {value!r}")
            direction = direction.strip().lower() or Direction.ASC.value
            try:
                orders.append(Order(property=prop, direction=Direction(direction)))
            except ValueError:
                raise ValueError(f"Invalid sort direction: {direction!r}") from None
        return cls(orders=orders)

    @property
    def is_sorted(self) -> bool:
        return bool(self.orders)


class PageRequest(BaseModel):
    """페이지 요청 — 페이지 번호, 크기, 정렬.

    Paging request (the query descriptor for paged reads).

    Attributes:
        page: 페이지 번호, 0부터 시작 (Zero-based page index)
        size: 페이지 크기 (Page size, at least 1)
        sort: 정렬 조건 (Ordering applied before OFFSET/LIMIT)
    """

    page: int = Field(ge=0)
    size: int = Field(ge=1)
    sort: Sort = Field(default_factory=Sort)

    @classmethod
    def of(cls, page: int, size: int, sort: Sort | None = None) -> "PageRequest":
        """페이지 요청을 생성합니다. 잘못된 값이면 ValueError (ValidationError).

        Build a page request; invalid values raise pydantic's ValidationError,
        which is a ValueError.
        """
        return cls(page=page, size=size, sort=sort or Sort())

    @property
    def offset(self) -> int:
        return self.page * self.size

    def next(self) -> "PageRequest":
        return PageRequest(page=self.page + 1, size=self.size, sort=self.sort)


class Slice(BaseModel):
    """카운트 쿼리 없는 페이지 결과.

    A page of results without a total count. ``has_next`` is known because
    one extra row is fetched beyond the page size.

    Attributes:
        content: 현재 페이지 항목 (Items of this slice)
        number: 페이지 번호, 0부터 시작 (Zero-based page index)
        size: 요청한 페이지 크기 (Requested page size)
        has_next: 다음 페이지 존재 여부 (Whether another slice follows)
        sort: 적용된 정렬 (Sort applied)
    """

    content: list[Any]
    number: int
    size: int
    has_next: bool
    sort: Sort = Field(default_factory=Sort)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def is_first(self) -> bool:
        return self.number == 0

    @property
    def is_last(self) -> bool:
        return not self.has_next

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    def map(self, converter: Callable[[Any], Any]) -> "Slice":
        """항목을 변환한 새 Slice를 반환합니다 (Convert content, keep metadata)."""
        return Slice(
            content=[converter(item) for item in self.content],
            number=self.number,
            size=self.size,
            has_next=self.has_next,
            sort=self.sort,
        )


class Page(BaseModel):
    """페이지네이션 결과 모델.

    Pagination result with total-count metadata.

    Attributes:
        content: 현재 페이지 항목 목록 (Items for the current page)
        total_elements: 전체 항목 수 (Total count across all pages)
        number: 현재 페이지 번호, 0부터 시작 (Current page number, 0-based)
        size: 페이지당 항목 수 (Items per page)
        sort: 적용된 정렬 (Sort applied)
    """

    content: list[Any]
    total_elements: int
    number: int
    size: int
    sort: Sort = Field(default_factory=Sort)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def is_first(self) -> bool:
        return self.number == 0

    @property
    def is_last(self) -> bool:
        return not self.has_next

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    def map(self, converter: Callable[[Any], Any]) -> "Page":
        """항목을 변환한 새 Page를 반환합니다.

        Return a new Page whose content is ``converter`` applied to each item.
        Paging metadata (total, number, size, sort) is preserved, e.g. to turn
        a Page of entities into a Page of DTOs.
        """
        return Page(
            content=[converter(item) for item in self.content],
            total_elements=self.total_elements,
            number=self.number,
            size=self.size,
            sort=self.sort,
        )


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    page_request: PageRequest,
    count_query: Select[Any] | None = None,
) -> Page:
    """SQLAlchemy 쿼리에 대한 페이지네이션을 수행합니다.

    Execute a paginated SQLAlchemy query, returning a Page.
    Runs two queries: one for the total count and one for the actual page
    of results with OFFSET/LIMIT. Ordering must already be applied to
    ``query``.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: 내용 조회 쿼리 (Content query, already ordered)
        page_request: 페이지 요청 (Page index, size and sort)
        count_query: 별도 카운트 쿼리, None이면 서브쿼리로 계산
                     (Dedicated count query; None counts via subquery of ``query``)

    Returns:
        Page: 페이지 결과 (Page of results with total count)
    """
    # 전체 개수 조회 — 별도 쿼리가 없으면 서브쿼리로 감싸서 COUNT 실행
    if count_query is None:
        count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total: int = (await db.execute(count_query)).scalar() or 0

    # 페이지 항목 조회 — OFFSET/LIMIT 적용 (Fetch page items with offset/limit)
    result = await db.execute(query.offset(page_request.offset).limit(page_request.size))
    items: Sequence[Any] = result.scalars().all()

    return Page(
        content=list(items),
        total_elements=total,
        number=page_request.page,
        size=page_request.size,
        sort=page_request.sort,
    )


async def slice_query(
    db: AsyncSession,
    query: Select[Any],
    page_request: PageRequest,
) -> Slice:
    """카운트 없이 size + 1 건을 조회하여 Slice를 만듭니다.

    Execute ``query`` for one page without a count query. One extra row
    is requested to find out whether a next slice exists.
    """
    result = await db.execute(query.offset(page_request.offset).limit(page_request.size + 1))
    items: list[Any] = list(result.scalars().all())
    has_next: bool = len(items) > page_request.size

    return Slice(
        content=items[: page_request.size],
        number=page_request.page,
        size=page_request.size,
        has_next=has_next,
        sort=page_request.sort,
    )
