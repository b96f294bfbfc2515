"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides generic save, read, count, delete, sorting and paging operations.
Repositories only flush; committing is left to the caller.

Usage:
    class TeamRepository(BaseRepository[Team]):
        def __init__(self) -> None:
            super().__init__(Team)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.utils.pagination import Direction, Page, PageRequest, Slice, Sort, paginate, slice_query

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations
    for a single entity type with an integer primary key ``id``.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    def apply_sort(self, query: Select, sort: Sort | None) -> Select:
        """정렬 조건을 ORDER BY 절로 변환합니다.

        Translate a Sort into ORDER BY clauses on this repository's model.

        Args:
            query: 정렬을 적용할 쿼리 (Query to order)
            sort: 정렬 조건, None이면 그대로 반환 (Sort, or None for unsorted)

        Returns:
            Select: 정렬이 적용된 쿼리 (Ordered query)

        Raises:
            ValueError: 모델에 없는 속성 (Property is not a mapped column of the model)
        """
        if sort is None or not sort.is_sorted:
            return query

        columns = inspect(self.model).columns
        for order in sort.orders:
            if order.property not in columns:
                raise ValueError(
                    f"No property '{order.property}' found for type {self.model.__name__}"
                )
            column = getattr(self.model, order.property)
            query = query.order_by(column.desc() if order.direction == Direction.DESC else column.asc())
        return query

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드의 ID (ID of the record to retrieve)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = select(self.model).where(self.model.id == record_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def find_all(
        self,
        db: AsyncSession,
        sort: Sort | None = None,
    ) -> Sequence[ModelType]:
        """모든 레코드를 조회합니다.

        Retrieve all records, optionally ordered.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            sort: 정렬 조건 (Optional sort)

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록 (List of records)
        """
        query: Select = self.apply_sort(select(self.model), sort)
        result = await db.execute(query)
        return result.scalars().all()

    async def count(self, db: AsyncSession) -> int:
        """전체 레코드 수를 반환합니다 (Total number of records)."""
        query: Select = select(func.count()).select_from(self.model)
        return (await db.execute(query)).scalar() or 0

    async def exists_by_id(self, db: AsyncSession, record_id: int) -> bool:
        """ID에 해당하는 레코드 존재 여부 (Whether a record with this ID exists)."""
        query: Select = select(func.count()).select_from(self.model).where(self.model.id == record_id)
        count: int = (await db.execute(query)).scalar() or 0
        return count > 0

    async def find_page(
        self,
        db: AsyncSession,
        query: Select,
        page_request: PageRequest,
        count_query: Select | None = None,
    ) -> Page:
        """정렬과 페이지네이션을 적용하여 조회합니다.

        Apply the request's sort to ``query`` and return one Page.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            query: 기본 SELECT 쿼리 (Base SELECT query)
            page_request: 페이지 요청 (Page index, size and sort)
            count_query: 별도 카운트 쿼리 (Optional dedicated count query)

        Returns:
            Page: 페이지 결과 (Page with total count)
        """
        query = self.apply_sort(query, page_request.sort)
        return await paginate(db, query, page_request, count_query)

    async def find_slice(
        self,
        db: AsyncSession,
        query: Select,
        page_request: PageRequest,
    ) -> Slice:
        """카운트 쿼리 없이 한 페이지를 조회합니다 (One page, no count query)."""
        query = self.apply_sort(query, page_request.sort)
        return await slice_query(db, query, page_request)

    async def save(
        self,
        db: AsyncSession,
        entity: ModelType,
    ) -> ModelType:
        """엔티티를 세션에 추가하고 flush 합니다.

        Add the entity to the session and flush so its generated ID is populated.
        Saving an entity that is already tracked is a no-op apart from the flush.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            entity: 저장할 엔티티 (Entity to persist)

        Returns:
            ModelType: 저장된 엔티티 (The same, now persistent, entity)
        """
        db.add(entity)
        await db.flush()
        return entity

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """새 레코드를 생성합니다.

        Create a new record in the database from a dict of column values.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 데이터 딕셔너리
                      (Dictionary of data for the new record)

        Returns:
            ModelType: 생성된 레코드 (The created record)
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        record_id: int,
        update_data: dict[str, Any],
    ) -> ModelType | None:
        """기존 레코드를 업데이트합니다.

        Update an existing record by its ID. Changes are written by the
        session's dirty checking on flush.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 업데이트할 레코드의 ID (ID of the record to update)
            update_data: 업데이트할 필드와 값의 딕셔너리
                         (Dictionary of fields and values to update)

        Returns:
            ModelType | None: 업데이트된 레코드 또는 None (Updated record or None)
        """
        # 먼저 레코드 존재 여부 확인 — First verify record exists
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return None

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await db.flush()
        return db_obj

    async def delete(
        self,
        db: AsyncSession,
        entity: ModelType,
    ) -> None:
        """엔티티를 삭제합니다 (Delete the given entity and flush)."""
        await db.delete(entity)
        await db.flush()

    async def delete_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> bool:
        """레코드를 삭제합니다.

        Delete a record by its ID.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 삭제할 레코드의 ID (ID of the record to delete)

        Returns:
            bool: 삭제 성공 여부 (Whether the deletion was successful)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return False

        await self.delete(db, db_obj)
        return True
