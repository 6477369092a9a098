"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides generic Create, Read, Update, Delete operations.

Updates and deletes are issued as single conditional statements
(``UPDATE/DELETE ... WHERE id = :id``) and report the affected row count,
so callers never need a separate existence check before writing.
Bulk statements do not synchronize the session; reads reload rows from the
database instead.

Usage:
    class CreatorRepository(BaseRepository[Creator]):
        def __init__(self) -> None:
            super().__init__(Creator)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.database import Base

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its identifier.
        Always reloads attributes from the database so that rows changed by a
        bulk UPDATE in the same session are returned with fresh values.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드 ID (Identifier of the record to retrieve)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = (
            select(self.model)
            .where(self.model.id == record_id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
        filters: dict[str, Any] | None = None,
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """조건에 맞는 모든 레코드를 조회합니다.

        Retrieve all records matching the given equality filters.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 추가 필터 딕셔너리 {'속성명': 값}
                     (Additional filter dict {'attribute_name': value})
            order_by: 정렬 기준 컬럼, 기본은 ID (Column to order by, defaults to id)

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록 (List of matching records)
        """
        query: Select = select(self.model)

        # 동적 필터 적용 — Dynamic filter application
        if filters:
            for attr_name, value in filters.items():
                if hasattr(self.model, attr_name) and value is not None:
                    query = query.where(getattr(self.model, attr_name) == value)

        query = query.order_by(order_by if order_by is not None else self.model.id)
        query = query.execution_options(populate_existing=True)

        result = await db.execute(query)
        return result.scalars().all()

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """새 레코드를 생성합니다.

        Create a new record; the identifier is assigned on flush.

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

    async def update_if_exists(
        self,
        db: AsyncSession,
        record_id: int,
        update_data: dict[str, Any],
        *criteria: Any,
    ) -> int:
        """존재하는 레코드만 한 번의 UPDATE 문으로 수정합니다.

        Overwrite the given fields of an existing record with a single
        conditional UPDATE statement.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 수정할 레코드 ID (Identifier of the record to update)
            update_data: 덮어쓸 속성과 값의 딕셔너리
                         (Dictionary of attributes and values to write)
            criteria: 추가 WHERE 조건 (Extra WHERE conditions the row must also meet)

        Returns:
            int: 영향받은 행 수, 0이면 레코드 없음 또는 조건 불충족
                 (Affected row count; 0 means no such record or a failed criterion)
        """
        values: dict[Any, Any] = {
            getattr(self.model, attr_name): value
            for attr_name, value in update_data.items()
            if hasattr(self.model, attr_name)
        }
        stmt = (
            update(self.model)
            .where(self.model.id == record_id, *criteria)
            .values(values)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        return result.rowcount

    async def delete_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> int:
        """레코드를 삭제합니다. 없는 ID는 아무 작업도 하지 않습니다.

        Delete a record by its identifier. Deleting a missing id is a no-op.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 삭제할 레코드 ID (Identifier of the record to delete)

        Returns:
            int: 삭제된 행 수 (Number of deleted rows, 0 or 1)
        """
        stmt = (
            delete(self.model)
            .where(self.model.id == record_id)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        return result.rowcount

    async def exists(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
    ) -> bool:
        """주어진 조건에 일치하는 레코드가 존재하는지 확인합니다.

        Check if a record matching the given filters exists.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 검색 조건 딕셔너리 (Filter criteria dictionary)

        Returns:
            bool: 레코드 존재 여부 (Whether a matching record exists)
        """
        query: Select = select(func.count()).select_from(self.model)
        for attr_name, value in filters.items():
            if hasattr(self.model, attr_name):
                query = query.where(getattr(self.model, attr_name) == value)

        count: int = (await db.execute(query)).scalar() or 0
        return count > 0
