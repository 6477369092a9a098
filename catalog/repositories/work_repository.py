"""작품 레포지토리 — 작품 CRUD, 작가별 조회 및 조인 쿼리.

Work Repository — CRUD, per-creator lookups, and the joined catalog
projection for literary works.
"""

from typing import Sequence

from sqlalchemy import ColumnElement, Row, Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from catalog.models.literary import Creator, Work
from catalog.repositories.base import BaseRepository


class WorkRepository(BaseRepository[Work]):
    """작품 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the literary_works table.
    """

    def __init__(self) -> None:
        super().__init__(Work)

    async def get_by_creator(
        self,
        db: AsyncSession,
        creator_id: int,
    ) -> list[Work]:
        """특정 작가의 모든 작품을 조회합니다.

        Retrieve all works owned by the given creator.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            creator_id: 작가 ID (Creator identifier)

        Returns:
            list[Work]: 작품 목록 (List of works)
        """
        query: Select = (
            select(Work)
            .where(Work.creator_id == creator_id)
            .order_by(Work.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def search_by_title(
        self,
        db: AsyncSession,
        fragment: str,
    ) -> list[Work]:
        """제목에 문자열이 포함된 작품을 대소문자 구분 없이 조회합니다.

        Case-insensitive substring match on the work title.
        """
        query: Select = (
            select(Work)
            .where(Work.title.icontains(fragment, autoescape=True))
            .order_by(Work.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_by_code(
        self,
        db: AsyncSession,
        code: str,
    ) -> Work | None:
        """식별 코드로 작품을 조회합니다.

        Retrieve the work carrying the exact identifying code.
        """
        result = await db.execute(select(Work).where(Work.code == code))
        return result.scalar_one_or_none()

    async def code_in_use(
        self,
        db: AsyncSession,
        code: str,
        exclude_work_id: int | None = None,
    ) -> bool:
        """다른 작품이 이미 해당 코드를 사용하는지 확인합니다.

        Check whether another work already carries ``code``.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            code: 확인할 식별 코드 (Identifying code to check)
            exclude_work_id: 검사에서 제외할 작품 ID, 수정 시 자기 자신
                             (Work to ignore, i.e. the one being updated)

        Returns:
            bool: 사용 중 여부 (Whether the code is taken)
        """
        query: Select = select(Work.id).where(Work.code == code)
        if exclude_work_id is not None:
            query = query.where(Work.id != exclude_work_id)
        result = await db.execute(query.limit(1))
        return result.first() is not None

    def code_free(self, code: str, work_id: int) -> ColumnElement[bool]:
        """코드가 다른 작품에 없다는 조건식을 만듭니다.

        WHERE condition that holds while no work other than ``work_id``
        carries ``code``. Used as an extra criterion of the conditional UPDATE.
        """
        other = aliased(Work)
        return ~select(other.id).where(other.code == code, other.id != work_id).exists()

    async def list_with_creator_names(
        self,
        db: AsyncSession,
    ) -> Sequence[Row[tuple[str, str | None, str]]]:
        """작품과 작가 이름을 조인하여 조회합니다.

        Return one ``(title, code, creator_name)`` row per work.

        Returns:
            Sequence[Row]: (제목, 코드, 작가 이름) 행 목록
                           (Rows of title, code, creator name)
        """
        query: Select = (
            select(Work.title, Work.code, Creator.name)
            .join(Creator, Work.creator_id == Creator.id)
            .order_by(Work.id)
        )
        result = await db.execute(query)
        return result.all()

    async def delete_by_creator(
        self,
        db: AsyncSession,
        creator_id: int,
    ) -> int:
        """작가에 속한 모든 작품을 삭제합니다.

        Delete every work owned by the given creator.

        Returns:
            int: 삭제된 작품 수 (Number of deleted works)
        """
        stmt = (
            delete(Work)
            .where(Work.creator_id == creator_id)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        return result.rowcount


# 싱글턴 인스턴스 — Singleton instance
work_repository: WorkRepository = WorkRepository()
