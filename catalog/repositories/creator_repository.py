"""작가 레포지토리 — 작가 CRUD 및 검색 쿼리.

Creator Repository — CRUD and search queries for literary creators.
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models.literary import Creator, Work
from catalog.repositories.base import BaseRepository


class CreatorRepository(BaseRepository[Creator]):
    """작가 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the literary_creators table.
    """

    def __init__(self) -> None:
        super().__init__(Creator)

    async def search_by_name(
        self,
        db: AsyncSession,
        fragment: str,
    ) -> list[Creator]:
        """이름에 문자열이 포함된 작가를 대소문자 구분 없이 조회합니다.

        Case-insensitive substring match on the creator name.
        LIKE wildcards in the fragment are matched literally.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            fragment: 검색할 이름 조각 (Name fragment)

        Returns:
            list[Creator]: 일치하는 작가 목록 (Matching creators)
        """
        query: Select = (
            select(Creator)
            .where(Creator.name.icontains(fragment, autoescape=True))
            .order_by(Creator.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def search_by_bio(
        self,
        db: AsyncSession,
        fragment: str,
    ) -> list[Creator]:
        """소개글에 문자열이 포함된 작가를 조회합니다.

        Case-insensitive substring match on the biography.
        Creators without a biography never match.
        """
        query: Select = (
            select(Creator)
            .where(Creator.bio.icontains(fragment, autoescape=True))
            .order_by(Creator.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def count_with_more_works_than(
        self,
        db: AsyncSession,
        work_count: int,
    ) -> int:
        """작품 수가 기준보다 많은 작가 수를 셉니다.

        Count creators owning strictly more than ``work_count`` works.
        Creators with no works are included when ``work_count`` is negative.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            work_count: 기준 작품 수 (Threshold number of works)

        Returns:
            int: 조건을 만족하는 작가 수 (Number of matching creators)
        """
        per_creator = (
            select(Creator.id)
            .outerjoin(Work, Work.creator_id == Creator.id)
            .group_by(Creator.id)
            .having(func.count(Work.id) > work_count)
            .subquery()
        )
        query: Select = select(func.count()).select_from(per_creator)
        return (await db.execute(query)).scalar() or 0


# 싱글턴 인스턴스 — Singleton instance
creator_repository: CreatorRepository = CreatorRepository()
