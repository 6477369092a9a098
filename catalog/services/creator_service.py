"""작가 서비스 — 작가 등록/조회/수정/삭제 비즈니스 로직.

Creator Service — Business logic for literary creators.
Validates input, forwards to the repositories, and removes a creator's works
together with the creator.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models.literary import Creator
from catalog.repositories.creator_repository import creator_repository
from catalog.repositories.work_repository import work_repository
from catalog.schemas.creator import CreatorCreate, CreatorResponse, CreatorUpdate
from catalog.utils.exceptions import BadRequestError


class CreatorService:
    """작가 관련 비즈니스 로직을 처리하는 서비스.

    Service handling creator business logic.
    Reads return None or empty lists instead of raising; only validation
    failures raise BadRequestError.
    """

    def _to_response(self, creator: Creator) -> CreatorResponse:
        """작가 모델을 응답 스키마로 변환합니다.

        Convert a Creator model instance to a CreatorResponse schema.
        """
        return CreatorResponse(
            id=creator.id,
            name=creator.name,
            bio=creator.bio,
            created_at=creator.created_at,
        )

    def _validated_name(self, name: str | None) -> str:
        """이름이 비어 있으면 BadRequestError를 발생시킵니다.

        Return the trimmed name, or raise if it is null or blank.
        """
        if name is None or not name.strip():
            raise BadRequestError("Creator name cannot be empty")
        return name.strip()

    async def register(
        self,
        db: AsyncSession,
        data: CreatorCreate,
    ) -> CreatorResponse:
        """새 작가를 등록합니다.

        Register a new creator and return it with its assigned id.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 작가 등록 데이터 (Creator registration data)

        Returns:
            CreatorResponse: 등록된 작가 (Stored creator)

        Raises:
            BadRequestError: 이름이 비어 있을 때 (Name is null or blank)
        """
        name: str = self._validated_name(data.name)
        creator: Creator = await creator_repository.create(
            db, {"name": name, "bio": data.bio}
        )
        return self._to_response(creator)

    async def find_all(self, db: AsyncSession) -> list[CreatorResponse]:
        """모든 작가를 조회합니다.

        List every creator.
        """
        creators = await creator_repository.get_all(db)
        return [self._to_response(c) for c in creators]

    async def find_by_id(
        self,
        db: AsyncSession,
        creator_id: int,
    ) -> CreatorResponse | None:
        """ID로 작가를 조회합니다. 없으면 None.

        Retrieve a creator by id, or None when absent.
        """
        creator: Creator | None = await creator_repository.get_by_id(db, creator_id)
        if creator is None:
            return None
        return self._to_response(creator)

    async def update(
        self,
        db: AsyncSession,
        creator_id: int | None,
        data: CreatorUpdate,
    ) -> CreatorResponse:
        """기존 작가의 모든 필드를 덮어씁니다.

        Overwrite every field of an existing creator.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            creator_id: 작가 ID (Creator identifier, must already exist)
            data: 새 필드 값 (New field values)

        Returns:
            CreatorResponse: 수정된 작가 (Updated creator)

        Raises:
            BadRequestError: ID가 없거나 존재하지 않을 때, 이름이 비어 있을 때
                             (Null or unknown id, or blank name)
        """
        if creator_id is None:
            raise BadRequestError("Cannot update non-existent creator")
        name: str = self._validated_name(data.name)

        # 단일 조건부 UPDATE — 0행이면 존재하지 않는 작가
        # Single conditional UPDATE; zero affected rows means unknown id
        affected: int = await creator_repository.update_if_exists(
            db, creator_id, {"name": name, "bio": data.bio}
        )
        if affected == 0:
            raise BadRequestError("Cannot update non-existent creator")

        creator: Creator | None = await creator_repository.get_by_id(db, creator_id)
        return self._to_response(creator)

    async def delete(self, db: AsyncSession, creator_id: int) -> None:
        """작가와 그 작가의 모든 작품을 삭제합니다.

        Delete a creator and all of its works in the current transaction.
        Works go first so no work is ever left without its creator.
        Deleting an unknown id is a no-op.
        """
        await work_repository.delete_by_creator(db, creator_id)
        await creator_repository.delete_by_id(db, creator_id)

    async def search_by_name(
        self,
        db: AsyncSession,
        fragment: str,
    ) -> list[CreatorResponse]:
        """이름 조각으로 작가를 검색합니다 (대소문자 무시).

        Case-insensitive substring search on creator names.
        """
        creators = await creator_repository.search_by_name(db, fragment)
        return [self._to_response(c) for c in creators]

    async def search_by_bio(
        self,
        db: AsyncSession,
        fragment: str,
    ) -> list[CreatorResponse]:
        creators = await creator_repository.search_by_bio(db, fragment)
        return [self._to_response(c) for c in creators]

    async def count_with_more_works_than(
        self,
        db: AsyncSession,
        work_count: int,
    ) -> int:
        """작품 수가 기준보다 많은 작가 수.

        Number of creators owning more than ``work_count`` works.
        """
        return await creator_repository.count_with_more_works_than(db, work_count)


# 싱글턴 인스턴스 — Singleton instance
creator_service: CreatorService = CreatorService()
