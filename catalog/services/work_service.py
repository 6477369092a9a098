"""작품 서비스 — 작품 카탈로그 비즈니스 로직.

Work Service — Business logic for the literary work catalog.
Enforces the title/creator invariants and the uniqueness of identifying codes.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models.literary import Work
from catalog.repositories.creator_repository import creator_repository
from catalog.repositories.work_repository import work_repository
from catalog.schemas.work import (
    CatalogEntryResponse,
    WorkCreate,
    WorkResponse,
    WorkUpdate,
)
from catalog.utils.exceptions import BadRequestError, DuplicateError


class WorkService:
    """작품 관련 비즈니스 로직을 처리하는 서비스.

    Service handling literary work business logic.
    """

    def _to_response(self, work: Work) -> WorkResponse:
        """작품 모델을 응답 스키마로 변환합니다.

        Convert a Work model instance to a WorkResponse schema.
        """
        return WorkResponse(
            id=work.id,
            title=work.title,
            code=work.code,
            creator_id=work.creator_id,
            created_at=work.created_at,
        )

    def _normalized_code(self, code: str | None) -> str | None:
        """앞뒤 공백 제거, 빈 코드는 None — Trimmed code, or None when blank."""
        if code is None or not code.strip():
            return None
        return code.strip()

    async def _validated_fields(
        self,
        db: AsyncSession,
        data: WorkCreate,
    ) -> dict:
        """등록/수정 공통 검증 후 저장할 필드 딕셔너리를 반환합니다.

        Validate the fields shared by register and update and return the
        values to persist. Blank codes are stored as None. Code uniqueness
        is checked by the caller.

        Raises:
            BadRequestError: 제목이 비었거나 작가가 없거나 존재하지 않을 때
                             (Blank title, missing or unknown creator)
        """
        if data.title is None or not data.title.strip():
            raise BadRequestError("Literary work must have a title")
        if data.creator_id is None:
            raise BadRequestError("Literary work must have a creator")
        if not await creator_repository.exists(db, {"id": data.creator_id}):
            raise BadRequestError("Literary work must reference an existing creator")

        return {
            "title": data.title.strip(),
            "code": self._normalized_code(data.code),
            "creator_id": data.creator_id,
        }

    async def register(
        self,
        db: AsyncSession,
        data: WorkCreate,
    ) -> WorkResponse:
        """새 작품을 카탈로그에 등록합니다.

        Register a new work for an existing creator.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 작품 등록 데이터 (Work registration data)

        Returns:
            WorkResponse: 등록된 작품 (Stored work with its id)
        """
        fields: dict = await self._validated_fields(db, data)
        if fields["code"] is not None and await work_repository.code_in_use(db, fields["code"]):
            raise DuplicateError("A literary work with this code already exists")
        work: Work = await work_repository.create(db, fields)
        return self._to_response(work)

    async def browse_all(self, db: AsyncSession) -> list[WorkResponse]:
        """카탈로그의 모든 작품을 조회합니다.

        List every work in the catalog.
        """
        works = await work_repository.get_all(db)
        return [self._to_response(w) for w in works]

    async def find_by_id(
        self,
        db: AsyncSession,
        work_id: int,
    ) -> WorkResponse | None:
        work: Work | None = await work_repository.get_by_id(db, work_id)
        if work is None:
            return None
        return self._to_response(work)

    async def find_by_code(
        self,
        db: AsyncSession,
        code: str,
    ) -> WorkResponse | None:
        """식별 코드로 작품을 조회합니다. 없으면 None.

        Retrieve a work by its identifying code, or None when absent.
        """
        normalized: str | None = self._normalized_code(code)
        if normalized is None:
            return None
        work: Work | None = await work_repository.get_by_code(db, normalized)
        if work is None:
            return None
        return self._to_response(work)

    async def update(
        self,
        db: AsyncSession,
        work_id: int | None,
        data: WorkUpdate,
    ) -> WorkResponse:
        """기존 작품의 모든 필드를 덮어씁니다.

        Overwrite every field of an existing work, including its creator.

        Raises:
            BadRequestError: ID가 없거나 존재하지 않을 때, 필드 검증 실패 시
                             (Null or unknown id, or invalid fields)
            DuplicateError: 다른 작품이 같은 코드를 사용할 때
                            (Code already used by another work)
        """
        if work_id is None:
            raise BadRequestError("Cannot update non-existent literary work")
        fields: dict = await self._validated_fields(db, data)

        # 단일 조건부 UPDATE — 코드가 다른 작품에 있으면 갱신하지 않음
        # Single conditional UPDATE, also guarded on the code being free
        criteria = []
        if fields["code"] is not None:
            criteria.append(work_repository.code_free(fields["code"], work_id))
        affected: int = await work_repository.update_if_exists(db, work_id, fields, *criteria)
        if affected == 0:
            # 존재 여부가 먼저 — unknown ids fail as bad requests even with a taken code
            if not await work_repository.exists(db, {"id": work_id}):
                raise BadRequestError("Cannot update non-existent literary work")
            raise DuplicateError("A literary work with this code already exists")

        work: Work | None = await work_repository.get_by_id(db, work_id)
        return self._to_response(work)

    async def delete(self, db: AsyncSession, work_id: int) -> None:
        """작품을 삭제합니다. 없는 ID는 무시합니다.

        Remove a work from the catalog; unknown ids are ignored.
        """
        await work_repository.delete_by_id(db, work_id)

    async def find_by_creator(
        self,
        db: AsyncSession,
        creator_id: int,
    ) -> list[WorkResponse]:
        """특정 작가의 작품 목록.

        Works owned by the given creator.
        """
        works = await work_repository.get_by_creator(db, creator_id)
        return [self._to_response(w) for w in works]

    async def search_by_title(
        self,
        db: AsyncSession,
        fragment: str,
    ) -> list[WorkResponse]:
        works = await work_repository.search_by_title(db, fragment)
        return [self._to_response(w) for w in works]

    async def list_with_creator_names(
        self,
        db: AsyncSession,
    ) -> list[CatalogEntryResponse]:
        """작품별 (제목, 코드, 작가 이름) 목록을 조회합니다.

        Denormalized catalog listing, one entry per work.
        """
        rows = await work_repository.list_with_creator_names(db)
        return [
            CatalogEntryResponse(title=title, code=code, creator_name=creator_name)
            for title, code, creator_name in rows
        ]


# 싱글턴 인스턴스 — Singleton instance
work_service: WorkService = WorkService()
