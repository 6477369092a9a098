"""작품 관련 Pydantic 요청/응답 스키마 정의.

Work Pydantic request/response schema definitions.
Includes the joined catalog projection (title, code, creator name).
"""

from datetime import datetime

from pydantic import BaseModel, Field

from catalog.models.literary import CODE_MAX_LENGTH, TITLE_MAX_LENGTH


class WorkCreate(BaseModel):
    """작품 등록 요청 스키마.

    Work registration request schema.

    Attributes:
        title: 작품 제목 (Title, required non-blank)
        code: 식별 코드 (ISBN-like code, optional, unique)
        creator_id: 소유 작가 ID (Owning creator, required)
    """

    title: str | None = Field(default=None, max_length=TITLE_MAX_LENGTH)
    code: str | None = Field(default=None, max_length=CODE_MAX_LENGTH)
    creator_id: int | None = None


class WorkUpdate(WorkCreate):
    """작품 수정 요청 스키마 (전체 덮어쓰기).

    Work update request schema. Every field is overwritten,
    which also allows reassigning the work to another creator.
    """


class WorkResponse(BaseModel):
    """작품 응답 스키마.

    Work response schema returned from API.
    """

    id: int  # 작품 ID (Work identifier)
    title: str  # 작품 제목 (Title)
    code: str | None  # 식별 코드 (Identifying code)
    creator_id: int  # 소유 작가 ID (Owning creator identifier)
    created_at: datetime


class CatalogEntryResponse(BaseModel):
    """작품-작가 조인 응답 스키마 — 화면 표시용 비정규화 행.

    Denormalized (title, code, creator name) row for catalog listings.
    Not a distinct entity.
    """

    title: str
    code: str | None
    creator_name: str
