"""작가 관련 Pydantic 요청/응답 스키마 정의.

Creator Pydantic request/response schema definitions.
Blank-name checks are enforced by CreatorService, not here, so that the
service rejects invalid input no matter which caller built the schema.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from catalog.models.literary import BIO_MAX_LENGTH, NAME_MAX_LENGTH


class CreatorCreate(BaseModel):
    """작가 등록 요청 스키마.

    Creator registration request schema.

    Attributes:
        name: 작가 이름 (Display name, required non-blank)
        bio: 작가 소개 (Biography, optional)
    """

    name: str | None = Field(default=None, max_length=NAME_MAX_LENGTH)
    bio: str | None = Field(default=None, max_length=BIO_MAX_LENGTH)


class CreatorUpdate(CreatorCreate):
    """작가 수정 요청 스키마 (전체 덮어쓰기).

    Creator update request schema. Every field is overwritten;
    an omitted bio is stored as None.
    """


class CreatorResponse(BaseModel):
    """작가 응답 스키마.

    Creator response schema returned from API.
    """

    id: int  # 작가 ID (Creator identifier)
    name: str  # 작가 이름 (Display name)
    bio: str | None  # 작가 소개 (Biography)
    created_at: datetime
