"""문학 카탈로그 SQLAlchemy ORM 모델 정의.

Literary catalog SQLAlchemy ORM model definitions.
A creator owns zero or more works; each work references exactly one creator
through a one-directional foreign key. "Works of a creator" is answered by a
query on ``literary_works.creator_id`` rather than a back-reference collection.

Tables:
    - literary_creators: 작가 (Creators / authors)
    - literary_works: 작품 (Works / books)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.database import Base

# 컬럼 최대 길이 — Column length limits, shared with the request schemas
NAME_MAX_LENGTH: int = 255
BIO_MAX_LENGTH: int = 2000
TITLE_MAX_LENGTH: int = 500
CODE_MAX_LENGTH: int = 255


class Creator(Base):
    """작가 모델 — 작품을 소유하는 최상위 엔티티.

    Creator (author) model. Owns the works that reference it; deleting a
    creator removes those works in the same unit of work.

    Attributes:
        id: 자동 증가 식별자 (Auto-generated integer identifier)
        name: 작가 이름 (Display name, required, non-blank)
        bio: 작가 소개 (Free-text biography, optional)
        created_at: 생성 일시 UTC (Creation timestamp in UTC)
        updated_at: 수정 일시 UTC (Last update timestamp in UTC)
    """

    __tablename__ = "literary_creators"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 작가 이름 — Creator display name (required)
    name: Mapped[str] = mapped_column("full_name", String(NAME_MAX_LENGTH), nullable=False)
    # 작가 소개 — Biography (optional, bounded length)
    bio: Mapped[str | None] = mapped_column("biography", String(BIO_MAX_LENGTH), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    def __repr__(self) -> str:
        return f"<Creator id={self.id} name={self.name!r}>"


class Work(Base):
    """작품 모델 — 하나의 작가에 속하는 카탈로그 항목.

    Work (book) model — A catalog entry belonging to exactly one creator.

    Attributes:
        id: 자동 증가 식별자 (Auto-generated integer identifier)
        title: 작품 제목 (Title, required, non-blank)
        code: 식별 코드 (ISBN-like identifying code, optional, unique)
        creator_id: 소유 작가 FK (Owning creator foreign key, required)
        created_at: 생성 일시 UTC (Creation timestamp in UTC)
        updated_at: 수정 일시 UTC (Last update timestamp in UTC)
    """

    __tablename__ = "literary_works"

    id: Mapped[int] = mapped_column("work_id", Integer, primary_key=True, autoincrement=True)
    # 작품 제목 — Work title (required)
    title: Mapped[str] = mapped_column("work_title", String(TITLE_MAX_LENGTH), nullable=False)
    # 국제 식별 코드 — International identifying code (unique when present)
    code: Mapped[str | None] = mapped_column("international_code", String(CODE_MAX_LENGTH), unique=True, nullable=True)
    # 소유 작가 FK — Owning creator (CASCADE: 작가 삭제 시 작품도 삭제)
    creator_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("literary_creators.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    def __repr__(self) -> str:
        return f"<Work id={self.id} title={self.title!r} creator_id={self.creator_id}>"
