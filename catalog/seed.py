"""샘플 데이터 시드 스크립트 — 작가 5명, 작품 7편 생성.

Seed script — Creates sample creators and works for development.
Goes through the services so the same validation rules apply.

Usage:
    python -m catalog.seed

Creates:
    - 5명의 작가 (5 creators)
    - 7편의 작품 (7 works)
"""

import asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.database import Base, async_session, engine
from catalog.models import Creator
from catalog.schemas.creator import CreatorCreate
from catalog.schemas.work import WorkCreate
from catalog.services.creator_service import creator_service
from catalog.services.work_service import work_service

SAMPLE_CREATORS: list[tuple[str, str]] = [
    ("Emily Brontë", "English novelist and poet, best known for her only novel, Wuthering Heights."),
    ("Gabriel García Márquez", "Colombian novelist known for magical realism and One Hundred Years of Solitude."),
    ("Haruki Murakami", "Japanese writer whose works blend elements of fantasy and realism."),
    ("Toni Morrison", "American novelist and Nobel Prize winner known for exploring Black identity."),
    ("Jorge Luis Borges", "Argentine short-story writer known for philosophical fiction."),
]

# (작가 인덱스, 제목, 코드) — (creator index, title, code)
SAMPLE_WORKS: list[tuple[int, str, str]] = [
    (0, "Wuthering Heights", "9780141439556"),
    (1, "One Hundred Years of Solitude", "9780060883287"),
    (1, "Love in the Time of Cholera", "9780307389732"),
    (2, "Norwegian Wood", "9780375704024"),
    (2, "Kafka on the Shore", "9781400079278"),
    (3, "Beloved", "9781400033416"),
    (4, "Ficciones", "9780802130303"),
]


async def seed_catalog(db: AsyncSession) -> bool:
    """세션에 샘플 데이터를 추가합니다. 이미 작가가 있으면 건너뜁니다.

    Insert the sample catalog into ``db`` unless creators already exist.
    The caller commits.

    Returns:
        bool: 시드 수행 여부 (Whether sample data was inserted)
    """
    result = await db.execute(select(Creator.id).limit(1))
    if result.first() is not None:
        return False

    creator_ids: list[int] = []
    for name, bio in SAMPLE_CREATORS:
        creator = await creator_service.register(db, CreatorCreate(name=name, bio=bio))
        creator_ids.append(creator.id)

    for creator_index, title, code in SAMPLE_WORKS:
        await work_service.register(
            db,
            WorkCreate(title=title, code=code, creator_id=creator_ids[creator_index]),
        )
    return True


async def seed() -> None:
    """테이블을 만들고 샘플 데이터를 커밋합니다.

    Create tables if needed, then seed and commit.
    Idempotent: 이미 시드된 경우 건너뜁니다 (Skips if already seeded).
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        if not await seed_catalog(db):
            print("Already seeded. Skipping.")
            return
        await db.commit()
        print(f"Seeded: {len(SAMPLE_CREATORS)} creators, {len(SAMPLE_WORKS)} works")


if __name__ == "__main__":
    asyncio.run(seed())
