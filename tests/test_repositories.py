"""레포지토리 테스트 — 조건부 UPDATE/DELETE 행 수와 조인 프로젝션.

Repository tests — conditional UPDATE/DELETE row counts and the joined
(title, code, creator name) projection.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models.literary import Creator, Work
from catalog.repositories.creator_repository import creator_repository
from catalog.repositories.work_repository import work_repository


async def test_list_with_creator_names_returns_tuples(db: AsyncSession):
    genius: Creator = await creator_repository.create(db, {"name": "Literary Genius"})
    await work_repository.create(
        db, {"title": "Masterpiece Novel", "code": "ABC9876543210", "creator_id": genius.id}
    )

    rows = await work_repository.list_with_creator_names(db)
    assert [tuple(row) for row in rows] == [
        ("Masterpiece Novel", "ABC9876543210", "Literary Genius")
    ]


async def test_update_if_exists_reports_row_count(db: AsyncSession, creator):
    assert await creator_repository.update_if_exists(db, creator.id, {"name": "H. Murakami"}) == 1
    assert await creator_repository.update_if_exists(db, creator.id + 50, {"name": "Nobody"}) == 0

    refreshed = await creator_repository.get_by_id(db, creator.id)
    assert refreshed.name == "H. Murakami"


async def test_delete_by_id_reports_row_count(db: AsyncSession, work):
    assert await work_repository.delete_by_id(db, work.id) == 1
    assert await work_repository.delete_by_id(db, work.id) == 0


async def test_delete_by_creator(db: AsyncSession, creator, other_creator):
    for title in ("Norwegian Wood", "Kafka on the Shore"):
        await work_repository.create(db, {"title": title, "creator_id": creator.id})
    kept: Work = await work_repository.create(db, {"title": "Beloved", "creator_id": other_creator.id})

    assert await work_repository.delete_by_creator(db, creator.id) == 2
    remaining = await work_repository.get_all(db)
    assert [w.id for w in remaining] == [kept.id]


async def test_code_in_use(db: AsyncSession, work):
    assert await work_repository.code_in_use(db, work.code) is True
    assert await work_repository.code_in_use(db, work.code, exclude_work_id=work.id) is False
    assert await work_repository.code_in_use(db, "unused-code") is False


async def test_get_all_with_filters(db: AsyncSession, creator, other_creator, work):
    await work_repository.create(db, {"title": "Beloved", "creator_id": other_creator.id})

    owned = await work_repository.get_all(db, filters={"creator_id": creator.id})
    assert [w.title for w in owned] == ["Kafka on the Shore"]
