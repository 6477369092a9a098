"""작가 라우터 — 작가 CRUD 및 검색 엔드포인트.

Creator Router — CRUD and search endpoints for literary creators.
Mutating endpoints commit the request session after the service call.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.database import get_db
from catalog.schemas.creator import CreatorCreate, CreatorResponse, CreatorUpdate
from catalog.schemas.work import WorkResponse
from catalog.services.creator_service import creator_service
from catalog.services.work_service import work_service
from catalog.utils.exceptions import NotFoundError

router: APIRouter = APIRouter()


@router.get("", response_model=list[CreatorResponse])
async def list_creators(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[CreatorResponse]:
    """작가 목록을 조회합니다.

    List all creators.
    """
    return await creator_service.find_all(db)


@router.get("/search", response_model=list[CreatorResponse])
async def search_creators(
    db: Annotated[AsyncSession, Depends(get_db)],
    query: Annotated[str, Query()] = "",
) -> list[CreatorResponse]:
    """이름으로 작가를 검색합니다.

    Search creators by name fragment (case-insensitive).
    """
    return await creator_service.search_by_name(db, query)


@router.get("/search/bio", response_model=list[CreatorResponse])
async def search_creators_by_bio(
    db: Annotated[AsyncSession, Depends(get_db)],
    query: Annotated[str, Query()] = "",
) -> list[CreatorResponse]:
    """소개글로 작가를 검색합니다.

    Search creators by biography fragment (case-insensitive).
    """
    return await creator_service.search_by_bio(db, query)


@router.get("/stats/prolific")
async def count_prolific_creators(
    db: Annotated[AsyncSession, Depends(get_db)],
    more_than: Annotated[int, Query()] = 1,
) -> dict[str, int]:
    """작품 수가 기준보다 많은 작가 수를 반환합니다.

    Count creators owning strictly more than ``more_than`` works.
    """
    count: int = await creator_service.count_with_more_works_than(db, more_than)
    return {"more_than": more_than, "count": count}


@router.get("/{creator_id}", response_model=CreatorResponse)
async def get_creator(
    creator_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CreatorResponse:
    """작가 상세 정보를 조회합니다.

    Retrieve a creator by id.
    """
    creator: CreatorResponse | None = await creator_service.find_by_id(db, creator_id)
    if creator is None:
        raise NotFoundError("Creator not found")
    return creator


@router.get("/{creator_id}/works", response_model=list[WorkResponse])
async def list_creator_works(
    creator_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[WorkResponse]:
    """작가의 작품 목록을 조회합니다.

    List the works of an existing creator.
    """
    if await creator_service.find_by_id(db, creator_id) is None:
        raise NotFoundError("Creator not found")
    return await work_service.find_by_creator(db, creator_id)


@router.post("", response_model=CreatorResponse, status_code=201)
async def register_creator(
    data: CreatorCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CreatorResponse:
    """새 작가를 등록합니다.

    Register a new creator.
    """
    result: CreatorResponse = await creator_service.register(db, data)
    await db.commit()
    return result


@router.put("/{creator_id}", response_model=CreatorResponse)
async def update_creator(
    creator_id: int,
    data: CreatorUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CreatorResponse:
    """작가 정보를 덮어씁니다.

    Overwrite an existing creator.
    """
    result: CreatorResponse = await creator_service.update(db, creator_id, data)
    await db.commit()
    return result


@router.delete("/{creator_id}", status_code=204)
async def delete_creator(
    creator_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """작가와 소속 작품을 삭제합니다. 없는 ID도 204.

    Delete a creator together with its works. Idempotent.
    """
    await creator_service.delete(db, creator_id)
    await db.commit()
