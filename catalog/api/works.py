"""작품 라우터 — 작품 카탈로그 CRUD 및 검색 엔드포인트.

Work Router — CRUD, search, and joined catalog endpoints for literary works.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.database import get_db
from catalog.schemas.work import (
    CatalogEntryResponse,
    WorkCreate,
    WorkResponse,
    WorkUpdate,
)
from catalog.services.work_service import work_service
from catalog.utils.exceptions import NotFoundError

router: APIRouter = APIRouter()


@router.get("", response_model=list[WorkResponse])
async def browse_catalog(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[WorkResponse]:
    """카탈로그 전체 작품을 조회합니다.

    List every work in the catalog.
    """
    return await work_service.browse_all(db)


@router.get("/detailed", response_model=list[CatalogEntryResponse])
async def detailed_catalog(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[CatalogEntryResponse]:
    """작품과 작가 이름을 함께 조회합니다.

    Catalog listing with creator names.
    """
    return await work_service.list_with_creator_names(db)


@router.get("/search", response_model=list[WorkResponse])
async def search_works(
    db: Annotated[AsyncSession, Depends(get_db)],
    query: Annotated[str, Query()] = "",
) -> list[WorkResponse]:
    """제목으로 작품을 검색합니다.

    Search works by title fragment (case-insensitive).
    """
    return await work_service.search_by_title(db, query)


@router.get("/by-code/{code}", response_model=WorkResponse)
async def get_work_by_code(
    code: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> WorkResponse:
    work: WorkResponse | None = await work_service.find_by_code(db, code)
    if work is None:
        raise NotFoundError("Literary work not found in catalog")
    return work


@router.get("/{work_id}", response_model=WorkResponse)
async def get_work(
    work_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> WorkResponse:
    """작품 상세 정보를 조회합니다.

    Retrieve a work by id.
    """
    work: WorkResponse | None = await work_service.find_by_id(db, work_id)
    if work is None:
        raise NotFoundError("Literary work not found in catalog")
    return work


@router.post("", response_model=WorkResponse, status_code=201)
async def register_work(
    data: WorkCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> WorkResponse:
    """새 작품을 등록합니다.

    Register a new work for an existing creator.
    """
    result: WorkResponse = await work_service.register(db, data)
    await db.commit()
    return result


@router.put("/{work_id}", response_model=WorkResponse)
async def update_work(
    work_id: int,
    data: WorkUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> WorkResponse:
    """작품 정보를 덮어씁니다.

    Overwrite an existing work.
    """
    result: WorkResponse = await work_service.update(db, work_id, data)
    await db.commit()
    return result


@router.delete("/{work_id}", status_code=204)
async def delete_work(
    work_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """작품을 카탈로그에서 삭제합니다. 없는 ID도 204.

    Withdraw a work from the catalog. Idempotent.
    """
    await work_service.delete(db, work_id)
    await db.commit()
