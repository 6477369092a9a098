"""API 라우터 패키지 — 모든 카탈로그 엔드포인트 통합.

API Router package — Aggregates all catalog endpoints into a single router
for inclusion in the FastAPI application.

Included routers:
    - creators: 작가 CRUD 및 검색 (Creator CRUD and search)
    - works: 작품 CRUD, 검색, 작가 조인 목록 (Work CRUD, search, joined listing)
"""

from fastapi import APIRouter

from catalog.api.creators import router as creators_router
from catalog.api.works import router as works_router

api_router: APIRouter = APIRouter()

api_router.include_router(creators_router, prefix="/creators", tags=["Creators"])
api_router.include_router(works_router, prefix="/works", tags=["Works"])
