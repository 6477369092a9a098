"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어 및 라우터 등록.

FastAPI application entry point — Middleware and router registration.
Configures request logging, CORS, health/about endpoints, and the catalog API.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.config import settings
from catalog.middleware.axiom_logging import AxiomLoggingMiddleware

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Axiom API 로깅 미들웨어 — CORS보다 먼저 등록하여 모든 요청을 캡처
# Registered before CORS to capture all requests
app.add_middleware(AxiomLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


@app.get("/about")
async def about() -> dict[str, str]:
    """시스템 정보 — Application name and version."""
    return {"application_name": settings.APP_NAME, "version": settings.APP_VERSION}


from catalog.api import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")
