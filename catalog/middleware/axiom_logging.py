"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Ships one structured event per catalog request to Axiom: method, path,
parameters, request body, status code, duration and error detail.
Passes requests straight through when Axiom is not configured.
"""

import json
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from catalog.config import settings

# 마스킹 대상 키 패턴 — Keys whose values are never shipped
_SENSITIVE_KEYS = re.compile(
    r"(password|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = frozenset({"/health", "/about", "/docs", "/redoc", "/openapi.json"})

_MAX_BODY_CHARS: int = 2000
_MAX_ERROR_CHARS: int = 500


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드 마스킹 — Recursively replace sensitive values with ``***``."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            key: "***" if _SENSITIVE_KEYS.search(str(key)) else mask_sensitive(value, depth + 1)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    if isinstance(data, str) and len(data) > _MAX_BODY_CHARS:
        return data[:_MAX_BODY_CHARS] + "...(truncated)"
    return data


def extract_error_detail(body: bytes) -> str:
    """에러 응답 본문에서 사유 추출 — Pull ``detail`` out of an error response body."""
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:_MAX_ERROR_CHARS]
    detail = payload.get("detail", payload) if isinstance(payload, dict) else payload
    text = detail if isinstance(detail, str) else json.dumps(detail, default=str)
    if len(text) > _MAX_ERROR_CHARS:
        text = text[:_MAX_ERROR_CHARS] + "..."
    return text


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 카탈로그 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs catalog API requests and responses to Axiom.
    """

    def __init__(self, app: Any, client: AxiomClient | None = None) -> None:
        super().__init__(app)
        self._dataset: str = settings.AXIOM_DATASET
        self._client: AxiomClient | None = client
        if self._client is None and settings.AXIOM_API_TOKEN and self._dataset:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def _read_json_body(self, request: Request) -> Any:
        if request.method not in ("POST", "PUT", "PATCH"):
            return None
        body = await request.body()
        if not body:
            return None
        try:
            return mask_sensitive(json.loads(body))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return "(non-json body)"

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if self._client is None or request.url.path in _SKIP_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        event: dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
            "status_code": 500,
        }
        if request.query_params:
            event["query_params"] = mask_sensitive(dict(request.query_params))
        request_body = await self._read_json_body(request)
        if request_body is not None:
            event["request_body"] = request_body

        try:
            response = await call_next(request)
            event["status_code"] = response.status_code

            # 에러 응답이면 본문을 소비해 사유를 기록하고 다시 감싼다
            # Error responses: consume the body for the log, then re-wrap it
            if response.status_code >= 400:
                body = b""
                async for chunk in response.body_iterator:
                    body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                event["error"] = extract_error_detail(body)
                response = Response(
                    content=body,
                    status_code=response.status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
            try:
                self._client.ingest_events(self._dataset, [event])
            except Exception:
                pass  # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break a request on log failure

        return response
