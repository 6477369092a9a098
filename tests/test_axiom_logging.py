"""Axiom 로깅 미들웨어 테스트.

Axiom logging middleware tests — masking helpers and the events shipped for
successful and failing requests.
"""

from typing import Any

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from catalog.middleware.axiom_logging import (
    AxiomLoggingMiddleware,
    extract_error_detail,
    mask_sensitive,
)
from catalog.utils.exceptions import BadRequestError


class RecordingClient:
    """ingest_events 호출을 기록하는 테스트용 클라이언트."""

    def __init__(self) -> None:
        self.events: list[dict[str, Any]] = []

    def ingest_events(self, dataset: str, events: list[dict[str, Any]]) -> None:
        self.events.extend(events)


def _build_app(recorder: RecordingClient) -> FastAPI:
    app = FastAPI()
    app.add_middleware(AxiomLoggingMiddleware, client=recorder)

    @app.post("/api/v1/creators")
    async def register(payload: dict) -> dict:
        return {"ok": True}

    @app.get("/api/v1/works/{work_id}")
    async def get_work(work_id: int) -> dict:
        raise BadRequestError("Cannot update non-existent literary work")

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    return app


def test_mask_sensitive_nested():
    masked = mask_sensitive({"name": "Borges", "auth": {"api_key": "k", "items": [{"token": "t"}]}})
    assert masked == {"name": "Borges", "auth": {"api_key": "***", "items": [{"token": "***"}]}}


def test_mask_sensitive_truncates_long_strings():
    masked = mask_sensitive({"bio": "x" * 5000})
    assert masked["bio"].endswith("...(truncated)")
    assert len(masked["bio"]) < 5000


def test_extract_error_detail():
    assert extract_error_detail(b'{"detail": "Creator not found"}') == "Creator not found"
    assert extract_error_detail(b"plain failure") == "plain failure"


async def test_logs_request_body_and_status():
    recorder = RecordingClient()
    transport = ASGITransport(app=_build_app(recorder))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        res = await ac.post("/api/v1/creators", json={"name": "Borges", "password": "x"})
    assert res.status_code == 200

    [event] = recorder.events
    assert event["method"] == "POST"
    assert event["path"] == "/api/v1/creators"
    assert event["status_code"] == 200
    assert event["request_body"] == {"name": "Borges", "password": "***"}
    assert "error" not in event


async def test_logs_error_detail_and_preserves_response():
    recorder = RecordingClient()
    transport = ASGITransport(app=_build_app(recorder))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        res = await ac.get("/api/v1/works/5")
    assert res.status_code == 400
    assert res.json() == {"detail": "Cannot update non-existent literary work"}

    [event] = recorder.events
    assert event["status_code"] == 400
    assert event["error"] == "Cannot update non-existent literary work"


async def test_skipped_paths_not_logged():
    recorder = RecordingClient()
    transport = ASGITransport(app=_build_app(recorder))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        await ac.get("/health")
    assert recorder.events == []
