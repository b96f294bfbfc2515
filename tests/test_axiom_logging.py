"""Axiom 로깅 미들웨어 테스트.

Axiom logging middleware tests — event building, masking, and the
request/response capture using a fake Axiom client.
"""

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.middleware.axiom_logging import (
    AxiomLoggingMiddleware,
    build_log_event,
    extract_error_detail,
    mask_sensitive,
)
from app.utils.exceptions import NotFoundError


class FakeAxiomClient:
    """ingest_events 호출을 기록하는 가짜 클라이언트."""

    def __init__(self, fail: bool = False) -> None:
        self.events: list[tuple[str, list[dict]]] = []
        self.fail = fail

    def ingest_events(self, dataset: str, events: list[dict]) -> None:
        if self.fail:
            raise RuntimeError("axiom down")
        self.events.append((dataset, events))


def _make_app(client: FakeAxiomClient) -> FastAPI:
    app = FastAPI()
    app.add_middleware(AxiomLoggingMiddleware, client=client, dataset="api-logs")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/members/")
    async def create(payload: dict) -> dict:
        return payload

    @app.get("/members/{member_id}")
    async def get(member_id: int) -> dict:
        raise NotFoundError("Member not found")

    return app


async def _request(app: FastAPI, method: str, url: str, **kwargs):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        return await ac.request(method, url, **kwargs)


class TestHelpers:
    """헬퍼 함수 테스트."""

    def test_mask_sensitive(self):
        masked = mask_sensitive({"username": "memberA", "password": "x", "nested": [{"api_key": "k"}]})
        assert masked == {"username": "memberA", "password": "***", "nested": [{"api_key": "***"}]}

    def test_extract_error_detail(self):
        assert extract_error_detail(b'{"detail": "Member not found"}') == "Member not found"
        assert extract_error_detail(b"plain text") == "plain text"
        assert extract_error_detail(b"x" * 600).endswith("...")

    def test_build_log_event_omits_empty_parts(self):
        event = build_log_event("GET", "/api/v1/members/", 200, 1.5)
        assert event == {"method": "GET", "path": "/api/v1/members/", "status_code": 200, "duration_ms": 1.5}


class TestMiddleware:
    """미들웨어 동작 테스트."""

    async def test_logs_request_body(self):
        """요청 본문이 마스킹되어 기록된다."""
        fake = FakeAxiomClient()
        res = await _request(
            _make_app(fake), "POST", "/members/", json={"username": "memberA", "token": "t"}
        )

        assert res.status_code == 200
        [(dataset, [event])] = fake.events
        assert dataset == "api-logs"
        assert event["method"] == "POST"
        assert event["status_code"] == 200
        assert event["request_body"] == {"username": "memberA", "token": "***"}
        assert "error" not in event

    async def test_logs_error_detail(self):
        """에러 응답의 사유가 기록되고 응답 본문은 유지된다."""
        fake = FakeAxiomClient()
        res = await _request(_make_app(fake), "GET", "/members/1", params={"verbose": "1"})

        assert res.status_code == 404
        assert res.json() == {"detail": "Member not found"}
        [(_, [event])] = fake.events
        assert event["error"] == "Member not found"
        assert event["query_params"] == {"verbose": "1"}

    async def test_skips_health(self):
        """제외 경로는 기록하지 않는다."""
        fake = FakeAxiomClient()
        res = await _request(_make_app(fake), "GET", "/health")

        assert res.status_code == 200
        assert fake.events == []

    async def test_ingest_failure_does_not_break_request(self):
        """Axiom 전송 실패가 요청에 영향을 주지 않는다."""
        res = await _request(_make_app(FakeAxiomClient(fail=True)), "GET", "/members/1")
        assert res.status_code == 404
