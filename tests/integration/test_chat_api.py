"""Integration tests for the /v1 HTTP surface.

The orchestrator on app.state is replaced with one wired to mock services;
requests go through httpx.ASGITransport against the real FastAPI app.
"""

from __future__ import annotations

import uuid
from typing import AsyncIterator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from lingochat.main import app, lifespan
from lingochat.services.conversation.orchestrator import ConversationOrchestrator
from tests.conftest import ENGLISH_PASSAGE


@pytest_asyncio.fixture
async def client(orchestrator: ConversationOrchestrator) -> AsyncIterator[httpx.AsyncClient]:
    app.state.orchestrator = orchestrator
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


class TestMetaEndpoints:
    @pytest.mark.asyncio
    async def test_health(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/v1/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    @pytest.mark.asyncio
    async def test_languages(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/v1/languages")
        assert response.status_code == 200
        assert response.json() == [
            {"code": "en", "name": "English"},
            {"code": "pt", "name": "Portuguese"},
            {"code": "es", "name": "Spanish"},
            {"code": "ru", "name": "Russian"},
            {"code": "tr", "name": "Turkish"},
            {"code": "fr", "name": "French"},
        ]


class TestChatEndpoints:
    @pytest.mark.asyncio
    async def test_empty_conversation(self, client: httpx.AsyncClient) -> None:
        body = (await client.get("/v1/chat")).json()
        assert body["messages"] == []
        assert body["loading"] is False
        assert body["target_language"] == "en"
        assert body["error"] is None

    @pytest.mark.asyncio
    async def test_blank_send(self, client: httpx.AsyncClient) -> None:
        response = await client.post("/v1/chat/messages", json={"text": "   "})
        assert response.status_code == 200
        assert response.json() == {"message": None}
        assert (await client.get("/v1/chat")).json()["messages"] == []

    @pytest.mark.asyncio
    async def test_send_from_draft(self, client: httpx.AsyncClient) -> None:
        await client.put("/v1/chat/draft", json={"text": "Hello"})
        response = await client.post("/v1/chat/messages", json={})
        message = response.json()["message"]
        assert message["text"] == "Hello"
        assert message["language"] == "en"
        assert message["summarizable"] is False
        assert message["summary"]["status"] == "idle"
        assert (await client.get("/v1/chat")).json()["draft"] == ""

    @pytest.mark.asyncio
    async def test_summarize_and_translate(self, client: httpx.AsyncClient) -> None:
        sent = await client.post("/v1/chat/messages", json={"text": ENGLISH_PASSAGE})
        message_id = sent.json()["message"]["id"]

        summary = await client.post(f"/v1/chat/messages/{message_id}/summary")
        assert summary.status_code == 200
        assert summary.json()["summary"]["result"] == "A short summary."
        assert summary.json()["summary"]["in_flight"] is False

        selected = await client.put("/v1/chat/target-language", json={"code": "ru"})
        assert selected.json()["target_language"] == "ru"

        translation = await client.post(f"/v1/chat/messages/{message_id}/translation")
        body = translation.json()["translation"]
        assert body["result"] == "Texto traducido"
        assert body["target_language"] == "ru"
        assert body["status"] == "done"

    @pytest.mark.asyncio
    async def test_not_summarizable_conflict(self, client: httpx.AsyncClient) -> None:
        sent = await client.post("/v1/chat/messages", json={"text": "Hello"})
        message_id = sent.json()["message"]["id"]
        response = await client.post(f"/v1/chat/messages/{message_id}/summary")
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "NOT_SUMMARIZABLE"

    @pytest.mark.asyncio
    async def test_unknown_message(self, client: httpx.AsyncClient) -> None:
        response = await client.post(f"/v1/chat/messages/{uuid.uuid4()}/translation")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "MESSAGE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_unsupported_language(self, client: httpx.AsyncClient) -> None:
        response = await client.put("/v1/chat/target-language", json={"code": "xx"})
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "UNSUPPORTED_LANGUAGE"

    @pytest.mark.asyncio
    async def test_dismiss_error(
        self, client: httpx.AsyncClient, orchestrator: ConversationOrchestrator
    ) -> None:
        orchestrator.banner.report(RuntimeError("boom"), context="test")
        body = (await client.get("/v1/chat")).json()
        assert body["error"] == {
            "message": "An unexpected error occurred",
            "code": "UNKNOWN_ERROR",
        }
        body = (await client.delete("/v1/chat/error")).json()
        assert body["error"] is None


class TestLifespan:
    @pytest.mark.asyncio
    async def test_only_orchestrator_on_state(self) -> None:
        fresh = FastAPI()
        async with lifespan(fresh):
            assert isinstance(fresh.state.orchestrator, ConversationOrchestrator)
            assert not hasattr(fresh.state, "executor")
