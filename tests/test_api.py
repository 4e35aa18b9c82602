"""
Integration tests for the HTTP surface

Requests go through FastAPI routing, validation and serialisation against the
in-memory database.
"""

from unittest.mock import patch

import pytest

from conftest import OTHER_ID, auth_headers
from hivechat.models import AppSetting, SearchEngineConfig


@pytest.mark.integration
@pytest.mark.asyncio
class TestChatApi:
    async def test_health(self, client):
        response = await client.get("/health")
        assert response.json() == {"status": "ok"}

    async def test_chat_lifecycle(self, client):
        headers = auth_headers()

        created = await client.post(
            "/api/v1/chats",
            json={"title": "First", "defaultModel": "gpt-4o", "historyType": "all"},
            headers=headers,
        )
        assert created.status_code == 200
        body = created.json()
        assert body["status"] == "success"
        chat_id = body["data"]["id"]
        assert body["data"]["defaultModel"] == "gpt-4o"
        assert body["data"]["historyType"] == "all"

        renamed = await client.put(
            f"/api/v1/chats/{chat_id}/title", json={"title": "Renamed"}, headers=headers
        )
        assert renamed.json()["status"] == "success"

        patched = await client.patch(
            f"/api/v1/chats/{chat_id}", json={"isStar": True}, headers=headers
        )
        assert patched.json()["status"] == "success"

        info = (await client.get(f"/api/v1/chats/{chat_id}", headers=headers)).json()
        assert info["data"]["title"] == "Renamed"
        assert info["data"]["isStar"] is True

        message = await client.post(
            f"/api/v1/chats/{chat_id}/messages",
            json={"role": "user", "content": "hello", "providerId": "openai"},
            headers=headers,
        )
        message_id = message.json()["data"]["id"]

        synced = await client.put(
            f"/api/v1/messages/{message_id}/mcp-tools",
            json={"mcpTools": [{"id": "call_1", "status": "done", "response": "ok"}]},
            headers=headers,
        )
        assert synced.json()["status"] == "success"

        messages = (
            await client.get(f"/api/v1/chats/{chat_id}/messages", headers=headers)
        ).json()
        assert messages["data"][0]["mcpTools"][0]["id"] == "call_1"

        deleted = await client.delete(f"/api/v1/chats/{chat_id}", headers=headers)
        assert deleted.json()["status"] == "success"

        gone = (await client.get(f"/api/v1/chats/{chat_id}", headers=headers)).json()
        assert gone == {"status": "fail", "data": None, "message": None}
        leftover = (
            await client.get(f"/api/v1/chats/{chat_id}/messages", headers=headers)
        ).json()
        assert leftover["data"] == []

    async def test_anonymous_requests_get_fail_envelopes(self, client):
        listing = (await client.get("/api/v1/chats")).json()
        assert listing == {"status": "fail", "data": [], "message": "please login first."}

        created = (await client.post("/api/v1/chats", json={"title": "x"})).json()
        assert created["status"] == "fail"
        assert created["message"] == "please login first."

    async def test_invalid_token_is_anonymous(self, client):
        response = await client.get(
            "/api/v1/chats", headers={"Authorization": "Bearer not-a-token"}
        )
        assert response.json()["status"] == "fail"

    async def test_chats_are_private(self, client):
        created = await client.post(
            "/api/v1/chats", json={"title": "Mine"}, headers=auth_headers()
        )
        chat_id = created.json()["data"]["id"]

        other = auth_headers(OTHER_ID)
        assert (await client.get("/api/v1/chats", headers=other)).json()["data"] == []
        assert (
            await client.get(f"/api/v1/chats/{chat_id}", headers=other)
        ).json()["data"] is None

    async def test_unknown_fields_are_rejected(self, client):
        response = await client.post(
            "/api/v1/chats",
            json={"title": "x", "userId": "someone-else"},
            headers=auth_headers(),
        )
        assert response.status_code == 422

    async def test_profile_requires_login(self, client):
        response = await client.get("/api/v1/auth/me")
        assert response.status_code == 401


@pytest.mark.integration
@pytest.mark.asyncio
class TestLookupApi:
    async def test_app_setting(self, client, db_session):
        db_session.add(AppSetting(key="isRegistrationOpen", value="true"))
        await db_session.commit()

        found = (await client.get("/api/v1/app-settings/isRegistrationOpen")).json()
        assert found == {"status": "success", "data": "true", "message": None}

        missing = (await client.get("/api/v1/app-settings/unknown")).json()
        assert missing["status"] == "fail"
        assert missing["data"] is None

    async def test_mcp_catalog_is_empty_by_default(self, client):
        response = await client.get("/api/v1/mcp/catalog")
        assert response.json() == {"tools": [], "mcpServers": []}

    async def test_mcp_catalog_unexpected_error(self, client):
        with patch(
            "hivechat.mcp.router.mcp_service.get_mcp_servers_and_available_tools",
            side_effect=RuntimeError("catalog unavailable"),
        ):
            response = await client.get("/api/v1/mcp/catalog")

        assert response.status_code == 500
        assert response.json()["detail"] == "catalog unavailable"

    async def test_search_requires_login(self, client):
        response = await client.post("/api/v1/search", json={"keyword": "python"})
        assert response.status_code == 401

    async def test_search_without_active_engine(self, client, db_session):
        db_session.add(SearchEngineConfig(id="tavily", name="Tavily", is_active=False))
        await db_session.commit()

        response = await client.post(
            "/api/v1/search", json={"keyword": "python"}, headers=auth_headers()
        )
        body = response.json()
        assert body["status"] == "error"
        assert body["data"] is None
