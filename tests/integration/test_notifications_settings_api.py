"""Integration tests for notification and user settings endpoints."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

from fintrack.models.notification import Notification


@pytest.fixture
async def notifications(db_session, test_user):
    items = [
        Notification(user_id=test_user.id, notification_type="bill_reminder", message="Rent due soon"),
        Notification(user_id=test_user.id, notification_type="budget", message="Food budget at 90%", is_read=True),
    ]
    db_session.add_all(items)
    await db_session.commit()
    return items


class TestNotifications:
    @pytest.mark.asyncio
    async def test_list(self, client: AsyncClient, auth_headers: dict, notifications):
        response = await client.get("/api/v1/notifications", headers=auth_headers)

        assert response.status_code == 200
        assert len(response.json()) == 2

    @pytest.mark.asyncio
    async def test_unread_only(self, client: AsyncClient, auth_headers: dict, notifications):
        response = await client.get(
            "/api/v1/notifications", headers=auth_headers, params={"unread_only": "true"}
        )

        assert [n["message"] for n in response.json()] == ["Rent due soon"]

    @pytest.mark.asyncio
    async def test_mark_read_and_unread(self, client: AsyncClient, auth_headers: dict, notifications):
        unread_id = str(notifications[0].id)

        marked = await client.patch(
            f"/api/v1/notifications/{unread_id}", headers=auth_headers, json={"is_read": True}
        )
        assert marked.status_code == 200
        assert marked.json()["is_read"] is True

        unmarked = await client.patch(
            f"/api/v1/notifications/{unread_id}", headers=auth_headers, json={"is_read": False}
        )
        assert unmarked.json()["is_read"] is False

    @pytest.mark.asyncio
    async def test_mark_unknown(self, client: AsyncClient, auth_headers: dict):
        response = await client.patch(
            f"/api/v1/notifications/{uuid4()}", headers=auth_headers, json={"is_read": True}
        )

        assert response.status_code == 404
        assert response.json()["error_code"] == "NF_006"


class TestUserSettings:
    @pytest.mark.asyncio
    async def test_get_creates_empty(self, client: AsyncClient, auth_headers: dict):
        response = await client.get("/api/v1/user-settings", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["notification_preferences"] == {}
        assert data["other_preferences"] == {}

    @pytest.mark.asyncio
    async def test_put_replaces(self, client: AsyncClient, auth_headers: dict):
        first = await client.put(
            "/api/v1/user-settings",
            headers=auth_headers,
            json={"notification_preferences": {"email": True}, "other_preferences": {"theme": "dark"}},
        )
        assert first.status_code == 200

        second = await client.put(
            "/api/v1/user-settings",
            headers=auth_headers,
            json={"notification_preferences": {"push": False}},
        )

        data = second.json()
        assert data["id"] == first.json()["id"]
        assert data["notification_preferences"] == {"push": False}
        assert data["other_preferences"] == {}
        assert (await client.get("/api/v1/user-settings", headers=auth_headers)).json() == data
